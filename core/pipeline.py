import asyncio
import time
from typing import List, Optional
from config.settings import settings
from core.aligner import SentenceAligner, aligner, extract_labeled_pairs
from core.difficulty import difficulty_level, score_difficulty
from core.grammar import grammar_matcher
from core.keywords import extract_keywords
from core.readability import readability
from models.internal import SentencePair
from models.request import MaterialItem
from models.response import MaterialResult, SentenceAnalysis, StatusEnum, StepResult
from utils.helpers import format_processing_time
from utils.logging import logger


STEP_ALIGNMENT = "alignment"
STEP_SENTENCE_ANALYSIS = "sentence_analysis"
STEP_TEXT_ANALYSIS = "text_analysis"


class MaterialProcessor:
    """이중 언어 학습 자료 처리기 (정렬 -> 문장 분석 -> 텍스트 분석)"""

    def __init__(self, sentence_aligner: Optional[SentenceAligner] = None):
        self.aligner = sentence_aligner or aligner
        self.max_concurrent = settings.batch_max_concurrent

    def process(self, item: MaterialItem) -> MaterialResult:
        """
        단일 자료를 처리합니다.

        단계가 실패하면 이후 단계는 건너뛰고, 그때까지의 결과는 유지한 채
        error 상태로 반환합니다.

        Args:
            item: 자료 처리 항목

        Returns:
            단계별 처리 결과를 포함한 자료 처리 결과
        """
        total_start_time = time.time()
        result = MaterialResult(material_id=item.material_id, status=StatusEnum.COMPLETED)

        logger.info(f"[{item.material_id}] 자료 처리 시작")

        try:
            #### 1단계: 문장 정렬
            pairs = self._run_step(result, STEP_ALIGNMENT, self._align, item)
            result.sentence_pairs = pairs

            #### 2단계: 문장별 분석
            result.sentences = self._run_step(result, STEP_SENTENCE_ANALYSIS, self._analyze_sentences, pairs)

            #### 3단계: 영문 전체 텍스트 분석
            english_text = " ".join(pair.english for pair in pairs)
            result.readability, result.keywords = self._run_step(
                result, STEP_TEXT_ANALYSIS, self._analyze_text, english_text, item.max_keywords
            )

        except Exception as e:
            result.status = StatusEnum.ERROR
            result.error_message = str(e)
            logger.error(f"[{item.material_id}] 자료 처리 실패: {str(e)}")

        end_time = time.time()
        result.total_processing_time = end_time - total_start_time
        logger.info(
            f"[{item.material_id}] 자료 처리 종료: status={result.status.value}, "
            f"{len(result.sentence_pairs)}쌍, {format_processing_time(total_start_time, end_time)}"
        )
        return result

    def _run_step(self, result: MaterialResult, step_name: str, func, *args):
        """단계 실행 시간과 성공 여부를 StepResult 로 기록"""
        step_start_time = time.time()
        try:
            value, details = func(*args)
        except Exception as e:
            result.step_results.append(StepResult(
                step_name=step_name,
                success=False,
                processing_time=time.time() - step_start_time,
                error_message=str(e)
            ))
            raise

        result.step_results.append(StepResult(
            step_name=step_name,
            success=True,
            processing_time=time.time() - step_start_time,
            details=details
        ))
        return value

    def _align(self, item: MaterialItem):
        if item.raw_text:
            labeled = extract_labeled_pairs(item.raw_text)
            if labeled:
                return labeled, {"pairs": len(labeled), "source": "labeled"}

        pairs = self.aligner.align(item.english_text, item.chinese_text, item.options)
        return pairs, {
            "pairs": len(pairs),
            "source": "aligned",
            "method": item.options.method.value,
            "fallback_strategy": item.options.fallback_strategy.value,
        }

    def _analyze_sentences(self, pairs: List[SentencePair]):
        analyses = []
        for pair in pairs:
            score = score_difficulty(pair.english)
            structure = grammar_matcher.analyze_structure(pair.english)
            analyses.append(SentenceAnalysis(
                english=pair.english,
                chinese=pair.chinese,
                confidence=pair.confidence,
                difficulty=score,
                difficulty_level=difficulty_level(score),
                grammar_points=grammar_matcher.identify_grammar_points(pair.english),
                structure_type=structure.type,
                complexity_score=structure.complexity_score,
            ))

        average = sum(a.difficulty for a in analyses) / len(analyses) if analyses else 0.0
        return analyses, {"sentences": len(analyses), "average_difficulty": round(average, 2)}

    def _analyze_text(self, english_text: str, max_keywords: int):
        metrics = readability(english_text)
        keywords = extract_keywords(english_text, max_keywords)
        return (metrics, keywords), {
            "flesch_reading_ease": metrics.flesch_reading_ease,
            "keywords": len(keywords),
        }

    async def process_batch(self, items: List[MaterialItem], max_concurrent: int = None) -> List[MaterialResult]:
        """
        여러 자료를 병렬로 처리합니다.

        Args:
            items: 처리할 자료 리스트
            max_concurrent: 최대 동시 처리 개수

        Returns:
            입력 순서와 같은 처리 결과 리스트
        """
        if max_concurrent is None:
            max_concurrent = self.max_concurrent

        logger.info(f"배치 자료 처리 시작: {len(items)}개 항목, 최대 동시 처리: {max_concurrent}개")

        # 세마포어를 사용한 동시 처리 제한
        semaphore = asyncio.Semaphore(max_concurrent)

        async def process_single_item(item: MaterialItem) -> MaterialResult:
            async with semaphore:
                return await asyncio.to_thread(self.process, item)

        tasks = [process_single_item(item) for item in items]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        # 예외 처리
        processed_results = []
        for i, result in enumerate(results):
            if isinstance(result, Exception):
                logger.error(f"항목 {i} 자료 처리 실패: {str(result)}")
                processed_results.append(MaterialResult(
                    material_id=items[i].material_id,
                    status=StatusEnum.ERROR,
                    error_message=str(result)
                ))
            else:
                processed_results.append(result)

        logger.info(f"배치 자료 처리 완료: {len(processed_results)}개 결과")
        return processed_results


# 전역 자료 처리기 인스턴스
material_processor = MaterialProcessor()
