import math
import re
from typing import List
from config.settings import settings
from core.keywords import extract_common_phrases, extract_keywords
from core.readability import readability
from core.segmenter import segment
from models.internal import ContentSection, DifficultyFactor, QualityIssue
from models.response import (
    ContentAnalysisResult, ContentQuality, ContentStats, DifficultyEstimate, DocumentStructure
)
from utils.exceptions import ContentAnalysisError, InputValidationError, PipelineError
from utils.helpers import ensure_text, round_half_up
from utils.logging import logger


BASE_QUALITY_SCORE = 85
MIN_CONTENT_LENGTH = 500
BASE_DIFFICULTY_SCORE = 50

# 자주 보이는 오타 -> 교정어
COMMON_MISSPELLINGS = {
    "teh": "the",
    "recieve": "receive",
    "seperate": "separate",
    "definately": "definitely",
    "occured": "occurred",
}

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_HEADING_RE = re.compile(r"^[A-Z\d][\w ]{2,50}$", re.ASCII)
_MARKDOWN_HEADING_RE = re.compile(r"^#+\s")
_MARKDOWN_PREFIX_RE = re.compile(r"^#+")


class ContentAnalyzer:
    """학습 자료 텍스트의 통계/품질/구조/난이도 분석기"""

    def __init__(self, reading_speed_wpm: int = None, sentences_per_lesson: int = None):
        self.reading_speed_wpm = reading_speed_wpm or settings.reading_speed_wpm
        self.sentences_per_lesson = sentences_per_lesson or settings.sentences_per_lesson

    def analyze_content(self, text: str, max_keywords: int = None) -> ContentAnalysisResult:
        """
        자료 텍스트를 종합 분석합니다.

        Args:
            text: 영문 자료 텍스트
            max_keywords: 추출할 키워드 수 (기본값: 설정값)

        Returns:
            통계, 가독성, 키워드, 품질, 구조, 난이도 추정 결과

        Raises:
            InputValidationError: 텍스트가 비어 있을 때
        """
        text = ensure_text(text)
        if not text.strip():
            raise InputValidationError("분석할 내용이 비어 있습니다")

        if max_keywords is None:
            max_keywords = settings.default_max_keywords

        try:
            sentences = segment(text, "en")
            stats = self.calculate_stats(text, sentences)

            logger.info(
                f"자료 분석 시작: {stats.char_count}글자, {stats.word_count}단어, {stats.sentence_count}문장"
            )

            result = ContentAnalysisResult(
                stats=stats,
                readability=readability(text),
                keywords=extract_keywords(text, max_keywords),
                common_phrases=extract_common_phrases(text),
                quality=self.assess_quality(text, sentences),
                structure=self.analyze_document_structure(text),
                difficulty=self.estimate_difficulty(text, stats.avg_sentence_length),
            )
        except PipelineError:
            raise
        except Exception as e:
            raise ContentAnalysisError(f"자료 분석 중 예상치 못한 오류: {str(e)}")

        logger.info(
            f"자료 분석 완료: 품질={result.quality.score}, 난이도={result.difficulty.level}({result.difficulty.score})"
        )
        return result

    def calculate_stats(self, text: str, sentences: List[str]) -> ContentStats:
        word_count = len(text.split())
        sentence_count = len(sentences)
        paragraph_count = len([p for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]) or 1

        return ContentStats(
            char_count=len(text),
            word_count=word_count,
            sentence_count=sentence_count,
            paragraph_count=paragraph_count,
            avg_sentence_length=word_count / sentence_count if sentence_count else 0.0,
            estimated_read_time=math.ceil(word_count / self.reading_speed_wpm),
            estimated_lessons=math.ceil(sentence_count / self.sentences_per_lesson),
        )

    def assess_quality(self, text: str, sentences: List[str]) -> ContentQuality:
        """
        길이, 중복 문장, 문장 길이 변화, 흔한 오타를 기준으로 품질 점수를 매깁니다.
        """
        issues: List[QualityIssue] = []
        score = BASE_QUALITY_SCORE

        if len(text) < MIN_CONTENT_LENGTH:
            issues.append(QualityIssue(type="structure", description="내용이 너무 짧습니다", severity="medium"))
            score -= 15

        if sentences and len(set(sentences)) < len(sentences) * 0.9:
            issues.append(QualityIssue(type="structure", description="중복된 문장이 있습니다", severity="high"))
            score -= 10

        if len(sentences) > 10:
            lengths = [len(s) for s in sentences]
            mean = sum(lengths) / len(lengths)
            if all(abs(length - mean) < mean * 0.3 for length in lengths):
                issues.append(QualityIssue(
                    type="readability", description="문장 길이에 변화가 없습니다", severity="low"
                ))
                score -= 5

        lowered = text.lower()
        for wrong, correct in COMMON_MISSPELLINGS.items():
            if re.search(rf"\b{wrong}\b", lowered, re.ASCII):
                issues.append(QualityIssue(
                    type="spelling",
                    description=f'오타 가능성: "{wrong}"',
                    severity="medium",
                    suggestion=correct,
                ))
                score -= 3

        return ContentQuality(
            score=max(0, min(100, score)),
            issues=issues,
            readability=self.readability_score(text, sentences),
        )

    def readability_score(self, text: str, sentences: List[str]) -> float:
        """짧은 문장과 짧은 단어일수록 높은 0-100 점수 (공백 포함 글자 수 / 단어 수)"""
        words = text.split()
        if not sentences or not words:
            return 0.0

        avg_sentence_length = len(words) / len(sentences)
        avg_word_length = len(text) / len(words)
        score = 100 - avg_sentence_length * 1.5 - avg_word_length * 5
        return round_half_up(max(0.0, min(100.0, score)), 1)

    def analyze_document_structure(self, text: str) -> DocumentStructure:
        """제목처럼 보이는 줄을 섹션으로 수집"""
        sections: List[ContentSection] = []

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if not line or len(line) >= 100:
                continue
            if not (line.endswith(":") or _HEADING_RE.match(line) or _MARKDOWN_HEADING_RE.match(line)):
                continue

            if line.startswith("#"):
                level = len(_MARKDOWN_PREFIX_RE.match(line).group(0))
            elif len(line) > 30:
                level = 2
            else:
                level = 1

            title = _MARKDOWN_HEADING_RE.sub("", line)
            if title.endswith(":"):
                title = title[:-1]
            sections.append(ContentSection(title=title, level=level))

        return DocumentStructure(sections=sections, has_clear_structure=len(sections) > 1)

    def estimate_difficulty(self, text: str, avg_sentence_length: float) -> DifficultyEstimate:
        score = BASE_DIFFICULTY_SCORE
        factors: List[DifficultyFactor] = []

        if avg_sentence_length > 25:
            score += 15
            factors.append(DifficultyFactor(name="long sentences", impact=15))
        elif avg_sentence_length < 10:
            score -= 10
            factors.append(DifficultyFactor(name="short sentences", impact=-10))

        words = text.lower().split()
        if words:
            lexical_diversity = len(set(words)) / len(words)
            if lexical_diversity > 0.7:
                score += 20
                factors.append(DifficultyFactor(name="rich vocabulary", impact=20))
            elif lexical_diversity < 0.4:
                score -= 15
                factors.append(DifficultyFactor(name="simple vocabulary", impact=-15))

            long_word_ratio = len([w for w in words if len(w) > 8]) / len(words)
            if long_word_ratio > 0.1:
                score += 15
                factors.append(DifficultyFactor(name="long words", impact=15))

        if score < 30:
            level = "beginner"
        elif score > 70:
            level = "advanced"
        else:
            level = "intermediate"

        return DifficultyEstimate(level=level, score=max(0, min(100, score)), factors=factors)


# 전역 자료 분석기 인스턴스
content_analyzer = ContentAnalyzer()


def analyze_content(text: str, max_keywords: int = None) -> ContentAnalysisResult:
    return content_analyzer.analyze_content(text, max_keywords)
