from typing import List, Optional
from core.segmenter import segment
from core.translation import StubTranslator, TranslationProvider, get_translation_provider
from models.internal import SentencePair
from models.request import AlignmentOptions, FallbackStrategy
from utils.exceptions import TranslationError
from utils.helpers import ensure_text
from utils.logging import logger


# 길이 비율 허용 범위 (영문 글자 수 / 중문 글자 수)
MIN_RATIO = 0.5
MAX_RATIO = 2.5

EQUAL_COUNT_CONFIDENCE = 0.9
MERGED_CONFIDENCE = 0.6
UNMATCHED_CONFIDENCE = 0.5
MACHINE_TRANSLATION_CONFIDENCE = 0.4
PLACEHOLDER_CONFIDENCE = 0.1
LABELED_PAIR_CONFIDENCE = 1.0

CHINESE_PLACEHOLDER = "[需要翻译]"
ENGLISH_PLACEHOLDER = "[needs translation]"


def _in_range(ratio: float) -> bool:
    return MIN_RATIO <= ratio <= MAX_RATIO


def ratio_confidence(ratio: float) -> float:
    """비율이 1에 가까울수록 높은 신뢰도 (0.75 ~ 0.9)"""
    return 0.7 + (1 - abs(1 - ratio) / 2) * 0.2


class SentenceAligner:
    """길이 비율 휴리스틱 기반 영문/중문 문장 정렬기"""

    def __init__(self, translator: Optional[TranslationProvider] = None):
        self._translator = translator
        self._stub = StubTranslator()

    @property
    def translator(self) -> TranslationProvider:
        """machine-translation 대체 전략에서 사용할 번역 제공자 (지연 생성)"""
        if self._translator is None:
            self._translator = get_translation_provider()
        return self._translator

    def align(
        self,
        english_text: str,
        chinese_text: str,
        options: Optional[AlignmentOptions] = None
    ) -> List[SentencePair]:
        """
        영문/중문 텍스트를 문장 단위로 정렬합니다.

        Args:
            english_text: 영문 원문
            chinese_text: 중문 원문
            options: 정렬 옵션 (None 이면 설정 기본값)

        Returns:
            원래 순서를 유지한 문장 쌍 리스트 (min_confidence 미만은 제외)

        Raises:
            InputValidationError: 텍스트가 문자열이 아닐 때
        """
        english_text = ensure_text(english_text, "english_text")
        chinese_text = ensure_text(chinese_text, "chinese_text")
        if options is None:
            options = AlignmentOptions()

        english = segment(english_text, "en")
        chinese = segment(chinese_text, "zh")

        logger.info(
            f"문장 정렬 시작: method={options.method.value}, 영문 {len(english)}문장, 중문 {len(chinese)}문장, "
            f"fallback={options.fallback_strategy.value}, min_confidence={options.min_confidence}"
        )

        if len(english) == len(chinese):
            pairs = [
                self._pair(en, zh, EQUAL_COUNT_CONFIDENCE)
                for en, zh in zip(english, chinese)
            ]
        else:
            pairs, en_index, zh_index = self._walk(english, chinese)
            pairs.extend(self._resolve_leftovers(english, chinese, en_index, zh_index, options.fallback_strategy))

        result = [pair for pair in pairs if pair.confidence >= options.min_confidence]

        logger.info(f"문장 정렬 완료: 후보 {len(pairs)}쌍 중 {len(result)}쌍 채택")
        return result

    def _walk(self, english: List[str], chinese: List[str]):
        """두 커서로 min(n, m) 범위를 순회하며 1:1 또는 병합 쌍을 만든다"""
        pairs: List[SentencePair] = []
        limit = min(len(english), len(chinese))
        i = 0
        j = 0

        while i < limit and j < limit:
            en = english[i]
            zh = chinese[j]
            ratio = len(en) / len(zh)

            if _in_range(ratio):
                pairs.append(self._pair(en, zh, ratio_confidence(ratio)))
                i += 1
                j += 1
                continue

            if ratio < MIN_RATIO:
                # 중문이 상대적으로 길다 -> 영문 두 문장 병합 시도
                if i + 1 < len(english):
                    merged = en + " " + english[i + 1]
                    if _in_range(len(merged) / len(zh)):
                        pairs.append(self._pair(merged, zh, MERGED_CONFIDENCE))
                        i += 2
                        j += 1
                        continue
            else:
                # 영문이 상대적으로 길다 -> 중문 두 문장 병합 시도
                if j + 1 < len(chinese):
                    merged = zh + chinese[j + 1]
                    if _in_range(len(en) / len(merged)):
                        pairs.append(self._pair(en, merged, MERGED_CONFIDENCE))
                        i += 1
                        j += 2
                        continue

            pairs.append(self._pair(en, zh, UNMATCHED_CONFIDENCE))
            i += 1
            j += 1

        return pairs, i, j

    def _resolve_leftovers(
        self,
        english: List[str],
        chinese: List[str],
        en_index: int,
        zh_index: int,
        strategy: FallbackStrategy
    ) -> List[SentencePair]:
        """순회 후 남은 문장을 대체 전략에 따라 처리 (영문 잔여분 먼저)"""
        if strategy is FallbackStrategy.SKIP:
            skipped = (len(english) - en_index) + (len(chinese) - zh_index)
            if skipped:
                logger.debug(f"잔여 문장 {skipped}개 스킵")
            return []

        pairs: List[SentencePair] = []

        for en in english[en_index:]:
            if strategy is FallbackStrategy.PLACEHOLDER:
                pairs.append(self._pair(en, CHINESE_PLACEHOLDER, PLACEHOLDER_CONFIDENCE))
            else:
                pairs.append(self._pair(en, self._translate(en, "en", "zh"), MACHINE_TRANSLATION_CONFIDENCE))

        for zh in chinese[zh_index:]:
            if strategy is FallbackStrategy.PLACEHOLDER:
                pairs.append(self._pair(ENGLISH_PLACEHOLDER, zh, PLACEHOLDER_CONFIDENCE))
            else:
                pairs.append(self._pair(self._translate(zh, "zh", "en"), zh, MACHINE_TRANSLATION_CONFIDENCE))

        return pairs

    def _translate(self, text: str, source_lang: str, target_lang: str) -> str:
        try:
            return self.translator.translate(text, source_lang, target_lang)
        except TranslationError as e:
            logger.warning(f"번역 제공자 실패로 stub 번역 사용: {str(e)}")
            return self._stub.translate(text, source_lang, target_lang)

    @staticmethod
    def _pair(english: str, chinese: str, confidence: float) -> SentencePair:
        return SentencePair(english=english, chinese=chinese, confidence=round(confidence, 4))


def extract_labeled_pairs(text: str) -> List[SentencePair]:
    """
    'English: ...' 줄 바로 다음에 'Chinese: ...' 줄이 오는 형식에서 쌍을 추출합니다.

    Args:
        text: 라벨이 붙은 원문 (교재 추출 텍스트 등)

    Returns:
        라벨 기반 문장 쌍 리스트 (신뢰도 1.0)
    """
    text = ensure_text(text)
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    pairs = []
    for current, following in zip(lines, lines[1:]):
        if current.startswith("English:") and following.startswith("Chinese:"):
            english = current[len("English:"):].strip()
            chinese = following[len("Chinese:"):].strip()
            if english and chinese:
                pairs.append(SentencePair(english=english, chinese=chinese, confidence=LABELED_PAIR_CONFIDENCE))

    logger.info(f"라벨 기반 문장 쌍 추출: {len(pairs)}쌍")
    return pairs


# 전역 정렬기 인스턴스
aligner = SentenceAligner()


def align(
    english_text: str,
    chinese_text: str,
    options: Optional[AlignmentOptions] = None,
    translator: Optional[TranslationProvider] = None
) -> List[SentencePair]:
    """문장 정렬 (translator 를 주면 해당 번역 제공자로 별도 정렬기 사용)"""
    if translator is not None:
        return SentenceAligner(translator).align(english_text, chinese_text, options)
    return aligner.align(english_text, chinese_text, options)
