import re
from typing import List
from models.internal import ReadabilityMetrics
from utils.helpers import ensure_text, round_half_up


_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_ALNUM_RE = re.compile(r"[a-zA-Z0-9]")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_NON_LETTER_RE = re.compile(r"[^a-z]")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")

VOWELS = "aeiouy"


def _words(text: str) -> List[str]:
    """영숫자를 하나 이상 포함한 공백 구분 토큰"""
    return [token for token in text.split() if _ALNUM_RE.search(token)]


def count_syllables(word: str) -> int:
    """
    영어 단어의 음절 수를 근사합니다.

    Args:
        word: 단어 (구두점 포함 가능)

    Returns:
        음절 수 (최소 1)
    """
    clean = _NON_LETTER_RE.sub("", word.lower())

    if len(clean) <= 3:
        return 1

    syllables = max(1, len(_VOWEL_GROUP_RE.findall(clean)))

    # 끝의 묵음 e
    if clean.endswith("e") and syllables > 1:
        syllables -= 1

    # 자음 + le 는 독립 음절 (table, little)
    if clean.endswith("le") and len(clean) > 2 and clean[-3] not in VOWELS:
        syllables += 1

    if (clean.endswith("es") or clean.endswith("ed")) and syllables > 1:
        syllables -= 1

    return max(1, syllables)


def readability(text: str) -> ReadabilityMetrics:
    """
    Flesch Reading Ease / Flesch-Kincaid Grade 등 가독성 지표를 계산합니다.

    Args:
        text: 영문 텍스트

    Returns:
        소수점 첫째 자리로 반올림된 가독성 지표 (단어가 없으면 모두 0)
    """
    text = ensure_text(text)

    sentence_count = len([s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()])
    words = _words(text)
    word_count = len(words)

    if word_count == 0:
        return ReadabilityMetrics(
            flesch_reading_ease=0.0,
            flesch_kincaid_grade=0.0,
            average_sentence_length=0.0,
            average_word_length=0.0,
        )

    syllable_count = sum(count_syllables(word) for word in words)

    average_sentence_length = word_count / sentence_count if sentence_count > 0 else 0.0
    average_word_length = len(_NON_ALNUM_RE.sub("", text)) / word_count
    syllables_per_word = syllable_count / word_count

    flesch_reading_ease = 206.835 - (1.015 * average_sentence_length) - (84.6 * syllables_per_word)
    flesch_kincaid_grade = (0.39 * average_sentence_length) + (11.8 * syllables_per_word) - 15.59

    return ReadabilityMetrics(
        flesch_reading_ease=round_half_up(flesch_reading_ease, 1),
        flesch_kincaid_grade=round_half_up(flesch_kincaid_grade, 1),
        average_sentence_length=round_half_up(average_sentence_length, 1),
        average_word_length=round_half_up(average_word_length, 1),
    )
