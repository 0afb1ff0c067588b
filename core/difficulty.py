import re
from typing import Sequence
from models.internal import DifficultyBreakdown
from utils.helpers import ensure_text, round_half_up


LENGTH_WEIGHT = 0.25
VOCABULARY_WEIGHT = 0.30
SYNTAX_WEIGHT = 0.25
TENSE_WEIGHT = 0.20

CONJUNCTIONS = (
    "and", "but", "or", "so", "because", "if", "when", "while", "although",
    "that", "which", "who", "whom", "whose",
)
_CONJUNCTION_RE = re.compile(r"\b(?:" + "|".join(CONJUNCTIONS) + r")\b", re.ASCII | re.IGNORECASE)

# 시제 표지는 공백을 포함한 부분 문자열 매칭 ("had" 는 과거/완료 양쪽에 집계)
PAST_MARKERS = ("ed ", " was ", " were ", " had ")
PERFECT_MARKERS = (" has ", " have ", " had ")
CONTINUOUS_MARKERS = ("ing ",)


def _bucket(value: float, upper_bounds: Sequence[float]) -> int:
    """value <= upper_bounds[k] 인 첫 k 에 대해 k+1, 모두 넘으면 len+1"""
    for index, bound in enumerate(upper_bounds):
        if value <= bound:
            return index + 1
    return len(upper_bounds) + 1


def _count_markers(text: str, markers: Sequence[str]) -> int:
    return sum(text.count(marker) for marker in markers)


def length_score(word_count: int) -> int:
    return _bucket(word_count, (5, 10, 15, 20))


def vocabulary_score(average_word_length: float) -> int:
    return _bucket(average_word_length, (3, 4, 5, 6))


def syntax_score(conjunction_count: int) -> int:
    return _bucket(conjunction_count, (0, 1, 2, 3))


def tense_score(tense_complexity: float) -> int:
    return _bucket(tense_complexity, (0, 1, 2, 3))


def difficulty_breakdown(sentence: str) -> DifficultyBreakdown:
    """
    문장 난이도의 네 가지 세부 점수와 가중 평균을 계산합니다.

    Args:
        sentence: 영문 문장

    Returns:
        세부 점수와 최종 점수 (빈 문장은 모든 점수 1)
    """
    sentence = ensure_text(sentence, "sentence")
    words = sentence.split()

    if not words:
        return DifficultyBreakdown(
            length_score=1, vocabulary_score=1, syntax_score=1, tense_score=1,
            weighted=1.0, score=1,
        )

    average_word_length = sum(len(word) for word in words) / len(words)
    conjunction_count = len(_CONJUNCTION_RE.findall(sentence))

    lowered = sentence.lower()
    tense_complexity = (
        _count_markers(lowered, PAST_MARKERS)
        + _count_markers(lowered, PERFECT_MARKERS) * 1.5
        + _count_markers(lowered, CONTINUOUS_MARKERS)
    )

    scores = (
        length_score(len(words)),
        vocabulary_score(average_word_length),
        syntax_score(conjunction_count),
        tense_score(tense_complexity),
    )
    weighted = (
        scores[0] * LENGTH_WEIGHT
        + scores[1] * VOCABULARY_WEIGHT
        + scores[2] * SYNTAX_WEIGHT
        + scores[3] * TENSE_WEIGHT
    )
    final = max(1, min(5, int(round_half_up(weighted))))

    return DifficultyBreakdown(
        length_score=scores[0],
        vocabulary_score=scores[1],
        syntax_score=scores[2],
        tense_score=scores[3],
        weighted=round(weighted, 4),
        score=final,
    )


def score_difficulty(sentence: str) -> int:
    """문장 난이도 (1 = 가장 쉬움, 5 = 가장 어려움)"""
    return difficulty_breakdown(sentence).score


def difficulty_level(score: int) -> str:
    """1~2 beginner, 3 intermediate, 4~5 advanced"""
    if score <= 2:
        return "beginner"
    if score == 3:
        return "intermediate"
    return "advanced"
