import pytest
from core.difficulty import (
    difficulty_breakdown, difficulty_level, length_score, score_difficulty, syntax_score, tense_score, vocabulary_score
)
from utils.exceptions import InputValidationError


LONG_SENTENCE = (
    "Although the researchers had carefully considered every possibility, they were still surprised "
    "because the experimental results that they obtained were completely unexpected and extraordinary."
)


def test_short_simple_sentence_is_easiest():
    assert score_difficulty("I am a student.") == 1


def test_long_subordinated_sentence_is_hardest():
    breakdown = difficulty_breakdown(LONG_SENTENCE)

    assert breakdown.length_score == 5
    assert breakdown.vocabulary_score == 5
    assert breakdown.syntax_score == 5
    assert breakdown.tense_score == 5
    assert breakdown.score == 5


def test_empty_sentence_scores_one():
    assert score_difficulty("") == 1
    assert score_difficulty("   ") == 1


def test_score_always_in_range():
    for sentence in ["Go.", "I am a student.", LONG_SENTENCE, "a " * 100]:
        assert 1 <= score_difficulty(sentence) <= 5


def test_length_score_is_monotone_in_word_count():
    scores = [length_score(n) for n in range(0, 40)]
    assert scores == sorted(scores)
    assert scores[5] == 1 and scores[6] == 2 and scores[21] == 5


@pytest.mark.parametrize("value,expected", [(3, 1), (3.5, 2), (4, 2), (5, 3), (6, 4), (6.1, 5)])
def test_vocabulary_buckets(value, expected):
    assert vocabulary_score(value) == expected


@pytest.mark.parametrize("value,expected", [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)])
def test_syntax_buckets(value, expected):
    assert syntax_score(value) == expected


@pytest.mark.parametrize("value,expected", [(0, 1), (0.5, 2), (1.5, 3), (3, 4), (3.5, 5)])
def test_tense_buckets(value, expected):
    assert tense_score(value) == expected


def test_conjunctions_are_matched_as_whole_words():
    """'android', 'band' 안의 and 는 접속사로 세지 않는다"""
    assert difficulty_breakdown("The android band played.").syntax_score == 1
    assert difficulty_breakdown("Tom and Jerry played.").syntax_score == 2


def test_perfect_markers_weigh_more():
    assert difficulty_breakdown("She has a cat.").tense_score == 3


@pytest.mark.parametrize("score,level", [(1, "beginner"), (2, "beginner"), (3, "intermediate"), (4, "advanced"), (5, "advanced")])
def test_difficulty_level(score, level):
    assert difficulty_level(score) == level


def test_none_is_rejected():
    with pytest.raises(InputValidationError):
        score_difficulty(None)
