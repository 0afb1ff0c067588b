import pytest
from core.readability import count_syllables, readability
from utils.exceptions import InputValidationError


SAMPLE = "The cat sat on the mat. It was happy."


def test_sample_metrics():
    metrics = readability(SAMPLE)

    # 9 단어, 2 문장, 10 음절
    assert metrics.average_sentence_length == pytest.approx(4.5)
    assert metrics.average_word_length == pytest.approx(3.0)
    assert metrics.flesch_reading_ease == pytest.approx(108.3)
    assert metrics.flesch_kincaid_grade == pytest.approx(-0.7)


def test_readability_is_deterministic():
    assert readability(SAMPLE) == readability(SAMPLE)


@pytest.mark.parametrize("text", ["", "   ", "!!! ???"])
def test_text_without_words_gives_zeros(text):
    metrics = readability(text)

    assert metrics.flesch_reading_ease == 0
    assert metrics.flesch_kincaid_grade == 0
    assert metrics.average_sentence_length == 0
    assert metrics.average_word_length == 0


def test_values_are_rounded_to_one_decimal():
    metrics = readability("Reading comprehension requires considerable concentration. Practice helps.")
    for value in metrics.model_dump().values():
        assert round(value, 1) == pytest.approx(value)


def test_serializes_with_camel_case_keys():
    dumped = readability(SAMPLE).model_dump(by_alias=True)
    assert set(dumped) == {"fleschReadingEase", "fleschKincaidGrade", "averageSentenceLength", "averageWordLength"}


@pytest.mark.parametrize("word,expected", [
    ("the", 1),
    ("a", 1),
    ("happy", 2),
    ("cake", 1),
    ("table", 2),
    ("little", 2),
    ("reading", 2),
    ("considerable", 5),
    ("Happy!", 2),
])
def test_count_syllables(word, expected):
    assert count_syllables(word) == expected


def test_none_is_rejected():
    with pytest.raises(InputValidationError):
        readability(None)
