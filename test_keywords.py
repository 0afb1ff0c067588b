import pytest
from config.stopwords import STOPWORDS
from core.keywords import extract_common_phrases, extract_keywords, tokenize
from utils.exceptions import InputValidationError


def test_keywords_by_frequency_without_stopwords():
    assert extract_keywords("The cat sat on the mat. The cat was happy.", 3) == ["cat", "sat", "mat"]


def test_keyword_ties_keep_first_seen_order():
    assert extract_keywords("zebra apple mango apple zebra kiwi") == ["zebra", "apple", "mango", "kiwi"]


def test_keywords_never_contain_stopwords_or_single_letters():
    text = "I think that you and I should go to the park, but x y z are not there. Parks are great!"
    keywords = extract_keywords(text, 20)

    assert keywords
    assert not any(word in STOPWORDS for word in keywords)
    assert all(len(word) > 1 for word in keywords)


def test_keyword_limit():
    assert len(extract_keywords("one two three four five six seven", 2)) == 2
    assert extract_keywords("one two three", 0) == []


def test_tokenize_strips_punctuation_and_underscores():
    assert tokenize("Hello, World! snake_case  text") == ["hello", "world", "snake", "case", "text"]


def test_common_phrases():
    text = "Machine learning is fun. Machine learning is hard."
    assert extract_common_phrases(text) == ["machine learning", "machine learning is", "learning is"]


def test_phrases_sorted_by_count():
    text = "red car blue car red car blue sky red car"
    phrases = extract_common_phrases(text)

    assert phrases[0] == "red car"
    assert "blue car" not in phrases


def test_phrases_never_start_with_a_stopword():
    text = "the cat and the cat and the cat"
    assert all(phrase.split()[0] not in STOPWORDS for phrase in extract_common_phrases(text))


def test_min_occurrences():
    text = "Machine learning is fun. Machine learning is hard."
    assert extract_common_phrases(text, min_occurrences=3) == []
    assert "learning is fun" in extract_common_phrases(text, min_occurrences=1)


def test_empty_text():
    assert extract_keywords("") == []
    assert extract_common_phrases("") == []


def test_none_is_rejected():
    with pytest.raises(InputValidationError):
        extract_keywords(None)
