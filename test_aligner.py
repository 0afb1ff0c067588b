"""
문장 정렬 테스트

번역 제공자는 설정값과 무관하게 StubTranslator 또는 테스트용 제공자를 직접 주입합니다.
"""

import pytest
from pydantic import ValidationError
from core.aligner import (
    CHINESE_PLACEHOLDER, ENGLISH_PLACEHOLDER, SentenceAligner, align, extract_labeled_pairs, ratio_confidence
)
from core.translation import StubTranslator, TranslationProvider
from models.request import AlignmentMethod, AlignmentOptions, FallbackStrategy
from utils.exceptions import InputValidationError, TranslationError


def _options(strategy=FallbackStrategy.SKIP, min_confidence=0.0, method=AlignmentMethod.HYBRID):
    return AlignmentOptions(method=method, min_confidence=min_confidence, fallback_strategy=strategy)


class BrokenTranslator(TranslationProvider):
    """항상 실패하는 번역 제공자"""

    def translate(self, text, source_lang, target_lang):
        raise TranslationError("provider down")


def test_equal_sentence_counts_pair_in_order_at_fixed_confidence():
    pairs = align("Hello. How are you?", "你好。你好吗？", _options(min_confidence=0.7))

    assert [(p.english, p.chinese) for p in pairs] == [("Hello", "你好"), ("How are you", "你好吗")]
    assert all(p.confidence == pytest.approx(0.9) for p in pairs)


@pytest.mark.parametrize("method", list(AlignmentMethod))
def test_every_method_uses_the_same_heuristic(method):
    pairs = align("Hello. How are you?", "你好。你好吗？", _options(method=method))
    assert len(pairs) == 2


def test_skip_strategy_drops_leftovers():
    pairs = align("A. B. C.", "甲。", _options(FallbackStrategy.SKIP, 0.5))

    assert len(pairs) <= 1
    assert pairs[0].english == "A"
    assert pairs[0].chinese == "甲"
    assert pairs[0].confidence == pytest.approx(0.9)


def test_placeholder_strategy_keeps_leftovers_in_order():
    pairs = align("A. B. C.", "甲。", _options(FallbackStrategy.PLACEHOLDER))

    assert [p.english for p in pairs] == ["A", "B", "C"]
    assert [p.chinese for p in pairs[1:]] == [CHINESE_PLACEHOLDER, CHINESE_PLACEHOLDER]
    assert [p.confidence for p in pairs[1:]] == [pytest.approx(0.1), pytest.approx(0.1)]


def test_chinese_pair_merge_and_leftovers_on_both_sides():
    pairs = align("abcdefghij. Hi.", "一二三。四五六。七八。", _options(FallbackStrategy.PLACEHOLDER))

    assert pairs[0].english == "abcdefghij"
    assert pairs[0].chinese == "一二三四五六"
    assert pairs[0].confidence == pytest.approx(0.6)
    # 영문 잔여분이 먼저, 중문 잔여분이 나중
    assert (pairs[1].english, pairs[1].chinese) == ("Hi", CHINESE_PLACEHOLDER)
    assert (pairs[2].english, pairs[2].chinese) == (ENGLISH_PLACEHOLDER, "七八")


def test_english_pair_merge():
    pairs = align("Hi. Yo. Go.", "一二三四五六。", _options(FallbackStrategy.SKIP, 0.5))

    assert len(pairs) == 1
    assert pairs[0].english == "Hi Yo"
    assert pairs[0].confidence == pytest.approx(0.6)


def test_unmatched_pair_gets_low_confidence():
    pairs = align("abcdefghijklmnopqrst. B.", "一。二。三。", _options())

    assert pairs[0].english == "abcdefghijklmnopqrst"
    assert pairs[0].chinese == "一"
    assert pairs[0].confidence == pytest.approx(0.5)


def test_min_confidence_filters_pairs():
    text_en, text_zh = "abcdefghij. Hi.", "一二三。四五六。七八。"

    assert align(text_en, text_zh, _options(FallbackStrategy.PLACEHOLDER, 0.7)) == []
    kept = align(text_en, text_zh, _options(FallbackStrategy.PLACEHOLDER, 0.5))
    assert len(kept) == 1
    assert all(p.confidence >= 0.5 for p in kept)


def test_machine_translation_strategy_uses_provider():
    aligner = SentenceAligner(StubTranslator())
    pairs = aligner.align("A. B.", "甲。", _options(FallbackStrategy.MACHINE_TRANSLATION))

    assert pairs[1].english == "B"
    assert pairs[1].chinese == "[自动翻译] B..."
    assert pairs[1].confidence == pytest.approx(0.4)


def test_machine_translation_falls_back_to_stub_when_provider_fails():
    pairs = align("Hi.", "你好。再见。", _options(FallbackStrategy.MACHINE_TRANSLATION), translator=BrokenTranslator())

    assert pairs[-1].english == "[auto-translated] 再见..."
    assert pairs[-1].chinese == "再见"
    assert pairs[-1].confidence == pytest.approx(0.4)


def test_empty_inputs_give_no_pairs():
    assert align("", "", _options(FallbackStrategy.PLACEHOLDER)) == []


def test_one_empty_side_with_placeholder():
    pairs = align("Hello. World.", "", _options(FallbackStrategy.PLACEHOLDER))
    assert [(p.english, p.chinese) for p in pairs] == [("Hello", CHINESE_PLACEHOLDER), ("World", CHINESE_PLACEHOLDER)]


def test_confidence_always_within_bounds():
    pairs = align(
        "This is a very long English sentence. Short. Another one here.",
        "短。这是一个很长的中文句子，用来测试。",
        _options(FallbackStrategy.PLACEHOLDER),
    )
    assert pairs
    assert all(0.0 <= p.confidence <= 1.0 for p in pairs)


@pytest.mark.parametrize("ratio,expected", [(1.0, 0.9), (0.5, 0.85), (2.5, 0.75)])
def test_ratio_confidence(ratio, expected):
    assert ratio_confidence(ratio) == pytest.approx(expected)


def test_min_confidence_out_of_range_is_rejected():
    with pytest.raises(ValidationError):
        AlignmentOptions(min_confidence=1.5)


def test_options_accept_camel_case_keys():
    options = AlignmentOptions.model_validate({"minConfidence": 0.3, "fallbackStrategy": "placeholder"})
    assert options.min_confidence == 0.3
    assert options.fallback_strategy is FallbackStrategy.PLACEHOLDER


def test_none_text_is_rejected():
    with pytest.raises(InputValidationError):
        align(None, "你好。")


def test_labeled_pairs():
    text = "English: Hello\nChinese: 你好\nnoise line\nEnglish: Bye\nChinese: 再见\nEnglish: orphan"
    pairs = extract_labeled_pairs(text)

    assert [(p.english, p.chinese) for p in pairs] == [("Hello", "你好"), ("Bye", "再见")]
    assert all(p.confidence == 1.0 for p in pairs)
