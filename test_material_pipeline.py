"""
자료 처리기 (정렬 -> 문장 분석 -> 텍스트 분석) 테스트
"""

import pytest
from core.pipeline import (
    STEP_ALIGNMENT, STEP_SENTENCE_ANALYSIS, STEP_TEXT_ANALYSIS, MaterialProcessor, material_processor
)
from models.request import AlignmentOptions, FallbackStrategy, MaterialItem
from models.response import StatusEnum


class BrokenAligner:
    """정렬 단계에서 항상 실패하는 정렬기"""

    def align(self, english_text, chinese_text, options=None):
        raise RuntimeError("aligner exploded")


class FlakyProcessor(MaterialProcessor):
    """특정 자료에서 process 자체가 예외를 던지는 처리기"""

    def process(self, item):
        if item.material_id == "boom":
            raise ValueError("unexpected failure")
        return super().process(item)


def _item(material_id="m1", **kwargs):
    data = {"english_text": "Hello. How are you?", "chinese_text": "你好。你好吗？"}
    data.update(kwargs)
    return MaterialItem(material_id=material_id, **data)


def test_process_runs_all_steps():
    result = material_processor.process(_item())

    assert result.status is StatusEnum.COMPLETED
    assert result.error_message is None
    assert [s.step_name for s in result.step_results] == [STEP_ALIGNMENT, STEP_SENTENCE_ANALYSIS, STEP_TEXT_ANALYSIS]
    assert all(s.success for s in result.step_results)
    assert all(s.processing_time >= 0 for s in result.step_results)

    assert [(p.english, p.chinese) for p in result.sentence_pairs] == [("Hello", "你好"), ("How are you", "你好吗")]
    assert result.sentences[0].difficulty == 2
    assert result.sentences[0].difficulty_level == "beginner"
    assert result.keywords == ["hello"]
    assert result.readability is not None


def test_labeled_raw_text_takes_precedence():
    result = material_processor.process(_item(raw_text="English: I am a student.\nChinese: 我是学生。"))

    assert result.status is StatusEnum.COMPLETED
    assert result.step_results[0].details["source"] == "labeled"
    assert [(p.english, p.confidence) for p in result.sentence_pairs] == [("I am a student.", 1.0)]


def test_raw_text_without_labels_falls_back_to_alignment():
    result = material_processor.process(_item(raw_text="just some notes"))

    assert result.step_results[0].details["source"] == "aligned"
    assert len(result.sentence_pairs) == 2


def test_options_are_forwarded_to_aligner():
    options = AlignmentOptions(min_confidence=0.0, fallback_strategy=FallbackStrategy.PLACEHOLDER)
    result = material_processor.process(_item(english_text="A. B. C.", chinese_text="甲。", options=options))

    assert len(result.sentence_pairs) == 3
    assert result.step_results[0].details["fallback_strategy"] == "placeholder"


def test_failed_step_marks_error_and_stops():
    processor = MaterialProcessor(sentence_aligner=BrokenAligner())
    result = processor.process(_item())

    assert result.status is StatusEnum.ERROR
    assert result.error_message == "aligner exploded"
    assert len(result.step_results) == 1
    assert result.step_results[0].success is False
    assert result.step_results[0].error_message == "aligner exploded"
    assert result.sentences == []


@pytest.mark.asyncio
async def test_batch_preserves_input_order():
    items = [_item(f"m{i}") for i in range(5)]
    results = await material_processor.process_batch(items, max_concurrent=2)

    assert [r.material_id for r in results] == ["m0", "m1", "m2", "m3", "m4"]
    assert all(r.status is StatusEnum.COMPLETED for r in results)


@pytest.mark.asyncio
async def test_batch_converts_exceptions_to_error_results():
    processor = FlakyProcessor()
    results = await processor.process_batch([_item("ok"), _item("boom"), _item("ok2")])

    assert [r.status for r in results] == [StatusEnum.COMPLETED, StatusEnum.ERROR, StatusEnum.COMPLETED]
    assert results[1].material_id == "boom"
    assert results[1].error_message == "unexpected failure"
