import re
from typing import List
from models.request import Language
from utils.exceptions import InputValidationError
from utils.helpers import ensure_text


# 종결부호 묶음 + 뒤따르는 공백을 경계로 사용 (약어 "Dr." 등은 구분하지 않음)
_ENGLISH_BOUNDARY_RE = re.compile(r"[.!?]+\s*")
_CHINESE_BOUNDARY_RE = re.compile(r"[。！？]+\s*")

_CJK_RE = re.compile(r"[一-龥]")
_LATIN_RE = re.compile(r"[a-zA-Z]")


def segment(text: str, language: str = "en") -> List[str]:
    """
    텍스트를 종결부호 기준으로 문장 리스트로 분할합니다.

    Args:
        text: 원문 텍스트
        language: "en" 또는 "zh"

    Returns:
        순서가 보존된 문장 리스트 (빈 문장 제외, 종결부호 제거)

    Raises:
        InputValidationError: text 가 문자열이 아니거나 지원하지 않는 언어일 때
    """
    text = ensure_text(text)

    try:
        lang = Language(language)
    except ValueError:
        raise InputValidationError(f"지원하지 않는 언어입니다: {language}")

    boundary = _ENGLISH_BOUNDARY_RE if lang is Language.EN else _CHINESE_BOUNDARY_RE

    sentences = []
    for piece in boundary.split(text):
        piece = piece.strip()
        if piece:
            sentences.append(piece)
    return sentences


def detect_language(text: str) -> str:
    """
    한자/라틴 문자 존재 여부로 언어를 대략 판별합니다.

    Returns:
        "mixed" | "chinese" | "english" (둘 다 없으면 "english")
    """
    text = ensure_text(text)

    has_chinese = _CJK_RE.search(text) is not None
    has_english = _LATIN_RE.search(text) is not None

    if has_chinese and has_english:
        return "mixed"
    if has_chinese:
        return "chinese"
    return "english"
