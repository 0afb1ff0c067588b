import re
from collections import Counter
from typing import List
from config.stopwords import is_stopword
from utils.helpers import ensure_text


# 영숫자/밑줄 이외 문자와 밑줄 자체를 공백으로 치환 (ASCII 기준)
_PUNCTUATION_RE = re.compile(r"[^\w\s]|_", re.ASCII)


def tokenize(text: str) -> List[str]:
    """소문자화, 구두점 제거, 공백 분리"""
    return _PUNCTUATION_RE.sub(" ", text.lower()).split()


def extract_keywords(text: str, max_keywords: int = 5) -> List[str]:
    """
    불용어와 한 글자 토큰을 제외한 빈도 상위 키워드를 추출합니다.

    Args:
        text: 영문 텍스트
        max_keywords: 최대 키워드 수

    Returns:
        빈도 내림차순 키워드 리스트 (동률은 처음 등장한 순서)
    """
    text = ensure_text(text)
    if max_keywords <= 0:
        return []

    counts = Counter(
        token for token in tokenize(text)
        if len(token) > 1 and not is_stopword(token)
    )
    # Counter 는 삽입 순서를 유지하고 sorted 는 안정 정렬
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:max_keywords]]


def extract_common_phrases(text: str, min_occurrences: int = 2) -> List[str]:
    """
    반복되는 2~3단어 구를 추출합니다. 첫 단어가 불용어인 구는 제외합니다.

    Args:
        text: 영문 텍스트
        min_occurrences: 최소 등장 횟수

    Returns:
        등장 횟수 내림차순 구 리스트
    """
    text = ensure_text(text)
    words = tokenize(text)

    phrases: Counter = Counter()
    for i in range(len(words) - 1):
        if is_stopword(words[i]):
            continue
        phrases[" ".join(words[i:i + 2])] += 1
        if i < len(words) - 2:
            phrases[" ".join(words[i:i + 3])] += 1

    ranked = sorted(
        ((phrase, count) for phrase, count in phrases.items() if count >= min_occurrences),
        key=lambda item: item[1],
        reverse=True,
    )
    return [phrase for phrase, _ in ranked]
