"""
문법 패턴 카탈로그

정규식 기반 근사치 매칭이므로 오탐/미탐이 있을 수 있습니다.
호출 측이 현재 매칭 결과에 의존하므로 패턴을 임의로 "개선"하지 않습니다.
카탈로그 순서가 곧 identify_grammar_points 의 결과 순서입니다.
"""

import re
from types import MappingProxyType
from typing import Mapping, Tuple
from models.internal import GrammarPattern


def _pattern(name: str, regex: str, description: str, *examples: str) -> GrammarPattern:
    return GrammarPattern(
        name=name,
        pattern=re.compile(regex, re.ASCII | re.IGNORECASE),
        description=description,
        examples=tuple(examples),
    )


GRAMMAR_PATTERNS: Tuple[GrammarPattern, ...] = (
    _pattern(
        "present_simple",
        r"\b(?:do|does|don't|doesn't)\b.*?\b\w+\b|\b(?:am|is|are|'m|'s|'re)\s+not\b|\b\w+s\b(?!\w)",
        "一般现在时表达习惯性动作或事实",
        "I work every day.", "She lives in London.",
    ),
    _pattern(
        "present_continuous",
        r"\b(?:am|is|are|'m|'s|'re)\b\s+\w+ing\b",
        "现在进行时表达正在进行的动作",
        "I am working now.", "They are playing football.",
    ),
    _pattern(
        "past_simple",
        r"\b(?:did|didn't)\b.*?\b\w+\b|\b\w+(?:ed)\b(?!\w)",
        "一般过去时表达过去发生的动作或状态",
        "I worked yesterday.", "She visited Paris last year.",
    ),
    _pattern(
        "past_continuous",
        r"\b(?:was|were)\b\s+\w+ing\b",
        "过去进行时表达过去某个时间正在进行的动作",
        "I was working at 5 PM.", "They were watching TV when I called.",
    ),
    _pattern(
        "present_perfect",
        r"\b(?:have|has|'ve|'s)\b\s+\w+(?:ed|en|t)\b",
        "现在完成时表达过去发生并与现在有联系的动作",
        "I have worked here for 5 years.", "She has visited many countries.",
    ),
    _pattern(
        "present_perfect_continuous",
        r"\b(?:have|has|'ve|'s)\b\s+been\s+\w+ing\b",
        "现在完成进行时表达从过去持续到现在的动作",
        "I have been working all day.", "She has been studying for hours.",
    ),
    _pattern(
        "future_simple",
        r"\b(?:will|'ll|won't)\b\s+\w+\b",
        "一般将来时表达将来的动作或状态",
        "I will call you later.", "They will arrive tomorrow.",
    ),
    _pattern(
        "be_going_to",
        r"\b(?:am|is|are|'m|'s|'re)\b\s+going\s+to\s+\w+\b",
        "be going to 结构表达计划或意图",
        "I am going to study tonight.", "We are going to travel next month.",
    ),
    _pattern(
        "modal_verbs",
        r"\b(?:can|could|may|might|must|should|would|ought\s+to)\b\s+\w+\b",
        "情态动词表达可能性、必要性、建议等",
        "You should exercise more.", "He might come to the party.",
    ),
    _pattern(
        "passive_voice",
        r"\b(?:am|is|are|was|were|been|be)\b\s+\w+(?:ed|en|t)\b\s+(?:by\b)?",
        "被动语态强调动作的接受者",
        "The book was written by her.", "This building was constructed in 1990.",
    ),
    _pattern(
        "conditionals",
        r"\bif\b.*?(?:,|then).*?\b(?:will|would|could|might|may)\b",
        "条件句表达假设情况及其结果",
        "If it rains, I will stay home.", "If I had more time, I would travel more.",
    ),
    _pattern(
        "relative_clauses",
        r"\b(?:who|whom|whose|which|that)\b.*?\b\w+\b",
        "定语从句提供额外信息",
        "The man who called is my teacher.", "The book that you recommended is interesting.",
    ),
    _pattern(
        "reported_speech",
        r"\b(?:said|told|asked|reported|announced)\b.*?\bthat\b",
        "间接引语报告他人所说的话",
        "She said that she was busy.", "He told me that he would come.",
    ),
    _pattern(
        "gerunds",
        r"\b\w+ing\b\s+(?:is|was|as|for)\b",
        "动名词作为名词使用",
        "Swimming is good exercise.", "I enjoy reading books.",
    ),
    _pattern(
        "infinitives",
        r"\bto\s+\w+\b",
        "不定式表达目的、原因等",
        "I want to learn English.", "She went to the store to buy milk.",
    ),
)

GRAMMAR_PATTERNS_BY_NAME: Mapping[str, GrammarPattern] = MappingProxyType(
    {p.name: p for p in GRAMMAR_PATTERNS}
)
