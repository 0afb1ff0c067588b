import re
from typing import List, Optional
from config.grammar_patterns import GRAMMAR_PATTERNS, GRAMMAR_PATTERNS_BY_NAME
from models.internal import GrammarPattern, SentenceStructureAnalysis, StructureType
from utils.helpers import ensure_text, round_half_up
from utils.logging import logger


def _word_re(words) -> "re.Pattern[str]":
    return re.compile(r"\b(?:" + "|".join(words) + r")\b", re.ASCII | re.IGNORECASE)


# 절 개수 추정용 접속사/종속사/관계사
CLAUSE_MARKERS = (
    "and", "but", "or", "so", "for", "nor", "yet",
    "who", "which", "that", "when", "where", "why", "how",
    "because", "although", "since", "unless", "if", "while",
)

_CLAUSE_MARKER_RES = tuple(_word_re([marker]) for marker in CLAUSE_MARKERS)
_COORDINATOR_RE = _word_re(["and", "but", "or", "so"])
_SUBORDINATOR_RE = _word_re(["who", "which", "that", "when", "where", "why", "how"])

# 복잡도 점수용
_COMPLEXITY_CLAUSE_RE = _word_re([
    "who", "which", "that", "when", "where", "why", "how",
    "if", "unless", "although", "though", "while",
])
_CONNECTIVE_RE = _word_re([
    "and", "but", "or", "nor", "for", "so", "yet", "because", "since", "as",
    "therefore", "thus", "hence", "however", "nevertheless", "still", "otherwise", "instead",
])

# 문형 라벨 결정 목록 (먼저 일치한 규칙 채택)
STRUCTURE_RULES = (
    (re.compile(r"\b(?:am|is|are|was|were)\b.*?\b(?:a|an|the)\b", re.ASCII | re.IGNORECASE),
     "subject + be + complement"),
    (re.compile(r"\b(?:have|has|had)\b.*?\b(?:a|an|the)\b", re.ASCII | re.IGNORECASE),
     "subject + have + object"),
    (re.compile(r"\b(?:can|could|will|would|shall|should|may|might|must)\b", re.ASCII | re.IGNORECASE),
     "subject + modal + verb + object/complement"),
    (re.compile(r"\b(?:who|which|that|when|where|why|how)\b.*?\?$", re.ASCII | re.IGNORECASE),
     "question (wh-)"),
    (re.compile(r"^(?:do|does|did|have|has|had|am|is|are|was|were|will|would|can|could|shall|should|may|might|must)\b",
                re.ASCII | re.IGNORECASE),
     "question (yes/no)"),
    (re.compile(r"\b(?:if|unless|although|though|while|when)\b", re.ASCII | re.IGNORECASE),
     "complex sentence (condition/time/concession)"),
    (re.compile(r"\b(?:and|but|or|nor|for|so|yet)\b", re.ASCII | re.IGNORECASE),
     "compound sentence"),
)
_RELATIVE_RE = re.compile(r"\b(?:who|which|that|whose|whom)\b", re.ASCII | re.IGNORECASE)
_QUESTION_END_RE = re.compile(r"\?$")
_NOUN_CLAUSE_RE = re.compile(
    r"\b(?:tell|ask|know|think|believe|expect|hope|imagine|wish)\b.*?\bthat\b", re.ASCII | re.IGNORECASE
)
SIMPLE_STRUCTURE = "simple sentence (subject + verb + object)"


class GrammarMatcher:
    """정규식 카탈로그 기반 문법 요소 식별 및 문장 구조 분석"""

    def __init__(self, patterns=GRAMMAR_PATTERNS):
        self.patterns = patterns

    def identify_grammar_points(self, sentence: str) -> List[str]:
        """
        문장에서 일치하는 문법 패턴 이름을 카탈로그 순서대로 반환합니다.

        Args:
            sentence: 영문 문장

        Returns:
            패턴 이름 리스트 (중복 없음)
        """
        sentence = ensure_text(sentence, "sentence")
        found = [pattern.name for pattern in self.patterns if pattern.matches(sentence)]
        logger.debug(f"문법 요소 식별: {len(found)}개 - {found}")
        return found

    def get_grammar_point_details(self, name: str) -> Optional[GrammarPattern]:
        """이름으로 카탈로그 항목 조회 (없으면 None)"""
        return GRAMMAR_PATTERNS_BY_NAME.get(name)

    def estimate_clause_count(self, sentence: str) -> int:
        """주절 1 + 접속사/관계사 출현 수, 단 (쉼표 + 세미콜론 + 2) 를 넘지 않음"""
        count = 1
        for marker_re in _CLAUSE_MARKER_RES:
            count += len(marker_re.findall(sentence))

        commas = sentence.count(",")
        semicolons = sentence.count(";")
        return min(count, 1 + commas + semicolons + 1)

    def classify_type(self, sentence: str, clauses: int) -> StructureType:
        has_coordinator = _COORDINATOR_RE.search(sentence) is not None
        has_subordinator = _SUBORDINATOR_RE.search(sentence) is not None

        if clauses == 1:
            return StructureType.SIMPLE
        if has_coordinator and not has_subordinator:
            return StructureType.COMPOUND
        if has_subordinator and not has_coordinator:
            return StructureType.COMPLEX
        if clauses > 1:
            return StructureType.COMPOUND_COMPLEX
        return StructureType.SIMPLE

    def structure_label(self, sentence: str) -> str:
        for pattern, label in STRUCTURE_RULES:
            if pattern.search(sentence):
                return label
        if _RELATIVE_RE.search(sentence) and not _QUESTION_END_RE.search(sentence):
            return "complex sentence (relative clause)"
        if _NOUN_CLAUSE_RE.search(sentence):
            return "complex sentence (noun clause)"
        return SIMPLE_STRUCTURE

    def complexity_score(self, sentence: str) -> int:
        """길이, 종속절 표지, 연결어 수로 계산한 1~10 복잡도"""
        score = 1.0

        word_count = len(sentence.split())
        if word_count > 20:
            score += 2
        elif word_count > 10:
            score += 1

        score += len(_COMPLEXITY_CLAUSE_RE.findall(sentence))
        score += len(_CONNECTIVE_RE.findall(sentence)) * 0.5

        return int(min(10, max(1, round_half_up(score))))

    def analyze_structure(self, sentence: str) -> SentenceStructureAnalysis:
        """
        문장 구조 유형, 절 개수, 문형 라벨, 복잡도를 분석합니다.

        주어/동사/목적어 추출은 하지 않으므로 해당 리스트는 비어 있습니다.

        Args:
            sentence: 영문 문장

        Returns:
            문장 구조 분석 결과
        """
        sentence = ensure_text(sentence, "sentence")
        clauses = self.estimate_clause_count(sentence)

        return SentenceStructureAnalysis(
            type=self.classify_type(sentence, clauses),
            clauses=clauses,
            subjects=[],
            verbs=[],
            objects=[],
            structure=self.structure_label(sentence),
            complexity_score=self.complexity_score(sentence),
        )


# 전역 문법 분석기 인스턴스
grammar_matcher = GrammarMatcher()


def identify_grammar_points(sentence: str) -> List[str]:
    return grammar_matcher.identify_grammar_points(sentence)


def get_grammar_point_details(name: str) -> Optional[GrammarPattern]:
    return grammar_matcher.get_grammar_point_details(name)


def analyze_structure(sentence: str) -> SentenceStructureAnalysis:
    return grammar_matcher.analyze_structure(sentence)
