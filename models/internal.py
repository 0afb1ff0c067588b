from typing import List, Optional, Pattern, Tuple
from pydantic import BaseModel, ConfigDict, Field
from dataclasses import dataclass
from enum import Enum


class StructureType(str, Enum):
    """문장 구조 유형"""
    SIMPLE = "simple"
    COMPOUND = "compound"
    COMPLEX = "complex"
    COMPOUND_COMPLEX = "compound-complex"


class SentencePair(BaseModel):
    """정렬된 영문/중문 문장 쌍 (생성 후 변경 불가)"""
    model_config = ConfigDict(frozen=True)

    english: str
    chinese: str
    confidence: float = Field(ge=0.0, le=1.0, description="정렬 신뢰도 (1.0 = 정확한 1:1 매칭)")


class ReadabilityMetrics(BaseModel):
    """Flesch 계열 가독성 지표 (JSON 응답은 camelCase 키)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    flesch_reading_ease: float = Field(alias="fleschReadingEase")
    flesch_kincaid_grade: float = Field(alias="fleschKincaidGrade")
    average_sentence_length: float = Field(alias="averageSentenceLength")
    average_word_length: float = Field(alias="averageWordLength")


class SentenceStructureAnalysis(BaseModel):
    """문장 구조 분석 결과"""
    type: StructureType
    clauses: int
    subjects: List[str] = Field(default_factory=list)
    verbs: List[str] = Field(default_factory=list)
    objects: List[str] = Field(default_factory=list)
    structure: str = Field(description="문형 라벨 (예: question (yes/no))")
    complexity_score: int = Field(ge=1, le=10)


@dataclass(frozen=True)
class GrammarPattern:
    """문법 패턴 카탈로그 항목"""
    name: str
    pattern: Pattern[str]
    description: str
    examples: Tuple[str, ...] = ()

    def matches(self, sentence: str) -> bool:
        """문장이 패턴과 일치하는지 확인"""
        return self.pattern.search(sentence) is not None


@dataclass(frozen=True)
class DifficultyBreakdown:
    """난이도 세부 점수"""
    length_score: int
    vocabulary_score: int
    syntax_score: int
    tense_score: int
    weighted: float
    score: int


class QualityIssue(BaseModel):
    """자료 품질 이슈"""
    type: str = Field(description="grammar | spelling | readability | structure")
    description: str
    severity: str = Field(description="low | medium | high")
    suggestion: Optional[str] = None


class ContentSection(BaseModel):
    """제목으로 추정된 줄"""
    title: str
    level: int


class DifficultyFactor(BaseModel):
    """자료 난이도 가감 요인"""
    name: str
    impact: int
