from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum
from models.internal import (
    ContentSection, DifficultyFactor, QualityIssue, ReadabilityMetrics, SentencePair, StructureType
)


class StatusEnum(str, Enum):
    """자료 처리 상태"""
    COMPLETED = "completed"
    ERROR = "error"


class SegmentResponse(BaseModel):
    """문장 분할 응답 모델"""
    language: str
    sentences: List[str]
    total: int


class LanguageResponse(BaseModel):
    language: str = Field(description="english | chinese | mixed")


class AlignResponse(BaseModel):
    """문장 정렬 응답 모델"""
    sentence_pairs: List[SentencePair] = Field(description="원래 순서를 유지한 문장 쌍")
    total: int = Field(description="문장 쌍 개수")
    method: str = Field(description="요청된 정렬 방식")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "sentence_pairs": [
                {"english": "Hello", "chinese": "你好", "confidence": 0.9},
                {"english": "How are you", "chinese": "你好吗", "confidence": 0.9}
            ],
            "total": 2,
            "method": "hybrid"
        }
    })


class DifficultyBreakdownModel(BaseModel):
    length_score: int
    vocabulary_score: int
    syntax_score: int
    tense_score: int
    weighted: float


class DifficultyResponse(BaseModel):
    """문장 난이도 응답 모델"""
    sentence: str
    score: int = Field(ge=1, le=5, description="1 = 가장 쉬움, 5 = 가장 어려움")
    level: str = Field(description="beginner | intermediate | advanced")
    breakdown: DifficultyBreakdownModel


class GrammarPointsResponse(BaseModel):
    sentence: str
    grammar_points: List[str] = Field(description="카탈로그 순서의 문법 패턴 이름")


class GrammarPatternInfo(BaseModel):
    """문법 패턴 카탈로그 항목 (정규식은 문자열로 노출)"""
    name: str
    pattern: str
    description: str
    examples: List[str]


class StructureResponse(BaseModel):
    """문장 구조 분석 응답 모델"""
    sentence: str
    type: StructureType
    clauses: int
    subjects: List[str]
    verbs: List[str]
    objects: List[str]
    structure: str
    complexity_score: int


class KeywordsResponse(BaseModel):
    keywords: List[str]


class PhrasesResponse(BaseModel):
    phrases: List[str]


class ContentStats(BaseModel):
    """자료 기본 통계"""
    char_count: int
    word_count: int
    sentence_count: int
    paragraph_count: int
    avg_sentence_length: float
    estimated_read_time: int = Field(description="예상 읽기 시간 (분)")
    estimated_lessons: int = Field(description="예상 차시 수")


class ContentQuality(BaseModel):
    score: int = Field(ge=0, le=100)
    readability: float = Field(0.0, ge=0, le=100, description="문장/단어 길이 기반 간이 가독성 점수 (0-100)")
    issues: List[QualityIssue] = Field(default_factory=list)


class DocumentStructure(BaseModel):
    sections: List[ContentSection] = Field(default_factory=list)
    has_clear_structure: bool = False


class DifficultyEstimate(BaseModel):
    """자료 전체 난이도 추정"""
    level: str = Field(description="beginner | intermediate | advanced")
    score: int = Field(ge=0, le=100)
    factors: List[DifficultyFactor] = Field(default_factory=list)


class ContentAnalysisResult(BaseModel):
    """자료 종합 분석 결과 모델"""
    stats: ContentStats
    readability: ReadabilityMetrics
    keywords: List[str]
    common_phrases: List[str]
    quality: ContentQuality
    structure: DocumentStructure
    difficulty: DifficultyEstimate


class StepResult(BaseModel):
    """단계별 처리 결과 모델"""
    step_name: str = Field(description="단계명")
    success: bool = Field(description="성공 여부")
    processing_time: float = Field(description="처리 시간 (초)")
    details: Optional[Dict[str, Any]] = Field(default=None, description="상세 정보")
    error_message: Optional[str] = Field(default=None, description="에러 메시지")


class SentenceAnalysis(BaseModel):
    """정렬된 문장 쌍 하나에 대한 분석"""
    english: str
    chinese: str
    confidence: float
    difficulty: int
    difficulty_level: str
    grammar_points: List[str]
    structure_type: StructureType
    complexity_score: int


class MaterialResult(BaseModel):
    """자료 처리 결과 모델"""
    material_id: str = Field(description="자료 식별자")
    status: StatusEnum = Field(description="최종 처리 상태")
    sentence_pairs: List[SentencePair] = Field(default_factory=list)
    sentences: List[SentenceAnalysis] = Field(default_factory=list, description="문장별 분석 결과")
    readability: Optional[ReadabilityMetrics] = None
    keywords: List[str] = Field(default_factory=list)
    step_results: List[StepResult] = Field(default_factory=list, description="단계별 처리 결과")
    total_processing_time: float = Field(default=0.0, description="총 처리 시간 (초)")
    error_message: Optional[str] = Field(default=None, description="에러 메시지")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "material_id": "lesson_01",
            "status": "completed",
            "sentence_pairs": [{"english": "Hello", "chinese": "你好", "confidence": 0.9}],
            "sentences": [
                {
                    "english": "Hello",
                    "chinese": "你好",
                    "confidence": 0.9,
                    "difficulty": 1,
                    "difficulty_level": "beginner",
                    "grammar_points": [],
                    "structure_type": "simple",
                    "complexity_score": 1
                }
            ],
            "keywords": ["hello"],
            "step_results": [
                {"step_name": "alignment", "success": True, "processing_time": 0.001,
                 "details": {"pairs": 1, "source": "aligned"}}
            ],
            "total_processing_time": 0.003
        }
    })


class BatchMaterialResponse(BaseModel):
    """배치 자료 처리 응답 모델"""
    request_id: str = Field(description="배치 요청 ID")
    overall_success: bool = Field(description="전체 성공 여부")
    total_items: int = Field(description="총 처리 항목 수")
    successful_items: int = Field(description="성공한 항목 수")
    failed_items: int = Field(description="실패한 항목 수")
    results: List[MaterialResult] = Field(description="각 항목별 처리 결과")
    total_processing_time: float = Field(description="총 처리 시간 (초)")
    error_message: Optional[str] = Field(default=None, description="전체 에러 메시지")
