from typing import List, Optional
from enum import Enum
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from config.settings import settings


class AlignmentMethod(str, Enum):
    """정렬 방식 (현재는 모두 길이 비율 휴리스틱으로 처리)"""
    LENGTH_BASED = "length-based"
    SEMANTIC = "semantic"
    NEURAL = "neural"
    HYBRID = "hybrid"


class FallbackStrategy(str, Enum):
    """짝을 찾지 못한 잔여 문장 처리 전략"""
    SKIP = "skip"
    MACHINE_TRANSLATION = "machine-translation"
    PLACEHOLDER = "placeholder"


class Language(str, Enum):
    """분할 대상 언어"""
    EN = "en"
    ZH = "zh"


class AlignmentOptions(BaseModel):
    """문장 정렬 옵션 - camelCase(minConfidence)와 snake_case 모두 허용"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    method: AlignmentMethod = Field(
        default_factory=lambda: AlignmentMethod(settings.default_alignment_method),
        description="정렬 방식"
    )
    min_confidence: float = Field(
        default_factory=lambda: settings.default_min_confidence,
        ge=0.0,
        le=1.0,
        validation_alias=AliasChoices("min_confidence", "minConfidence"),
        description="이 값 미만의 신뢰도를 가진 쌍은 제거"
    )
    fallback_strategy: FallbackStrategy = Field(
        default_factory=lambda: FallbackStrategy(settings.default_fallback_strategy),
        validation_alias=AliasChoices("fallback_strategy", "fallbackStrategy"),
        description="잔여 문장 처리 전략"
    )


class SegmentRequest(BaseModel):
    """문장 분할 요청 모델"""
    text: str = Field(description="분할할 텍스트")
    language: Language = Field(default=Language.EN, description="en | zh")


class TextRequest(BaseModel):
    """텍스트 단위 분석 요청 모델"""
    text: str = Field(description="분석할 텍스트")


class SentenceRequest(BaseModel):
    """문장 단위 분석 요청 모델"""
    sentence: str = Field(description="분석할 영문 문장")


class AlignRequest(BaseModel):
    """문장 정렬 요청 모델"""
    model_config = ConfigDict(populate_by_name=True)

    english_text: str = Field(
        validation_alias=AliasChoices("english_text", "englishText"),
        description="영문 원문"
    )
    chinese_text: str = Field(
        validation_alias=AliasChoices("chinese_text", "chineseText"),
        description="중문 원문"
    )
    options: AlignmentOptions = Field(default_factory=AlignmentOptions, description="정렬 옵션")


class KeywordRequest(BaseModel):
    """키워드 추출 요청 모델"""
    model_config = ConfigDict(populate_by_name=True)

    text: str
    max_keywords: int = Field(
        default=5,
        ge=1,
        validation_alias=AliasChoices("max_keywords", "maxKeywords"),
        description="최대 키워드 수"
    )


class PhraseRequest(BaseModel):
    """반복 구문 추출 요청 모델"""
    model_config = ConfigDict(populate_by_name=True)

    text: str
    min_occurrences: int = Field(
        default=2,
        ge=1,
        validation_alias=AliasChoices("min_occurrences", "minOccurrences"),
        description="최소 출현 횟수"
    )


class MaterialItem(BaseModel):
    """자료 처리 항목 모델"""
    model_config = ConfigDict(populate_by_name=True)

    material_id: str = Field(
        validation_alias=AliasChoices("material_id", "materialId"),
        description="자료 식별자"
    )
    english_text: str = Field(
        default="",
        validation_alias=AliasChoices("english_text", "englishText"),
        description="영문 원문"
    )
    chinese_text: str = Field(
        default="",
        validation_alias=AliasChoices("chinese_text", "chineseText"),
        description="중문 원문"
    )
    raw_text: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("raw_text", "rawText"),
        description="'English:'/'Chinese:' 라벨이 붙은 원문 (있으면 라벨 기반 추출 사용)"
    )
    options: AlignmentOptions = Field(default_factory=AlignmentOptions, description="정렬 옵션")
    max_keywords: int = Field(default=5, ge=1, description="최대 키워드 수")


class BatchMaterialRequest(BaseModel):
    """배치 자료 처리 요청 모델"""
    request_id: str = Field(description="배치 요청 ID")
    items: List[MaterialItem] = Field(description="처리할 자료 리스트")
    max_concurrent: Optional[int] = Field(default=None, ge=1, description="최대 동시 처리 개수 (기본값: 설정값)")
