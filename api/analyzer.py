from typing import List
from fastapi import APIRouter, HTTPException
from core.analyzer import content_analyzer
from core.difficulty import difficulty_breakdown, difficulty_level
from core.grammar import grammar_matcher
from core.keywords import extract_common_phrases, extract_keywords
from core.readability import readability
from config.grammar_patterns import GRAMMAR_PATTERNS
from models.internal import GrammarPattern, ReadabilityMetrics
from models.request import KeywordRequest, PhraseRequest, SentenceRequest, TextRequest
from models.response import (
    ContentAnalysisResult, DifficultyBreakdownModel, DifficultyResponse, GrammarPatternInfo,
    GrammarPointsResponse, KeywordsResponse, PhrasesResponse, StructureResponse
)
from utils.exceptions import InputValidationError
from utils.logging import logger

router = APIRouter(tags=["analyzer"])


def _pattern_info(pattern: GrammarPattern) -> GrammarPatternInfo:
    return GrammarPatternInfo(
        name=pattern.name,
        pattern=pattern.pattern.pattern,
        description=pattern.description,
        examples=list(pattern.examples),
    )


@router.post("/analyze/difficulty", response_model=DifficultyResponse, summary="문장 난이도 (1~5)")
async def analyze_difficulty(request: SentenceRequest):
    try:
        breakdown = difficulty_breakdown(request.sentence)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return DifficultyResponse(
        sentence=request.sentence,
        score=breakdown.score,
        level=difficulty_level(breakdown.score),
        breakdown=DifficultyBreakdownModel(
            length_score=breakdown.length_score,
            vocabulary_score=breakdown.vocabulary_score,
            syntax_score=breakdown.syntax_score,
            tense_score=breakdown.tense_score,
            weighted=breakdown.weighted,
        ),
    )


@router.post("/analyze/readability", response_model=ReadabilityMetrics, summary="Flesch 가독성 지표")
async def analyze_readability(request: TextRequest):
    try:
        return readability(request.text)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/analyze/grammar", response_model=GrammarPointsResponse, summary="문법 요소 식별")
async def analyze_grammar(request: SentenceRequest):
    try:
        points = grammar_matcher.identify_grammar_points(request.sentence)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return GrammarPointsResponse(sentence=request.sentence, grammar_points=points)


@router.get("/grammar-patterns", response_model=List[GrammarPatternInfo], summary="문법 패턴 카탈로그")
async def list_grammar_patterns():
    return [_pattern_info(pattern) for pattern in GRAMMAR_PATTERNS]


@router.get("/grammar-patterns/{name}", response_model=GrammarPatternInfo, summary="문법 패턴 상세")
async def get_grammar_pattern(name: str):
    pattern = grammar_matcher.get_grammar_point_details(name)
    if pattern is None:
        raise HTTPException(status_code=404, detail=f"알 수 없는 문법 패턴입니다: {name}")
    return _pattern_info(pattern)


@router.post("/analyze/structure", response_model=StructureResponse, summary="문장 구조 분석")
async def analyze_sentence_structure(request: SentenceRequest):
    try:
        analysis = grammar_matcher.analyze_structure(request.sentence)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return StructureResponse(sentence=request.sentence, **analysis.model_dump())


@router.post("/analyze/keywords", response_model=KeywordsResponse, summary="키워드 추출")
async def analyze_keywords(request: KeywordRequest):
    try:
        return KeywordsResponse(keywords=extract_keywords(request.text, request.max_keywords))
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/analyze/phrases", response_model=PhrasesResponse, summary="반복 구문 추출")
async def analyze_phrases(request: PhraseRequest):
    try:
        return PhrasesResponse(phrases=extract_common_phrases(request.text, request.min_occurrences))
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/analyze/content",
    response_model=ContentAnalysisResult,
    summary="자료 종합 분석",
    response_description="통계, 가독성, 키워드, 품질, 구조, 난이도 추정"
)
async def analyze_content(request: TextRequest):
    """
    학습 자료 전체 텍스트를 분석합니다.
    """
    logger.info(f"자료 분석 요청: {len(request.text)} 글자")

    try:
        result = content_analyzer.analyze_content(request.text)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"자료 분석 실패: {str(e)}")
        raise HTTPException(status_code=500, detail=f"자료 분석 중 오류가 발생했습니다: {str(e)}")

    return result
