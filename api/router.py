import asyncio
from fastapi import APIRouter, HTTPException
from core.aligner import align, extract_labeled_pairs
from core.segmenter import detect_language, segment
from models.request import AlignRequest, SegmentRequest, TextRequest
from models.response import AlignResponse, LanguageResponse, SegmentResponse
from utils.exceptions import InputValidationError
from utils.logging import logger

router = APIRouter(tags=["alignment"])


@router.post(
    "/segment",
    response_model=SegmentResponse,
    summary="문장 분할",
    description="영문(. ! ?) 또는 중문(。！？) 종결부호 기준으로 문장을 분할합니다."
)
async def segment_text(request: SegmentRequest):
    try:
        sentences = segment(request.text, request.language.value)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"문장 분할 실패: {str(e)}")
        raise HTTPException(status_code=500, detail=f"문장 분할 중 오류가 발생했습니다: {str(e)}")

    return SegmentResponse(language=request.language.value, sentences=sentences, total=len(sentences))


@router.post("/detect-language", response_model=LanguageResponse, summary="언어 판별")
async def detect_text_language(request: TextRequest):
    try:
        return LanguageResponse(language=detect_language(request.text))
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/align",
    response_model=AlignResponse,
    summary="영문/중문 문장 정렬",
    description="길이 비율 휴리스틱으로 문장 쌍을 만들고 신뢰도를 부여합니다. "
                "minConfidence 미만의 쌍은 제외됩니다."
)
async def align_texts(request: AlignRequest):
    """
    문장 정렬 엔드포인트

    Args:
        request: 영문/중문 원문과 정렬 옵션

    Returns:
        순서가 보존된 문장 쌍 리스트
    """
    logger.info(
        f"문장 정렬 요청 수신: 영문={len(request.english_text)}글자, 중문={len(request.chinese_text)}글자"
    )

    try:
        # 기계 번역 대체 전략은 외부 호출을 포함하므로 스레드에서 실행
        pairs = await asyncio.to_thread(align, request.english_text, request.chinese_text, request.options)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"문장 정렬 실패: {str(e)}")
        raise HTTPException(status_code=500, detail=f"문장 정렬 중 오류가 발생했습니다: {str(e)}")

    return AlignResponse(sentence_pairs=pairs, total=len(pairs), method=request.options.method.value)


@router.post(
    "/align/labeled",
    response_model=AlignResponse,
    summary="라벨 기반 문장 쌍 추출",
    description="'English: ...' 다음 줄에 'Chinese: ...' 가 오는 형식의 텍스트에서 문장 쌍을 추출합니다."
)
async def align_labeled(request: TextRequest):
    try:
        pairs = extract_labeled_pairs(request.text)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"라벨 기반 추출 실패: {str(e)}")
        raise HTTPException(status_code=500, detail=f"라벨 기반 추출 중 오류가 발생했습니다: {str(e)}")

    return AlignResponse(sentence_pairs=pairs, total=len(pairs), method="labeled")
