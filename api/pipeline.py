import asyncio
import time
from fastapi import APIRouter, HTTPException
from core.pipeline import material_processor
from models.request import BatchMaterialRequest, MaterialItem
from models.response import BatchMaterialResponse, MaterialResult, StatusEnum
from utils.logging import logger

router = APIRouter(prefix="/materials", tags=["materials"])


@router.post(
    "/process",
    response_model=MaterialResult,
    summary="자료 처리 실행",
    description="문장 정렬, 문장별 분석, 텍스트 분석을 순서대로 수행하고 단계별 결과를 반환합니다."
)
async def process_material(item: MaterialItem):
    """
    단일 자료 처리 엔드포인트

    Args:
        item: 자료 처리 항목

    Returns:
        단계별 처리 결과 (실패해도 200 으로 error 상태를 반환)
    """
    logger.info(f"자료 처리 요청 수신: material_id={item.material_id}")
    return await asyncio.to_thread(material_processor.process, item)


@router.post(
    "/process:batch",
    response_model=BatchMaterialResponse,
    summary="배치 자료 처리 실행",
    description="여러 자료를 병렬로 처리합니다."
)
async def process_material_batch(request: BatchMaterialRequest):
    """
    배치 자료 처리 엔드포인트

    Args:
        request: 배치 자료 처리 요청

    Returns:
        배치 처리 결과
    """
    logger.info(f"배치 자료 처리 요청 수신: request_id={request.request_id}, 항목={len(request.items)}개")

    if not request.items:
        raise HTTPException(status_code=400, detail="처리할 항목이 없습니다")

    total_start_time = time.time()

    try:
        results = await material_processor.process_batch(request.items, request.max_concurrent)
    except Exception as e:
        total_time = time.time() - total_start_time
        error_msg = str(e)
        logger.error(f"배치 자료 처리 실패: {error_msg}")
        return BatchMaterialResponse(
            request_id=request.request_id,
            overall_success=False,
            total_items=len(request.items),
            successful_items=0,
            failed_items=len(request.items),
            results=[],
            total_processing_time=total_time,
            error_message=error_msg
        )

    # 결과 통계 계산
    total_time = time.time() - total_start_time
    successful_items = sum(1 for r in results if r.status == StatusEnum.COMPLETED)
    failed_items = len(results) - successful_items

    logger.info(f"배치 자료 처리 완료: 성공={successful_items}, 실패={failed_items}, 총시간={total_time:.2f}초")

    return BatchMaterialResponse(
        request_id=request.request_id,
        overall_success=failed_items == 0,
        total_items=len(request.items),
        successful_items=successful_items,
        failed_items=failed_items,
        results=results,
        total_processing_time=total_time
    )
