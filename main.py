from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from api.router import router as alignment_router
from api.analyzer import router as analyzer_router
from api.pipeline import router as materials_router
from utils.exceptions import InputValidationError, PipelineError
from utils.logging import setup_logging
from config.settings import settings

# 로깅 초기화
logger = setup_logging(settings.log_level)

app = FastAPI(
    title="Bilingual Alignment API",
    description="영문/중문 이중 언어 학습 자료 처리 API - 문장 분할, 정렬, 난이도/가독성/문법/키워드 분석",
    version="1.0.0"
)

# 라우터 등록
app.include_router(alignment_router)
app.include_router(analyzer_router)
app.include_router(materials_router)


@app.exception_handler(PipelineError)
async def pipeline_error_handler(request: Request, exc: PipelineError):
    """라우터에서 처리되지 않은 파이프라인 예외 (입력 오류 400, 그 외 500)"""
    status_code = 400 if isinstance(exc, InputValidationError) else 500
    if status_code == 500:
        logger.error(f"{request.url.path} 처리 실패: {str(exc)}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/", include_in_schema=False)
async def read_root():
    return {
        "message": "Bilingual Alignment API가 실행 중입니다.",
        "docs": "/docs",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """서비스 상태 확인"""
    return {
        "status": "healthy",
        "version": "1.0.0",
        "settings": {
            "debug": settings.debug,
            "alignment_method": settings.default_alignment_method,
            "min_confidence": settings.default_min_confidence,
            "fallback_strategy": settings.default_fallback_strategy,
            "translation_provider": settings.translation_provider
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
