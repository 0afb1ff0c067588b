import logging
import sys
from typing import Optional
from config.settings import settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# DEBUG 가 아닐 때 요청/응답 로그를 줄일 외부 라이브러리 로거
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "urllib3")


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    로깅 설정을 초기화합니다.

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: 로그 포맷 문자열
        log_file: 추가로 기록할 파일 경로 (없으면 콘솔만)

    Returns:
        설정된 로거 인스턴스
    """
    level = (level or settings.log_level).upper()
    format_string = format_string or LOG_FORMAT
    log_file = log_file or settings.log_file

    logger = logging.getLogger("align_api")
    logger.setLevel(getattr(logging, level))

    # 핸들러 중복 방지
    if logger.handlers:
        logger.handlers.clear()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(getattr(logging, level))
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)

    if level != "DEBUG":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    return logger


# 전역 로거 인스턴스
logger = setup_logging()
