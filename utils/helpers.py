"""유틸리티 헬퍼 함수들"""

import math
from typing import Any
from utils.exceptions import InputValidationError


def ensure_text(value: Any, field_name: str = "text") -> str:
    """
    문자열 입력 계약을 검증합니다.

    빈 문자열은 정상 입력으로 취급하고(빈 결과를 돌려주는 것은 각 단계의 몫),
    None 이나 문자열이 아닌 값만 거부합니다.

    Args:
        value: 검증할 값
        field_name: 오류 메시지에 표시할 필드명

    Returns:
        검증된 문자열

    Raises:
        InputValidationError: 문자열이 아닐 때
    """
    if value is None:
        raise InputValidationError(f"{field_name} 값이 필요합니다 (None 입력)")
    if not isinstance(value, str):
        raise InputValidationError(
            f"{field_name} 값은 문자열이어야 합니다: {type(value).__name__}"
        )
    return value


def round_half_up(value: float, digits: int = 0) -> float:
    """
    0.5 를 항상 올림 방향(+무한대)으로 반올림합니다.

    내장 round() 는 은행가 반올림이라 2.5 -> 2 가 되므로 점수 계산에는 쓰지 않습니다.

    Args:
        value: 반올림할 값
        digits: 소수점 자릿수

    Returns:
        반올림된 값
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_processing_time(start_time: float, end_time: float) -> str:
    """
    처리 시간을 포맷팅합니다.

    Args:
        start_time: 시작 시간
        end_time: 종료 시간

    Returns:
        포맷팅된 시간 문자열
    """
    duration = max(0.0, end_time - start_time)

    if duration < 1:
        return f"{duration*1000:.0f}ms"
    elif duration < 60:
        return f"{duration:.1f}s"
    else:
        minutes = int(duration // 60)
        seconds = duration % 60
        return f"{minutes}m {seconds:.1f}s"
