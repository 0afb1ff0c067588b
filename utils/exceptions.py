"""커스텀 예외 클래스 정의"""


class PipelineError(Exception):
    """정렬/분석 파이프라인 처리 중 발생하는 기본 예외"""
    pass


class InputValidationError(PipelineError):
    """입력 계약 위반 (None, 문자열이 아닌 값, 지원하지 않는 언어 등)"""
    pass


class TranslationError(PipelineError):
    """번역 제공자 호출 실패 예외"""
    pass


class ContentAnalysisError(PipelineError):
    """자료 전체 분석 실패 예외"""
    pass
