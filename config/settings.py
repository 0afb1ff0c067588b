from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# .env 파일 자동 로드
load_dotenv()


class Settings(BaseSettings):
    """애플리케이션 설정 관리"""

    # 앱 설정
    debug: bool = False
    log_level: str = "INFO"
    log_file: str = ""

    # 정렬 기본값 (요청에서 options를 생략했을 때 사용)
    default_alignment_method: str = "hybrid"
    default_min_confidence: float = 0.7
    default_fallback_strategy: str = "skip"

    # 기계 번역 대체 전략 설정: stub | http | openai
    translation_provider: str = "stub"
    translation_api_url: str = ""
    translation_timeout: int = 30

    # OpenAI API 설정 (translation_provider=openai 일 때만 사용)
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"

    # 배치 처리 설정
    batch_max_concurrent: int = 10

    # 자료 분석 설정
    reading_speed_wpm: int = 200
    sentences_per_lesson: int = 30
    default_max_keywords: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# 전역 설정 인스턴스
settings = Settings()
