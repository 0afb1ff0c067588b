"""
기계 번역 대체 전략(machine-translation fallback)에서 사용하는 번역 제공자

기본값인 StubTranslator 는 실제 번역을 하지 않고 원문 앞부분만 잘라 표시합니다.
실서비스에서는 settings.translation_provider 를 http 또는 openai 로 지정해야 합니다.
"""

from abc import ABC, abstractmethod
from typing import Optional
import requests
from config.settings import settings
from utils.exceptions import TranslationError
from utils.logging import logger


class TranslationProvider(ABC):
    """번역 제공자 인터페이스"""

    name: str = "base"

    @abstractmethod
    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        text 를 source_lang 에서 target_lang 으로 번역합니다.

        Args:
            text: 번역할 문장
            source_lang: "en" 또는 "zh"
            target_lang: "en" 또는 "zh"

        Returns:
            번역된 문장

        Raises:
            TranslationError: 번역 실패 시
        """


class StubTranslator(TranslationProvider):
    """번역 없이 원문 앞부분으로 자리표시 문자열을 만드는 기본 제공자"""

    name = "stub"

    def __init__(self, prefix_length: int = 10):
        self.prefix_length = prefix_length

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        prefix = text[:self.prefix_length]
        if target_lang == "zh":
            return f"[自动翻译] {prefix}..."
        return f"[auto-translated] {prefix}..."


class HttpTranslator(TranslationProvider):
    """외부 번역 API 클라이언트"""

    name = "http"

    def __init__(self, api_url: Optional[str] = None, timeout: Optional[int] = None):
        self.api_url = api_url or settings.translation_api_url
        self.timeout = timeout or settings.translation_timeout

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        if not self.api_url:
            raise TranslationError("번역 API URL 이 설정되지 않았습니다")

        try:
            response = requests.post(
                self.api_url,
                json={"text": text, "source": source_lang, "target": target_lang},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise TranslationError(f"외부 번역 API 호출 실패: {e}")
        except ValueError as e:
            raise TranslationError(f"번역 API 응답 파싱 실패: {e}")

        translated = None
        if isinstance(data, dict):
            translated = data.get("translation") or data.get("translated_text")
        if not isinstance(translated, str) or not translated.strip():
            raise TranslationError(f"번역 결과가 비어 있습니다: {data}")

        return translated.strip()


def get_translation_provider(provider_name: Optional[str] = None) -> TranslationProvider:
    """
    설정값에 맞는 번역 제공자를 생성합니다.

    Args:
        provider_name: stub | http | openai (None 이면 settings.translation_provider)

    Returns:
        번역 제공자 인스턴스
    """
    name = (provider_name or settings.translation_provider or "stub").lower()

    if name == "http":
        return HttpTranslator()
    if name == "openai":
        # openai 패키지 로딩은 실제로 선택되었을 때만
        from core.llm.client import LLMTranslator
        return LLMTranslator()
    if name != "stub":
        logger.warning(f"알 수 없는 번역 제공자 '{name}' - stub 으로 대체합니다")
    return StubTranslator()
