import openai
from config.settings import settings
from config.prompts import LANGUAGE_NAMES, TRANSLATION_PROMPT, TRANSLATION_SYSTEM_PROMPT
from core.translation import TranslationProvider
from utils.exceptions import TranslationError
from utils.logging import logger


class LLMTranslator(TranslationProvider):
    """OpenAI LLM 기반 번역 제공자"""

    name = "openai"

    def __init__(self, temperature: float = 0.2):
        self.model = settings.openai_model
        self.temperature = temperature
        self._client = None

    @property
    def client(self):
        """Lazy initialization으로 OpenAI 클라이언트 생성"""
        if self._client is None:
            try:
                self._client = openai.OpenAI(api_key=settings.openai_api_key)
                logger.info("OpenAI 클라이언트 초기화 성공")
            except Exception as e:
                logger.error(f"OpenAI 클라이언트 초기화 실패: {e}")
                self._client = None
        return self._client

    def build_messages(self, text: str, source_lang: str, target_lang: str) -> list:
        """번역 요청 메시지 구성"""
        prompt = TRANSLATION_PROMPT.format(
            source_name=LANGUAGE_NAMES.get(source_lang, source_lang),
            target_name=LANGUAGE_NAMES.get(target_lang, target_lang),
            text=text,
        )
        return [
            {"role": "system", "content": TRANSLATION_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        단일 문장 번역

        Args:
            text: 번역할 문장
            source_lang: 원문 언어 코드
            target_lang: 번역 언어 코드

        Returns:
            번역된 문장

        Raises:
            TranslationError: LLM API 호출 실패 시
        """
        if not self.client:
            raise TranslationError("OpenAI 클라이언트가 초기화되지 않았습니다")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(text, source_lang, target_lang),
                temperature=self.temperature,
            )
            translated = (response.choices[0].message.content or "").strip()
        except Exception as e:
            logger.error(f"LLM 번역 실패 ({source_lang}->{target_lang}): {str(e)}")
            raise TranslationError(f"LLM 번역 실패: {str(e)}")

        if not translated:
            raise TranslationError("LLM 번역 결과가 비어 있습니다")

        logger.info(f"LLM 번역 성공 ({source_lang}->{target_lang}): {len(translated)} 글자")
        return translated
