"""LLM 번역 프롬프트"""

LANGUAGE_NAMES = {
    "en": "English",
    "zh": "Simplified Chinese",
}

TRANSLATION_SYSTEM_PROMPT = (
    "You are a professional translator preparing bilingual sentence pairs "
    "for English learners. Translate faithfully, keep the sentence count, "
    "and output the translation only."
)

TRANSLATION_PROMPT = """Translate the following {source_name} sentence into {target_name}.

Sentence:
{text}

Return only the translated sentence without quotes or explanations."""
