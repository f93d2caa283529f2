from .config import get_gemini_api_key, get_gemini_model
from .llm import GeminiTranslator

_translator: GeminiTranslator | None = None


def get_translator() -> GeminiTranslator:
    global _translator
    if _translator is None:
        _translator = GeminiTranslator(api_key=get_gemini_api_key(), model=get_gemini_model())
    return _translator
