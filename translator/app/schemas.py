from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TranslationMode(str, Enum):
    ZERO_SHOT = "zero-shot"
    MANY_SHOT = "many-shot"


class TranslationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input_text: str = Field(..., min_length=1, alias="inputText")
    source_language: str = Field(..., min_length=1, alias="sourceLanguage")
    target_language: str = Field(..., min_length=1, alias="targetLanguage")
    translation_mode: TranslationMode = Field(..., alias="translationMode")


class TranslationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText")


class ErrorResponse(BaseModel):
    error: str
