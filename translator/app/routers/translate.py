import logging
from pathlib import Path

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..config import get_examples_path, get_max_examples
from ..dependencies import get_translator
from ..llm import GeminiTranslator, is_error_text
from ..reference_data import ExampleDataError
from ..schemas import ErrorResponse, TranslationRequest, TranslationResponse
from ..services import translate_text

logger = logging.getLogger("translator")

UNKNOWN_ERROR_MESSAGE = "Failed to translate text (unknown server error)"

router = APIRouter(tags=["translate"])


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/translate",
    response_model=TranslationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def translate(
    payload: TranslationRequest,
    translator: GeminiTranslator = Depends(get_translator),
    examples_path: Path = Depends(get_examples_path),
    max_examples: int | None = Depends(get_max_examples),
) -> TranslationResponse | JSONResponse:
    logger.info(
        "Translate %s -> %s (%s)",
        payload.source_language,
        payload.target_language,
        payload.translation_mode.value,
    )
    try:
        translated = translate_text(payload, translator, examples_path, max_examples)
    except ExampleDataError as exc:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)
    except Exception as exc:
        logger.exception("Translation API error")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or UNKNOWN_ERROR_MESSAGE)

    if is_error_text(translated):
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, translated)

    return TranslationResponse(translated_text=translated)
