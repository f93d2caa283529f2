import logging
from pathlib import Path

from .llm import GeminiTranslator
from .prompts import build_prompt
from .reference_data import ExamplePair, load_examples
from .schemas import TranslationMode, TranslationRequest

logger = logging.getLogger("translator")

PROMPT_LOG_CHARS = 500


def translate_text(
    request: TranslationRequest,
    translator: GeminiTranslator,
    examples_path: Path,
    max_examples: int | None = None,
) -> str:
    """Run one translation and return the model text, which may be an ``Error:`` string.

    Raises ExampleDataError before any model call when many-shot data is unusable.
    """
    examples: list[ExamplePair] | None = None
    if request.translation_mode is TranslationMode.MANY_SHOT:
        examples = load_examples(examples_path)
        logger.debug("Length of examples: %d", len(examples))

    prompt = build_prompt(
        request.input_text,
        request.source_language,
        request.target_language,
        examples,
        limit=max_examples,
    )
    logger.debug(
        "Constructed prompt (%s):\n%s%s",
        request.translation_mode.value,
        prompt[:PROMPT_LOG_CHARS],
        "..." if len(prompt) > PROMPT_LOG_CHARS else "",
    )
    return translator.generate(prompt)
