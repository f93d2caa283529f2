import json
import logging
from typing import Any

from google import genai

logger = logging.getLogger("translator")

ERROR_MARKER = "Error:"
UPSTREAM_ERROR_PREFIX = "Error during translation:"
MISSING_KEY_MESSAGE = "Error: Gemini API Key not configured."


class ResponseShapeError(Exception):
    pass


def extract_text(result: Any) -> str:
    """Pull plain text out of a generate_content result.

    The current SDK exposes ``result.text`` as a string. Older response
    objects offered a ``text()`` method on ``result.response``, or only the
    raw candidate parts.
    """
    text = getattr(result, "text", None)
    if isinstance(text, str):
        return text

    response = getattr(result, "response", None)
    for holder in (response, result):
        accessor = getattr(holder, "text", None)
        if callable(accessor):
            value = accessor()
            if isinstance(value, str):
                return value

    for holder in (response, result):
        candidates = getattr(holder, "candidates", None)
        if not candidates:
            continue
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None)
        if parts:
            return "".join(getattr(part, "text", None) or "" for part in parts)

    raise ResponseShapeError("Invalid response structure from Gemini API")


def describe_error(exc: Exception) -> str:
    message = getattr(exc, "message", None) or str(exc) or "Unknown Gemini API error"
    details = getattr(exc, "details", None)
    if details:
        return f"{UPSTREAM_ERROR_PREFIX} {message} (Details: {json.dumps(details, default=str)})"
    return f"{UPSTREAM_ERROR_PREFIX} {message}"


class GeminiTranslator:
    def __init__(self, api_key: str | None, model: str, client: Any = None) -> None:
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str) -> str:
        """Send one prompt and return trimmed text, or an ``Error:`` string on failure."""
        if not self.api_key and self._client is None:
            return MISSING_KEY_MESSAGE

        try:
            result = self.client.models.generate_content(model=self.model, contents=prompt)
            text = extract_text(result)
        except Exception as exc:
            logger.exception("Error calling Gemini API")
            return describe_error(exc)

        logger.debug("Gemini response text: %s", text)
        return text.strip()


def is_error_text(text: str) -> bool:
    return text.startswith((ERROR_MARKER, UPSTREAM_ERROR_PREFIX))
