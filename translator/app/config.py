import logging
import os
from pathlib import Path

logger = logging.getLogger("translator")

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_EXAMPLES_PATH = BASE_DIR / "data" / "train.csv"

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash-latest"
DEFAULT_MAX_EXAMPLES = 100


def get_gemini_api_key() -> str | None:
    return os.getenv("GEMINI_API_KEY") or None


def get_gemini_model() -> str:
    return os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)


def get_examples_path() -> Path:
    return Path(os.getenv("TRANSLATION_EXAMPLES_PATH", str(DEFAULT_EXAMPLES_PATH)))


def get_max_examples() -> int | None:
    """Upper bound on example fragments per prompt; None when unbounded."""
    raw = os.getenv("TRANSLATION_MAX_EXAMPLES", str(DEFAULT_MAX_EXAMPLES))
    try:
        limit = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring non-integer TRANSLATION_MAX_EXAMPLES=%r; using %d", raw, DEFAULT_MAX_EXAMPLES
        )
        limit = DEFAULT_MAX_EXAMPLES
    return limit if limit > 0 else None


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "info")
