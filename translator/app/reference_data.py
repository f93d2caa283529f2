import csv
import logging
from pathlib import Path

logger = logging.getLogger("translator")

ExamplePair = dict[str, str]


class ExampleDataError(Exception):
    """The reference example table could not be used for a many-shot request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _clean_row(row: dict[str | None, str | list[str] | None]) -> ExamplePair:
    cleaned: ExamplePair = {}
    for key, value in row.items():
        # DictReader files surplus cells under a None key.
        if key is None or not isinstance(value, str):
            continue
        cleaned[key.strip()] = value
    return cleaned


def load_examples(path: Path) -> list[ExamplePair]:
    """Read every non-blank row of the reference CSV as a language -> phrase mapping.

    Raises ExampleDataError when the file is absent, unreadable, or holds no rows.
    """
    if not path.exists():
        logger.warning("Reference examples not found at %s", path)
        raise ExampleDataError("Training data not found for many-shot mode. Cannot proceed.")

    try:
        with path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            rows = [_clean_row(row) for row in reader]
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.error("Error reading reference examples from %s: %s", path, exc)
        raise ExampleDataError(f"Failed to load training data for many-shot mode: {exc}") from exc

    examples = [row for row in rows if any(row.values())]
    skipped = len(rows) - len(examples)
    if skipped:
        logger.warning("Skipped %d blank rows in %s", skipped, path)
    if not examples:
        logger.warning("No examples found after parsing %s. Check CSV content and headers.", path)
        raise ExampleDataError("No valid training examples found for many-shot mode.")

    logger.debug("Loaded %d reference examples from %s", len(examples), path)
    return examples
