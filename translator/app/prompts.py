from collections.abc import Iterable

from .reference_data import ExamplePair


def capitalize(value: str) -> str:
    """Upper-case the first character only; str.capitalize would lower the rest."""
    return value[:1].upper() + value[1:]


def _pair_lines(source_language: str, source_text: str, target_language: str, target_text: str) -> str:
    return f'{capitalize(source_language)}: "{source_text}"\n{capitalize(target_language)}: "{target_text}"'


def build_example_fragments(
    examples: Iterable[ExamplePair],
    source_language: str,
    target_language: str,
    limit: int | None = None,
) -> list[str]:
    fragments: list[str] = []
    for example in examples:
        if limit is not None and len(fragments) >= limit:
            break
        source_text = example.get(source_language)
        target_text = example.get(target_language)
        if not source_text or not target_text:
            continue
        fragments.append(_pair_lines(source_language, source_text, target_language, target_text) + "\n\n")
    return fragments


def build_prompt(
    text: str,
    source_language: str,
    target_language: str,
    examples: Iterable[ExamplePair] | None = None,
    limit: int | None = None,
) -> str:
    """Assemble the single-string prompt sent to the model.

    The examples block is included only when at least one row has non-empty
    values for both languages; otherwise the zero-shot wording is used.
    """
    query = f'{capitalize(source_language)}: "{text}"\n{capitalize(target_language)}:'
    fragments = build_example_fragments(examples or [], source_language, target_language, limit)

    if fragments:
        return (
            f"You are a helpful translation assistant. Translate the text from {source_language} "
            f"to {target_language}. Only return the translation, no other text.\n\n"
            f"Here are {len(fragments)} examples of translations from {source_language} to {target_language}:\n"
            f"{''.join(fragments)}"
            f"Based on these examples, now translate the following text accurately:\n"
            f"{query}"
        )

    return (
        f"You are a helpful translation assistant. Translate the following text from {source_language} "
        f"to {target_language}. Only return the translation, no other text.\n\n"
        f"{query}"
    )
