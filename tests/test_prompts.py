"""Prompt assembly tests."""

from __future__ import annotations

from translator.app.prompts import build_example_fragments, build_prompt, capitalize


def test_capitalize_only_touches_first_character() -> None:
    assert capitalize("english") == "English"
    assert capitalize("bahasa Jawa") == "Bahasa Jawa"
    assert capitalize("iNDONESIAN") == "INDONESIAN"
    assert capitalize("") == ""


def test_zero_shot_prompt_exact_text() -> None:
    prompt = build_prompt("hello", "english", "indonesian")

    assert prompt == (
        "You are a helpful translation assistant. Translate the following text from english to indonesian. "
        "Only return the translation, no other text.\n\n"
        'English: "hello"\nIndonesian:'
    )


def test_many_shot_prompt_exact_text() -> None:
    examples = [
        {"english": "hi", "indonesian": "hai", "javanese": "halo"},
        {"english": "thanks", "indonesian": "terima kasih"},
    ]

    prompt = build_prompt("good night", "english", "indonesian", examples)

    assert prompt == (
        "You are a helpful translation assistant. Translate the text from english to indonesian. "
        "Only return the translation, no other text.\n\n"
        "Here are 2 examples of translations from english to indonesian:\n"
        'English: "hi"\nIndonesian: "hai"\n\n'
        'English: "thanks"\nIndonesian: "terima kasih"\n\n'
        "Based on these examples, now translate the following text accurately:\n"
        'English: "good night"\nIndonesian:'
    )


def test_rows_missing_either_language_are_skipped() -> None:
    examples = [
        {"english": "hi", "indonesian": ""},
        {"english": "", "indonesian": "hai"},
        {"javanese": "matur nuwun"},
        {"english": "yes", "indonesian": "ya"},
    ]

    fragments = build_example_fragments(examples, "english", "indonesian")

    assert fragments == ['English: "yes"\nIndonesian: "ya"\n\n']


def test_no_usable_examples_uses_zero_shot_wording() -> None:
    examples = [{"english": "hi", "javanese": "halo"}]

    assert build_prompt("hello", "english", "indonesian", examples) == build_prompt(
        "hello", "english", "indonesian"
    )


def test_example_limit_keeps_leading_usable_rows() -> None:
    examples = [
        {"english": "one", "indonesian": ""},
        {"english": "two", "indonesian": "dua"},
        {"english": "three", "indonesian": "tiga"},
    ]

    fragments = build_example_fragments(examples, "english", "indonesian", limit=1)

    assert fragments == ['English: "two"\nIndonesian: "dua"\n\n']


def test_prompt_follows_requested_direction() -> None:
    examples = [{"english": "hi", "javanese": "halo"}]

    prompt = build_prompt("sugeng enjing", "javanese", "english", examples)

    assert 'Javanese: "halo"\nEnglish: "hi"\n\n' in prompt
    assert prompt.endswith('Javanese: "sugeng enjing"\nEnglish:')


def test_whitespace_only_value_still_counts_as_usable() -> None:
    fragments = build_example_fragments([{"english": "hi", "indonesian": "  "}], "english", "indonesian")

    assert fragments == ['English: "hi"\nIndonesian: "  "\n\n']


def test_unbounded_limit_keeps_every_usable_row() -> None:
    examples = [{"english": str(n), "indonesian": str(n)} for n in range(150)]

    assert len(build_example_fragments(examples, "english", "indonesian", limit=None)) == 150
