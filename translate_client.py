import argparse
import os
import sys
from typing import Any

import requests

TRANSLATOR_URL = os.getenv("TRANSLATOR_URL", "http://127.0.0.1:8000")


class TranslationFailed(Exception):
    pass


def translate(
    text: str,
    source_language: str,
    target_language: str,
    translation_mode: str = "zero-shot",
    base_url: str = TRANSLATOR_URL,
) -> str:
    payload: dict[str, Any] = {
        "inputText": text,
        "sourceLanguage": source_language,
        "targetLanguage": target_language,
        "translationMode": translation_mode,
    }
    response = requests.post(f"{base_url}/api/translate", json=payload, timeout=60)
    if not response.ok:
        try:
            message = response.json().get("error")
        except ValueError:
            message = None
        raise TranslationFailed(message or "Translation failed")
    return response.json()["translatedText"]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Translate text through a running translator server.")
    parser.add_argument("text")
    parser.add_argument("-s", "--source", default="english")
    parser.add_argument("-t", "--target", default="indonesian")
    parser.add_argument("-m", "--mode", choices=["zero-shot", "many-shot"], default="zero-shot")
    parser.add_argument("--url", default=TRANSLATOR_URL)
    args = parser.parse_args(argv)

    try:
        print(translate(args.text, args.source, args.target, args.mode, base_url=args.url))
    except TranslationFailed as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
