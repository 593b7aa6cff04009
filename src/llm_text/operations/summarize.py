"""Summarization."""

from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.validation import validate_positive_int, validate_text

LENGTHS = {
    "short": "1-2 sentences",
    "medium": "3-5 sentences",
    "detailed": "1-2 paragraphs",
}


def summarize(
    text: str,
    *,
    length: str = "medium",
    max_words: int | None = None,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str:
    """Summarize `text`.

    `length` is one of ``short``, ``medium`` or ``detailed``; any other value
    is used verbatim as the length instruction (e.g. ``"one paragraph"``).
    """
    validate_text(text)
    validate_positive_int(max_words, "max_words")

    prompt = build_prompt(text, length=length, max_words=max_words)
    return call_llm(prompt, operation="summarize", model=model, config=config, **options)


def build_prompt(text: str, *, length: str = "medium", max_words: int | None = None) -> str:
    length_instruction = LENGTHS.get(length, str(length))
    word_limit = f" (maximum {max_words} words)" if max_words else ""

    return "\n".join(
        [
            "Summarize the following text.",
            f"Length: {length_instruction}{word_limit}",
            "Return only the summary, no preamble or explanation.",
            "",
            "Text:",
            text,
        ]
    )
