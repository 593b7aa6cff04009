"""Classification into caller-supplied categories."""

from collections.abc import Sequence
from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.validation import validate_sequence, validate_text


def classify(
    text: str,
    *,
    categories: Sequence[str] | None = None,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str:
    """Return the name of the category that best fits `text`.

    Raises:
        ValidationError: If `text` is blank or `categories` is missing/empty.
    """
    validate_text(text)
    category_list = validate_sequence(categories, "categories")

    prompt = build_prompt(text, category_list)
    response = call_llm(prompt, operation="classify", model=model, config=config, **options)
    return response.strip()


def build_prompt(text: str, categories: Sequence[str]) -> str:
    lines = ["Classify the following text into one of these categories:"]
    lines.extend(f"- {category}" for category in categories)
    lines.extend(
        [
            "",
            "Return only the category name, nothing else.",
            "",
            "Text:",
            text,
        ]
    )
    return "\n".join(lines)
