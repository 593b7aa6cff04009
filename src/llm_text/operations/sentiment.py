"""Sentiment analysis."""

from collections.abc import Sequence
from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.response import ResultShape, parse_structured_response
from llm_text.validation import validate_sequence, validate_text

DEFAULT_CATEGORIES = ("positive", "negative", "neutral")

SENTIMENT_SHAPE = ResultShape(text_field="label", defaults={"confidence": None})


def sentiment(
    text: str,
    *,
    categories: Sequence[str] = DEFAULT_CATEGORIES,
    simple: bool = False,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str | dict[str, Any]:
    """Analyze the sentiment of `text`.

    Returns ``{"label": str, "confidence": float}``, or just the label with
    ``simple=True``. When the structured reply cannot be parsed, the raw
    reply becomes the label and confidence is None.
    """
    validate_text(text)
    category_list = validate_sequence(categories, "categories")
    prompt = build_prompt(text, categories=category_list, simple=simple)

    if simple:
        response = call_llm(prompt, operation="sentiment", model=model, config=config, **options)
        return response.strip()

    response = call_llm(
        prompt,
        operation="sentiment",
        model=model,
        schema=build_schema(category_list),
        config=config,
        **options,
    )
    return parse_structured_response(response, SENTIMENT_SHAPE)


def build_schema(categories: Sequence[str]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "label": {"type": "string", "enum": list(categories)},
            "confidence": {"type": "number", "minimum": 0, "maximum": 1},
        },
        "required": ["label", "confidence"],
    }


def build_prompt(text: str, *, categories: Sequence[str], simple: bool = False) -> str:
    lines = [
        "Analyze the sentiment of the following text.",
        "",
        f"Categories: {', '.join(categories)}",
        "",
    ]
    if simple:
        lines.append("Return only the sentiment category name, nothing else.")
    else:
        lines.extend(
            [
                "Return a JSON object with:",
                '- "label": the sentiment category',
                '- "confidence": a confidence score between 0 and 1 '
                "(where 1 is completely confident)",
            ]
        )
    lines.extend(["", "Text:", text])
    return "\n".join(lines)
