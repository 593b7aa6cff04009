"""Key point extraction."""

import re
from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.validation import validate_choice, validate_positive_int, validate_text

FORMATS = {
    "bullets": "Format each point with a bullet (•) at the start.",
    "numbers": "Format as a numbered list (1. 2. 3. etc.).",
    "sentences": "Format as complete sentences, one per line.",
}

_BULLET_PREFIX = re.compile(r"^[•*\-]\s*")
_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")


def key_points(
    text: str,
    *,
    max_points: int | None = None,
    format: str = "sentences",  # noqa: A002
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> list[str]:
    """Extract the key points of `text`, one string per point.

    List markers matching `format` are stripped from the returned points.
    """
    validate_text(text)
    validate_positive_int(max_points, "max_points")
    format = validate_choice(format, "format", FORMATS)  # noqa: A001

    prompt = build_prompt(text, max_points=max_points, format=format)
    response = call_llm(prompt, operation="key_points", model=model, config=config, **options)
    return parse_response(response, format)


def build_prompt(
    text: str,
    *,
    max_points: int | None = None,
    format: str = "sentences",  # noqa: A002
) -> str:
    count_instruction = f" (maximum {max_points} points)" if max_points else ""

    return "\n".join(
        [
            f"Extract the key points from the following text{count_instruction}.",
            FORMATS.get(format, FORMATS["sentences"]),
            "Return only the key points, no preamble or explanation.",
            "Each point should be on a separate line.",
            "",
            "Text:",
            text,
        ]
    )


def parse_response(response: str, format: str = "sentences") -> list[str]:  # noqa: A002
    """Split a response into points, removing bullet or number markers"""
    lines = [line.strip() for line in response.strip().splitlines() if line.strip()]

    if format == "bullets":
        return [_BULLET_PREFIX.sub("", line) for line in lines]
    if format == "numbers":
        return [_NUMBER_PREFIX.sub("", line) for line in lines]
    return lines
