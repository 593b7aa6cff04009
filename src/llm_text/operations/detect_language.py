"""Language detection."""

from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.response import ResultShape, parse_structured_response
from llm_text.validation import validate_text

UNKNOWN_LANGUAGE = "unknown"

LANGUAGE_SCHEMA = {
    "type": "object",
    "properties": {
        "language": {"type": "string"},
        "confidence": {"type": "number", "minimum": 0, "maximum": 1},
        "code": {"type": "string"},
    },
    "required": ["language", "confidence", "code"],
}

LANGUAGE_SHAPE = ResultShape(
    text_field="language", defaults={"confidence": None, "code": None}
)


def detect_language(
    text: str,
    *,
    include_confidence: bool = False,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str | dict[str, Any]:
    """Detect the language `text` is written in.

    Returns the full language name (e.g. ``"French"``), or with
    ``include_confidence=True`` a dict with ``language``, ``confidence`` and
    the ISO 639-1 ``code``.
    """
    validate_text(text)
    prompt = build_prompt(text, include_confidence=include_confidence)

    if not include_confidence:
        response = call_llm(
            prompt, operation="detect_language", model=model, config=config, **options
        )
        return response.strip()

    response = call_llm(
        prompt,
        operation="detect_language",
        model=model,
        schema=LANGUAGE_SCHEMA,
        config=config,
        **options,
    )
    return parse_structured_response(response, LANGUAGE_SHAPE)


def build_prompt(text: str, *, include_confidence: bool = False) -> str:
    lines = ["Detect the language of the following text.", ""]

    if include_confidence:
        lines.extend(
            [
                "Return a JSON object with:",
                '- "language": the full language name (e.g., "English", "French", "Spanish")',
                '- "confidence": a confidence score between 0 and 1',
                '- "code": the ISO 639-1 language code (e.g., "en", "fr", "es")',
                "",
                f'If the language cannot be reliably detected, return "{UNKNOWN_LANGUAGE}" '
                "as the language with low confidence.",
            ]
        )
    else:
        lines.extend(
            [
                'Return only the full language name (e.g., "English", "French", "Spanish").',
                f'If the language cannot be reliably detected, return "{UNKNOWN_LANGUAGE}".',
            ]
        )

    lines.extend(["", "Text:", text])
    return "\n".join(lines)
