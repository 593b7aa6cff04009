"""Comparison of two texts."""

from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.response import ResultShape, parse_structured_response
from llm_text.validation import validate_choice, validate_text

PARSE_ERROR = "Failed to parse comparison result"

INSTRUCTIONS = {
    "similarity": [
        "Compare the two texts and provide:",
        "- A similarity score from 0 to 1 (where 1 is identical and 0 is completely different)",
        "- The type of similarity detected (semantic, structural, topical, etc.)",
        "- A brief summary of what makes them similar or different",
        "",
        "Focus on semantic similarity - texts with the same meaning should score high "
        "even if worded differently.",
    ],
    "detailed": [
        "Provide a detailed comparison including:",
        "- Overall similarity score from 0 to 1",
        "- Specific differences between the texts (tone, style, content, structure, etc.)",
        "- Common elements or themes found in both texts",
        "- A summary of the key similarities and differences",
        "",
        "Analyze style, tone, content, structure, and intent.",
    ],
    "changes": [
        "Analyze the texts as if the second text is a revision of the first and provide:",
        "- Overall similarity score from 0 to 1",
        "- Types of changes made (additions, deletions, modifications, restructuring)",
        "- Specific examples of what was changed",
        "- Assessment of whether the changes improve or alter the content significantly",
        "",
        "Focus on tracking edits and revisions between the versions.",
    ],
}

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

EXTRA_PROPERTIES: dict[str, dict[str, Any]] = {
    "similarity": {
        "similarity_type": {"type": "string"},
        "summary": {"type": "string"},
    },
    "detailed": {
        "differences": _STRING_LIST,
        "commonalities": _STRING_LIST,
        "summary": {"type": "string"},
    },
    "changes": {
        "change_types": _STRING_LIST,
        "examples": _STRING_LIST,
        "assessment": {"type": "string"},
    },
}


def compare(
    text1: str,
    text2: str,
    *,
    comparison_type: str = "similarity",
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> dict[str, Any]:
    """Compare two texts.

    Every result carries a float ``similarity`` in [0, 1] and the
    ``comparison_type``; the remaining keys depend on the type:

    - ``similarity``: ``similarity_type``, ``summary``
    - ``detailed``: ``differences``, ``commonalities``, ``summary``
    - ``changes``: ``change_types``, ``examples``, ``assessment``

    An unparseable reply yields ``similarity=None`` and an ``error`` message.
    """
    validate_text(text1, "text1")
    validate_text(text2, "text2")
    comparison_type = validate_choice(comparison_type, "comparison_type", INSTRUCTIONS)

    prompt = build_prompt(text1, text2, comparison_type=comparison_type)
    response = call_llm(
        prompt,
        operation="compare",
        model=model,
        schema=build_schema(comparison_type),
        config=config,
        **options,
    )
    return parse_structured_response(response, result_shape(comparison_type))


def result_shape(comparison_type: str) -> ResultShape:
    return ResultShape(
        text_field=None,
        defaults={
            "similarity": None,
            "comparison_type": comparison_type,
            "error": PARSE_ERROR,
        },
    )


def build_schema(comparison_type: str) -> dict[str, Any]:
    properties: dict[str, Any] = {
        "similarity": {"type": "number", "minimum": 0, "maximum": 1},
        "comparison_type": {"type": "string"},
    }
    properties.update(EXTRA_PROPERTIES[comparison_type])
    return {
        "type": "object",
        "properties": properties,
        "required": ["similarity", "comparison_type"],
    }


def build_prompt(text1: str, text2: str, *, comparison_type: str = "similarity") -> str:
    return "\n".join(
        [
            "Compare the following two texts:",
            "",
            *INSTRUCTIONS[comparison_type],
            "",
            "Text 1:",
            text1,
            "",
            "Text 2:",
            text2,
        ]
    )
