"""Grammar, spelling and punctuation correction."""

from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.response import ResultShape, parse_structured_response
from llm_text.validation import validate_text

EXPLAIN_SCHEMA = {
    "type": "object",
    "properties": {
        "corrected": {"type": "string"},
        "changes": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["corrected", "changes"],
}

EXPLAIN_SHAPE = ResultShape(text_field="corrected", defaults={"changes": []})


def fix_grammar(
    text: str,
    *,
    explain: bool = False,
    preserve_style: bool = False,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str | dict[str, Any]:
    """Correct `text`.

    Returns the corrected text, or with ``explain=True`` a dict with
    ``corrected`` and the list of ``changes`` made.
    """
    validate_text(text)
    prompt = build_prompt(text, explain=explain, preserve_style=preserve_style)

    if not explain:
        return call_llm(prompt, operation="grammar", model=model, config=config, **options)

    response = call_llm(
        prompt,
        operation="grammar",
        model=model,
        schema=EXPLAIN_SCHEMA,
        config=config,
        **options,
    )
    return parse_structured_response(response, EXPLAIN_SHAPE)


def build_prompt(text: str, *, explain: bool = False, preserve_style: bool = False) -> str:
    lines = ["Fix grammar, spelling, punctuation, and word choice errors in the following text."]
    if preserve_style:
        lines.append("Preserve the original tone, style, and level of formality.")
    lines.append("")

    if explain:
        lines.extend(
            [
                "Return a JSON object with:",
                '- "corrected": the corrected text',
                '- "changes": an array of changes made '
                '(e.g., "their → they\'re", "tommorow → tomorrow")',
            ]
        )
    else:
        lines.append(
            "Return only the corrected text with no explanation or additional commentary."
        )

    lines.extend(["", "Text:", text])
    return "\n".join(lines)
