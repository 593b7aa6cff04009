"""Question answering over a given text."""

from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.response import ResultShape, parse_boolean, parse_structured_response
from llm_text.validation import validate_text

NOT_AVAILABLE = "information not available"

_BOOLEAN_PREFIXES = (
    "is ", "are ", "was ", "were ",
    "do ", "does ", "did ",
    "can ", "could ", "will ", "would ", "should ",
    "has ", "have ", "had ",
)  # fmt: skip

ANSWER_SHAPE = ResultShape(
    text_field="answer",
    defaults={"confidence": None},
    boolean_fields=frozenset({"answer"}),
)


def answer(
    text: str,
    question: str,
    *,
    include_confidence: bool = False,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str | bool | dict[str, Any]:
    """Answer `question` using only the information in `text`.

    Yes/no questions produce a bool. With ``include_confidence=True`` the
    result is ``{"answer": ..., "confidence": float}``; yes/no style answers
    in that dict are converted to bool as well.
    """
    validate_text(text)
    validate_text(question, "question")
    prompt = build_prompt(text, question, include_confidence=include_confidence)

    if not include_confidence:
        response = call_llm(prompt, operation="answer", model=model, config=config, **options)
        if is_boolean_question(question):
            return parse_boolean(response.strip())
        return response.strip()

    response = call_llm(
        prompt,
        operation="answer",
        model=model,
        schema=build_schema(question),
        config=config,
        **options,
    )
    return parse_structured_response(response, ANSWER_SHAPE)


def is_boolean_question(question: str) -> bool:
    """Heuristic: does `question` expect a yes/no answer?"""
    lowered = question.strip().lower()
    return (
        lowered.startswith(_BOOLEAN_PREFIXES)
        or " or not" in lowered
        or (lowered.endswith("?") and ("yes" in lowered or "no" in lowered))
    )


def build_schema(question: str) -> dict[str, Any]:
    answer_type = "boolean" if is_boolean_question(question) else "string"
    return {
        "type": "object",
        "properties": {
            "answer": {"type": answer_type},
            "confidence": {"type": "number", "minimum": 0, "maximum": 1},
        },
        "required": ["answer", "confidence"],
    }


def build_prompt(text: str, question: str, *, include_confidence: bool = False) -> str:
    lines = [f'Based on the following text, answer this question: "{question}"', ""]

    if include_confidence:
        lines.extend(
            [
                "Return a JSON object with:",
                '- "answer": the answer to the question (use true/false for yes/no questions)',
                '- "confidence": a confidence score between 0 and 1',
                "",
                f'If the answer cannot be found in the text, return "{NOT_AVAILABLE}" '
                "as the answer with low confidence.",
            ]
        )
    else:
        lines.extend(
            [
                "Answer the question based only on the information provided in the text.",
                "For yes/no questions, respond with true or false.",
                f'If the answer cannot be found in the text, respond with "{NOT_AVAILABLE}".',
                "Return only the answer, no explanation.",
            ]
        )

    lines.extend(["", "Text:", text])
    return "\n".join(lines)
