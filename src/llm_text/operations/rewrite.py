"""Rewriting in a different tone or style."""

from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.validation import validate_one_of, validate_text

TONES = {
    "casual": "friendly, informal, and conversational",
    "professional": "business-appropriate, formal, and polished",
    "academic": "scholarly, formal, and precise",
    "creative": "engaging, descriptive, and imaginative",
    "concise": "brief, direct, and to-the-point",
}

STYLES = {
    "concise": "Make it shorter and more direct while preserving meaning",
    "detailed": "Expand with more context, examples, and explanation",
    "formal": "Use formal language and professional terminology",
    "casual": "Use informal, friendly language",
}


def rewrite(
    text: str,
    *,
    tone: str | None = None,
    style: str | None = None,
    instruction: str | None = None,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str:
    """Rewrite `text` according to a tone, a style and/or a free-form instruction.

    Known tone and style names expand to fuller descriptions; other values are
    passed to the model verbatim.

    Raises:
        ValidationError: If none of tone, style or instruction is given.
    """
    validate_text(text)
    validate_one_of({"tone": tone, "style": style, "instruction": instruction})

    prompt = build_prompt(text, tone=tone, style=style, instruction=instruction)
    return call_llm(prompt, operation="rewrite", model=model, config=config, **options)


def build_prompt(
    text: str,
    *,
    tone: str | None = None,
    style: str | None = None,
    instruction: str | None = None,
) -> str:
    transformations = []
    if tone:
        transformations.append(f"Tone: {TONES.get(tone, tone)}")
    if style:
        transformations.append(f"Style: {STYLES.get(style, style)}")
    if instruction:
        transformations.append(f"Additional instruction: {instruction}")

    return "\n".join(
        [
            "Rewrite the following text according to these requirements:",
            "",
            *transformations,
            "",
            "Return only the rewritten text, no explanation or commentary.",
            "",
            "Text:",
            text,
        ]
    )
