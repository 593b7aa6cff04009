"""Translation."""

from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.validation import validate_required, validate_text


def translate(
    text: str,
    *,
    to: str | None = None,
    source: str | None = None,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str:
    """Translate `text` into the language `to`, optionally naming the `source` language."""
    validate_text(text)
    validate_required(to, "to")
    validate_text(to, "to")

    prompt = build_prompt(text, to=to, source=source)
    return call_llm(prompt, operation="translate", model=model, config=config, **options)


def build_prompt(text: str, *, to: str, source: str | None = None) -> str:
    from_instruction = f"from {source} " if source else ""

    return "\n".join(
        [
            f"Translate the following text {from_instruction}to {to}.",
            "Return only the translated text, no explanation or notes.",
            "",
            "Text:",
            text,
        ]
    )
