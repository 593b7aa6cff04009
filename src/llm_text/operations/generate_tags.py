"""Tag generation."""

import re
from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig
from llm_text.validation import validate_choice, validate_positive_int, validate_text

STYLES = {
    "keywords": "Generate relevant keywords and key phrases that capture the main topics and concepts.",
    "topics": "Generate broader topic categories and subject areas covered in the content.",
    "hashtags": "Generate hashtag-style tags suitable for social media (include the # symbol).",
}

_BULLET_PREFIX = re.compile(r"^[•*\-]\s*")
_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")
_QUOTES = re.compile(r"^[\"']|[\"']$")


def generate_tags(
    text: str,
    *,
    max_tags: int | None = None,
    style: str = "keywords",
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> list[str]:
    """Generate a de-duplicated list of tags for `text`.

    `style` is ``keywords``, ``topics`` or ``hashtags``.
    """
    validate_text(text)
    validate_positive_int(max_tags, "max_tags")
    style = validate_choice(style, "style", STYLES)

    prompt = build_prompt(text, max_tags=max_tags, style=style)
    response = call_llm(
        prompt, operation="generate_tags", model=model, config=config, **options
    )
    return parse_response(response)


def build_prompt(text: str, *, max_tags: int | None = None, style: str = "keywords") -> str:
    count_instruction = f" (maximum {max_tags} tags)" if max_tags else ""
    if style == "hashtags":
        format_instruction = "Format each tag as a hashtag (e.g., #python, #programming)."
    else:
        format_instruction = "Return simple words or short phrases without special formatting."

    return "\n".join(
        [
            f"Analyze the following text and generate relevant tags{count_instruction}.",
            STYLES.get(style, STYLES["keywords"]),
            format_instruction,
            "",
            "Return only the tags, one per line, no preamble or explanation.",
            "Each tag should be on a separate line.",
            "",
            "Text:",
            text,
        ]
    )


def parse_response(response: str) -> list[str]:
    """Normalize model output into unique tags, preserving first-seen order.

    Bullets, numbering and surrounding quotes are stripped; comma-separated
    lines are split unless they are hashtags.
    """
    tags: list[str] = []
    for line in response.strip().splitlines():
        cleaned = _NUMBER_PREFIX.sub("", _BULLET_PREFIX.sub("", line.strip()))
        cleaned = _QUOTES.sub("", cleaned)

        if "," in cleaned and not cleaned.startswith("#"):
            candidates = [_QUOTES.sub("", part.strip()) for part in cleaned.split(",")]
        else:
            candidates = [cleaned]

        for tag in candidates:
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
    return tags
