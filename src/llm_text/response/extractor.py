"""JSON extraction from raw model output.

Models asked for JSON frequently wrap it in a markdown fence or surround it
with prose. `clean_json_response` recovers the first balanced ``{...}`` object
using a brace-depth scan, which (unlike a non-greedy regex) handles nested
objects correctly.
"""

import logging
import re

log = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"^```json\n", re.MULTILINE)
_FENCE_CLOSE = re.compile(r"\n```$", re.MULTILINE)


def strip_code_fence(text: str) -> str:
    """Remove ```` ```json ```` fences and surrounding whitespace."""
    return _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", text)).strip()


def find_balanced_object(text: str, start: int = 0) -> tuple[int, int] | None:
    """Locate the first balanced ``{...}`` at or after `start`.

    Returns:
        ``(begin, end)`` slice bounds of the balanced object, or None when no
        ``{`` exists or its depth never returns to zero.
    """
    begin = text.find("{", start)
    if begin == -1:
        return None

    depth = 0
    for index in range(begin, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return begin, index + 1
    return None


def clean_json_response(response: str) -> str:
    """Return the JSON object contained in a raw model response.

    The result is either text that starts with ``{`` (already clean, or a
    balanced object sliced out of surrounding prose) or, when no balanced
    object exists, the fence-stripped text unchanged. Callers treat the
    latter as "not JSON" and apply their fallback.

    Raises:
        TypeError: If `response` is not a string.
    """
    if not isinstance(response, str):
        raise TypeError(f"response must be a str, got {type(response).__name__}")

    cleaned = strip_code_fence(response)

    if not cleaned.startswith("{") and "{" in cleaned:
        bounds = find_balanced_object(cleaned)
        if bounds is not None:
            begin, end = bounds
            log.debug("Extracted JSON object at [%d:%d] from mixed content.", begin, end)
            cleaned = cleaned[begin:end]
        else:
            log.debug("No balanced JSON object found in response.")

    return cleaned
