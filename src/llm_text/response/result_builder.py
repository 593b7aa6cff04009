"""Structured result building for JSON-returning operations.

Turns cleaned model text into a plain ``dict``. Malformed JSON is never an
error here: each operation describes a `ResultShape` whose fallback carries
the raw text in the most relevant field, so callers always get a usable
result.
"""

from collections.abc import Mapping
import copy
from dataclasses import dataclass, field
import json
import logging
from typing import Any

from llm_text.constants import BOOLEAN_FALSE_VALUES, BOOLEAN_TRUE_VALUES, FLOAT_FIELDS

from .extractor import clean_json_response

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResultShape:
    """Expected shape of one operation's structured result.

    Attributes:
        text_field: Field that receives the cleaned text on fallback
            (None to omit it).
        defaults: Remaining fallback fields and their empty values.
        boolean_fields: Fields whose yes/no/true/false strings become bools.
        float_fields: Fields coerced to float after a successful parse.
    """

    text_field: str | None = "text"
    defaults: Mapping[str, Any] = field(default_factory=dict)
    boolean_fields: frozenset[str] = frozenset()
    float_fields: tuple[str, ...] = FLOAT_FIELDS

    def fallback(self, cleaned_text: str) -> dict[str, Any]:
        """Best-effort result used when the text is not a JSON object."""
        result: dict[str, Any] = {}
        if self.text_field is not None:
            result[self.text_field] = cleaned_text
        for key, value in self.defaults.items():
            result.setdefault(key, copy.deepcopy(value))
        return result


def build_structured_result(cleaned_text: str, shape: ResultShape) -> dict[str, Any]:
    """Parse cleaned text into a result dict, falling back per `shape`.

    Raises:
        TypeError: If `cleaned_text` is not a string.
    """
    if not isinstance(cleaned_text, str):
        raise TypeError(f"cleaned_text must be a str, got {type(cleaned_text).__name__}")

    try:
        parsed = json.loads(cleaned_text)
    except (ValueError, RecursionError) as e:
        log.warning("Structured response was not valid JSON (%s); using fallback.", e)
        return shape.fallback(cleaned_text)

    if not isinstance(parsed, dict):
        log.warning(
            "Structured response parsed to %s, expected an object; using fallback.",
            type(parsed).__name__,
        )
        return shape.fallback(cleaned_text)

    return _post_process(parsed, shape)


def parse_structured_response(response: str, shape: ResultShape) -> dict[str, Any]:
    """Clean a raw model response and build its structured result."""
    return build_structured_result(clean_json_response(response), shape)


def _post_process(result: dict[str, Any], shape: ResultShape) -> dict[str, Any]:
    for name in shape.float_fields:
        if name in result and result[name] is not None:
            result[name] = coerce_float(result[name])
    for name in shape.boolean_fields:
        if name in result:
            result[name] = parse_boolean(result[name])
    return result


def coerce_float(value: Any) -> float:
    """Coerce a parsed JSON value to float; non-numeric values become 0.0."""
    try:
        if isinstance(value, int | float):
            return float(value)
        return float(str(value).strip())
    except (ValueError, OverflowError):
        log.debug("Non-numeric value %r coerced to 0.0.", value)
        return 0.0


def is_boolean_like(value: Any) -> bool:
    """True for bools and for yes/no/true/false strings (any case)."""
    if isinstance(value, bool):
        return True
    if not isinstance(value, str):
        return False
    return value.strip().lower() in BOOLEAN_TRUE_VALUES + BOOLEAN_FALSE_VALUES


def parse_boolean(value: Any) -> Any:
    """Convert yes/no/true/false strings to bool; anything else passes through."""
    if not isinstance(value, str):
        return value
    normalized = value.strip().lower()
    if normalized in BOOLEAN_TRUE_VALUES:
        return True
    if normalized in BOOLEAN_FALSE_VALUES:
        return False
    return value
