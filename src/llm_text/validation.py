"""
Input validation shared by every operation.

All checks raise ValidationError before any model call is attempted.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .exceptions import ValidationError


def validate_text(text: Any, param_name: str = "text") -> None:
    """Ensure `text` is a non-blank string"""
    if text is None:
        raise ValidationError(f"{param_name} cannot be None")
    if not isinstance(text, str):
        raise ValidationError(
            f"{param_name} must be a str, got {type(text).__name__}"
        )
    if not text.strip():
        raise ValidationError(f"{param_name} cannot be empty")


def validate_required(value: Any, param_name: str) -> None:
    """Ensure a required argument was provided"""
    if value is None:
        raise ValidationError(f"{param_name} is required")


def validate_sequence(value: Any, param_name: str, min_size: int = 1) -> list[Any]:
    """Ensure `value` is a list/tuple with at least `min_size` elements.

    Returns the value as a list so callers can iterate it more than once.
    """
    validate_required(value, param_name)
    if isinstance(value, str | bytes | Mapping) or not isinstance(
        value, list | tuple
    ):
        raise ValidationError(
            f"{param_name} must be a list, got {type(value).__name__}"
        )
    if len(value) < min_size:
        raise ValidationError(f"{param_name} must have at least {min_size} element(s)")
    return list(value)


def validate_one_of(options: Mapping[str, Any]) -> None:
    """Ensure at least one of the named options is set"""
    if all(value is None for value in options.values()):
        names = ", ".join(options)
        raise ValidationError(f"must specify at least one of: {names}")


def validate_choice(value: Any, param_name: str, choices: Iterable[str]) -> str:
    """Ensure `value` names one of `choices`; returns the normalized name"""
    allowed = tuple(choices)
    normalized = str(value).lower() if value is not None else None
    if normalized not in allowed:
        raise ValidationError(
            f"Invalid {param_name}: {value!r}. Must be one of: {', '.join(allowed)}"
        )
    return normalized


def validate_positive_int(value: Any, param_name: str) -> None:
    """Ensure an optional count argument is a positive integer"""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{param_name} must be a positive integer, got {value!r}")
