"""Model response cleaning and structured result building."""

from .extractor import clean_json_response, find_balanced_object, strip_code_fence
from .result_builder import (
    ResultShape,
    build_structured_result,
    coerce_float,
    is_boolean_like,
    parse_boolean,
    parse_structured_response,
)

__all__ = [
    "ResultShape",
    "build_structured_result",
    "clean_json_response",
    "coerce_float",
    "find_balanced_object",
    "is_boolean_like",
    "parse_boolean",
    "parse_structured_response",
    "strip_code_fence",
]
