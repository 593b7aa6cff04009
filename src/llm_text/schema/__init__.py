"""Canonical schema representation and normalization."""

from .normalizer import normalize
from .types import FieldSpec, FieldType, ItemType, SchemaSource, SchemaSpec

__all__ = [
    "FieldSpec",
    "FieldType",
    "ItemType",
    "SchemaSource",
    "SchemaSpec",
    "normalize",
]
