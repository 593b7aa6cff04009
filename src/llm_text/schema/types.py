"""Canonical schema types used to constrain model output shape.

A `SchemaSpec` is the single representation the gateway attaches to a model
call. It is built once per call by the normalizer and never mutated.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable

from llm_text.exceptions import SchemaError

FieldType = Literal["string", "number", "boolean", "array", "object"]
ItemType = Literal["string", "number", "boolean"]

FIELD_TYPES: tuple[FieldType, ...] = ("string", "number", "boolean", "array", "object")
ITEM_TYPES: tuple[ItemType, ...] = ("string", "number", "boolean")


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One field of a SchemaSpec.

    `items` is only meaningful for arrays. `object` fields are free-form
    string-to-string maps.
    """

    type: FieldType = "string"
    items: ItemType | None = None
    required: bool = False
    enum: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.type not in FIELD_TYPES:
            raise SchemaError(f"Unsupported field type: {self.type!r}")
        if self.type == "array" and self.items is None:
            object.__setattr__(self, "items", "string")
        if self.type != "array" and self.items is not None:
            raise SchemaError(f"'items' is only valid for arrays, not {self.type!r}")

    def to_json_schema(self) -> dict[str, Any]:
        """Render this field as a JSON Schema property."""
        if self.type == "array":
            prop: dict[str, Any] = {"type": "array", "items": {"type": self.items}}
        elif self.type == "object":
            prop = {"type": "object", "additionalProperties": {"type": "string"}}
        else:
            prop = {"type": self.type}
        if self.enum is not None:
            prop["enum"] = list(self.enum)
        return prop


@runtime_checkable
class SchemaSource(Protocol):
    """Anything that can produce a canonical SchemaSpec."""

    def to_schema_spec(self) -> "SchemaSpec": ...


@dataclass(frozen=True, slots=True)
class SchemaSpec(Mapping[str, FieldSpec]):
    """Ordered, immutable mapping of field name to FieldSpec."""

    fields: tuple[tuple[str, FieldSpec], ...]

    def __post_init__(self) -> None:
        if not self.fields:
            raise SchemaError("Schema must define at least one field")
        names = [name for name, _ in self.fields]
        if len(set(names)) != len(names):
            raise SchemaError(f"Duplicate field names in schema: {names}")

    @classmethod
    def from_fields(cls, fields: Mapping[str, FieldSpec]) -> "SchemaSpec":
        """Build a spec from an ordered mapping of FieldSpecs."""
        return cls(fields=tuple((str(name), spec) for name, spec in fields.items()))

    def __getitem__(self, name: str) -> FieldSpec:
        for field_name, spec in self.fields:
            if field_name == name:
                return spec
        raise KeyError(name)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self)

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(name for name, spec in self.fields if spec.required)

    def fields_of_type(self, field_type: FieldType) -> tuple[str, ...]:
        """Names of all fields declared with `field_type`."""
        return tuple(name for name, spec in self.fields if spec.type == field_type)

    def to_schema_spec(self) -> "SchemaSpec":
        return self

    def to_json_schema(self) -> dict[str, Any]:
        """Render the spec as a JSON Schema object for the transport."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {name: spec.to_json_schema() for name, spec in self.fields},
        }
        if self.required_fields:
            schema["required"] = list(self.required_fields)
        return schema
