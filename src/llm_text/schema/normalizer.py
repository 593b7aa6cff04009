"""Schema normalization.

Converts the schema shapes accepted at the public boundary into a single
canonical `SchemaSpec`:

- objects exposing ``to_schema_spec()`` (including SchemaSpec itself)
- pydantic model classes, via their JSON Schema
- JSON-Schema-style mappings with a ``properties`` mapping
- flat ``{field: type}`` mappings, where a type is a name (``"string"``),
  a Python type (``str``) or a nested property mapping

Unrecognized field types fall back to ``string`` unless ``strict=True``.
Untyped ``enum``/``const`` properties are string fields.
Unions (``oneOf``/``anyOf``) always degrade to ``string``; they are not
representable in a SchemaSpec.
"""

from collections.abc import Mapping
import logging
from typing import Any

from llm_text.exceptions import SchemaError

from .types import FieldSpec, FieldType, ItemType, SchemaSource, SchemaSpec

log = logging.getLogger(__name__)

_TYPE_NAMES: dict[str, FieldType] = {
    "string": "string",
    "str": "string",
    "text": "string",
    "integer": "number",
    "int": "number",
    "number": "number",
    "float": "number",
    "boolean": "boolean",
    "bool": "boolean",
    "array": "array",
    "list": "array",
    "object": "object",
    "dict": "object",
    "hash": "object",
}

_PYTHON_TYPES: dict[type, FieldType] = {
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    list: "array",
    tuple: "array",
    dict: "object",
}

_UNION_KEYS = ("oneOf", "anyOf")


def normalize(schema_input: Any, *, strict: bool = False) -> SchemaSpec:
    """Normalize any accepted schema shape into a SchemaSpec.

    Args:
        schema_input: SchemaSpec/SchemaSource, pydantic model class,
            JSON-Schema-style mapping, or flat field-to-type mapping.
        strict: Raise SchemaError on unrecognized field types instead of
            falling back to ``string``.

    Returns:
        The canonical SchemaSpec.

    Raises:
        SchemaError: If the input is not a recognized shape, or defines no
            fields, or (in strict mode) uses an unknown type.
    """
    if isinstance(schema_input, SchemaSource) and not isinstance(schema_input, type):
        spec = schema_input.to_schema_spec()
        if not isinstance(spec, SchemaSpec):
            raise SchemaError(
                f"{type(schema_input).__name__}.to_schema_spec() returned "
                f"{type(spec).__name__}, expected SchemaSpec"
            )
        return spec

    if _is_pydantic_model(schema_input):
        log.debug("Normalizing pydantic model '%s'.", schema_input.__name__)
        return _from_json_schema(schema_input.model_json_schema(), strict=strict)

    if not isinstance(schema_input, Mapping):
        raise SchemaError(
            "Schema must be a SchemaSpec, a pydantic model, or a mapping; "
            f"got {type(schema_input).__name__}"
        )

    if not schema_input:
        raise SchemaError("Schema must define at least one field")

    if _is_json_schema(schema_input):
        return _from_json_schema(schema_input, strict=strict)
    return _from_field_map(schema_input, strict=strict)


# --- Shape detection ---


def _is_pydantic_model(value: Any) -> bool:
    return isinstance(value, type) and hasattr(value, "model_json_schema")


def _is_json_schema(schema: Mapping[Any, Any]) -> bool:
    properties = schema.get("properties")
    return isinstance(properties, Mapping) and schema.get("type") in (None, "object")


# --- Conversions ---


def _from_json_schema(schema: Mapping[Any, Any], *, strict: bool) -> SchemaSpec:
    properties = schema.get("properties") or {}
    if not properties:
        raise SchemaError("JSON schema 'properties' must define at least one field")

    required = {str(name) for name in (schema.get("required") or ())}
    definitions = schema.get("$defs") or {}

    fields: dict[str, FieldSpec] = {}
    for name, prop in properties.items():
        field_name = str(name)
        prop = _resolve_ref(prop, definitions)
        fields[field_name] = _property_to_field(
            field_name, prop, required=field_name in required, strict=strict
        )
    return SchemaSpec.from_fields(fields)


def _from_field_map(schema: Mapping[Any, Any], *, strict: bool) -> SchemaSpec:
    fields: dict[str, FieldSpec] = {}
    for name, declared in schema.items():
        field_name = str(name)
        if isinstance(declared, Mapping):
            fields[field_name] = _property_to_field(
                field_name,
                declared,
                required=declared.get("required") is True,
                strict=strict,
            )
        else:
            fields[field_name] = FieldSpec(
                type=_resolve_type(field_name, declared, strict=strict)
            )
    return SchemaSpec.from_fields(fields)


def _property_to_field(
    name: str, prop: Any, *, required: bool, strict: bool
) -> FieldSpec:
    if not isinstance(prop, Mapping):
        # e.g. {"properties": {"name": "string"}}
        return FieldSpec(type=_resolve_type(name, prop, strict=strict), required=required)

    if any(key in prop for key in _UNION_KEYS):
        log.debug("Field '%s' declares a union; degrading to string.", name)
        return FieldSpec(type="string", required=required, enum=_enum_of(prop))

    if prop.get("type") is None and ("enum" in prop or "const" in prop):
        enum = _enum_of(prop) if "enum" in prop else (str(prop["const"]),)
        return FieldSpec(type="string", required=required, enum=enum)

    field_type = _resolve_type(name, prop.get("type"), strict=strict)
    if field_type == "array":
        return FieldSpec(
            type="array",
            items=_item_type(name, prop.get("items")),
            required=required,
        )
    return FieldSpec(type=field_type, required=required, enum=_enum_of(prop))


def _resolve_type(name: str, declared: Any, *, strict: bool) -> FieldType:
    resolved: FieldType | None = None
    if isinstance(declared, type):
        resolved = _PYTHON_TYPES.get(declared)
    elif declared is not None:
        resolved = _TYPE_NAMES.get(str(declared).strip().lower())

    if resolved is not None:
        return resolved
    if strict:
        raise SchemaError(f"Unrecognized type {declared!r} for field '{name}'")
    log.debug("Unrecognized type %r for field '%s'; using string.", declared, name)
    return "string"


def _item_type(name: str, items: Any) -> ItemType:
    if isinstance(items, Mapping):
        resolved = _TYPE_NAMES.get(str(items.get("type", "")).lower())
        if resolved in ("string", "number", "boolean"):
            return resolved
    log.debug("Array field '%s' has no primitive item type; using string.", name)
    return "string"


def _enum_of(prop: Mapping[Any, Any]) -> tuple[str, ...] | None:
    values = prop.get("enum")
    if not values:
        return None
    return tuple(str(value) for value in values)


def _resolve_ref(prop: Any, definitions: Mapping[str, Any]) -> Any:
    """Inline a local ``$ref`` (as emitted by pydantic for enums)."""
    if not isinstance(prop, Mapping) or "$ref" not in prop:
        return prop
    ref_name = str(prop["$ref"]).rsplit("/", 1)[-1]
    return definitions.get(ref_name, prop)
