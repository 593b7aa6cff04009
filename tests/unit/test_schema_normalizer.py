"""Unit tests for schema normalization.

Every accepted schema shape must normalize to the same canonical SchemaSpec,
and anything unusable must fail with SchemaError.
"""

from enum import Enum

from pydantic import BaseModel
import pytest

from llm_text.exceptions import SchemaError
from llm_text.schema import FieldSpec, SchemaSpec, normalize


class Mood(str, Enum):
    HAPPY = "happy"
    SAD = "sad"


class Person(BaseModel):
    name: str
    age: int
    active: bool = False
    tags: list[str] = []
    mood: Mood | None = None


@pytest.mark.unit
class TestNormalizeShapes:
    """Accepted input shapes"""

    def test_json_schema_and_flat_map_describe_same_fields(self):
        """Should produce identical field names and types for both styles"""
        json_schema = normalize(
            {
                "type": "object",
                "properties": {"name": {"type": "string"}, "age": {"type": "integer"}},
            }
        )
        flat = normalize({"name": "string", "age": "integer"})

        assert json_schema.field_names == flat.field_names == ("name", "age")
        assert [json_schema[n].type for n in json_schema] == ["string", "number"]
        assert [flat[n].type for n in flat] == ["string", "number"]

    def test_json_schema_without_type_key(self):
        spec = normalize({"properties": {"label": {"type": "string"}}})
        assert spec.field_names == ("label",)

    def test_json_schema_required_list(self):
        spec = normalize(
            {
                "type": "object",
                "properties": {"a": {"type": "string"}, "b": {"type": "number"}},
                "required": ["a"],
            }
        )
        assert spec["a"].required is True
        assert spec["b"].required is False
        assert spec.required_fields == ("a",)

    def test_flat_map_with_python_types(self):
        spec = normalize({"title": str, "price": float, "count": int, "paid": bool, "tags": list})
        assert {name: spec[name].type for name in spec} == {
            "title": "string",
            "price": "number",
            "count": "number",
            "paid": "boolean",
            "tags": "array",
        }
        assert spec["tags"].items == "string"

    def test_flat_map_fields_are_optional(self):
        spec = normalize({"name": "string"})
        assert spec["name"].required is False

    def test_flat_map_with_nested_property(self):
        spec = normalize(
            {"status": {"type": "string", "enum": ["open", "closed"], "required": True}}
        )
        assert spec["status"] == FieldSpec(
            type="string", required=True, enum=("open", "closed")
        )

    def test_array_item_type_is_kept(self):
        spec = normalize(
            {"properties": {"scores": {"type": "array", "items": {"type": "number"}}}}
        )
        assert spec["scores"].items == "number"

    def test_array_without_items_defaults_to_string(self):
        spec = normalize({"properties": {"words": {"type": "array"}}})
        assert spec["words"].items == "string"

    def test_object_field(self):
        spec = normalize(
            {
                "properties": {
                    "mapping": {"type": "object", "additionalProperties": {"type": "string"}}
                }
            }
        )
        assert spec["mapping"].type == "object"
        assert spec.to_json_schema()["properties"]["mapping"] == {
            "type": "object",
            "additionalProperties": {"type": "string"},
        }

    def test_union_degrades_to_string(self):
        spec = normalize(
            {"properties": {"value": {"anyOf": [{"type": "string"}, {"type": "number"}]}}}
        )
        assert spec["value"].type == "string"

    def test_schema_spec_is_returned_as_is(self):
        spec = SchemaSpec.from_fields({"a": FieldSpec()})
        assert normalize(spec) is spec

    def test_custom_schema_source(self):
        class Source:
            def to_schema_spec(self):
                return SchemaSpec.from_fields({"x": FieldSpec(type="number")})

        assert normalize(Source())["x"].type == "number"

    def test_pydantic_model(self):
        """Should read fields, types and required-ness from the model schema"""
        spec = normalize(Person)

        assert spec.field_names == ("name", "age", "active", "tags", "mood")
        assert spec["name"] == FieldSpec(type="string", required=True)
        assert spec["age"].type == "number"
        assert spec["active"] == FieldSpec(type="boolean", required=False)
        assert spec["tags"].items == "string"
        assert spec["mood"].type == "string"

    def test_enum_reference_is_resolved(self):
        class Ticket(BaseModel):
            mood: Mood

        spec = normalize(Ticket)
        assert spec["mood"].enum == ("happy", "sad")


@pytest.mark.unit
class TestNormalizeErrors:
    """Rejected input shapes"""

    @pytest.mark.parametrize("schema", [{}, {"type": "object", "properties": {}}])
    def test_empty_schema(self, schema):
        with pytest.raises(SchemaError, match="at least one field"):
            normalize(schema)

    @pytest.mark.parametrize("schema", ["string", 42, ["name"], None])
    def test_unrecognized_shape(self, schema):
        with pytest.raises(SchemaError, match="Schema must be"):
            normalize(schema)

    def test_unknown_type_falls_back_to_string(self):
        spec = normalize({"when": "datetime"})
        assert spec["when"].type == "string"

    def test_unknown_type_rejected_in_strict_mode(self):
        with pytest.raises(SchemaError, match="Unrecognized type 'datetime'"):
            normalize({"when": "datetime"}, strict=True)

    @pytest.mark.parametrize(
        "prop, enum",
        [({"enum": ["low", "high"]}, ("low", "high")), ({"const": "fixed"}, ("fixed",))],
        ids=["enum", "const"],
    )
    def test_untyped_enum_is_string_in_strict_mode(self, prop, enum):
        spec = normalize({"properties": {"level": prop}}, strict=True)
        assert spec["level"] == FieldSpec(type="string", enum=enum)

    def test_schema_source_must_return_schema_spec(self):
        class BadSource:
            def to_schema_spec(self):
                return {"a": "string"}

        with pytest.raises(SchemaError, match="expected SchemaSpec"):
            normalize(BadSource())


@pytest.mark.unit
class TestSchemaSpec:
    """Canonical schema type"""

    def test_duplicate_names_rejected(self):
        with pytest.raises(SchemaError, match="Duplicate"):
            SchemaSpec(fields=(("a", FieldSpec()), ("a", FieldSpec())))

    def test_empty_spec_rejected(self):
        with pytest.raises(SchemaError):
            SchemaSpec(fields=())

    def test_items_only_valid_for_arrays(self):
        with pytest.raises(SchemaError, match="only valid for arrays"):
            FieldSpec(type="string", items="number")

    def test_unknown_field_type_rejected(self):
        with pytest.raises(SchemaError, match="Unsupported field type"):
            FieldSpec(type="date")

    def test_mapping_interface(self):
        spec = SchemaSpec.from_fields({"a": FieldSpec(), "b": FieldSpec(type="boolean")})

        assert list(spec) == ["a", "b"]
        assert len(spec) == 2
        assert "b" in spec
        assert spec.fields_of_type("boolean") == ("b",)
        with pytest.raises(KeyError):
            spec["missing"]

    def test_to_json_schema(self):
        spec = SchemaSpec.from_fields(
            {
                "label": FieldSpec(required=True, enum=("a", "b")),
                "tags": FieldSpec(type="array"),
            }
        )
        assert spec.to_json_schema() == {
            "type": "object",
            "properties": {
                "label": {"type": "string", "enum": ["a", "b"]},
                "tags": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["label"],
        }
