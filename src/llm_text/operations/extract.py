"""Structured information extraction against a caller schema."""

from typing import Any

from llm_text.client import call_llm
from llm_text.config import TextConfig, get_config
from llm_text.response import ResultShape, parse_structured_response
from llm_text.schema import SchemaSpec, normalize
from llm_text.validation import validate_required, validate_text


def extract(
    text: str,
    *,
    schema: Any = None,
    model: str | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> dict[str, Any]:
    """Extract the fields described by `schema` from `text`.

    `schema` may be a SchemaSpec, a pydantic model class, a JSON-Schema-style
    mapping or a flat ``{field: type}`` mapping. Boolean fields are normalized
    from yes/no strings. If the model's reply is not a JSON object, every
    field is returned as None.

    Raises:
        ValidationError: If `text` is blank or `schema` is missing.
        SchemaError: If `schema` cannot be normalized.
    """
    validate_text(text)
    validate_required(schema, "schema")
    config = config if config is not None else get_config()
    spec = normalize(schema, strict=config.strict_schema)

    prompt = build_prompt(text, spec)
    response = call_llm(
        prompt, operation="extract", model=model, schema=spec, config=config, **options
    )
    return parse_structured_response(response, result_shape(spec))


def result_shape(spec: SchemaSpec) -> ResultShape:
    return ResultShape(
        text_field=None,
        defaults=dict.fromkeys(spec.field_names),
        boolean_fields=frozenset(spec.fields_of_type("boolean")),
    )


def build_prompt(text: str, spec: SchemaSpec) -> str:
    return "\n".join(
        [
            f"Extract the following information from the text: {', '.join(spec.field_names)}",
            "Return the data as structured JSON matching the provided schema.",
            "",
            "Text:",
            text,
        ]
    )
