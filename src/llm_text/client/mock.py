"""Deterministic adapter used for tests/examples (no network)."""

import json
from typing import Any

from llm_text.schema import FieldSpec

from .base import ChatRequest

_EMPTY_VALUES: dict[str, Any] = {
    "string": "",
    "number": 0.0,
    "boolean": False,
    "array": [],
    "object": {},
}


class MockChatAdapter:
    """Echoes the prompt, or returns an empty JSON object shaped like the schema."""

    def ask(self, request: ChatRequest) -> str:
        if request.schema is None:
            return f"echo: {request.prompt}"
        return json.dumps(
            {name: _placeholder(spec) for name, spec in request.schema.items()}
        )


def _placeholder(spec: FieldSpec) -> Any:
    if spec.enum:
        return spec.enum[0]
    return _EMPTY_VALUES[spec.type]
