"""Chat adapter backed by the Google Gen AI SDK."""

import logging
from typing import Any

from google import genai
from google.genai import types

from .base import ChatRequest

log = logging.getLogger(__name__)


class GeminiChatAdapter:
    """Sends a ChatRequest to Gemini via ``client.models.generate_content``.

    Structured requests set ``response_mime_type="application/json"`` and
    attach the SchemaSpec as a JSON Schema.
    """

    def __init__(self, api_key: str | None = None, client: Any | None = None):
        """Creates an adapter around an existing client or a new one for `api_key`."""
        self.client = client if client is not None else genai.Client(api_key=api_key)

    def ask(self, request: ChatRequest) -> str:
        config = self.build_config(request)
        log.debug(
            "Gemini generate_content: model=%s, structured=%s",
            request.model,
            request.schema is not None,
        )
        response = self.client.models.generate_content(
            model=request.model,
            contents=request.prompt,
            config=config,
        )
        return response.text or ""

    def build_config(self, request: ChatRequest) -> types.GenerateContentConfig:
        """Translate a ChatRequest into a GenerateContentConfig."""
        options = request.options
        config_kwargs: dict[str, Any] = {"temperature": request.temperature}

        if options.instructions is not None:
            config_kwargs["system_instruction"] = options.instructions
        if options.max_tokens is not None:
            config_kwargs["max_output_tokens"] = options.max_tokens
        if options.top_p is not None:
            config_kwargs["top_p"] = options.top_p
        if options.top_k is not None:
            config_kwargs["top_k"] = options.top_k
        if options.stop_sequences is not None:
            config_kwargs["stop_sequences"] = list(options.stop_sequences)
        if options.seed is not None:
            config_kwargs["seed"] = options.seed

        if request.schema is not None:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_json_schema"] = request.schema.to_json_schema()
        else:
            config_kwargs["response_mime_type"] = "text/plain"

        return types.GenerateContentConfig(**config_kwargs)
