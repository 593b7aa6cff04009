"""Model call gateway.

`call_llm` is the single choke point between operations and the chat
transport. It resolves model and temperature against the configuration,
normalizes the schema, narrows keyword options to `ChatOptions`, and makes
sure no transport exception type escapes except as `LlmCallError`.
"""

import logging
from typing import Any

from llm_text.config import TextConfig, get_config
from llm_text.schema import SchemaSpec, normalize

from .base import ChatAdapter, ChatOptions, ChatRequest, response_text
from .error_handler import TransportErrorHandler
from .mock import MockChatAdapter

log = logging.getLogger(__name__)

_error_handler = TransportErrorHandler()


def call_llm(
    prompt: str,
    *,
    operation: str | None = None,
    model: str | None = None,
    temperature: float | None = None,
    schema: Any | None = None,
    config: TextConfig | None = None,
    **options: Any,
) -> str:
    """Send one prompt to the model and return its raw text.

    Args:
        prompt: Fully-built prompt text.
        operation: Operation name used for per-operation overrides.
        model: Explicit model; wins over configured overrides.
        temperature: Explicit temperature; wins over configured values.
        schema: Any schema shape accepted by `normalize`.
        config: Configuration to read; defaults to the active one.
        **options: Chat options; names outside `ChatOptions` are ignored.

    Returns:
        The model's response text.

    Raises:
        SchemaError: If `schema` cannot be normalized.
        LlmCallError: If the adapter cannot be created or the call fails.
    """
    config = config if config is not None else get_config()

    spec: SchemaSpec | None = None
    if schema is not None:
        spec = normalize(schema, strict=config.strict_schema)

    request = ChatRequest(
        prompt=prompt,
        model=config.model_for(operation, model),
        temperature=config.temperature_for(operation, temperature),
        schema=spec,
        options=ChatOptions.from_options(options),
    )
    log.debug(
        "Calling model '%s' (operation=%s, temperature=%s, structured=%s).",
        request.model,
        operation,
        request.temperature,
        spec is not None,
    )

    try:
        adapter = select_adapter(config)
        return response_text(adapter.ask(request))
    except Exception as e:
        _error_handler.handle_call_error(
            e,
            model=request.model,
            operation=operation,
            structured=spec is not None,
        )


def select_adapter(config: TextConfig) -> ChatAdapter:
    """Adapter for `config`: explicit, Gemini when enabled, else the mock."""
    if config.adapter is not None:
        return config.adapter
    if config.use_real_api:
        from .gemini import GeminiChatAdapter

        return GeminiChatAdapter(api_key=config.api_key)
    return MockChatAdapter()
