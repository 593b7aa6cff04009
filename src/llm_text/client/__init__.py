"""Chat transport: adapter protocol, adapters, and the model call gateway."""

from .base import ChatAdapter, ChatOptions, ChatRequest, response_text
from .error_handler import TransportErrorHandler
from .gateway import call_llm, select_adapter
from .mock import MockChatAdapter

__all__ = [
    "ChatAdapter",
    "ChatOptions",
    "ChatRequest",
    "MockChatAdapter",
    "TransportErrorHandler",
    "call_llm",
    "response_text",
    "select_adapter",
]
