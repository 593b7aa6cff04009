"""Prompt-construction helpers for common text operations on top of an LLM."""

import importlib.metadata
import logging

from llm_text.client import ChatAdapter, ChatOptions, ChatRequest, MockChatAdapter, call_llm
from llm_text.config import (
    OperationConfig,
    TextConfig,
    TextSettings,
    configure,
    get_config,
    load_config,
)
from llm_text.exceptions import (
    ConfigurationError,
    LlmCallError,
    SchemaError,
    TextError,
    ValidationError,
)
from llm_text.operations import (
    answer,
    anonymize,
    classify,
    compare,
    detect_language,
    extract,
    fix_grammar,
    generate_tags,
    key_points,
    rewrite,
    sentiment,
    summarize,
    translate,
)
from llm_text.response import clean_json_response
from llm_text.schema import FieldSpec, SchemaSpec, normalize
from llm_text.text import TextOps

# Version handling
try:
    __version__ = importlib.metadata.version("llm-text")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [  # noqa: RUF022
    # Operations
    "summarize",
    "translate",
    "extract",
    "classify",
    "fix_grammar",
    "sentiment",
    "key_points",
    "rewrite",
    "answer",
    "detect_language",
    "generate_tags",
    "anonymize",
    "compare",
    "TextOps",
    # Configuration
    "configure",
    "get_config",
    "load_config",
    "TextConfig",
    "TextSettings",
    "OperationConfig",
    # Structured output pipeline
    "SchemaSpec",
    "FieldSpec",
    "normalize",
    "clean_json_response",
    # Transport
    "call_llm",
    "ChatAdapter",
    "ChatOptions",
    "ChatRequest",
    "MockChatAdapter",
    # Exceptions
    "TextError",
    "ValidationError",
    "SchemaError",
    "LlmCallError",
    "ConfigurationError",
]
