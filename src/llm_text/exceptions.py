"""Exceptions raised by llm_text operations."""


class TextError(Exception):
    """Base exception for all llm_text errors."""


class ValidationError(TextError):
    """Raised when operation input validation fails, before any model call."""


class SchemaError(TextError):
    """Raised when a schema description cannot be normalized."""


class ConfigurationError(TextError):
    """Raised when configuration values are invalid or unknown."""


class LlmCallError(TextError):
    """Raised when the underlying chat transport fails.

    The original transport exception is always chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        model: str | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.model = model
        self.operation = operation
