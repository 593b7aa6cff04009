"""Chat adapter protocol and request types.

Adapters are the only place a provider SDK is touched. The gateway hands
them a fully-resolved `ChatRequest`; they return text, or an object exposing
the text as ``content`` or ``text``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
import logging
from typing import Any, Protocol, runtime_checkable

from llm_text.schema import SchemaSpec

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChatOptions:
    """Closed set of optional chat settings an operation may pass through.

    Attributes:
        instructions: System instruction prepended to the conversation.
        max_tokens: Upper bound on generated tokens.
        top_p: Nucleus sampling probability mass.
        top_k: Top-k sampling cutoff.
        stop_sequences: Sequences that end generation.
        seed: Sampling seed for reproducible output, where supported.
    """

    instructions: str | None = None
    max_tokens: int | None = None
    top_p: float | None = None
    top_k: int | None = None
    stop_sequences: tuple[str, ...] | None = None
    seed: int | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "ChatOptions":
        """Build options from keyword arguments, ignoring unsupported names."""
        supported = {f.name for f in fields(cls)}
        ignored = sorted(set(options) - supported)
        if ignored:
            log.debug("Ignoring unsupported chat option(s): %s", ", ".join(ignored))
        values = {name: value for name, value in options.items() if name in supported}
        stop = values.get("stop_sequences")
        if isinstance(stop, str):
            values["stop_sequences"] = (stop,)
        elif stop is not None:
            values["stop_sequences"] = tuple(stop)
        return cls(**values)

    def as_dict(self) -> dict[str, Any]:
        """Only the options that were actually set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True, slots=True)
class ChatRequest:
    """One fully-resolved model call."""

    prompt: str
    model: str
    temperature: float
    schema: SchemaSpec | None = None
    options: ChatOptions = ChatOptions()


@runtime_checkable
class ChatAdapter(Protocol):
    """Anything that can answer a single prompt."""

    def ask(self, request: ChatRequest) -> Any: ...


def response_text(response: Any) -> str:
    """Extract text from an adapter response.

    Accepts a plain string or an object with a ``content`` or ``text``
    attribute.

    Raises:
        TypeError: If the response carries no text.
    """
    if isinstance(response, str):
        return response
    for attr in ("content", "text"):
        value = getattr(response, attr, None)
        if value is not None:
            return value if isinstance(value, str) else str(value)
    raise TypeError(
        f"Adapter response of type {type(response).__name__} has no text content"
    )
