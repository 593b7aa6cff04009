"""Core configuration data types for llm_text.

The process-wide configuration is a frozen `TextConfig`. It is built once
(from `TextSettings` or programmatically) and replaced wholesale by
`configure()`; it is never mutated in place.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, NamedTuple

from llm_text.constants import DEFAULT_MODEL, DEFAULT_TEMPERATURE, ENV_PREFIX, OPERATIONS
from llm_text.exceptions import ConfigurationError

if TYPE_CHECKING:
    from llm_text.client.base import ChatAdapter


class OperationConfig(NamedTuple):
    """Per-operation override of model and temperature."""

    model: str | None = None
    temperature: float | None = None


@dataclass(frozen=True)
class TextConfig:
    """Immutable configuration read by every operation invocation.

    Resolution rules:
        model: explicit argument > per-operation override > default_model
        temperature: explicit argument > per-operation override >
            temperature > DEFAULT_TEMPERATURE
    """

    api_key: str | None = None
    default_model: str = DEFAULT_MODEL
    temperature: float | None = DEFAULT_TEMPERATURE
    use_real_api: bool = False
    strict_schema: bool = False
    operations: Mapping[str, OperationConfig] = field(
        default_factory=lambda: MappingProxyType({})
    )
    adapter: "ChatAdapter | None" = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.use_real_api and not self.api_key and self.adapter is None:
            raise ConfigurationError(
                "api_key is required when use_real_api=True. "
                f"Set {ENV_PREFIX}API_KEY or pass it programmatically."
            )
        unknown = sorted(set(self.operations) - set(OPERATIONS))
        if unknown:
            raise ConfigurationError(
                f"Unknown operation(s) in configuration: {', '.join(unknown)}. "
                f"Known operations: {', '.join(OPERATIONS)}"
            )
        frozen_ops = {
            name: override
            if isinstance(override, OperationConfig)
            else OperationConfig(**dict(override))
            for name, override in self.operations.items()
        }
        object.__setattr__(self, "operations", MappingProxyType(frozen_ops))

        temperatures = {"temperature": self.temperature} | {
            f"operations[{name}].temperature": override.temperature
            for name, override in frozen_ops.items()
        }
        for label, value in temperatures.items():
            if value is not None and not 0.0 <= value <= 2.0:
                raise ConfigurationError(f"{label} must be in [0, 2], got {value}")

    def __repr__(self) -> str:
        """Repr with redacted API key for safe logging."""
        api_key_display = "[REDACTED]" if self.api_key else None
        return (
            f"TextConfig(api_key={api_key_display!r}, "
            f"default_model={self.default_model!r}, "
            f"temperature={self.temperature!r}, use_real_api={self.use_real_api!r}, "
            f"strict_schema={self.strict_schema!r}, "
            f"operations={dict(self.operations)!r}, "
            f"adapter={type(self.adapter).__name__ if self.adapter else None})"
        )

    def operation(self, name: str | None) -> OperationConfig:
        """Override for `name`, or an empty override."""
        if name is None:
            return OperationConfig()
        return self.operations.get(name, OperationConfig())

    def model_for(self, operation: str | None, explicit: str | None = None) -> str:
        """Resolve the model for one call."""
        return explicit or self.operation(operation).model or self.default_model

    def temperature_for(
        self, operation: str | None, explicit: float | None = None
    ) -> float:
        """Resolve the temperature for one call."""
        for candidate in (
            explicit,
            self.operation(operation).temperature,
            self.temperature,
        ):
            if candidate is not None:
                return float(candidate)
        return DEFAULT_TEMPERATURE

    def with_overrides(self, **overrides: Any) -> "TextConfig":
        """Return a new TextConfig with `overrides` applied.

        ``operations`` is merged per operation rather than replaced, so
        ``with_overrides(operations={"summarize": OperationConfig(model="m")})``
        keeps other operations' overrides.

        Raises:
            ConfigurationError: If an override names an unknown field.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration field(s): {', '.join(unknown)}"
            )
        if "operations" in overrides:
            merged = dict(self.operations)
            merged.update(overrides["operations"] or {})
            overrides["operations"] = merged
        return replace(self, **overrides)
