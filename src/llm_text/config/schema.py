"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces
configuration values from the environment (``LLM_TEXT_*`` variables, an
optional ``.env`` file) or programmatic input into a `TextConfig`.
"""

from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from llm_text.constants import DEFAULT_MODEL, DEFAULT_TEMPERATURE, ENV_PREFIX, OPERATIONS

from .types import OperationConfig, TextConfig


class TextSettings(BaseSettings):
    """Pydantic settings schema for llm_text configuration.

    Mapping fields (`models`, `temperatures`) are read from JSON in the
    environment, e.g. ``LLM_TEXT_MODELS='{"summarize": "gemini-2.5-pro"}'``.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="API key for the real chat adapter",
    )

    default_model: str = Field(
        default=DEFAULT_MODEL,
        description="Model used when no per-operation override is set",
        min_length=1,
    )

    temperature: float = Field(
        default=DEFAULT_TEMPERATURE,
        description="Default sampling temperature",
        ge=0.0,
        le=2.0,
    )

    use_real_api: bool = Field(
        default=False,
        description="Use the Gemini adapter instead of the deterministic mock",
    )

    strict_schema: bool = Field(
        default=False,
        description="Reject unrecognized schema field types instead of using string",
    )

    models: dict[str, str] = Field(
        default_factory=dict,
        description="Per-operation model overrides",
    )

    temperatures: dict[str, float] = Field(
        default_factory=dict,
        description="Per-operation temperature overrides",
    )

    # --- Validation Rules ---

    @field_validator("models", "temperatures")
    @classmethod
    def check_operation_names(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Only known operations may carry overrides."""
        unknown = sorted(set(v) - set(OPERATIONS))
        if unknown:
            raise ValueError(
                f"Unknown operation(s): {', '.join(unknown)}. "
                f"Must be among: {', '.join(OPERATIONS)}"
            )
        return v

    @field_validator("temperatures")
    @classmethod
    def check_temperature_range(cls, v: dict[str, float]) -> dict[str, float]:
        for name, value in v.items():
            if not 0.0 <= value <= 2.0:
                raise ValueError(f"Temperature for '{name}' must be in [0, 2], got {value}")
        return v

    @model_validator(mode="after")
    def validate_api_key_requirement(self) -> "TextSettings":
        """Ensure api_key is provided when use_real_api is True."""
        if self.use_real_api and not self.api_key:
            raise ValueError(
                "api_key is required when use_real_api=True. "
                f"Set {ENV_PREFIX}API_KEY or pass it programmatically."
            )
        return self

    def to_config(self) -> TextConfig:
        """Freeze these settings into a TextConfig."""
        operations = {
            name: OperationConfig(
                model=self.models.get(name),
                temperature=self.temperatures.get(name),
            )
            for name in sorted(set(self.models) | set(self.temperatures))
        }
        return TextConfig(
            api_key=self.api_key,
            default_model=self.default_model,
            temperature=self.temperature,
            use_real_api=self.use_real_api,
            strict_schema=self.strict_schema,
            operations=operations,
        )
