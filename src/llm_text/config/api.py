"""Public API for the configuration system.

The process-wide `TextConfig` is resolved lazily from the environment on
first use, or set explicitly with `configure()` during initialization.
Reconfiguring while other threads run operations is the caller's
responsibility; no locking is performed.
"""

import logging
from pathlib import Path
from typing import Any

import pydantic

from llm_text.exceptions import ConfigurationError

from .schema import TextSettings
from .types import TextConfig

log = logging.getLogger(__name__)

_active_config: TextConfig | None = None


def load_config(
    programmatic: dict[str, Any] | None = None,
    *,
    env_file: str | Path | None = None,
) -> TextConfig:
    """Build a TextConfig from programmatic values, environment, and defaults.

    Precedence: programmatic > environment (``LLM_TEXT_*``) > ``env_file`` >
    defaults. The result is not installed as the active configuration; pass
    it to `configure()` for that.

    Raises:
        ConfigurationError: If values fail validation or `env_file` is missing.
    """
    if env_file is not None and not Path(env_file).exists():
        raise ConfigurationError(f"Environment file not found: {env_file}")

    try:
        settings = TextSettings(_env_file=env_file, **(programmatic or {}))
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid llm_text configuration: {e}") from e
    return settings.to_config()


def get_config() -> TextConfig:
    """Return the active configuration, resolving it from the environment once."""
    global _active_config
    if _active_config is None:
        _active_config = load_config()
        log.debug("Resolved configuration from environment: %r", _active_config)
    return _active_config


def configure(config: TextConfig | None = None, /, **overrides: Any) -> TextConfig:
    """Install the process-wide configuration.

    Examples:
        configure(default_model="gemini-2.5-flash", temperature=0.2)
        configure(operations={"summarize": OperationConfig(model="gemini-2.5-pro")})
        configure(load_config(env_file=".env.local"))

    Args:
        config: Configuration to install. Defaults to the active one.
        **overrides: Field overrides applied on top of `config`.

    Returns:
        The newly active TextConfig.
    """
    global _active_config
    base = config if config is not None else get_config()
    _active_config = base.with_overrides(**overrides) if overrides else base
    log.debug("Configured llm_text: %r", _active_config)
    return _active_config
