"""Configuration management for llm_text.

Key components:
- TextSettings: pydantic-settings schema reading ``LLM_TEXT_*`` variables
- TextConfig: frozen configuration read by every operation
- OperationConfig: per-operation model/temperature override
"""

from .api import configure, get_config, load_config
from .schema import TextSettings
from .types import OperationConfig, TextConfig

__all__ = [
    "OperationConfig",
    "TextConfig",
    "TextSettings",
    "configure",
    "get_config",
    "load_config",
]
