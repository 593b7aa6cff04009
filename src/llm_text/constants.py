"""
Project-wide constants for llm_text
"""

# ==============================================================================
# Model Call Defaults
# ==============================================================================

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_TEMPERATURE = 0.3

# Environment variable prefix for TextSettings
ENV_PREFIX = "LLM_TEXT_"

# ==============================================================================
# Operations
# ==============================================================================

# Names accepted for per-operation model/temperature overrides
OPERATIONS = (
    "summarize",
    "translate",
    "extract",
    "classify",
    "grammar",
    "sentiment",
    "key_points",
    "rewrite",
    "answer",
    "detect_language",
    "generate_tags",
    "anonymize",
    "compare",
)

# ==============================================================================
# Structured Output
# ==============================================================================

# Fields always coerced to float after a successful parse
FLOAT_FIELDS = ("confidence", "similarity")

BOOLEAN_TRUE_VALUES = ("true", "yes")
BOOLEAN_FALSE_VALUES = ("false", "no")
