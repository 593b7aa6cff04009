"""Text operations built on the shared model call pipeline.

Each module builds a prompt, calls `llm_text.client.call_llm`, and
post-processes the reply into a str, bool, list or dict.
"""

from .answer import answer
from .anonymize import anonymize
from .classify import classify
from .compare import compare
from .detect_language import detect_language
from .extract import extract
from .generate_tags import generate_tags
from .grammar import fix_grammar
from .key_points import key_points
from .rewrite import rewrite
from .sentiment import sentiment
from .summarize import summarize
from .translate import translate

__all__ = [
    "answer",
    "anonymize",
    "classify",
    "compare",
    "detect_language",
    "extract",
    "fix_grammar",
    "generate_tags",
    "key_points",
    "rewrite",
    "sentiment",
    "summarize",
    "translate",
]
