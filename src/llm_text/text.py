"""Fluent wrapper exposing every operation as a method on a piece of text.

Example:
    TextOps("Long article ...").summarize(length="short")
    TextOps("Bonjour").detect_language()
"""

from dataclasses import dataclass
from typing import Any

from . import operations


@dataclass(frozen=True, slots=True)
class TextOps:
    """Immutable holder for `text`; each method forwards to the operation."""

    text: str

    def __str__(self) -> str:
        return self.text

    def summarize(self, **options: Any) -> str:
        return operations.summarize(self.text, **options)

    def translate(self, **options: Any) -> str:
        return operations.translate(self.text, **options)

    def extract(self, **options: Any) -> dict[str, Any]:
        return operations.extract(self.text, **options)

    def classify(self, **options: Any) -> str:
        return operations.classify(self.text, **options)

    def fix_grammar(self, **options: Any) -> str | dict[str, Any]:
        return operations.fix_grammar(self.text, **options)

    def sentiment(self, **options: Any) -> str | dict[str, Any]:
        return operations.sentiment(self.text, **options)

    def key_points(self, **options: Any) -> list[str]:
        return operations.key_points(self.text, **options)

    def rewrite(self, **options: Any) -> str:
        return operations.rewrite(self.text, **options)

    def answer(self, question: str, **options: Any) -> str | bool | dict[str, Any]:
        return operations.answer(self.text, question, **options)

    def detect_language(self, **options: Any) -> str | dict[str, Any]:
        return operations.detect_language(self.text, **options)

    def generate_tags(self, **options: Any) -> list[str]:
        return operations.generate_tags(self.text, **options)

    def anonymize(self, **options: Any) -> str | dict[str, Any]:
        return operations.anonymize(self.text, **options)

    def compare(self, other: "str | TextOps", **options: Any) -> dict[str, Any]:
        other_text = other.text if isinstance(other, TextOps) else other
        return operations.compare(self.text, other_text, **options)
