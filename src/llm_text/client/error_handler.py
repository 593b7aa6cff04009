"""Error handling for chat transport failures"""

from typing import NoReturn

from llm_text.exceptions import LlmCallError


class TransportErrorHandler:
    """Translates transport exceptions into informative LlmCallErrors"""

    def handle_call_error(
        self,
        error: Exception,
        *,
        model: str | None = None,
        operation: str | None = None,
        structured: bool = False,
    ) -> NoReturn:
        """Raise an LlmCallError describing `error`, chained from it"""
        error_str = str(error).lower()
        target = f"model '{model}'" if model else "the model"
        context = f" during {operation}" if operation else ""

        if any(term in error_str for term in ("quota", "rate limit", "429", "resource_exhausted")):
            message = (
                f"LLM call failed: rate limit or quota exceeded for {target}{context}. "
                f"Original error: {error}"
            )
        elif structured and ("json" in error_str or "schema" in error_str):
            message = (
                f"LLM call failed: structured output request rejected by {target}{context}. "
                f"Check the schema definition. Original error: {error}"
            )
        elif "not found" in error_str or "404" in error_str:
            message = (
                f"LLM call failed: {target} not found or unavailable{context}. "
                f"Original error: {error}"
            )
        elif any(term in error_str for term in ("api key", "api_key", "permission", "401", "403")):
            message = (
                f"LLM call failed: authentication rejected for {target}{context}. "
                f"Original error: {error}"
            )
        else:
            message = f"LLM call failed{context}: {error}"

        raise LlmCallError(message, model=model, operation=operation) from error
