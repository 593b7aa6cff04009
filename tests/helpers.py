"""Test doubles for the chat transport."""

from collections.abc import Iterable
from typing import Any

from llm_text.client import ChatRequest


class FakeChatAdapter:
    """Records every request and replies with scripted responses.

    Responses are consumed in order; the last one repeats once the script
    runs out.
    """

    def __init__(self, responses: Iterable[Any] | Any = "ok"):
        if isinstance(responses, str) or not isinstance(responses, Iterable):
            responses = [responses]
        self.responses = list(responses)
        self.requests: list[ChatRequest] = []

    def ask(self, request: ChatRequest) -> Any:
        self.requests.append(request)
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    @property
    def last_request(self) -> ChatRequest:
        return self.requests[-1]

    @property
    def last_prompt(self) -> str:
        return self.last_request.prompt


class FailingChatAdapter:
    """Raises `error` on every call."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    def ask(self, request: ChatRequest) -> Any:
        self.calls += 1
        raise self.error


class ContentResponse:
    """Response object exposing its text as ``content``."""

    def __init__(self, content: str):
        self.content = content
