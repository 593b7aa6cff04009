"""
Global test configuration.
"""

import os

import pytest

from llm_text.config import TextConfig, configure
import llm_text.config.api as config_api
from tests.helpers import FakeChatAdapter


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_llm_text_env(request, monkeypatch):
    """Ensure a clean LLM_TEXT_* environment and no active configuration.

    Escape hatch: mark a test with @pytest.mark.allow_env_pollution to keep
    the current environment unchanged.
    """
    monkeypatch.setattr(config_api, "_active_config", None)
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("LLM_TEXT_"):
            monkeypatch.delenv(key, raising=False)


# --- Transport Fixtures ---
@pytest.fixture
def fake_adapter():
    """A FakeChatAdapter answering "ok"; set `.responses` to script replies."""
    return FakeChatAdapter("ok")


@pytest.fixture
def use_adapter(fake_adapter):
    """Install `fake_adapter` as the process-wide transport."""
    configure(TextConfig(adapter=fake_adapter))
    return fake_adapter


@pytest.fixture
def respond(use_adapter):
    """Script the installed adapter's replies.

    Usage:
        respond('{"label": "positive", "confidence": 0.9}')
    """

    def _respond(*responses):
        use_adapter.responses = list(responses)
        return use_adapter

    return _respond
