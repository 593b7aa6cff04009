"""Unit tests for the model call gateway and chat adapters."""

import json
from unittest.mock import MagicMock

import pytest

from llm_text.client import (
    ChatOptions,
    ChatRequest,
    MockChatAdapter,
    call_llm,
    response_text,
    select_adapter,
)
from llm_text.client.error_handler import TransportErrorHandler
from llm_text.config import OperationConfig, TextConfig
from llm_text.exceptions import LlmCallError, SchemaError
from llm_text.schema import SchemaSpec, normalize
from tests.helpers import ContentResponse, FailingChatAdapter, FakeChatAdapter


@pytest.mark.unit
class TestCallLlm:
    """Request resolution and transport error wrapping"""

    def test_returns_adapter_text(self, use_adapter):
        use_adapter.responses = ["hello"]
        assert call_llm("prompt") == "hello"
        assert use_adapter.last_prompt == "prompt"

    def test_accepts_response_objects_with_content(self, use_adapter):
        use_adapter.responses = [ContentResponse("from content")]
        assert call_llm("prompt") == "from content"

    def test_resolves_model_and_temperature_from_config(self):
        adapter = FakeChatAdapter()
        config = TextConfig(
            default_model="default",
            temperature=0.4,
            operations={"summarize": OperationConfig(model="op-model", temperature=0.8)},
            adapter=adapter,
        )

        call_llm("p", operation="summarize", config=config)
        assert (adapter.last_request.model, adapter.last_request.temperature) == (
            "op-model",
            0.8,
        )

        call_llm("p", operation="summarize", model="explicit", temperature=0.0, config=config)
        assert (adapter.last_request.model, adapter.last_request.temperature) == (
            "explicit",
            0.0,
        )

        call_llm("p", operation="translate", config=config)
        assert (adapter.last_request.model, adapter.last_request.temperature) == (
            "default",
            0.4,
        )

    def test_schema_is_normalized(self, use_adapter):
        call_llm("p", schema={"name": "string", "age": int})

        schema = use_adapter.last_request.schema
        assert isinstance(schema, SchemaSpec)
        assert schema.field_names == ("name", "age")
        assert schema["age"].type == "number"

    def test_no_schema_means_plain_request(self, use_adapter):
        call_llm("p")
        assert use_adapter.last_request.schema is None

    def test_options_are_narrowed(self, use_adapter, caplog):
        caplog.set_level("DEBUG", logger="llm_text")
        call_llm("p", max_tokens=100, stop_sequences=["END"], unsupported_flag=True)

        options = use_adapter.last_request.options
        assert options == ChatOptions(max_tokens=100, stop_sequences=("END",))
        assert "unsupported_flag" in caplog.text

    def test_single_stop_sequence_string_is_kept_whole(self, use_adapter):
        call_llm("p", stop_sequences="END")
        assert use_adapter.last_request.options.stop_sequences == ("END",)

    def test_invalid_schema_raises_schema_error_before_call(self, use_adapter):
        with pytest.raises(SchemaError):
            call_llm("p", schema={})
        assert use_adapter.requests == []

    def test_transport_error_is_wrapped(self):
        original = ConnectionError("connection reset by peer")
        config = TextConfig(adapter=FailingChatAdapter(original))

        with pytest.raises(LlmCallError, match="LLM call failed") as exc_info:
            call_llm("p", operation="summarize", config=config)

        assert exc_info.value.__cause__ is original
        assert exc_info.value.operation == "summarize"
        assert exc_info.value.model == config.default_model

    def test_unreadable_response_is_wrapped(self, use_adapter):
        use_adapter.responses = [object()]
        with pytest.raises(LlmCallError) as exc_info:
            call_llm("p")
        assert isinstance(exc_info.value.__cause__, TypeError)


@pytest.mark.unit
class TestTransportErrorHandler:
    """Error classification for transport failures"""

    @pytest.mark.parametrize(
        "error, structured, expected",
        [
            (RuntimeError("429 RESOURCE_EXHAUSTED"), False, "rate limit or quota"),
            (ValueError("invalid JSON schema"), True, "structured output request rejected"),
            (RuntimeError("404 model not found"), False, "not found or unavailable"),
            (PermissionError("API key not valid"), False, "authentication rejected"),
            (RuntimeError("boom"), False, "LLM call failed during classify: boom"),
        ],
        ids=["quota", "schema", "not_found", "auth", "generic"],
    )
    def test_messages(self, error, structured, expected):
        handler = TransportErrorHandler()
        with pytest.raises(LlmCallError, match=expected) as exc_info:
            handler.handle_call_error(
                error, model="m", operation="classify", structured=structured
            )
        assert exc_info.value.__cause__ is error

    def test_schema_hint_only_for_structured_calls(self):
        with pytest.raises(LlmCallError) as exc_info:
            TransportErrorHandler().handle_call_error(ValueError("bad json"))
        assert "structured output" not in str(exc_info.value)


@pytest.mark.unit
class TestAdapters:
    """Adapter selection and the deterministic mock"""

    def test_explicit_adapter_wins(self):
        adapter = FakeChatAdapter()
        assert select_adapter(TextConfig(adapter=adapter, use_real_api=True)) is adapter

    def test_mock_by_default(self):
        assert isinstance(select_adapter(TextConfig()), MockChatAdapter)

    def test_mock_echoes_prompt(self):
        assert call_llm("hello there") == "echo: hello there"

    def test_mock_returns_schema_shaped_json(self):
        spec = normalize(
            {
                "label": {"type": "string", "enum": ["positive", "negative"]},
                "confidence": "number",
                "paid": "boolean",
                "tags": "array",
                "mapping": "object",
            }
        )
        request = ChatRequest(prompt="p", model="m", temperature=0.3, schema=spec)

        assert json.loads(MockChatAdapter().ask(request)) == {
            "label": "positive",
            "confidence": 0.0,
            "paid": False,
            "tags": [],
            "mapping": {},
        }

    def test_response_text_reads_text_attribute(self):
        response = MagicMock(spec=["text"])
        response.text = "via text"
        assert response_text(response) == "via text"


@pytest.mark.unit
class TestGeminiAdapter:
    """Translation of ChatRequests into Gemini calls"""

    def test_structured_request_config(self):
        from llm_text.client.gemini import GeminiChatAdapter

        client = MagicMock()
        client.models.generate_content.return_value.text = '{"label": "positive"}'
        adapter = GeminiChatAdapter(client=client)
        spec = normalize({"label": "string"})
        request = ChatRequest(
            prompt="classify this",
            model="gemini-2.0-flash",
            temperature=0.2,
            schema=spec,
            options=ChatOptions(instructions="be brief", max_tokens=50),
        )

        assert adapter.ask(request) == '{"label": "positive"}'

        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.0-flash"
        assert kwargs["contents"] == "classify this"
        config = kwargs["config"]
        assert config.temperature == 0.2
        assert config.system_instruction == "be brief"
        assert config.max_output_tokens == 50
        assert config.response_mime_type == "application/json"
        assert config.response_json_schema == spec.to_json_schema()

    def test_plain_request_config(self):
        from llm_text.client.gemini import GeminiChatAdapter

        client = MagicMock()
        client.models.generate_content.return_value.text = None
        adapter = GeminiChatAdapter(client=client)

        result = adapter.ask(ChatRequest(prompt="p", model="m", temperature=0.3))

        assert result == ""
        config = client.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "text/plain"
        assert config.response_json_schema is None
