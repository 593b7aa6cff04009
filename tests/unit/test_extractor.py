import json

import pytest

from llm_text.response import clean_json_response, find_balanced_object, strip_code_fence


@pytest.mark.unit
class TestCleanJsonResponse:
    """JSON recovery from raw model output"""

    def test_clean_object_is_returned_unchanged(self):
        """Should return text that already starts with '{' as-is"""
        assert clean_json_response('{"a": 1}') == '{"a": 1}'

    def test_strips_json_code_fence(self):
        """Should remove a ```json fence around the object"""
        response = '```json\n{"label": "positive"}\n```'
        assert clean_json_response(response) == '{"label": "positive"}'

    def test_strips_surrounding_whitespace(self):
        assert clean_json_response('  \n{"a": 1}\n  ') == '{"a": 1}'

    def test_extracts_object_with_nested_braces_from_prose(self):
        """Should slice the full balanced object, not stop at the first '}'"""
        response = 'Here you go: {"a": {"b": 1}, "c": 2} done.'
        cleaned = clean_json_response(response)

        assert cleaned == '{"a": {"b": 1}, "c": 2}'
        assert json.loads(cleaned) == {"a": {"b": 1}, "c": 2}

    def test_extracts_first_object_when_several_present(self):
        response = 'first {"x": 1} then {"y": 2}'
        assert clean_json_response(response) == '{"x": 1}'

    def test_unbalanced_braces_return_input_unchanged(self):
        """Should leave text alone when no balanced object exists"""
        response = "prefix {not closed"
        assert clean_json_response(response) == response

    def test_text_without_braces_is_unchanged(self):
        assert clean_json_response("not json at all") == "not json at all"

    def test_fenced_object_inside_prose(self):
        response = 'Result:\n```json\n{"items": [{"k": "v"}]}\n```\nThanks!'
        assert json.loads(clean_json_response(response)) == {"items": [{"k": "v"}]}

    def test_rejects_non_string_input(self):
        with pytest.raises(TypeError, match="must be a str"):
            clean_json_response(None)


@pytest.mark.unit
class TestBraceScanning:
    """Low-level helpers used by clean_json_response"""

    def test_find_balanced_object_returns_slice_bounds(self):
        text = 'ab {"k": {"n": 1}} cd'
        begin, end = find_balanced_object(text)
        assert text[begin:end] == '{"k": {"n": 1}}'

    def test_find_balanced_object_respects_start(self):
        text = '{"a": 1} {"b": 2}'
        begin, end = find_balanced_object(text, start=1)
        assert text[begin:end] == '{"b": 2}'

    @pytest.mark.parametrize("text", ["no braces", "{ open only", "{{ }"])
    def test_find_balanced_object_returns_none_when_unbalanced(self, text):
        assert find_balanced_object(text) is None

    def test_strip_code_fence_leaves_plain_text(self):
        assert strip_code_fence("  plain  ") == "plain"
