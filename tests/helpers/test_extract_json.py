"""Tests for extract_json helper."""

import json
import logging

import pytest

from json_extractor.core.domain import FencedJsonError
from json_extractor.helpers.json import extract_json


class TestFencedBlocks:
    """Test suite for extraction from markdown code fences."""

    def test_markdown_fenced_json(self):
        """Test extraction of JSON from a json-tagged code fence."""
        text = '```json\n{"spec_file": "specs/bar.md", "slug": "bar"}\n```'
        assert extract_json(text) == {"spec_file": "specs/bar.md", "slug": "bar"}

    def test_untagged_fence(self):
        """Test that the json language tag is optional."""
        assert extract_json('```\n{"a": 1}\n```') == {"a": 1}

    def test_fence_without_whitespace(self):
        """Test that whitespace around the fenced body is optional."""
        assert extract_json('```json{"a":1}```') == {"a": 1}

    def test_fenced_block_inside_prose(self):
        """Test extraction of a fenced block surrounded by explanation."""
        text = 'Sure! Here it is:\n\n```json\n{"name": "x", "tags": ["a", "b"]}\n```\n\nLet me know.'
        assert extract_json(text) == {"name": "x", "tags": ["a", "b"]}

    def test_nested_object_in_fence(self):
        """Test that nested objects are captured when the fence follows the outer brace."""
        text = '```json\n{"outer": {"inner": {"deep": true}}, "n": 1}\n```'
        assert extract_json(text) == {"outer": {"inner": {"deep": True}}, "n": 1}

    def test_first_fenced_block_wins(self):
        """Test that only the first fenced block is used."""
        text = '```json\n{"a": 1}\n```\n\n```json\n{"b": 2}\n```'
        assert extract_json(text) == {"a": 1}

    def test_fenced_block_preferred_over_earlier_braces(self):
        """Test that a fenced candidate wins over braces appearing before it."""
        text = 'Draft: {"draft": true}\nFinal:\n```json\n{"final": true}\n```'
        assert extract_json(text) == {"final": True}

    def test_round_trip_through_fence(self):
        """Test that a serialized object wrapped in a fence extracts deep-equal."""
        obj = {"id": 7, "name": "café", "items": [{"k": None}, 1.5, "x"], "flags": {"on": False}}
        assert extract_json("```json\n" + json.dumps(obj) + "\n```") == obj


class TestFencedParseFailure:
    """Test suite for malformed fenced blocks, which fail hard."""

    def test_invalid_fenced_json_raises(self):
        """Test that unquoted keys inside a fence raise FencedJsonError."""
        with pytest.raises(FencedJsonError, match="Invalid JSON in fenced block"):
            extract_json("```json\n{a:1}\n```")

    def test_fenced_error_is_value_error(self):
        """Test that FencedJsonError can be caught as ValueError."""
        with pytest.raises(ValueError):
            extract_json("```json\n{a:1}\n```")

    def test_invalid_fence_does_not_fall_back(self):
        """Test that a valid unfenced object does not rescue a malformed fence."""
        text = 'Valid: {"ok": true}\n```json\n{"broken": }\n```'
        with pytest.raises(FencedJsonError):
            extract_json(text)

    def test_lazy_match_truncates_at_first_closing_fence(self):
        """Test that the fenced body ends at the first brace followed by a fence, not a balanced brace."""
        text = '```json\n{"a": "}\n```", "b": 1}\n```'
        with pytest.raises(FencedJsonError):
            extract_json(text)

    def test_nan_in_fence_raises(self):
        """Test that non-standard constants are rejected inside a fence."""
        with pytest.raises(FencedJsonError, match="NaN"):
            extract_json('```json\n{"a": NaN}\n```')

    def test_cause_is_preserved(self):
        """Test that the decoder error is chained onto FencedJsonError."""
        with pytest.raises(FencedJsonError) as excinfo:
            extract_json('```json\n{"a": 1,}\n```')
        assert isinstance(excinfo.value.__cause__, ValueError)


class TestUnfencedFallback:
    """Test suite for the first-brace to last-brace fallback."""

    def test_clean_json(self):
        """Test extraction of clean JSON object without surrounding text."""
        text = '{"spec_file": "specs/foo.md", "slug": "foo"}'
        assert extract_json(text) == {"spec_file": "specs/foo.md", "slug": "foo"}

    def test_prose_surrounding_json(self):
        """Test extraction of JSON object embedded in prose text."""
        text = 'Here is the result:\n{"spec_file": "specs/baz.md", "slug": "baz"}\nDone.'
        assert extract_json(text) == {"spec_file": "specs/baz.md", "slug": "baz"}

    def test_prefix_and_suffix(self):
        """Test that the span from first to last brace is the object itself."""
        assert extract_json('prefix {"a":1} suffix') == {"a": 1}

    def test_nested_json_objects(self):
        """Test extraction of nested JSON object structures."""
        text = '{"outer": {"inner": "value"}, "key": "val"}'
        assert extract_json(text) == {"outer": {"inner": "value"}, "key": "val"}

    def test_over_wide_span_returns_none(self):
        """Test that two objects produce an unparseable span and no result."""
        assert extract_json('{a:1} and {"b":2}') is None

    def test_trailing_braces_in_prose_return_none(self):
        """Test that a brace in trailing prose widens the span past the object."""
        assert extract_json('Result: {"a": 1} (see {note})') is None

    def test_invalid_json_returns_none(self):
        """Test that malformed unfenced JSON yields None instead of raising."""
        assert extract_json("some text { not: valid json } more text") is None

    def test_nan_outside_fence_returns_none(self):
        """Test that non-standard constants make the fallback candidate invalid."""
        assert extract_json('{"a": NaN}') is None

    def test_non_json_fence_uses_fallback(self):
        """Test that a fence whose body is not an object leaves the fallback in play."""
        text = '```python\nprint("hi")\n```\nOutput: {"printed": "hi"}'
        assert extract_json(text) == {"printed": "hi"}

    def test_fallback_failure_is_logged_at_debug(self, caplog):
        """Test that a swallowed fallback failure still leaves a DEBUG record."""
        with caplog.at_level(logging.DEBUG, logger="json_extractor.helpers.json"):
            extract_json("{not json}")
        assert "not valid JSON" in caplog.text


class TestNoCandidate:
    """Test suite for inputs without any object candidate."""

    def test_no_braces_returns_none(self):
        """Test that text without JSON braces returns None."""
        assert extract_json("no json here") is None

    def test_empty_string_returns_none(self):
        """Test that empty string returns None."""
        assert extract_json("") is None

    def test_reversed_braces_return_none(self):
        """Test that a closing brace before any opening brace is not a candidate."""
        assert extract_json("} then {") is None

    def test_top_level_array_is_not_extracted(self):
        """Test that a fenced array is never returned."""
        assert extract_json("```json\n[1, 2, 3]\n```") is None

    def test_scalar_values_are_not_extracted(self):
        """Test that bare strings and numbers are never returned."""
        assert extract_json('"just a string"') is None
        assert extract_json("42") is None


class TestPurity:
    def test_repeated_calls_return_equal_results(self):
        """Test that extracting twice from the same text gives identical results."""
        text = 'Answer:\n```json\n{"x": [1, 2, {"y": null}]}\n```'
        assert extract_json(text) == extract_json(text)

    def test_result_is_not_shared_between_calls(self):
        """Test that mutating one result does not affect the next."""
        text = '{"a": [1]}'
        first = extract_json(text)
        first["a"].append(2)
        assert extract_json(text) == {"a": [1]}
