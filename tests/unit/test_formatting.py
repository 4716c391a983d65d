"""Unit tests for JSON re-formatting and language detection."""

import pytest

from sibylline_unescape.errors import InvalidStructuredDataError, UnescapeError
from sibylline_unescape.formatting import detect_language, format_json


class TestFormatJson:
    def test_indent_two(self):
        result = format_json('{"name":"Alice","age":30}', indent=2)
        assert result == '{\n  "name": "Alice",\n  "age": 30\n}'

    def test_key_order_preserved(self):
        result = format_json('{"z": 1, "a": 2, "m": 3}', indent=2)
        assert result.index('"z"') < result.index('"a"') < result.index('"m"')

    def test_indent_four(self):
        result = format_json("[1]", indent=4)
        assert result == "[\n    1\n]"

    def test_compact(self):
        result = format_json('{ "a" : [1, 2],\n "b": {"c": null} }', indent=0)
        assert result == '{"a":[1,2],"b":{"c":null}}'

    def test_non_ascii_kept(self):
        assert format_json('{"city":"Zürich"}', indent=0) == '{"city":"Zürich"}'

    def test_invalid_json(self):
        with pytest.raises(InvalidStructuredDataError) as exc_info:
            format_json('{"a": 1,}')
        assert "Invalid JSON" in str(exc_info.value)
        assert exc_info.value.line == 1
        assert exc_info.value.column is not None

    def test_invalid_json_is_value_error(self):
        with pytest.raises(ValueError):
            format_json("not json")
        with pytest.raises(UnescapeError):
            format_json("")


class TestDetectLanguage:
    def test_json_object(self):
        assert detect_language('{"a": 1}') == "json"

    def test_json_array(self):
        assert detect_language("  [1, 2, 3]\n") == "json"

    def test_broken_json_not_json(self):
        assert detect_language('{"a": ') != "json"

    def test_xml(self):
        assert detect_language('<?xml version="1.0"?><root/>') == "xml"

    def test_html(self):
        assert detect_language("<div>hi</div>") == "xml"

    def test_yaml(self):
        assert detect_language("name: Alice\nrole: admin\n") == "yaml"

    def test_yaml_list(self):
        assert detect_language("- name: a\n- name: b\n") == "yaml"

    def test_plain_text(self):
        assert detect_language("Hello\nWorld\t!") == "plaintext"

    def test_scalar_yaml_is_plain(self):
        assert detect_language("just words") == "plaintext"

    def test_empty(self):
        assert detect_language("") == "plaintext"
