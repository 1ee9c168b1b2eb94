"""Unit tests for JSON highlighting."""

import json

import pytest

from highlighter.syntax.escaping import escape_html
from highlighter.syntax.json_tagger import highlight_json
from tests.conftest import strip_tags


class TestHighlightJson:
    """Tests for highlight_json."""

    def test_each_token_class(self) -> None:
        """Keys, numbers, strings, booleans and nulls get their own class."""
        result = highlight_json({"a": 1, "b": "x", "c": True, "d": None})
        assert '<span class="key">"a":</span>' in result
        assert '<span class="number">1</span>' in result
        assert '<span class="key">"b":</span>' in result
        assert '<span class="string">"x"</span>' in result
        assert '<span class="boolean">true</span>' in result
        assert '<span class="null">null</span>' in result

    def test_serialized_with_two_space_indent(self) -> None:
        """Non-string input is pretty-printed before tagging."""
        result = highlight_json({"a": [1]})
        assert strip_tags(result) == '{\n  "a": [\n    1\n  ]\n}'

    def test_string_input_used_as_is(self) -> None:
        """A string is treated as JSON text and not re-serialized."""
        result = highlight_json('{"a":1}')
        assert result == '{<span class="key">"a":</span><span class="number">1</span>}'

    def test_whitespace_before_colon_still_key(self) -> None:
        result = highlight_json('{"a" : false}')
        assert '<span class="key">"a" :</span>' in result
        assert '<span class="boolean">false</span>' in result

    def test_escaped_quotes_stay_in_one_string(self) -> None:
        """Escaped quotes do not end the string token."""
        result = highlight_json({"q": 'say "hi"'})
        assert '<span class="string">"say \\"hi\\""</span>' in result

    def test_unicode_escape_inside_string(self) -> None:
        result = highlight_json('["\\u00e9t\\u00e9"]')
        assert '<span class="string">"\\u00e9t\\u00e9"</span>' in result

    def test_digits_and_keywords_inside_strings_not_tagged(self) -> None:
        result = highlight_json({"id": "abc123 true null"})
        assert 'class="number"' not in result
        assert 'class="boolean"' not in result
        assert 'class="null"' not in result

    def test_number_grammar(self) -> None:
        """Negative, fractional and exponent forms are one number token."""
        result = highlight_json("[-1.5e-3, 2E+10, 0]")
        assert '<span class="number">-1.5e-3</span>' in result
        assert '<span class="number">2E+10</span>' in result
        assert '<span class="number">0</span>' in result

    def test_markup_in_values_escaped(self) -> None:
        result = highlight_json({"html": "<b>&"})
        assert '<span class="string">"&lt;b&gt;&amp;"</span>' in result

    def test_non_ascii_kept(self) -> None:
        result = highlight_json({"name": "Zoë"})
        assert '<span class="string">"Zoë"</span>' in result

    @pytest.mark.parametrize(
        "value",
        [
            {"a": 1, "b": "x", "c": True, "d": None},
            [1, -2.5, 3e20, "four", [], {}],
            {"nested": {"list": [{"k": "v"}, None, False]}, "html": "<i>&amp;</i>"},
            {"quote": 'a "b" c', "path": "C:\\temp", "emoji": "😀"},
            "just a string",
            42,
        ],
    )
    def test_stripping_tags_restores_serialization(self, value) -> None:
        """Only whole tokens are wrapped; the text itself is unchanged."""
        serialized = json.dumps(value, indent=2, ensure_ascii=False)
        assert strip_tags(highlight_json(value)) == escape_html(serialized)
