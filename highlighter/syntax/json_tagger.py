# highlighter/syntax/json_tagger.py
"""
JSON syntax highlighting.

The value is serialized with two-space indentation and then classified in a
single left-to-right regex scan. Strings are matched before bare words and
numbers, so digits and keywords inside strings are never tagged on their own.
"""

import json
import re

from .escaping import escape_html

JSON_TOKEN_PATTERN = re.compile(
    r'(?P<string>"(?:\\u[a-zA-Z0-9]{4}|\\[^u]|[^\\"])*")(?P<colon>\s*:)?'
    r"|\b(?P<word>true|false|null)\b"
    r"|-?\d+(?:\.\d*)?(?:[eE][+\-]?\d+)?"
)


def _classify(match) -> str:
    if match.group("string") is not None:
        return "key" if match.group("colon") is not None else "string"
    word = match.group("word")
    if word == "null":
        return "null"
    if word is not None:
        return "boolean"
    return "number"


def _wrap_token(match) -> str:
    return f'<span class="{_classify(match)}">{match.group(0)}</span>'


def highlight_json(value) -> str:
    """
    Return highlighted markup for a JSON value.

    Args:
        value: Parsed JSON data, or a string already holding valid JSON text

    Returns:
        Escaped JSON text with keys, strings, numbers, booleans and nulls
        wrapped in ``<span class="...">`` elements
    """
    if not isinstance(value, str):
        value = json.dumps(value, indent=2, ensure_ascii=False)

    return JSON_TOKEN_PATTERN.sub(_wrap_token, escape_html(value))
