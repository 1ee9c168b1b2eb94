# highlighter/syntax/yaml_tagger.py
"""
Line-oriented YAML syntax highlighting.

No document tree is built. Each pass is a regex rewrite over the output of the
previous one, in this order:

1. HTML-escape the text
2. double-quoted strings
3. keys at the start of a line (after optional indentation)
4. numbers
5. booleans (case-insensitive)
6. null and ``~`` (case-insensitive)
7. comments, from ``#`` to the end of the line

The markup inserted by one pass contains no digits, keywords, ``~`` or ``#``,
so later passes never match inside it. A ``#`` inside a quoted string still
starts a comment; the passes are not quote-aware.
"""

import re

from .escaping import escape_html

STRING_PATTERN = re.compile(r'"[^"]*"')
KEY_PATTERN = re.compile(r"^([ \t]*[a-zA-Z0-9_-]+:)(.*)$", re.MULTILINE)
NUMBER_PATTERN = re.compile(r"\b\d+(?:\.\d+)?\b")
BOOLEAN_PATTERN = re.compile(r"\b(?:true|false)\b", re.IGNORECASE)
NULL_PATTERN = re.compile(r"\bnull\b|(?<!\S)~(?!\S)", re.IGNORECASE)
COMMENT_PATTERN = re.compile(r"#.*$", re.MULTILINE)


def _span(css_class):
    return lambda match: f'<span class="{css_class}">{match.group(0)}</span>'


def _wrap_key(match) -> str:
    key, rest = match.group(1), match.group(2)
    return f'<b class="key">{key}</b>{rest}'


def _wrap_comment(match) -> str:
    return f'<i class="comment">{match.group(0)}</i>'


YAML_PASSES = [
    (STRING_PATTERN, _span("string")),
    (KEY_PATTERN, _wrap_key),
    (NUMBER_PATTERN, _span("number")),
    (BOOLEAN_PATTERN, _span("boolean")),
    (NULL_PATTERN, _span("null")),
    (COMMENT_PATTERN, _wrap_comment),
]


def highlight_yaml(text: str) -> str:
    """Return highlighted markup for YAML-shaped text. Never raises on bad YAML."""
    text = escape_html(text)
    for pattern, replacement in YAML_PASSES:
        text = pattern.sub(replacement, text)
    return text
