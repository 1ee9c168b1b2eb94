# highlighter/syntax/markdown_tagger.py
"""
Regex-based Markdown highlighting.

Markdown constructs are rewritten into tagged HTML by whole-document regex
passes. The pass order is the disambiguation policy:

- headers are whole lines and go first
- bold before italic, so ``**x**`` is not read as two italic delimiters
- images before links, since ``![alt](url)`` contains a link
- line-level constructs (list items, blockquotes, rules) last

Emphasis and code spans stay on one line and cannot start with whitespace, so
``* item`` lines and rule lines such as ``***`` are left for the line passes.
Bold text may contain single delimiters (``**a *b* c**``); the italic pass
then tags the inner span.
"""

import re
from typing import Callable, List, Tuple, Union

from .escaping import escape_attribute, escape_html

Replacement = Union[str, Callable[[re.Match], str]]


def _header(match: re.Match) -> str:
    level = len(match.group(1))
    return f'<h{level} class="markdown-header">{match.group(2)}</h{level}>'


def _image(match: re.Match) -> str:
    alt, src = escape_attribute(match.group(1)), escape_attribute(match.group(2))
    return f'<img src="{src}" alt="{alt}" class="markdown-image">'


def _link(match: re.Match) -> str:
    href = escape_attribute(match.group(2))
    return f'<a href="{href}" class="markdown-link">{match.group(1)}</a>'


MARKDOWN_PASSES: List[Tuple[re.Pattern, Replacement]] = [
    # Headers: "# Title" .. "###### Title"
    (re.compile(r"^(#{1,6})[ \t]+(.+)$", re.MULTILINE), _header),
    # Bold
    (re.compile(r"\*\*([^*\s](?:[^*\n]|\*(?!\*))*?)\*\*"), r'<strong class="markdown-bold">\1</strong>'),
    (re.compile(r"__([^_\s](?:[^_\n]|_(?!_))*?)__"), r'<strong class="markdown-bold">\1</strong>'),
    # Italic
    (re.compile(r"\*([^*\s][^*\n]*?)\*"), r'<em class="markdown-italic">\1</em>'),
    (re.compile(r"_([^_\s][^_\n]*?)_"), r'<em class="markdown-italic">\1</em>'),
    # Inline code
    (re.compile(r"`([^`\n]+?)`"), r'<code class="markdown-code">\1</code>'),
    # Images, then links
    (re.compile(r"!\[([^\]\n]*)\]\(([^)\n]+)\)"), _image),
    (re.compile(r"\[([^\]\n]+)\]\(([^)\n]+)\)"), _link),
    # Unordered and ordered list items, flat
    (re.compile(r"^[*-][ \t]+(.+)$", re.MULTILINE), r'<li class="markdown-list-item">\1</li>'),
    (re.compile(r"^\d+\.[ \t]+(.+)$", re.MULTILINE), r'<li class="markdown-list-item">\1</li>'),
    # Blockquotes (">" is already escaped at this point)
    (re.compile(r"^&gt;[ \t]+(.+)$", re.MULTILINE), r'<blockquote class="markdown-blockquote">\1</blockquote>'),
    # Horizontal rules
    (re.compile(r"^(?:\*{3,}|-{3,}|_{3,})$", re.MULTILINE), '<hr class="markdown-hr">'),
]


def highlight_markdown(text: str) -> str:
    """
    Return highlighted markup for Markdown text.

    Args:
        text: Raw Markdown

    Returns:
        Escaped text with headers, emphasis, code spans, images, links, list
        items, blockquotes and horizontal rules rewritten into HTML elements
        carrying ``markdown-*`` classes
    """
    text = escape_html(text)
    for pattern, replacement in MARKDOWN_PASSES:
        text = pattern.sub(replacement, text)
    return text
