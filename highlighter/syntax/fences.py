# highlighter/syntax/fences.py
"""
Code fence handling for model responses.

Language models often wrap structured output in a Markdown code fence
(```` ```json ... ``` ````). The fence language tells us which highlighter to
use and the fence itself should not be displayed.
"""

import re
from typing import NamedTuple, Optional

FENCE_PATTERN = re.compile(r"\A```[ \t]*([\w+.-]*)[^\n]*\n(.*?)\n?[ \t]*```\Z", re.DOTALL)

FORMAT_ALIASES = {
    "yml": "yaml",
    "md": "markdown",
}

FORMAT_HINTS = {
    "json": "highlight-json",
    "yaml": "highlight-yaml",
    "markdown": "highlight-markdown",
}


class CodeFence(NamedTuple):
    format: str
    text: str


def normalize_format(name: str) -> str:
    name = name.strip().lower()
    return FORMAT_ALIASES.get(name, name)


def extract_code_fence(text: str, default_format: str = "text") -> CodeFence:
    """
    Strip a single enclosing code fence from ``text``.

    Args:
        text: Raw response text
        default_format: Format reported when there is no fence, or when the
            fence names no language

    Returns:
        CodeFence with the (normalized) fence language and the inner text.
        Text that is not one fenced block is returned unchanged.
    """
    match = FENCE_PATTERN.match(text.strip())
    if not match:
        return CodeFence(normalize_format(default_format), text)

    language = match.group(1) or default_format
    return CodeFence(normalize_format(language), match.group(2))


def hint_for_format(name: str) -> Optional[str]:
    """Hint class that makes the dispatcher pick ``name``, if it is supported."""
    return FORMAT_HINTS.get(normalize_format(name))
