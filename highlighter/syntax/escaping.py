# highlighter/syntax/escaping.py
"""HTML escaping applied once to every raw block before tagging."""


def escape_html(text: str) -> str:
    """
    Replace ``&``, ``<`` and ``>`` with their entities.

    The ampersand goes first so the entities introduced for ``<`` and ``>``
    are not escaped again. Calling this twice double-escapes, so taggers call
    it exactly once per raw block.
    """
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_attribute(text: str) -> str:
    """Make already-escaped text safe inside a double-quoted attribute."""
    return text.replace('"', "&quot;")
