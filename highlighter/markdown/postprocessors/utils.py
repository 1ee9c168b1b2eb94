"""Shared BeautifulSoup handling for postprocessors."""

from __future__ import annotations

from bs4 import BeautifulSoup

_SOUP_KEY = "__soup"
_SOUP_SOURCE_KEY = "__soup_source"


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Parse ``html`` once per render and keep the tree in ``context``.

    The cached tree is reused only while the HTML handed to the next
    postprocessor is exactly what the previous one produced from it.
    """
    soup = context.get(_SOUP_KEY)
    if soup is None or context.get(_SOUP_SOURCE_KEY) != html:
        soup = BeautifulSoup(html, "html.parser")
        context[_SOUP_KEY] = soup
        context[_SOUP_SOURCE_KEY] = html
    return soup


def soup_to_html(soup: BeautifulSoup, context: dict) -> str:
    """Serialise ``soup`` and remember the result as the cached source."""
    html = str(soup)
    context[_SOUP_KEY] = soup
    context[_SOUP_SOURCE_KEY] = html
    return html
