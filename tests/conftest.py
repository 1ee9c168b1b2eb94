"""Shared pytest fixtures for highlighter tests."""

from __future__ import annotations

import re

import pypandoc
import pytest

TAG_PATTERN = re.compile(r"</?[a-z][a-z0-9]*(?:\s[^>]*)?>")


def strip_tags(markup: str) -> str:
    """Remove every element tag, keeping text and entities."""
    return TAG_PATTERN.sub("", markup)


def _has_pandoc() -> bool:
    """Check if a pandoc binary is reachable by pypandoc."""
    try:
        pypandoc.get_pandoc_version()
        return True
    except OSError:
        return False


requires_pandoc = pytest.mark.skipif(not _has_pandoc(), reason="pandoc not installed")


@pytest.fixture
def render_context() -> dict:
    """Fresh postprocessor context for each test."""
    return {}
