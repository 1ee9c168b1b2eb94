# highlighter/conf.py
"""
Settings for the highlighter app.

Projects override any of the defaults below with a ``HIGHLIGHTER`` dict in
their Django settings::

    HIGHLIGHTER = {
        "LANGUAGE_CLASS_HINTS": False,
        "HINT_CLASSES": {"highlight-json": "json", "jsonblock": "json"},
    }

Outside a configured Django project the defaults are used as-is.
"""

from django.conf import settings

DEFAULTS = {
    # Explicit hint classes on <pre>/<code> elements and the format they declare
    "HINT_CLASSES": {
        "highlight-json": "json",
        "highlight-yaml": "yaml",
        "highlight-yml": "yaml",
        "highlight-markdown": "markdown",
        "highlight-md": "markdown",
    },
    # Also accept fence language classes emitted by pandoc ("json", "language-yaml", ...)
    "LANGUAGE_CLASS_HINTS": True,
    # Class added to blocks that were highlighted, so a block is visited once
    "MARK_HIGHLIGHTED_CLASS": "highlighted",
    # Appended to the pandoc command line by the markdown renderer
    "PANDOC_EXTRA_ARGS": [],
}

LANGUAGE_CLASSES = {
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "markdown": "markdown",
    "md": "markdown",
}


def get_setting(name):
    """Return a highlighter setting, falling back to DEFAULTS."""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown highlighter setting: {name}")

    overrides = {}
    if settings.configured:
        overrides = getattr(settings, "HIGHLIGHTER", None) or {}

    return overrides.get(name, DEFAULTS[name])


def get_hint_classes() -> dict:
    """Full hint vocabulary (class name -> format) in effect right now."""
    hints = dict(get_setting("HINT_CLASSES"))
    if get_setting("LANGUAGE_CLASS_HINTS"):
        for language, fmt in LANGUAGE_CLASSES.items():
            hints.setdefault(language, fmt)
            hints.setdefault(f"language-{language}", fmt)
    return hints
