# highlighter/markdown/config.py

from ..conf import get_setting

# Pandoc markdown extensions used for documents that embed highlightable blocks
MARKDOWN_EXTENSIONS = [
    "fenced_code_blocks",
    "fenced_code_attributes",
    "backtick_code_blocks",
    "pipe_tables",
    "raw_html",
    "smart",
]


def get_pandoc_config():
    """
    Configuration for pypandoc rendering.

    Pandoc's own syntax highlighting is switched off: fenced blocks come out
    as plain ``<pre class="json"><code>`` and are highlighted by the
    syntax_highlighter postprocessor instead.
    """
    return {
        "format": "markdown+" + "+".join(MARKDOWN_EXTENSIONS),
        "extra_args": [
            "--no-highlight",
            *get_setting("PANDOC_EXTRA_ARGS"),
        ],
    }
