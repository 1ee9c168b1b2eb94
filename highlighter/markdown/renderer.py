# highlighter/markdown/renderer.py

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors


def render_markdown(text, context=None):
    """
    Render a markdown document to HTML and highlight its code blocks.

    Args:
        text: Raw markdown text
        context: Optional dict shared by the postprocessors
    """
    context = context or {}

    pandoc_config = get_pandoc_config()

    html = pypandoc.convert_text(
        text,
        to="html5",
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
    )

    return apply_postprocessors(html, context)
