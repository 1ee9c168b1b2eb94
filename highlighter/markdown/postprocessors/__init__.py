# highlighter/markdown/postprocessors/__init__.py

from .sanitizer import sanitize_html
from .syntax_highlighter import syntax_highlighter_default

POSTPROCESSORS = [
    syntax_highlighter_default,  # Tag JSON/YAML/Markdown <pre> blocks
    sanitize_html,  # Last, so the highlighted markup is sanitized too
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
