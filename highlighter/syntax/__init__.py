# highlighter/syntax/__init__.py

from .dispatcher import (
    TAGGERS,
    CandidateBlock,
    HighlightResult,
    detect_format,
    highlight_block,
    highlight_blocks,
)
from .escaping import escape_html
from .fences import CodeFence, extract_code_fence, hint_for_format
from .json_tagger import highlight_json
from .markdown_tagger import highlight_markdown
from .structured import highlight_data, highlight_text
from .yaml_tagger import highlight_yaml

__all__ = (
    "TAGGERS",
    "CandidateBlock",
    "CodeFence",
    "HighlightResult",
    "detect_format",
    "escape_html",
    "extract_code_fence",
    "highlight_block",
    "highlight_blocks",
    "highlight_data",
    "highlight_json",
    "highlight_markdown",
    "highlight_text",
    "highlight_yaml",
    "hint_for_format",
)
