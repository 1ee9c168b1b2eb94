# highlighter/syntax/structured.py
"""Highlight structured results in the output format a caller asked for."""

import json
import logging

import yaml

from .dispatcher import CandidateBlock, highlight_block
from .escaping import escape_html
from .fences import extract_code_fence, hint_for_format, normalize_format
from .json_tagger import highlight_json
from .markdown_tagger import highlight_markdown
from .yaml_tagger import highlight_yaml

logger = logging.getLogger(__name__)


def _markdown_scalar(value) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def to_markdown(data, depth: int = 0) -> str:
    """
    Render parsed data as a Markdown list.

    Mappings become ``- **key**: value`` items and sequences become ``- item``
    items; nested containers are indented two spaces per level. Strings are
    returned unchanged, other scalars as their JSON literal.
    """
    indent = "  " * depth
    if isinstance(data, dict):
        items = data.items()
    elif isinstance(data, (list, tuple)):
        items = ((None, value) for value in data)
    else:
        return _markdown_scalar(data)

    lines = []
    for key, value in items:
        prefix = f"{indent}- " if key is None else f"{indent}- **{key}**:"
        if isinstance(value, (dict, list, tuple)):
            lines.append(prefix.rstrip())
            nested = to_markdown(value, depth + 1)
            if nested:
                lines.append(nested)
        elif key is None:
            lines.append(prefix + _markdown_scalar(value))
        else:
            lines.append(f"{prefix} {_markdown_scalar(value)}")
    return "\n".join(lines)


def highlight_data(data, output_format: str = "json") -> str:
    """
    Serialize parsed data in ``output_format`` and return highlighted markup.

    Supported formats are json, yaml (yml) and markdown (md). Mappings and
    lists are rendered as a Markdown list for the markdown format. Any other
    format falls back to escaped, pretty-printed JSON without tags.

    Raises:
        TypeError: if ``data`` cannot be serialized as JSON
        yaml.YAMLError: if ``data`` cannot be represented as YAML
    """
    fmt = normalize_format(output_format)

    if fmt == "json":
        return highlight_json(data)
    if fmt == "yaml":
        return highlight_yaml(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
    if fmt == "markdown":
        return highlight_markdown(to_markdown(data))

    logger.debug(f"No highlighter for output format '{output_format}', using plain JSON")
    return escape_html(json.dumps(data, indent=2, ensure_ascii=False))


def highlight_text(text: str, output_format: str = "text") -> str:
    """
    Highlight a text response, honouring an enclosing code fence.

    The fence language wins over ``output_format``. Text in a format with no
    highlighter comes back escaped.
    """
    fence = extract_code_fence(text, default_format=output_format)
    hint = hint_for_format(fence.format)
    block = CandidateBlock(fence.text, frozenset([hint]) if hint else frozenset())
    highlight_block(block)
    return block.render()
