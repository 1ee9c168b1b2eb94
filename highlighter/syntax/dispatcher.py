# highlighter/syntax/dispatcher.py
"""
Pick a tagger for each candidate block and apply it.

A block declares its format through hint classes (``highlight-json``,
``highlight-yaml`` ...). JSON additionally has to look like JSON: the trimmed
text must start with ``{`` or ``[`` and parse. YAML and Markdown are tagged
unconditionally. Blocks are independent: a failure is recorded on that
block's result and the batch carries on.
"""

import json
import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from ..conf import get_hint_classes
from .escaping import escape_html
from .json_tagger import highlight_json
from .markdown_tagger import highlight_markdown
from .yaml_tagger import highlight_yaml

logger = logging.getLogger(__name__)

TAGGERS = {
    "json": highlight_json,
    "yaml": highlight_yaml,
    "markdown": highlight_markdown,
}

# Checked in this order when a block carries more than one hint
FORMAT_PRECEDENCE = ("json", "yaml", "markdown")

HIGHLIGHTED = "highlighted"
NO_HINT = "no-hint"
NOT_JSON = "not-json"
ERROR = "error"


@dataclass
class CandidateBlock:
    """Raw text considered for highlighting, plus its hints and final markup."""

    text: str
    hints: FrozenSet[str] = frozenset()
    markup: Optional[str] = None

    def render(self) -> str:
        """Highlighted markup if the block was tagged, else the escaped text."""
        if self.markup is not None:
            return self.markup
        return escape_html(self.text)


@dataclass(frozen=True)
class HighlightResult:
    status: str
    format: Optional[str] = None
    markup: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == HIGHLIGHTED


def declared_formats(hints: Iterable[str]) -> List[str]:
    """Formats declared by a set of hint classes, in precedence order."""
    vocabulary = get_hint_classes()
    declared = {vocabulary[hint] for hint in hints if hint in vocabulary}
    return [fmt for fmt in FORMAT_PRECEDENCE if fmt in declared]


def detect_format(hints: Iterable[str]) -> Optional[str]:
    """Return the strongest declared format for a set of hint classes, or None."""
    formats = declared_formats(hints)
    return formats[0] if formats else None


def looks_like_json(text: str) -> bool:
    return text.strip().startswith(("{", "["))


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are accepted by json.loads but are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def highlight_block(block: CandidateBlock) -> HighlightResult:
    """
    Highlight a single block in place.

    A JSON hint only applies when the text is shaped like a JSON object or
    array; otherwise the next declared format (YAML, then Markdown) is tried.
    Text shaped like JSON that fails to parse is left alone.

    ``block.markup`` is only assigned when tagging succeeds; every other
    outcome leaves the block untouched and is reported through the result.
    """
    formats = declared_formats(block.hints)
    if not formats:
        return HighlightResult(NO_HINT)

    if "json" in formats:
        if looks_like_json(block.text):
            try:
                value = json.loads(block.text, parse_constant=_reject_constant)
            except ValueError:
                logger.debug("Block hinted as JSON does not parse, leaving as is")
                return HighlightResult(NOT_JSON, "json")
            block.markup = TAGGERS["json"](value)
            return HighlightResult(HIGHLIGHTED, "json", block.markup)
        formats = formats[1:]
        if not formats:
            return HighlightResult(NOT_JSON, "json")

    fmt = formats[0]
    block.markup = TAGGERS[fmt](block.text)
    return HighlightResult(HIGHLIGHTED, fmt, block.markup)


def highlight_blocks(blocks: Iterable[CandidateBlock]) -> List[HighlightResult]:
    """
    Highlight every block independently.

    Returns one result per block, in input order. An unexpected error in one
    block is logged and reported as an ``error`` result; it never stops the
    remaining blocks.
    """
    results = []
    for block in blocks:
        try:
            result = highlight_block(block)
        except Exception as e:
            logger.error(f"Syntax highlighting failed for block: {e}", exc_info=True)
            result = HighlightResult(ERROR)
        results.append(result)
    return results
