# highlighter/markdown/postprocessors/syntax_highlighter.py
"""
Postprocessor that syntax-highlights JSON, YAML and Markdown blocks.

This postprocessor:
- Finds every <pre> element in the rendered HTML
- Reads format hints from the classes of the <pre> and of a single <code> child
  (highlight-json, highlight-yaml/yml, highlight-markdown/md, and fence
  language classes such as "json" when enabled)
- Replaces the block contents with tagged markup on success
- Adds a marker class so a block is never highlighted twice
- Leaves blocks without a hint, or with broken JSON, exactly as they were

Usage in HTML:
    <pre class="highlight-json">{"status": "ok"}</pre>

    <pre><code class="highlight-yaml">name: "Alice"</code></pre>

Usage in Markdown (rendered by pandoc):
    ```json
    {"status": "ok"}
    ```
"""

import logging
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag

from ...conf import get_setting
from ...syntax import CandidateBlock, highlight_blocks
from .utils import get_shared_soup, soup_to_html

logger = logging.getLogger(__name__)


def _get_classes(element: Tag) -> List[str]:
    classes = element.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    return list(classes)


def _content_element(pre: Tag) -> Tag:
    """
    Return the element whose contents get replaced.

    That is the <code> child when it is the only element inside the <pre>
    (ignoring whitespace), otherwise the <pre> itself.
    """
    children = [
        child
        for child in pre.children
        if not (isinstance(child, NavigableString) and not child.strip())
    ]
    if len(children) == 1 and isinstance(children[0], Tag) and children[0].name == "code":
        return children[0]
    return pre


def collect_candidate_blocks(
    soup: BeautifulSoup, mark_class: Optional[str] = None
) -> List[Tuple[Tag, Tag, CandidateBlock]]:
    """
    Find the <pre> blocks that may be highlighted.

    Returns:
        (pre, content element, CandidateBlock) triples in document order
    """
    candidates = []
    for pre in soup.find_all("pre"):
        pre_classes = _get_classes(pre)
        if mark_class and mark_class in pre_classes:
            continue

        content = _content_element(pre)
        hints = set(pre_classes)
        if content is not pre:
            hints.update(_get_classes(content))

        candidates.append((pre, content, CandidateBlock(pre.get_text(), frozenset(hints))))
    return candidates


def syntax_highlighter(html: str, context: dict, mark_class: Optional[str] = None) -> str:
    """
    Highlight every hinted <pre> block in ``html``.

    Args:
        html: HTML string to process
        context: Render context; receives the per-block results under
            "highlight_results"
        mark_class: Class added to highlighted <pre> elements (None to disable)

    Returns:
        Processed HTML
    """
    soup = get_shared_soup(html, context)

    candidates = collect_candidate_blocks(soup, mark_class)
    results = highlight_blocks(block for _, _, block in candidates)
    context["highlight_results"] = results

    for (pre, content, block), result in zip(candidates, results):
        if not result.ok:
            continue

        content.clear()
        content.append(BeautifulSoup(block.markup, "html.parser"))

        if mark_class:
            pre["class"] = _get_classes(pre) + [mark_class]

    highlighted = sum(1 for result in results if result.ok)
    logger.debug(f"Highlighted {highlighted} of {len(results)} <pre> blocks")

    return soup_to_html(soup, context)


def syntax_highlighter_default(html: str, context: dict) -> str:
    """
    Default configuration for syntax_highlighter.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return syntax_highlighter(
        html,
        context,
        mark_class=get_setting("MARK_HIGHLIGHTED_CLASS"),
    )
