"""Expand tree markup embedded in a Markdown document.

Two forms are recognised::

    Inline: {{tree: [VP [V see] [DP her]]}}

    Block:
    ```tree
    [CP [DP#wh what] [C' [C did] [TP [DP you] [VP [V see] t#wh]]]]
    ```

Each tree is rendered independently; a tree that fails to parse is replaced
by an error marker and does not affect the others.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass

from lingtree.render import render

logger = logging.getLogger(__name__)

_INLINE_RE = re.compile(r"\{\{tree:\s*([\s\S]+?)\s*\}\}")
_BLOCK_RE = re.compile(r"^```tree[ \t]*\n([\s\S]*?)^```[ \t]*$", re.MULTILINE)

INLINE_ERROR = '<span class="ling-tree-error">[tree parse error]</span>'


@dataclass
class TreeSource:
    kind: str  # "inline" or "block"
    source: str
    start: int
    end: int


def find_tree_sources(text: str) -> list[TreeSource]:
    """Locate tree markup in document order.

    Blocks win over inline spans: an inline match that overlaps a block is
    dropped and scanning resumes after that block.
    """
    blocks = [
        TreeSource("block", m.group(1), m.start(), m.end())
        for m in _BLOCK_RE.finditer(text)
    ]
    found = list(blocks)
    pos = 0
    while True:
        m = _INLINE_RE.search(text, pos)
        if m is None:
            break
        hit = next((b for b in blocks if m.start() < b.end and b.start < m.end()), None)
        if hit is not None:
            pos = hit.end
            continue
        found.append(TreeSource("inline", m.group(1), m.start(), m.end()))
        pos = m.end()
    found.sort(key=lambda s: s.start)
    return found


def _replacement(src: TreeSource) -> str:
    if src.kind == "inline":
        result = render(src.source, extra_class="ling-tree-inline")
        return result.svg if result.ok else INLINE_ERROR
    result = render(src.source)
    if result.ok:
        return result.svg
    return f"<pre>Tree parse error: {html.escape(result.error)}</pre>"


def render_document(text: str) -> str:
    """Return ``text`` with every tree replaced by its SVG or an error marker."""
    sources = find_tree_sources(text)
    parts = []
    pos = 0
    for src in sources:
        parts.append(text[pos:src.start])
        parts.append(_replacement(src))
        pos = src.end
    parts.append(text[pos:])
    logger.debug("Rendered document: %d tree(s)", len(sources))
    return "".join(parts)
