"""Two-pass tree layout: size every box, then place subtrees left to right.

Each subtree owns a horizontal interval as wide as the larger of its own box
and its children's block. Parents are centred over their children, and
sibling intervals never overlap, so boxes at any depth stay apart.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from lingtree.tree.parser import Feature, Node

logger = logging.getLogger(__name__)

MIN_WIDTH = 36
NODE_HEIGHT = 22
H_GAP = 14
V_GAP = 28
CHAR_WIDTH = 8
LABEL_PADDING = 12


@dataclass
class Positioned:
    label: str
    features: list[Feature]
    id: str | None
    children: list[Positioned] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = NODE_HEIGHT
    offset: float = 0.0  # box x relative to the start of the children block; negative when the box is wider
    span: float = 0.0  # width of the whole subtree
    depth: int = 0
    parent: Positioned | None = field(default=None, repr=False, compare=False)

    @property
    def display_label(self) -> str:
        if not self.id:
            return self.label
        return f"{self.label}#{self.id}"

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height


def measure(label: str, features: list[Feature]) -> float:
    """Estimate a box width from character counts."""
    text = label
    if features:
        text += " [" + ",".join(str(f) for f in features) + "]"
    return max(MIN_WIDTH, CHAR_WIDTH * len(text) + LABEL_PADDING)


def iter_nodes(root: Positioned) -> Iterator[Positioned]:
    """Yield nodes in document (pre-order) order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _clone(root: Node) -> Positioned:
    def make(node: Node, parent: Positioned | None) -> Positioned:
        p = Positioned(
            label=node.label,
            features=list(node.features),
            id=node.id,
            parent=parent,
            depth=parent.depth + 1 if parent is not None else 0,
        )
        p.width = measure(p.display_label, p.features)
        return p

    proot = make(root, None)
    stack = [(root, proot)]
    while stack:
        node, pos = stack.pop()
        for child in node.children:
            pc = make(child, pos)
            pos.children.append(pc)
            stack.append((child, pc))
    return proot


def _block_width(node: Positioned) -> float:
    if not node.children:
        return 0.0
    return sum(c.span for c in node.children) + H_GAP * (len(node.children) - 1)


def _size(root: Positioned) -> None:
    # Reversed pre-order visits every child before its parent.
    for node in reversed(list(iter_nodes(root))):
        if not node.children:
            node.offset = 0.0
            node.span = node.width
            continue
        block = _block_width(node)
        node.offset = block / 2 - node.width / 2
        node.span = max(node.width, block)


def _place(root: Positioned) -> None:
    stack = [(root, 0.0)]
    while stack:
        node, left = stack.pop()
        node.x = left + max(node.offset, 0.0)
        node.y = node.depth * (NODE_HEIGHT + V_GAP)
        cursor = left + max(-node.offset, 0.0)
        for child in node.children:
            stack.append((child, cursor))
            cursor += child.span + H_GAP


def _normalize(root: Positioned) -> None:
    min_x = min(n.x for n in iter_nodes(root))
    for n in iter_nodes(root):
        n.x -= min_x


def tree_extent(root: Positioned) -> tuple[float, float]:
    """Return ``(width, height)`` of the laid-out diagram."""
    width = max(n.x + n.width for n in iter_nodes(root))
    height = max(n.y + n.height for n in iter_nodes(root))
    return width, height


def layout_tree(root: Node) -> Positioned:
    """Clone ``root`` into a :class:`Positioned` tree with box geometry."""
    proot = _clone(root)
    _size(proot)
    _place(proot)
    _normalize(proot)
    logger.debug("Laid out tree: extent %.0fx%.0f", *tree_extent(proot))
    return proot
