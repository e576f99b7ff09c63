"""Turn a laid-out tree into drawing primitives.

The primitives are backend-neutral; :mod:`lingtree.tree.svg` writes them out
as SVG.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lingtree.tree.layout import Positioned, iter_nodes, tree_extent
from lingtree.tree.movement import MovementGroup, movement_arcs

logger = logging.getLogger(__name__)

ARC_PULL = 40
CORNER_RADIUS = 6
LABEL_INSET = 8
BASELINE = 15
BADGE_CHAR_WIDTH = 6
BADGE_PADDING = 10
SCENE_MARGIN = 8
ARROW_MARKER = "ling-tree-arrow"

Point = tuple[float, float]


@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float
    rx: float = CORNER_RADIUS
    css_class: str = "ling-tree-box"


@dataclass
class Text:
    x: float
    y: float
    text: str
    css_class: str = "ling-tree-label"


@dataclass
class Polyline:
    points: list[Point]
    css_class: str = "ling-tree-edge"


@dataclass
class Curve:
    start: Point
    control1: Point
    control2: Point
    end: Point
    marker: str | None = ARROW_MARKER
    css_class: str = "ling-tree-move"


@dataclass
class Scene:
    width: float
    height: float
    primitives: list[Rect | Text | Polyline | Curve] = field(default_factory=list)
    markers: list[str] = field(default_factory=list)


def edge_points(parent: Positioned, child: Positioned) -> list[Point]:
    """Right-angle path from the parent's bottom centre to the child's top centre."""
    x1, y1 = parent.center_x, parent.bottom
    x2, y2 = child.center_x, child.y
    mid = (y1 + y2) / 2
    return [(x1, y1), (x1, mid), (x2, mid), (x2, y2)]


def arc_points(origin: Positioned, trace: Positioned) -> tuple[Point, Point, Point, Point]:
    """Cubic curve from the origin's top centre down into the trace's bottom centre."""
    x1, y1 = origin.center_x, origin.y
    x2, y2 = trace.center_x, trace.bottom
    return (x1, y1), (x1, y1 - ARC_PULL), (x2, y2 + ARC_PULL), (x2, y2)


def badge_texts(node: Positioned) -> list[Text]:
    """Feature badges packed leftward from the box's right edge."""
    badges = []
    right = node.x + node.width - LABEL_INSET
    for feature in node.features:
        text = f"[{feature}]"
        right -= BADGE_CHAR_WIDTH * len(text) + BADGE_PADDING
        badges.append(Text(right, node.y + BASELINE, text, css_class="ling-tree-feature"))
    return badges


def emit_scene(root: Positioned, groups: dict[str, MovementGroup]) -> Scene:
    """Emit edges, node boxes and movement arcs, in that drawing order."""
    width, height = tree_extent(root)
    scene = Scene(width=width + SCENE_MARGIN, height=height + SCENE_MARGIN, markers=[ARROW_MARKER])
    nodes = list(iter_nodes(root))

    for node in nodes:
        for child in node.children:
            scene.primitives.append(Polyline(edge_points(node, child)))

    for node in nodes:
        scene.primitives.append(Rect(node.x, node.y, node.width, node.height))
        scene.primitives.append(Text(node.x + LABEL_INSET, node.y + BASELINE, node.display_label))
        scene.primitives.extend(badge_texts(node))

    arcs = movement_arcs(groups)
    for origin, trace in arcs:
        scene.primitives.append(Curve(*arc_points(origin, trace)))

    logger.debug("Emitted scene: %d nodes, %d arcs", len(nodes), len(arcs))
    return scene
