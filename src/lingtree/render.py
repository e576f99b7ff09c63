"""Render one tree source string to SVG, or to a displayable error."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lingtree.errors import ParseError
from lingtree.tree.layout import layout_tree
from lingtree.tree.movement import resolve_movement
from lingtree.tree.parser import parse_tree
from lingtree.tree.scene import Scene, emit_scene
from lingtree.tree.svg import scene_to_svg

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    svg: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_scene(source: str) -> Scene:
    """Parse, lay out and resolve movement for ``source``.

    Raises:
        ParseError: If ``source`` is not a single well-formed tree.
    """
    positioned = layout_tree(parse_tree(source.strip()))
    return emit_scene(positioned, resolve_movement(positioned))


def render_svg(source: str, extra_class: str | None = None) -> str:
    """Render ``source`` to an ``<svg>`` string. Raises :class:`ParseError`."""
    return scene_to_svg(build_scene(source), extra_class)


def render(source: str, extra_class: str | None = None) -> RenderResult:
    """Like :func:`render_svg`, but reports parse errors in the result."""
    try:
        return RenderResult(svg=render_svg(source, extra_class))
    except ParseError as e:
        logger.debug("Tree parse error: %s", e)
        return RenderResult(error=str(e))
