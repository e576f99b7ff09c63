"""lingtree — render bracket-notation syntax trees with movement arcs."""

from lingtree.errors import ParseError
from lingtree.render import RenderResult, render, render_svg

__all__ = ["ParseError", "RenderResult", "render", "render_svg"]
