"""Bracket-notation syntax trees: parse, lay out, resolve movement, draw."""

from lingtree.tree.layout import Positioned, layout_tree, tree_extent
from lingtree.tree.movement import TRACE_LABEL, MovementGroup, resolve_movement
from lingtree.tree.parser import Feature, Node, parse_tree
from lingtree.tree.scene import Scene, emit_scene
from lingtree.tree.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "TRACE_LABEL",
    "Feature",
    "MovementGroup",
    "Node",
    "Positioned",
    "Scene",
    "Token",
    "TokenKind",
    "emit_scene",
    "layout_tree",
    "parse_tree",
    "resolve_movement",
    "tokenize",
    "tree_extent",
]
