#!/usr/bin/env python3
"""CLI: Render a bracket-notation tree (or a Markdown document of trees) to SVG."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure the package is importable when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from lingtree.document import render_document
from lingtree.errors import ParseError
from lingtree.render import render_svg
from lingtree.tree.layout import iter_nodes, layout_tree
from lingtree.tree.movement import resolve_movement
from lingtree.tree.parser import parse_tree


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    p = Path(path)
    if not p.is_file():
        print(f"Error: {p} is not a file.", file=sys.stderr)
        sys.exit(1)
    return p.read_text(encoding="utf-8")


def _dump(source: str) -> None:
    """Print each node's geometry and the movement groups."""
    root = layout_tree(parse_tree(source.strip()))
    for n in iter_nodes(root):
        feats = " ".join(f"[{f}]" for f in n.features)
        print(
            f"{'  ' * n.depth}{n.display_label} {feats}".rstrip()
            + f"  x={n.x:g} y={n.y:g} w={n.width:g}"
        )
    groups = resolve_movement(root)
    if groups:
        print()
    for ident, group in groups.items():
        origin = group.origin.label if group.origin else "(none)"
        print(f"#{ident}: origin={origin} traces={len(group.traces)}")
        for extra in group.ignored_origins:
            print(f"  ignored origin: {extra.label}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a syntax tree to SVG")
    parser.add_argument("input", help="Tree source file, or - for stdin")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write output here instead of stdout",
    )
    parser.add_argument(
        "--document",
        action="store_true",
        help="Treat input as Markdown and expand {{tree: ...}} spans and ```tree blocks",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the laid-out tree and movement groups instead of SVG",
    )
    args = parser.parse_args()

    source = _read_input(args.input)

    try:
        if args.dump:
            _dump(source)
            return
        out = render_document(source) if args.document else render_svg(source)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        args.output.write_text(out, encoding="utf-8")
        print(f"Wrote {args.output}")
    else:
        print(out)


if __name__ == "__main__":
    main()
