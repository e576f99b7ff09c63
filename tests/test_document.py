"""Tests for expanding tree markup inside documents."""

from __future__ import annotations

from lingtree.document import INLINE_ERROR, find_tree_sources, render_document

BLOCK_DOC = """\
Intro text.

```tree
[CP [DP#wh what] [C' [C did] t#wh]]
```

Outro.
"""


class TestFindTreeSources:
    def test_inline(self) -> None:
        text = "See {{tree: [VP [V see] [DP her]]}} here."
        (src,) = find_tree_sources(text)
        assert src.kind == "inline"
        assert src.source == "[VP [V see] [DP her]]"
        assert text[src.start:src.end] == "{{tree: [VP [V see] [DP her]]}}"

    def test_block(self) -> None:
        (src,) = find_tree_sources(BLOCK_DOC)
        assert src.kind == "block"
        assert src.source.strip() == "[CP [DP#wh what] [C' [C did] t#wh]]"

    def test_document_order(self) -> None:
        text = "{{tree: a}} then\n```tree\n[B c]\n```\nand {{tree: d}}"
        assert [s.kind for s in find_tree_sources(text)] == ["inline", "block", "inline"]

    def test_inline_inside_block_not_counted(self) -> None:
        text = "```tree\n{{tree: a}}\n```\n"
        assert [s.kind for s in find_tree_sources(text)] == ["block"]

    def test_other_fences_ignored(self) -> None:
        assert find_tree_sources("```python\n[A b]\n```\n") == []


class TestRenderDocument:
    def test_inline_replaced(self) -> None:
        out = render_document("See {{tree: [A b]}} here.")
        assert out.startswith("See <svg")
        assert "ling-tree-inline" in out
        assert out.endswith("</svg> here.")

    def test_inline_error_marker(self) -> None:
        out = render_document("Bad {{tree: [A b}} tree.")
        assert out == f"Bad {INLINE_ERROR} tree."

    def test_block_replaced(self) -> None:
        out = render_document(BLOCK_DOC)
        assert out.startswith("Intro text.\n\n<svg")
        assert "```" not in out
        assert out.endswith("\n\nOutro.\n")

    def test_block_error_escaped(self) -> None:
        out = render_document('```tree\n[A "b\n```\n')
        assert out.startswith("<pre>Tree parse error: Unclosed quote")
        assert "<svg" not in out

    def test_one_failure_does_not_affect_others(self) -> None:
        out = render_document("{{tree: [A}} and {{tree: [B c]}}")
        assert out.count(INLINE_ERROR) == 1
        assert out.count("<svg") == 1

    def test_no_trees(self) -> None:
        assert render_document("plain text") == "plain text"


UNCLOSED_BEFORE_BLOCK = "Forgot close {{tree: [A b]\n```tree\n[B c]\n```\nlater {{tree: d}} tail"


class TestOverlappingMarkup:
    def test_inline_spanning_block_dropped(self) -> None:
        sources = find_tree_sources(UNCLOSED_BEFORE_BLOCK)
        assert [(s.kind, s.source.strip()) for s in sources] == [("block", "[B c]"), ("inline", "d")]
        for a, b in zip(sources, sources[1:]):
            assert a.end <= b.start

    def test_no_text_duplicated(self) -> None:
        out = render_document(UNCLOSED_BEFORE_BLOCK)
        assert out.startswith("Forgot close {{tree: [A b]\n<svg")
        assert out.count("later") == 1
        assert out.count("<svg") == 2
        assert INLINE_ERROR not in out
        assert out.endswith("</svg> tail")
