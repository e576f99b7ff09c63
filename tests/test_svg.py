"""Tests for SVG serialization and the render entry points."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from lingtree import ParseError, render, render_svg
from lingtree.tree.scene import Curve, Polyline, Rect, Scene, Text
from lingtree.tree.svg import SVG_NS, scene_to_svg

NS = {"svg": SVG_NS}


class TestSceneToSvg:
    def test_empty_scene(self) -> None:
        root = ET.fromstring(scene_to_svg(Scene(width=10, height=20)))
        assert root.tag == f"{{{SVG_NS}}}svg"
        assert root.get("width") == "10"
        assert root.get("viewBox") == "0 0 10 20"
        assert root.get("class") == "ling-tree-svg"

    def test_primitives(self) -> None:
        scene = Scene(
            width=100, height=100,
            primitives=[
                Rect(1, 2, 36, 22),
                Text(9, 17, "DP"),
                Polyline([(18, 24), (18, 37), (40.5, 37), (40.5, 50)]),
                Curve((0, 0), (0, -40), (10, 60), (10, 20)),
            ],
            markers=["ling-tree-arrow"],
        )
        root = ET.fromstring(scene_to_svg(scene, extra_class="ling-tree-inline"))
        assert root.get("class") == "ling-tree-svg ling-tree-inline"
        marker = root.find("svg:defs/svg:marker", NS)
        assert marker.get("id") == "ling-tree-arrow"

        rect = root.find("svg:rect", NS)
        assert (rect.get("x"), rect.get("width"), rect.get("rx")) == ("1", "36", "6")
        assert root.find("svg:text", NS).text == "DP"

        edge, arc = root.findall("svg:path", NS)
        assert edge.get("d") == "M 18 24 L 18 37 L 40.5 37 L 40.5 50"
        assert arc.get("d") == "M 0 0 C 0 -40, 10 60, 10 20"
        assert arc.get("marker-end") == "url(#ling-tree-arrow)"

    def test_text_is_escaped(self) -> None:
        svg = scene_to_svg(Scene(10, 10, [Text(0, 0, "<a&b>")]))
        assert "&lt;a&amp;b&gt;" in svg


class TestRender:
    def test_render_svg(self, wh_source) -> None:
        root = ET.fromstring(render_svg(wh_source))
        labels = [t.text for t in root.findall("svg:text", NS)]
        assert "DP#wh" in labels
        arcs = [p for p in root.findall("svg:path", NS) if p.get("marker-end")]
        assert len(arcs) == 1

    def test_render_svg_strips_block_whitespace(self) -> None:
        assert render_svg("\n[A b]\n") == render_svg("[A b]")

    def test_render_svg_raises(self) -> None:
        with pytest.raises(ParseError):
            render_svg("[DP [D the]")

    def test_render_result_ok(self) -> None:
        result = render("[A b]")
        assert result.ok
        assert result.svg.startswith("<svg")
        assert result.error is None

    def test_render_result_error(self) -> None:
        result = render("[A] [B]")
        assert not result.ok
        assert result.svg is None
        assert result.error == "Extra input after tree (at offset 4)"

    def test_deterministic(self, wh_source) -> None:
        assert render_svg(wh_source) == render_svg(wh_source)
