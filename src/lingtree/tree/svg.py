"""Serialize a :class:`Scene` to SVG markup."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from lingtree.tree.scene import Curve, Polyline, Rect, Scene, Text

SVG_NS = "http://www.w3.org/2000/svg"
SVG_CLASS = "ling-tree-svg"

ET.register_namespace("", SVG_NS)


def _num(v: float) -> str:
    return f"{v:g}"


def _marker(marker_id: str) -> ET.Element:
    marker = ET.Element(f"{{{SVG_NS}}}marker", {
        "id": marker_id,
        "markerWidth": "10",
        "markerHeight": "10",
        "refX": "9",
        "refY": "3",
        "orient": "auto",
        "markerUnits": "strokeWidth",
    })
    ET.SubElement(marker, f"{{{SVG_NS}}}path", {"d": "M0,0 L9,3 L0,6 Z"})
    return marker


def _element(prim: Rect | Text | Polyline | Curve) -> ET.Element:
    if isinstance(prim, Rect):
        return ET.Element(f"{{{SVG_NS}}}rect", {
            "x": _num(prim.x), "y": _num(prim.y),
            "width": _num(prim.width), "height": _num(prim.height),
            "rx": _num(prim.rx), "ry": _num(prim.rx),
            "class": prim.css_class,
        })
    if isinstance(prim, Text):
        el = ET.Element(f"{{{SVG_NS}}}text", {
            "x": _num(prim.x), "y": _num(prim.y), "class": prim.css_class,
        })
        el.text = prim.text
        return el
    if isinstance(prim, Polyline):
        (x0, y0), *rest = prim.points
        d = f"M {_num(x0)} {_num(y0)} " + " ".join(f"L {_num(x)} {_num(y)}" for x, y in rest)
        return ET.Element(f"{{{SVG_NS}}}path", {"d": d, "class": prim.css_class, "fill": "none"})
    if isinstance(prim, Curve):
        (x1, y1), (c1x, c1y), (c2x, c2y), (x2, y2) = prim.start, prim.control1, prim.control2, prim.end
        attrs = {
            "d": (
                f"M {_num(x1)} {_num(y1)} "
                f"C {_num(c1x)} {_num(c1y)}, {_num(c2x)} {_num(c2y)}, {_num(x2)} {_num(y2)}"
            ),
            "class": prim.css_class,
            "fill": "none",
        }
        if prim.marker:
            attrs["marker-end"] = f"url(#{prim.marker})"
        return ET.Element(f"{{{SVG_NS}}}path", attrs)
    raise TypeError(f"Unknown primitive: {type(prim).__name__}")


def scene_to_element(scene: Scene, extra_class: str | None = None) -> ET.Element:
    w, h = _num(scene.width), _num(scene.height)
    css = SVG_CLASS if not extra_class else f"{SVG_CLASS} {extra_class}"
    svg = ET.Element(f"{{{SVG_NS}}}svg", {
        "width": w, "height": h, "viewBox": f"0 0 {w} {h}", "class": css,
    })
    defs = ET.SubElement(svg, f"{{{SVG_NS}}}defs")
    for marker_id in scene.markers:
        defs.append(_marker(marker_id))
    for prim in scene.primitives:
        svg.append(_element(prim))
    return svg


def scene_to_svg(scene: Scene, extra_class: str | None = None) -> str:
    """Return the scene as a standalone ``<svg>`` string."""
    return ET.tostring(scene_to_element(scene, extra_class), encoding="unicode")
