from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal
import xml.etree.ElementTree as ET

from simplegraph.adapters import normalize_points, normalize_values
from simplegraph.charts import bar_chart, chart_size, line_chart, scatter_plot
from simplegraph.geometry import format_number
from simplegraph.instructions import Group, Line, Node, Rect, Text
from simplegraph.options import GraphAttributes
from simplegraph.window import DataWindow


SVG_NS = "http://www.w3.org/2000/svg"
ChartKind = Literal["line", "bar", "scatter"]


def to_svg(tree: Node, width: float, height: float) -> ET.Element:
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": format_number(width),
            "height": format_number(height),
            "viewBox": f"0 0 {format_number(width)} {format_number(height)}",
        },
    )
    _append(root, tree)
    return root


def to_markup(tree: Node, width: float, height: float) -> str:
    return ET.tostring(to_svg(tree, width, height), encoding="unicode")


def render_svg(
    kind: ChartKind,
    attributes: GraphAttributes,
    data: Any,
    window: DataWindow | None = None,
) -> str:
    """Assemble a chart of ``kind`` and serialize it sized to fit its padding."""
    if kind == "line":
        tree = line_chart(attributes, normalize_points(data), window)
    elif kind == "scatter":
        tree = scatter_plot(attributes, normalize_points(data), window)
    elif kind == "bar":
        tree = bar_chart(attributes, normalize_values(data))
    else:
        raise ValueError(f"unknown chart kind: {kind!r}")
    width, height = chart_size(attributes)
    return to_markup(tree, width, height)


def _append(parent: ET.Element, node: Node) -> None:
    if isinstance(node, Group):
        attrib: dict[str, str] = {}
        if node.name:
            attrib["class"] = node.name
        if node.transform is not None:
            attrib["transform"] = node.transform.svg()
        elem = ET.SubElement(parent, "g", attrib)
        for child in node.children:
            _append(elem, child)
    elif isinstance(node, Line):
        ET.SubElement(
            parent,
            "line",
            {
                "x1": format_number(node.x1),
                "y1": format_number(node.y1),
                "x2": format_number(node.x2),
                "y2": format_number(node.y2),
                "stroke": node.color,
                "stroke-width": format_number(node.width),
                # Keep stroke width constant under the chart's scale transform.
                "vector-effect": "non-scaling-stroke",
            },
        )
    elif isinstance(node, Rect):
        ET.SubElement(
            parent,
            "rect",
            {
                "x": format_number(node.x),
                "y": format_number(node.y),
                "width": format_number(node.width),
                "height": format_number(node.height),
                "fill": node.fill,
            },
        )
    elif isinstance(node, Text):
        attrib = {
            "x": format_number(node.x),
            "y": format_number(node.y),
            "font-size": format_number(node.font_size),
            "text-anchor": node.anchor,
            "fill": node.color,
        }
        if node.rotation:
            attrib["transform"] = (
                f"rotate({format_number(node.rotation)} {format_number(node.x)} {format_number(node.y)})"
            )
        elem = ET.SubElement(parent, "text", attrib)
        elem.text = node.content
    else:
        raise TypeError(f"unsupported drawing instruction: {type(node)!r}")


@dataclass
class SvgSummary:
    """Primitive counts of a chart document, keyed by enclosing group class."""

    width: float
    height: float
    counts: dict[str, Counter[str]] = field(default_factory=dict)
    texts: list[str] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: Path) -> "SvgSummary":
        return cls._from_root(ET.parse(path).getroot())

    @classmethod
    def from_markup(cls, svg_markup: str) -> "SvgSummary":
        return cls._from_root(ET.fromstring(svg_markup))

    @classmethod
    def _from_root(cls, root: ET.Element) -> "SvgSummary":
        summary = cls(
            width=_parse_length(root.attrib.get("width")) or 0.0,
            height=_parse_length(root.attrib.get("height")) or 0.0,
        )
        summary._walk(root, group="")
        return summary

    def _walk(self, elem: ET.Element, group: str) -> None:
        for child in elem:
            tag = _strip_namespace(child.tag)
            if tag == "g":
                self._walk(child, child.attrib.get("class", group))
                continue
            self.counts.setdefault(group, Counter())[tag] += 1
            if tag == "text":
                self.texts.append(child.text or "")

    def count(self, group: str, tag: str | None = None) -> int:
        counter = self.counts.get(group)
        if counter is None:
            return 0
        if tag is None:
            return sum(counter.values())
        return counter[tag]

    def groups(self) -> list[str]:
        return sorted(self.counts)


def _strip_namespace(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def _parse_length(value: str | None) -> float | None:
    if not value:
        return None
    value = value.strip()
    if value.endswith("px"):
        value = value[:-2]
    try:
        return float(value)
    except ValueError:
        return None
