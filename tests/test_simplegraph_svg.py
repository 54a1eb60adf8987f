from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from simplegraph.charts import PADDING, line_chart, overlay, scatter_plot
from simplegraph.geometry import Point, Transform
from simplegraph.instructions import Group, Line, Text
from simplegraph.options import Color, DeltaX, GraphAttributes, XTickmarks, YTickmarks
from simplegraph.svg import SvgSummary, render_svg, to_markup, to_svg
from simplegraph.window import DataWindow


LINE_DATA = [Point(0.0, 0.0), Point(10.0, 10.0), Point(20.0, 0.0)]


class SvgSerializerTests(unittest.TestCase):
    def test_root_element_has_size_and_viewbox(self) -> None:
        root = to_svg(Group(), 180.0, 120.5)
        self.assertEqual(root.tag, "svg")
        self.assertEqual(root.attrib["width"], "180")
        self.assertEqual(root.attrib["height"], "120.5")
        self.assertEqual(root.attrib["viewBox"], "0 0 180 120.5")

    def test_primitives_are_serialized(self) -> None:
        tree = Group(
            name="demo",
            transform=Transform(scale_y=-1.0, translate_y=10.0),
            children=(
                Line(0.0, 0.0, 5.0, 5.0, "red", 2.0),
                Text(1.0, 2.0, "a<b", 9.0, rotation=90.0, anchor="middle"),
            ),
        )
        markup = to_markup(tree, 10.0, 10.0)
        self.assertIn('class="demo"', markup)
        self.assertIn('transform="translate(0 10) scale(1 -1)"', markup)
        self.assertIn('stroke="red"', markup)
        self.assertIn('stroke-width="2"', markup)
        self.assertIn("a&lt;b", markup)
        self.assertIn('transform="rotate(90 1 2)"', markup)

    def test_unknown_node_type_rejected(self) -> None:
        with self.assertRaises(TypeError):
            to_markup(Group(children=("oops",)), 10.0, 10.0)  # type: ignore[arg-type]

    def test_line_chart_markup_summary(self) -> None:
        attrs = GraphAttributes(width=100.0, height=100.0)
        markup = to_markup(line_chart(attrs, LINE_DATA), 100.0 + 2 * PADDING, 100.0 + 2 * PADDING)
        summary = SvgSummary.from_markup(markup)
        self.assertEqual(summary.width, 180.0)
        self.assertEqual(summary.count("series", "line"), 2)
        self.assertEqual(summary.count("x-axis", "line"), 1)
        self.assertEqual(summary.count("y-axis", "line"), 1)
        self.assertEqual(summary.count("bounding-box"), 0)
        self.assertEqual(summary.groups(), ["series", "x-axis", "y-axis"])


class RenderSvgTests(unittest.TestCase):
    def test_render_line_chart_with_ticks(self) -> None:
        attrs = GraphAttributes(width=100.0, height=100.0, options=(XTickmarks(3), YTickmarks(3)))
        summary = SvgSummary.from_markup(render_svg("line", attrs, [(0, 0), (10, 10), (20, 0)]))
        self.assertEqual(summary.count("x-ticks", "line"), 3)
        self.assertEqual(summary.count("bounding-box", "line"), 4)
        self.assertEqual(summary.count("x-labels", "text"), 3)
        self.assertEqual(summary.texts[:3], ["0", "10", "20"])

    def test_render_bar_chart(self) -> None:
        attrs = GraphAttributes(width=120.0, height=100.0, options=(DeltaX(15.0), Color("green")))
        markup = render_svg("bar", attrs, [5, 10, 20, 30, 20, 20, 5])
        summary = SvgSummary.from_markup(markup)
        self.assertEqual(summary.count("series", "rect"), 7)
        self.assertIn('fill="green"', markup)
        self.assertEqual(summary.width, 120.0 + 2 * PADDING)

    def test_render_scatter_with_window(self) -> None:
        attrs = GraphAttributes(width=100.0, height=100.0)
        markup = render_svg("scatter", attrs, [(0, 0), (5, 5), (10, 0)], DataWindow(0.0, 20.0, 0.0, 10.0))
        summary = SvgSummary.from_markup(markup)
        self.assertEqual(summary.count("series", "rect"), 3)
        self.assertEqual(summary.count("bounding-box", "line"), 4)

    def test_render_rejects_unknown_kind(self) -> None:
        with self.assertRaises(ValueError):
            render_svg("pie", GraphAttributes(width=10.0, height=10.0), [1.0])  # type: ignore[arg-type]

    def test_overlay_markup_and_file_summary(self) -> None:
        attrs = GraphAttributes(width=100.0, height=100.0)
        tree = overlay(line_chart(attrs, LINE_DATA), scatter_plot(attrs, LINE_DATA))
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "chart.svg"
            path.write_text(to_markup(tree, 180.0, 180.0), encoding="utf-8")
            summary = SvgSummary.from_file(path)
        self.assertEqual(summary.count("series"), 5)
        self.assertEqual(summary.count("series", "rect"), 3)


if __name__ == "__main__":
    unittest.main()
