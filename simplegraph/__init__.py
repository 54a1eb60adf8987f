from simplegraph.adapters import normalize_points, normalize_values
from simplegraph.charts import bar_chart, chart_size, chart_transform, line_chart, overlay, scatter_plot
from simplegraph.errors import GraphConfigError, GraphDataError
from simplegraph.geometry import Point, Segment, Transform, rescale, segments, translate
from simplegraph.instructions import Group, Line, Rect, Text, count_primitives, iter_primitives
from simplegraph.options import (
    ChartStyle,
    Color,
    DeltaX,
    DotSize,
    GraphAttributes,
    Scale,
    XTickmarks,
    YTickmarks,
    find_option,
)
from simplegraph.svg import render_svg, to_markup, to_svg
from simplegraph.ticks import format_label, round_to, tick_positions
from simplegraph.window import DataWindow, ScaleFactor, get_data_window, scale_factor

__all__ = [
    "ChartStyle",
    "Color",
    "DataWindow",
    "DeltaX",
    "DotSize",
    "GraphAttributes",
    "GraphConfigError",
    "GraphDataError",
    "Group",
    "Line",
    "Point",
    "Rect",
    "Scale",
    "ScaleFactor",
    "Segment",
    "Text",
    "Transform",
    "XTickmarks",
    "YTickmarks",
    "bar_chart",
    "chart_size",
    "chart_transform",
    "count_primitives",
    "find_option",
    "format_label",
    "get_data_window",
    "iter_primitives",
    "line_chart",
    "normalize_points",
    "normalize_values",
    "overlay",
    "render_svg",
    "rescale",
    "round_to",
    "scale_factor",
    "scatter_plot",
    "segments",
    "tick_positions",
    "to_markup",
    "to_svg",
    "translate",
]
