from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from simplegraph.geometry import Point, Transform, rescale, segments, translate
from simplegraph.instructions import Group, Line, Node, Rect, Text
from simplegraph.options import (
    AXIS_COLOR,
    BOX_COLOR,
    LABEL_COLOR,
    LABEL_FONT_SIZE,
    ChartStyle,
    GraphAttributes,
)
from simplegraph.ticks import TickLabel, TickSet, axis_ticks, horizontal_ticks, vertical_ticks
from simplegraph.window import DataWindow, get_data_window, scale_factor


LOGGER = logging.getLogger(__name__)

PADDING = 40.0
BAR_FILL_RATIO = 0.8
DEFAULT_BAR_LABELS = 3


def chart_size(attributes: GraphAttributes) -> tuple[float, float]:
    """Surface size needed to show a chart, padding for labels included."""
    style = ChartStyle.from_attributes(attributes)
    return (
        abs(style.scale_x) * attributes.width + 2 * PADDING,
        abs(style.scale_y) * attributes.height + 2 * PADDING,
    )


def chart_transform(width: float, height: float, style: ChartStyle) -> Transform:
    """Map chart space (origin lower-left, y up) onto the padded screen.

    The vertical axis is flipped for screen coordinates, the caller's scale is
    applied on top, and mirrored axes are shifted back into positive space.
    """
    kx = style.scale_x
    ky = style.scale_y
    return Transform(
        scale_x=kx,
        scale_y=-ky,
        translate_x=PADDING + max(0.0, -kx * width),
        translate_y=PADDING + max(0.0, ky * height),
    )


def line_chart(
    attributes: GraphAttributes,
    points: Iterable[Point],
    window: DataWindow | None = None,
) -> Group:
    style = ChartStyle.from_attributes(attributes)
    data = tuple(points)
    if window is None:
        window = get_data_window(data)
    if not data:
        LOGGER.debug("line chart has no data; drawing axes only")
    scale = scale_factor(window, attributes.width, attributes.height)
    width = attributes.width
    height = attributes.height

    scaled = rescale(scale.kx, scale.ky, translate(-window.x_min, -window.y_min, data))
    series = Group(
        name="series",
        children=tuple(Line.from_segment(s, style.color) for s in segments(scaled)),
    )

    axis_y = (_axis_anchor(window.y_min, window.y_max) - window.y_min) * scale.ky
    axis_x = (_axis_anchor(window.x_min, window.x_max) - window.x_min) * scale.kx
    x_axis = Group(name="x-axis", children=(Line(0.0, axis_y, width, axis_y, AXIS_COLOR),))
    y_axis = Group(name="y-axis", children=(Line(axis_x, 0.0, axis_x, height, AXIS_COLOR),))

    xs, x_values = axis_ticks(window.x_min, window.x_max, style.x_ticks, scale.kx)
    ys, y_values = axis_ticks(window.y_min, window.y_max, style.y_ticks, scale.ky)
    x_ticks = horizontal_ticks(xs, x_values)
    y_ticks = vertical_ticks(ys, y_values)

    plot: list[Node] = [series, x_axis, y_axis]
    if style.has_ticks:
        plot.append(_bounding_box(0.0, 0.0, width, height))
    return _assemble(plot, x_ticks, y_ticks, chart_transform(width, height, style))


def bar_chart(attributes: GraphAttributes, values: Iterable[float]) -> Group:
    style = ChartStyle.from_attributes(attributes)
    data = tuple(float(v) for v in values)
    width = attributes.width
    height = attributes.height
    spacing = style.delta_x
    bar_width = BAR_FILL_RATIO * spacing

    max_value = max(data, default=0.0)
    if max_value <= 0:
        LOGGER.debug("bar chart maximum %r is not positive; bars have zero height", max_value)
    bars: list[Node] = []
    for index, value in enumerate(data):
        bar_height = bar_fraction(value, max_value) * height
        bars.append(
            Rect(
                x=index * spacing,
                y=min(0.0, bar_height),
                width=bar_width,
                height=abs(bar_height),
                fill=style.color,
            )
        )
    series = Group(name="series", children=tuple(bars))
    x_axis = Group(name="x-axis", children=(Line(0.0, 0.0, width, 0.0, AXIS_COLOR),))
    y_axis = Group(name="y-axis", children=(Line(0.0, 0.0, 0.0, height, AXIS_COLOR),))

    label_count = style.y_ticks or DEFAULT_BAR_LABELS
    top = max(max_value, 0.0)
    ky = height / top if top > 0 else height
    ys, y_values = axis_ticks(0.0, top, label_count, ky)
    y_ticks = vertical_ticks(ys, y_values)

    x_ticks = TickSet()
    if style.x_ticks > 0 and spacing > 0 and data:
        interval = spacing * style.x_ticks
        xs = tuple(float(x) for x in np.arange(0.0, len(data) * spacing + 1e-9, interval))
        x_ticks = horizontal_ticks(xs, tuple(x / spacing for x in xs))

    plot: list[Node] = [series, x_axis, y_axis]
    if style.has_ticks:
        plot.append(_bounding_box(0.0, 0.0, width, height))
    return _assemble(plot, x_ticks, y_ticks, chart_transform(width, height, style))


def bar_fraction(value: float, max_value: float) -> float:
    if max_value <= 0:
        return 0.0
    return value / max_value


def scatter_plot(
    attributes: GraphAttributes,
    points: Iterable[Point],
    window: DataWindow | None = None,
) -> Group:
    style = ChartStyle.from_attributes(attributes)
    data = tuple(points)
    if window is None:
        window = get_data_window(data)
    scale = scale_factor(window, attributes.width, attributes.height)
    width = attributes.width
    height = attributes.height
    size = style.dot_size
    radius = size / 2.0

    scaled = rescale(scale.kx, scale.ky, translate(-window.x_min, -window.y_min, data))
    series = Group(
        name="series",
        children=tuple(Rect(p.x - radius, p.y - radius, size, size, style.color) for p in scaled),
    )

    xs, x_values = axis_ticks(window.x_min, window.x_max, style.x_ticks, scale.kx)
    ys, y_values = axis_ticks(window.y_min, window.y_max, style.y_ticks, scale.ky)
    x_ticks = horizontal_ticks(xs, x_values, baseline=-radius)
    y_ticks = vertical_ticks(ys, y_values, baseline=-radius)

    plot: list[Node] = [series, _bounding_box(-radius, -radius, width + radius, height + radius)]
    return _assemble(plot, x_ticks, y_ticks, chart_transform(width, height, style))


def overlay(*charts: Group) -> Group:
    """Stack chart trees onto one surface; later charts draw on top."""
    return Group(name="overlay", children=tuple(charts))


def _axis_anchor(lo: float, hi: float) -> float:
    if lo <= 0.0 <= hi:
        return 0.0
    return lo


def _bounding_box(x0: float, y0: float, x1: float, y1: float) -> Group:
    corners = (Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1), Point(x0, y0))
    return Group(
        name="bounding-box",
        children=tuple(Line.from_segment(s, BOX_COLOR) for s in segments(corners)),
    )


def _tick_lines(name: str, ticks: TickSet) -> Group:
    return Group(name=name, children=tuple(Line.from_segment(m, AXIS_COLOR) for m in ticks.marks))


def _label_group(name: str, labels: Sequence[TickLabel], transform: Transform, anchor: str) -> Group:
    screen = transform.apply_many([label.anchor for label in labels])
    # Vertical-axis labels are centred on their tick.
    dy = LABEL_FONT_SIZE / 3.0 if anchor == "end" else 0.0
    return Group(
        name=name,
        children=tuple(
            Text(
                x=p.x,
                y=p.y + dy,
                content=label.text,
                font_size=LABEL_FONT_SIZE,
                anchor=anchor,
                color=LABEL_COLOR,
            )
            for p, label in zip(screen, labels)
        ),
    )


def _assemble(plot: list[Node], x_ticks: TickSet, y_ticks: TickSet, transform: Transform) -> Group:
    if x_ticks:
        plot.append(_tick_lines("x-ticks", x_ticks))
    if y_ticks:
        plot.append(_tick_lines("y-ticks", y_ticks))
    children: list[Node] = [Group(name="plot", children=tuple(plot), transform=transform)]
    if x_ticks.labels:
        children.append(_label_group("x-labels", x_ticks.labels, transform, "middle"))
    if y_ticks.labels:
        children.append(_label_group("y-labels", y_ticks.labels, transform, "end"))
    return Group(name="chart", children=tuple(children))

