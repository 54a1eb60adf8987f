from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from simplegraph import (
    Color,
    DataWindow,
    DotSize,
    GraphAttributes,
    Scale,
    XTickmarks,
    YTickmarks,
    chart_size,
    line_chart,
    normalize_points,
    overlay,
    render_svg,
    scatter_plot,
    to_markup,
)


def _random_walk(steps: int, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return np.cumsum(rng.normal(scale=0.5, size=steps))


def main() -> None:
    parser = argparse.ArgumentParser(description="Write a few sample charts as SVG files.")
    parser.add_argument("--out", type=Path, default=Path("chart_gallery"))
    args = parser.parse_args()
    args.out.mkdir(parents=True, exist_ok=True)

    walk = normalize_points(_random_walk(200, seed=3))
    attrs = GraphAttributes(width=600, height=300, options=(XTickmarks(5), YTickmarks(4)))
    (args.out / "walk.svg").write_text(render_svg("line", attrs, walk), encoding="utf-8")

    # Same walk, panned to the middle of the run.
    window = DataWindow(x_min=50.0, x_max=150.0, y_min=-8.0, y_max=8.0)
    (args.out / "walk_window.svg").write_text(render_svg("line", attrs, walk, window), encoding="utf-8")

    mirrored = GraphAttributes(width=600, height=300, options=(Scale(-1.0, 1.0), XTickmarks(3)))
    (args.out / "walk_mirrored.svg").write_text(render_svg("line", mirrored, walk), encoding="utf-8")

    points = normalize_points(np.sin(np.linspace(0.0, 6.0, 40)), x=np.linspace(0.0, 6.0, 40))
    line_attrs = GraphAttributes(width=400, height=200, options=(Color("rgb(0,120,0)"),))
    dot_attrs = GraphAttributes(width=400, height=200, options=(DotSize(5), XTickmarks(4), YTickmarks(3)))
    tree = overlay(line_chart(line_attrs, points), scatter_plot(dot_attrs, points))
    width, height = chart_size(dot_attrs)
    (args.out / "sine_overlay.svg").write_text(to_markup(tree, width, height), encoding="utf-8")

    bars = GraphAttributes(width=240, height=160, options=(YTickmarks(4),))
    (args.out / "bars.svg").write_text(render_svg("bar", bars, [5, 10, 20, 30, 20, 20, 5]), encoding="utf-8")
    print(f"wrote charts to {args.out}")


if __name__ == "__main__":
    main()
