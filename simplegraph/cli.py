from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from simplegraph.config import load_chart_config
from simplegraph.errors import GraphConfigError, GraphDataError
from simplegraph.svg import SvgSummary, render_svg


LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="simplegraph")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a chart from a TOML config and a JSON data file.")
    render.add_argument("config", type=Path)
    render.add_argument("data", type=Path)
    render.add_argument("-o", "--output", type=Path, default=None, help="Output SVG path. Default: stdout.")

    inspect = sub.add_parser("inspect", help="Print primitive counts per group of a chart SVG.")
    inspect.add_argument("svg", type=Path)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "render":
            return _render(args.config, args.data, args.output)
        if args.command == "inspect":
            return _inspect(args.svg)
    except (GraphConfigError, GraphDataError, FileNotFoundError, json.JSONDecodeError) as exc:
        print(f"simplegraph: {exc}", file=sys.stderr)
        return 2
    raise RuntimeError(f"unhandled command: {args.command}")


def _render(config_path: Path, data_path: Path, output: Path | None) -> int:
    config = load_chart_config(config_path)
    data = load_data(data_path, config.kind)
    markup = render_svg(config.kind, config.attributes(), data, config.window)  # type: ignore[arg-type]
    if output is None:
        sys.stdout.write(markup + "\n")
    else:
        output.write_text(markup + "\n", encoding="utf-8")
        LOGGER.info("wrote %s chart to %s", config.kind, output)
    return 0


def _inspect(svg_path: Path) -> int:
    if not svg_path.exists():
        raise FileNotFoundError(f"svg not found: {svg_path}")
    summary = SvgSummary.from_file(svg_path)
    print(f"size: {summary.width:g}x{summary.height:g}")
    for group in summary.groups():
        counts = ", ".join(f"{tag}={n}" for tag, n in sorted(summary.counts[group].items()))
        print(f"{group or '<root>'}: {counts}")
    return 0


def load_data(path: Path, kind: str) -> Any:
    """Read chart data: ``[v, ...]`` for bars, ``[[x, y], ...]`` or ``{"x": [...], "y": [...]}`` otherwise."""
    if not path.exists():
        raise FileNotFoundError(f"data file not found: {path}")
    raw = json.loads(path.read_text(encoding="utf-8"))
    if kind == "bar":
        if not isinstance(raw, list):
            raise GraphDataError("bar chart data must be a JSON array of numbers")
        return raw
    if isinstance(raw, dict):
        try:
            return list(zip(raw["x"], raw["y"], strict=True))
        except KeyError as exc:
            raise GraphDataError(f"point data missing key: {exc.args[0]}") from exc
        except ValueError as exc:
            raise GraphDataError("x and y arrays must have the same length") from exc
    if not isinstance(raw, list):
        raise GraphDataError("point data must be a JSON array of [x, y] pairs")
    return raw


if __name__ == "__main__":
    raise SystemExit(main())
