from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import tomllib
from typing import Any, Mapping

from simplegraph.errors import GraphConfigError
from simplegraph.options import Color, DeltaX, DotSize, GraphAttributes, Option, Scale, XTickmarks, YTickmarks
from simplegraph.window import DataWindow


LOGGER = logging.getLogger(__name__)
CHART_KINDS = ("line", "bar", "scatter")
_CHART_KEYS = {"kind", "width", "height", "color", "x_ticks", "y_ticks", "delta_x", "scale", "dot_size"}
_WINDOW_KEYS = ("x_min", "x_max", "y_min", "y_max")


@dataclass(frozen=True)
class ChartConfig:
    kind: str
    width: float
    height: float
    color: str | None = None
    x_ticks: int | None = None
    y_ticks: int | None = None
    delta_x: float | None = None
    scale: tuple[float, float] | None = None
    dot_size: float | None = None
    window: DataWindow | None = None

    def options(self) -> tuple[Option, ...]:
        out: list[Option] = []
        if self.color is not None:
            out.append(Color(self.color))
        if self.x_ticks is not None:
            out.append(XTickmarks(self.x_ticks))
        if self.y_ticks is not None:
            out.append(YTickmarks(self.y_ticks))
        if self.delta_x is not None:
            out.append(DeltaX(self.delta_x))
        if self.scale is not None:
            out.append(Scale(*self.scale))
        if self.dot_size is not None:
            out.append(DotSize(self.dot_size))
        return tuple(out)

    def attributes(self) -> GraphAttributes:
        return GraphAttributes(width=self.width, height=self.height, options=self.options())


def load_chart_config(path: str | Path) -> ChartConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"chart config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise GraphConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    return parse_chart_config(raw)


def parse_chart_config(raw: Mapping[str, Any]) -> ChartConfig:
    chart = raw.get("chart")
    if not isinstance(chart, Mapping):
        raise GraphConfigError("config missing [chart] table")
    try:
        kind = str(chart["kind"])
        width = _coerce_positive(chart["width"], "width")
        height = _coerce_positive(chart["height"], "height")
    except KeyError as exc:
        raise GraphConfigError(f"chart missing required field: {exc.args[0]}") from exc
    if kind not in CHART_KINDS:
        raise GraphConfigError(f"chart kind must be one of {', '.join(CHART_KINDS)}; got {kind!r}")

    unknown = sorted(set(chart) - _CHART_KEYS)
    if unknown:
        LOGGER.warning("ignoring unknown chart keys: %s", ", ".join(unknown))

    color = chart.get("color")
    if color is not None and (not isinstance(color, str) or not color.strip()):
        raise GraphConfigError("`color` must be a non-empty string")

    return ChartConfig(
        kind=kind,
        width=width,
        height=height,
        color=color,
        x_ticks=_coerce_optional_int(chart.get("x_ticks"), "x_ticks"),
        y_ticks=_coerce_optional_int(chart.get("y_ticks"), "y_ticks"),
        delta_x=_coerce_optional_positive(chart.get("delta_x"), "delta_x"),
        scale=_coerce_scale(chart.get("scale")),
        dot_size=_coerce_optional_float(chart.get("dot_size"), "dot_size"),
        window=_coerce_window(raw.get("window")),
    )


def _coerce_positive(value: Any, name: str) -> float:
    number = _coerce_optional_float(value, name)
    if number is None or number <= 0:
        raise GraphConfigError(f"`{name}` must be a positive number")
    return number


def _coerce_optional_positive(value: Any, name: str) -> float | None:
    if value is None:
        return None
    return _coerce_positive(value, name)


def _coerce_optional_float(value: Any, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GraphConfigError(f"`{name}` must be a number")
    return float(value)


def _coerce_optional_int(value: Any, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphConfigError(f"`{name}` must be an integer")
    return value


def _coerce_scale(value: Any) -> tuple[float, float] | None:
    if value is None:
        return None
    if not isinstance(value, list) or len(value) != 2:
        raise GraphConfigError("`scale` must be a two-element array [kx, ky]")
    kx = _coerce_optional_float(value[0], "scale")
    ky = _coerce_optional_float(value[1], "scale")
    assert kx is not None and ky is not None
    return (kx, ky)


def _coerce_window(value: Any) -> DataWindow | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise GraphConfigError("[window] must be a table")
    try:
        bounds = {key: _coerce_optional_float(value[key], key) for key in _WINDOW_KEYS}
    except KeyError as exc:
        raise GraphConfigError(f"window missing required field: {exc.args[0]}") from exc
    window = DataWindow(**bounds)  # type: ignore[arg-type]
    if window.x_max < window.x_min or window.y_max < window.y_min:
        raise GraphConfigError("window max bounds must not be below min bounds")
    return window
