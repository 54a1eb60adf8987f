from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Sequence

import numpy as np

from simplegraph.geometry import Point, Segment


TICK_LENGTH = 5.0
LABEL_GAP = 4.0
X_LABEL_DROP = 12.0
LABEL_DECIMALS = 1
SCIENTIFIC_THRESHOLD = 1e6


@dataclass(frozen=True)
class TickLabel:
    anchor: Point
    text: str
    value: float


@dataclass(frozen=True)
class TickSet:
    marks: tuple[Segment, ...] = ()
    labels: tuple[TickLabel, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.marks)


def tick_positions(lo: float, hi: float, count: int) -> tuple[float, ...]:
    """Evenly spaced tick values from ``lo`` to ``hi`` inclusive.

    A count of one places only the lower boundary; zero or less disables ticks.
    """
    if count <= 0:
        return ()
    if count == 1:
        return (float(lo),)
    values = np.linspace(lo, hi, num=count, dtype=np.float64)
    return tuple(float(v) for v in values)


def round_to(places: int, value: float) -> float:
    """Round half away from zero at ``places`` decimals (2.25 -> 2.3)."""
    if not np.isfinite(value):
        return value
    quant = Decimal("1").scaleb(-places)
    try:
        return float(Decimal(repr(float(value))).quantize(quant, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return value


def format_label(value: float, places: int = LABEL_DECIMALS) -> str:
    """Render a tick value at ``places`` decimals, or in scientific notation
    once its magnitude reaches ``SCIENTIFIC_THRESHOLD``."""
    rounded = round_to(places, value)
    if not np.isfinite(rounded):
        return str(rounded)
    if abs(rounded) >= SCIENTIFIC_THRESHOLD:
        return f"{rounded:.4e}"
    d = Decimal(repr(rounded))
    try:
        q = d.quantize(Decimal("1").scaleb(-places))
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def axis_ticks(lo: float, hi: float, count: int, k: float) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Tick values in data space and their offsets along the scaled axis."""
    values = tick_positions(lo, hi, count)
    return tuple((v - lo) * k for v in values), values


def horizontal_ticks(xs: Sequence[float], values: Sequence[float], baseline: float = 0.0) -> TickSet:
    """Tick marks hanging below ``baseline`` at chart x positions ``xs``."""
    marks = tuple(Segment(Point(x, baseline), Point(x, baseline - TICK_LENGTH)) for x in xs)
    labels = tuple(
        TickLabel(anchor=Point(x, baseline - TICK_LENGTH - LABEL_GAP - X_LABEL_DROP), text=format_label(v), value=v)
        for x, v in zip(xs, values)
    )
    return TickSet(marks=marks, labels=labels)


def vertical_ticks(ys: Sequence[float], values: Sequence[float], baseline: float = 0.0) -> TickSet:
    """Tick marks extending left of ``baseline`` at chart y positions ``ys``."""
    marks = tuple(Segment(Point(baseline, y), Point(baseline - TICK_LENGTH, y)) for y in ys)
    labels = tuple(
        TickLabel(anchor=Point(baseline - TICK_LENGTH - LABEL_GAP, y), text=format_label(v), value=v)
        for y, v in zip(ys, values)
    )
    return TickSet(marks=marks, labels=labels)
