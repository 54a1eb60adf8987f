from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


def translate(dx: float, dy: float, points: Iterable[Point]) -> tuple[Point, ...]:
    return tuple(Point(p.x + dx, p.y + dy) for p in points)


def rescale(kx: float, ky: float, points: Iterable[Point]) -> tuple[Point, ...]:
    return tuple(Point(p.x * kx, p.y * ky) for p in points)


def segments(points: Sequence[Point]) -> tuple[Segment, ...]:
    """Pair consecutive points; fewer than two points yield no segments."""
    return tuple(Segment(a, b) for a, b in zip(points, points[1:]))


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    if not points:
        return np.zeros((0, 2), dtype=np.float64)
    return np.asarray([(p.x, p.y) for p in points], dtype=np.float64)


@dataclass(frozen=True)
class Transform:
    """Affine map ``p -> (scale_x * x + translate_x, scale_y * y + translate_y)``.

    Scaling is applied before translation, matching the SVG attribute
    ``translate(tx ty) scale(sx sy)``.
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def apply(self, point: Point) -> Point:
        return Point(
            self.scale_x * point.x + self.translate_x,
            self.scale_y * point.y + self.translate_y,
        )

    def apply_many(self, points: Sequence[Point]) -> tuple[Point, ...]:
        arr = points_to_array(points)
        if arr.size == 0:
            return ()
        out = arr * np.asarray([self.scale_x, self.scale_y]) + np.asarray([self.translate_x, self.translate_y])
        return tuple(Point(float(x), float(y)) for x, y in out.tolist())

    def svg(self) -> str:
        return (
            f"translate({format_number(self.translate_x)} {format_number(self.translate_y)}) "
            f"scale({format_number(self.scale_x)} {format_number(self.scale_y)})"
        )


def format_number(value: float) -> str:
    out = f"{value:.6f}".rstrip("0").rstrip(".")
    if out in ("-0", ""):
        return "0"
    return out
