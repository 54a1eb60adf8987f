from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

import numpy as np

from simplegraph.geometry import Point, points_to_array


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataWindow:
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @classmethod
    def zero(cls) -> "DataWindow":
        return cls(x_min=0.0, x_max=0.0, y_min=0.0, y_max=0.0)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def origin(self) -> Point:
        return Point(self.x_min, self.y_min)


@dataclass(frozen=True)
class ScaleFactor:
    kx: float
    ky: float


def get_data_window(points: Sequence[Point]) -> DataWindow:
    arr = points_to_array(points)
    if arr.shape[0] == 0:
        return DataWindow.zero()
    mins = np.min(arr, axis=0)
    maxs = np.max(arr, axis=0)
    return DataWindow(
        x_min=float(mins[0]),
        x_max=float(maxs[0]),
        y_min=float(mins[1]),
        y_max=float(maxs[1]),
    )


def scale_factor(window: DataWindow, width: float, height: float) -> ScaleFactor:
    """Pixel-per-data-unit ratio along each axis.

    A zero-span axis is scaled as if it spanned one data unit so the factor
    stays finite.
    """
    return ScaleFactor(
        kx=width / _span(window.width, "x"),
        ky=height / _span(window.height, "y"),
    )


def _span(value: float, axis: str) -> float:
    if value > 0 and np.isfinite(value):
        return value
    LOGGER.debug("degenerate %s span %r in data window; using 1.0", axis, value)
    return 1.0
