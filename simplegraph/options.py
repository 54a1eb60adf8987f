from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence, TypeVar, Union


DEFAULT_COLOR = "rgb(0,0,200)"
DEFAULT_DELTA_X = 15.0
DEFAULT_DOT_SIZE = 4.0
AXIS_COLOR = "rgb(110,110,110)"
BOX_COLOR = "rgb(180,180,180)"
LABEL_COLOR = "rgb(60,60,60)"
LABEL_FONT_SIZE = 9.0

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    value: str


@dataclass(frozen=True)
class XTickmarks:
    count: int


@dataclass(frozen=True)
class YTickmarks:
    count: int


@dataclass(frozen=True)
class DeltaX:
    value: float


@dataclass(frozen=True)
class Scale:
    """Extra scale applied to the rendered chart; negative factors mirror it."""

    kx: float
    ky: float


@dataclass(frozen=True)
class DotSize:
    value: float


Option = Union[Color, XTickmarks, YTickmarks, DeltaX, Scale, DotSize]
OptionT = TypeVar("OptionT", Color, XTickmarks, YTickmarks, DeltaX, Scale, DotSize)


@dataclass(frozen=True)
class GraphAttributes:
    width: float
    height: float
    options: tuple[Option, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence from callers but keep the stored value immutable.
        object.__setattr__(self, "options", tuple(self.options))


def find_option(options: Sequence[Option], kind: type[OptionT]) -> OptionT | None:
    """Return the first option of ``kind``; later duplicates are ignored."""
    for option in options:
        if isinstance(option, kind):
            return option
    return None


@dataclass(frozen=True)
class ChartStyle:
    """Option list resolved once into named fields with their defaults."""

    color: str = DEFAULT_COLOR
    x_ticks: int = 0
    y_ticks: int = 0
    delta_x: float = DEFAULT_DELTA_X
    scale_x: float = 1.0
    scale_y: float = 1.0
    dot_size: float = DEFAULT_DOT_SIZE

    @classmethod
    def from_attributes(cls, attributes: GraphAttributes) -> "ChartStyle":
        return cls.from_options(attributes.options)

    @classmethod
    def from_options(cls, options: Sequence[Option]) -> "ChartStyle":
        color = find_option(options, Color)
        x_ticks = find_option(options, XTickmarks)
        y_ticks = find_option(options, YTickmarks)
        delta_x = find_option(options, DeltaX)
        scale = find_option(options, Scale)
        dot_size = find_option(options, DotSize)
        return cls(
            color=color.value if color is not None else DEFAULT_COLOR,
            x_ticks=max(0, int(x_ticks.count)) if x_ticks is not None else 0,
            y_ticks=max(0, int(y_ticks.count)) if y_ticks is not None else 0,
            delta_x=_resolve_delta_x(delta_x),
            scale_x=float(scale.kx) if scale is not None else 1.0,
            scale_y=float(scale.ky) if scale is not None else 1.0,
            dot_size=float(dot_size.value) if dot_size is not None else DEFAULT_DOT_SIZE,
        )

    @property
    def has_ticks(self) -> bool:
        return self.x_ticks > 0 or self.y_ticks > 0


def _resolve_delta_x(option: DeltaX | None) -> float:
    if option is None:
        return DEFAULT_DELTA_X
    value = float(option.value)
    if not math.isfinite(value) or value <= 0:
        LOGGER.warning("bar spacing must be positive; got %r, using %s", option.value, DEFAULT_DELTA_X)
        return DEFAULT_DELTA_X
    return value
