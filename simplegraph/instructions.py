from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from simplegraph.geometry import Segment, Transform


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float = 1.0

    @classmethod
    def from_segment(cls, segment: Segment, color: str, width: float = 1.0) -> "Line":
        return cls(
            x1=segment.start.x,
            y1=segment.start.y,
            x2=segment.end.x,
            y2=segment.end.y,
            color=color,
            width=width,
        )


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    content: str
    font_size: float
    rotation: float = 0.0
    anchor: str = "start"
    color: str = "black"


@dataclass(frozen=True)
class Group:
    """Grouping node; ``transform`` maps child coordinates to the parent's."""

    children: tuple["Node", ...] = field(default_factory=tuple)
    name: str | None = None
    transform: Transform | None = None

    def find(self, name: str) -> "Group | None":
        for node in iter_nodes(self):
            if isinstance(node, Group) and node.name == name:
                return node
        return None


Node = Union[Line, Rect, Text, Group]
Primitive = Union[Line, Rect, Text]


def iter_nodes(node: Node) -> Iterator[Node]:
    """Depth-first walk including ``node`` itself."""
    yield node
    if isinstance(node, Group):
        for child in node.children:
            yield from iter_nodes(child)


def iter_primitives(node: Node) -> Iterator[Primitive]:
    for item in iter_nodes(node):
        if not isinstance(item, Group):
            yield item


def count_primitives(node: Node, kind: type | None = None) -> int:
    return sum(1 for p in iter_primitives(node) if kind is None or isinstance(p, kind))
