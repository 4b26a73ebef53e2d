"""Point and Bounds value types. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point:
    """A 2D coordinate. y grows downwards, as in SVG."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def translate(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def scale(self, factor: float, pivot: Point) -> Point:
        """Scale the distance to pivot by factor."""
        return Point(
            pivot.x + (self.x - pivot.x) * factor,
            pivot.y + (self.y - pivot.y) * factor,
        )

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box: (x, y) is the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_extent(cls, extent: tuple[float, float, float, float]) -> Bounds:
        """Build from (xmin, ymin, xmax, ymax)."""
        xmin, ymin, xmax, ymax = extent
        return cls(xmin, ymin, xmax - xmin, ymax - ymin)

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.x + self.width, self.y + self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)
