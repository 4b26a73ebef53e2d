"""Outline types over shapely geometry.

Shape       common surface: bounds, boolean ops, path data, fill, scene membership
Outline     one closed ring held as an Nx2 vertex array, editable in place
CompoundOutline
            result of a boolean op; any polygonal shapely geometry, possibly
            several contours or holes

Boolean ops never mutate their operands and always return a new, detached
CompoundOutline. A removed shape refuses all further geometric work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np
from numpy.typing import NDArray
from shapely import affinity
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import make_valid

from longshadow.errors import DisposedShapeError
from longshadow.shapes.pathdata import SAMPLES_PER_CURVE, parse_contours, ring_path_data
from longshadow.shapes.point import Bounds, Point
from longshadow.utils.geometry import bbox

if TYPE_CHECKING:
    from longshadow.scene import Scene
    from longshadow.shapes.style import Fill


def _polygonal(geom: BaseGeometry) -> Polygon | MultiPolygon:
    """Keep only the area-bearing part of a geometry. Lines and points collapse to empty."""
    if geom.is_empty:
        return Polygon()
    if geom.geom_type in ("Polygon", "MultiPolygon"):
        return geom
    if geom.geom_type == "GeometryCollection":
        polys = [
            g
            for g in geom.geoms
            if g.geom_type in ("Polygon", "MultiPolygon") and not g.is_empty
        ]
        if not polys:
            return Polygon()
        merged = unary_union(polys)
        return merged if merged.geom_type in ("Polygon", "MultiPolygon") else Polygon()
    return Polygon()


def _iter_polygons(geom: Polygon | MultiPolygon) -> Iterable[Polygon]:
    if geom.is_empty:
        return []
    if geom.geom_type == "MultiPolygon":
        return list(geom.geoms)
    return [geom]


class Shape(ABC):
    """Anything that can be drawn in a Scene and combined with boolean ops.

    Subclasses supply the shapely geometry and the in-place transforms; bounds,
    path data, boolean ops and stacking are shared.
    """

    def __init__(self) -> None:
        self.fill: Fill | None = None
        self.scene: Scene | None = None
        self._disposed = False

    # --- lifecycle ---

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _check_alive(self) -> None:
        if self._disposed:
            raise DisposedShapeError(f"{type(self).__name__} was removed and cannot be used")

    def remove(self) -> None:
        """Detach from the scene (if any) and dispose. Further geometric use raises."""
        if self.scene is not None:
            self.scene.detach(self)
        self._disposed = True

    # --- geometry ---

    @property
    @abstractmethod
    def geometry(self) -> Polygon | MultiPolygon:
        """Polygonal shapely geometry; empty when the shape encloses nothing."""

    @property
    def bounds(self) -> Bounds:
        self._check_alive()
        geom = self.geometry
        if geom.is_empty:
            return Bounds(0.0, 0.0, 0.0, 0.0)
        return Bounds.from_extent(geom.bounds)

    @property
    def position(self) -> Point:
        """Centre of the bounding box."""
        return self.bounds.center

    @property
    def width(self) -> float:
        return self.bounds.width

    @property
    def height(self) -> float:
        return self.bounds.height

    @property
    def area(self) -> float:
        self._check_alive()
        return float(self.geometry.area)

    @property
    def is_empty(self) -> bool:
        self._check_alive()
        return self.geometry.is_empty

    @property
    def path_data(self) -> str:
        """SVG path data for every contour, exteriors before their holes."""
        self._check_alive()
        parts: list[str] = []
        for poly in _iter_polygons(self.geometry):
            parts.append(ring_path_data(list(poly.exterior.coords)[:-1]))
            for hole in poly.interiors:
                parts.append(ring_path_data(list(hole.coords)[:-1]))
        return " ".join(p for p in parts if p)

    @abstractmethod
    def clone(self) -> Shape:
        """Detached copy with the same geometry and fill."""

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None: ...

    @abstractmethod
    def scale(self, factor: float, pivot: Point | None = None) -> None:
        """Scale about pivot, or about the bounds centre when pivot is None."""

    # --- boolean ops ---

    def _boolean(self, other: Shape, op: str) -> CompoundOutline:
        self._check_alive()
        other._check_alive()
        result = getattr(self.geometry, op)(other.geometry)
        return CompoundOutline(_polygonal(result))

    def unite(self, other: Shape) -> CompoundOutline:
        return self._boolean(other, "union")

    def intersect(self, other: Shape) -> CompoundOutline:
        return self._boolean(other, "intersection")

    def subtract(self, other: Shape) -> CompoundOutline:
        return self._boolean(other, "difference")

    # --- stacking ---

    def insert_below(self, reference: Shape) -> None:
        """Place this shape directly beneath reference in reference's scene."""
        self._check_alive()
        if reference.scene is None:
            raise ValueError("Reference shape is not part of a scene")
        reference.scene.insert_below(self, reference)

    def replace_with(self, other: Shape) -> None:
        """Let other take this shape's slot in the scene. This shape is detached, not disposed."""
        if self.scene is None:
            raise ValueError("Shape is not part of a scene")
        self.scene.replace(self, other)


class Outline(Shape):
    """A single closed ring of vertices."""

    def __init__(self, vertices: Iterable[Sequence[float]] | NDArray[np.float64] = ()) -> None:
        super().__init__()
        if not isinstance(vertices, np.ndarray):
            vertices = list(vertices)
        arr = np.asarray(vertices, dtype=np.float64).reshape(-1, 2)
        if len(arr) > 1 and np.array_equal(arr[0], arr[-1]):
            arr = arr[:-1]
        self._vertices: NDArray[np.float64] = arr.copy()

    @classmethod
    def from_path_data(cls, d: str, samples_per_curve: int = SAMPLES_PER_CURVE) -> Outline:
        """Flatten path data into one ring, subpaths concatenated in document order."""
        contours = parse_contours(d, samples_per_curve)
        return cls([pt for contour in contours for pt in contour])

    @classmethod
    def rectangle(cls, x: float, y: float, width: float, height: float) -> Outline:
        return cls([(x, y), (x + width, y), (x + width, y + height), (x, y + height)])

    def __len__(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> NDArray[np.float64]:
        """Live Nx2 view; edits change the outline."""
        self._check_alive()
        return self._vertices

    @property
    def points(self) -> list[Point]:
        return [Point(float(x), float(y)) for x, y in self.vertices]

    def remove_vertex(self, index: int) -> None:
        self._check_alive()
        self._vertices = np.delete(self._vertices, index, axis=0)

    def remove_vertices(self, indices: Iterable[int]) -> None:
        """Remove each listed index once, highest first so lower indices stay valid."""
        for index in sorted(set(indices), reverse=True):
            self.remove_vertex(index)

    @property
    def geometry(self) -> Polygon | MultiPolygon:
        self._check_alive()
        if len(self._vertices) < 3:
            return Polygon()
        poly = Polygon(self._vertices)
        if not poly.is_valid:
            return _polygonal(make_valid(poly))
        return poly if poly.area > 0 else Polygon()

    @property
    def bounds(self) -> Bounds:
        self._check_alive()
        return Bounds.from_extent(bbox(self._vertices))

    @property
    def path_data(self) -> str:
        self._check_alive()
        return ring_path_data(self._vertices.tolist())

    def clone(self) -> Outline:
        self._check_alive()
        copy = Outline(self._vertices)
        copy.fill = self.fill
        return copy

    def translate(self, dx: float, dy: float) -> None:
        self._check_alive()
        self._vertices += (dx, dy)

    def scale(self, factor: float, pivot: Point | None = None) -> None:
        self._check_alive()
        if pivot is None:
            pivot = self.position
        origin = np.array([pivot.x, pivot.y])
        self._vertices = origin + (self._vertices - origin) * factor


class CompoundOutline(Shape):
    """Polygonal geometry returned by a boolean operation."""

    def __init__(self, geometry: Polygon | MultiPolygon | None = None) -> None:
        super().__init__()
        self._geometry = geometry if geometry is not None else Polygon()

    @property
    def geometry(self) -> Polygon | MultiPolygon:
        self._check_alive()
        return self._geometry

    @property
    def contour_count(self) -> int:
        return sum(1 + len(p.interiors) for p in _iter_polygons(self.geometry))

    def clone(self) -> CompoundOutline:
        self._check_alive()
        copy = CompoundOutline(self._geometry)
        copy.fill = self.fill
        return copy

    def translate(self, dx: float, dy: float) -> None:
        self._check_alive()
        self._geometry = affinity.translate(self._geometry, dx, dy)

    def scale(self, factor: float, pivot: Point | None = None) -> None:
        self._check_alive()
        if pivot is None:
            pivot = self.position
        self._geometry = affinity.scale(self._geometry, factor, factor, origin=(pivot.x, pivot.y))
