"""SVG path data <-> vertex contours, via the fontTools pen protocol.

fontTools.svgLib parses `d` strings and drives a pen; ContourPen records one
vertex list per subpath. Curves (including arcs, which svgLib draws as
cubics) are flattened by sampling.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from fontTools.pens.basePen import BasePen
from fontTools.svgLib.path import parse_path

from longshadow.errors import GeometryError

Contour = list[tuple[float, float]]

SAMPLES_PER_CURVE = 16


def _fmt(value: float) -> str:
    # repr round-trips exactly; numpy scalars would otherwise print as np.float64(...)
    return repr(float(value))


def ring_path_data(coords: Sequence[Sequence[float]]) -> str:
    """One closed subpath: M x,y L x,y ... Z."""
    if len(coords) == 0:
        return ""
    head = f"M {_fmt(coords[0][0])},{_fmt(coords[0][1])}"
    tail = "".join(f" L {_fmt(x)},{_fmt(y)}" for x, y in coords[1:])
    return head + tail + " Z"


class ContourPen(BasePen):
    """Record the vertices of every subpath drawn into it.

    Each segment contributes its end point; a moveTo contributes the start.
    Open subpaths are treated as closed.
    """

    def __init__(self, samples_per_curve: int = SAMPLES_PER_CURVE) -> None:
        super().__init__(glyphSet=None)
        self.samples_per_curve = samples_per_curve
        self.contours: list[Contour] = []
        self._current: Contour = []

    def _moveTo(self, pt):
        self._finish()
        self._current = [(float(pt[0]), float(pt[1]))]

    def _lineTo(self, pt):
        self._current.append((float(pt[0]), float(pt[1])))

    def _curveToOne(self, pt1, pt2, pt3):
        p0 = np.array(self._getCurrentPoint(), dtype=np.float64)
        p1, p2, p3 = (np.array(p, dtype=np.float64) for p in (pt1, pt2, pt3))
        for t in np.linspace(0, 1, self.samples_per_curve + 1)[1:]:
            mt = 1 - t
            pt = mt**3 * p0 + 3 * mt**2 * t * p1 + 3 * mt * t**2 * p2 + t**3 * p3
            self._current.append((float(pt[0]), float(pt[1])))

    def _closePath(self):
        self._finish()

    def _endPath(self):
        self._finish()

    def _finish(self) -> None:
        contour = self._current
        if len(contour) > 1 and contour[-1] == contour[0]:
            contour = contour[:-1]
        if contour:
            self.contours.append(contour)
        self._current = []


def parse_contours(d: str, samples_per_curve: int = SAMPLES_PER_CURVE) -> list[Contour]:
    """Vertex lists for each subpath of `d`, in document order."""
    if not d.strip():
        return []
    pen = ContourPen(samples_per_curve)
    try:
        parse_path(d, pen)
    except Exception as e:
        raise GeometryError(f"Invalid path data: {e}") from e
    pen._finish()
    return pen.contours
