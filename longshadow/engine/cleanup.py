"""Vertex clean-up passes for swept shadow outlines.

Sweeping an icon by repeated translate+union leaves two kinds of debris:

  * near-duplicate vertices where contours were stitched together
  * staircase runs, one pair of vertices per sweep step, e.g.

        o
          o              o
            o     ->
              o              o

All passes edit the Outline in place and return how many vertices they touched.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from longshadow.engine.constants import (
    DUPLICATE_TOLERANCE,
    STAIRCASE_DECIMALS,
    TAIL_EXTENSION,
)
from longshadow.shapes.outline import Outline
from longshadow.utils.geometry import distances_from, round_half_up

logger = logging.getLogger(__name__)

# A ring needs three vertices to enclose anything.
_MIN_RING_VERTICES = 3


def _distance(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    return float(math.hypot(a[0] - b[0], a[1] - b[1]))


# == Deduplication ===========================================================


def duplicate_vertex_indices(
    vertices: NDArray[np.float64],
    tolerance: float = DUPLICATE_TOLERANCE,
) -> list[int]:
    """Indices of vertices closer than tolerance to the previous kept vertex.

    The ring is cyclic: once the walk is done, trailing vertices that sit on top
    of the first vertex are dropped too.
    """
    n = len(vertices)
    if n < 2:
        return []

    kept = [0]
    duplicates: list[int] = []
    for i in range(1, n):
        if _distance(vertices[i], vertices[kept[-1]]) < tolerance:
            duplicates.append(i)
        else:
            kept.append(i)

    while len(kept) > 1 and _distance(vertices[kept[-1]], vertices[kept[0]]) < tolerance:
        duplicates.append(kept.pop())

    return duplicates


def remove_duplicate_vertices(outline: Outline, tolerance: float = DUPLICATE_TOLERANCE) -> int:
    indices = duplicate_vertex_indices(outline.vertices, tolerance)
    outline.remove_vertices(indices)
    return len(indices)


# == Staircase simplification ================================================


def staircase_distances(step: float) -> set[float]:
    """Rounded distances between a vertex and the one two places before it on a staircase.

    One diagonal step spans sqrt(2)*step; two consecutive steps span twice that.
    """
    diagonal_step = math.sqrt(2) * step
    return {
        round_half_up(diagonal_step, STAIRCASE_DECIMALS),
        round_half_up(diagonal_step * 2, STAIRCASE_DECIMALS),
    }


def staircase_vertex_indices(vertices: NDArray[np.float64], step: float) -> list[int]:
    """Indices of the interior vertices of every staircase run.

    Each vertex is compared with the one two positions earlier. A run of
    matches ends at the first mismatch, or at the last position of the walk;
    the vertices strictly inside the run are marked and its two end vertices
    survive. The walk covers n + 3 positions so a run crossing the start of
    the ring is seen whole.
    """
    n = len(vertices)
    if n < _MIN_RING_VERTICES:
        return []

    expected = staircase_distances(step)
    total_iterations = n + 3
    marked: set[int] = set()
    match_count = 0

    for i in range(total_iterations):
        index = i % n
        matched = True
        if i >= 2:
            second_last = vertices[(i - 2) % n]
            distance = round_half_up(_distance(vertices[index], second_last), STAIRCASE_DECIMALS)
            matched = distance in expected
            if matched:
                match_count += 1

        if match_count > 0 and (not matched or i == total_iterations - 1):
            # last matched vertex ends the run
            end = index if matched else index - 1
            for remove_idx in range(end - match_count, end):
                marked.add(remove_idx % n)
            match_count = 0

    return sorted(marked)


def simplify_staircase(outline: Outline, step: float) -> int:
    indices = staircase_vertex_indices(outline.vertices, step)
    if indices and len(outline) - len(indices) < _MIN_RING_VERTICES:
        logger.warning(
            "Staircase pass would leave %d of %d vertices, skipping",
            len(outline) - len(indices),
            len(outline),
        )
        return 0
    outline.remove_vertices(indices)
    return len(indices)


# == Tail extension ==========================================================


def far_vertex_mask(outline: Outline, diagonal: float) -> NDArray[np.bool_]:
    """True for vertices farther than diagonal from the outline's top-left corner."""
    top_left = outline.bounds.top_left
    return distances_from(outline.vertices, (top_left.x, top_left.y)) > diagonal


def extend_tail(outline: Outline, diagonal: float, distance: float = TAIL_EXTENSION) -> int:
    """Push the far edge out by distance along both axes."""
    mask = far_vertex_mask(outline, diagonal)
    outline.vertices[mask] += distance
    return int(np.count_nonzero(mask))
