"""Tests for the vertex clean-up passes."""

from __future__ import annotations

import math

import numpy as np
import pytest

from longshadow.engine.cleanup import (
    duplicate_vertex_indices,
    extend_tail,
    far_vertex_mask,
    remove_duplicate_vertices,
    simplify_staircase,
    staircase_distances,
    staircase_vertex_indices,
)
from longshadow.engine.constants import DUPLICATE_TOLERANCE
from longshadow.engine.shadow import sweep, sweep_step
from longshadow.shapes.outline import Outline
from longshadow.utils.geometry import round_half_up

# Square with a five-step staircase on its right edge (step = 1)
STAIRCASE_RING = [
    (0, 0),
    (10, 0),
    (10, 1),
    (11, 1),
    (11, 2),
    (12, 2),
    (12, 3),
    (13, 3),
    (13, 13),
    (0, 13),
]


def _cyclic_gaps(vertices: np.ndarray) -> np.ndarray:
    return np.hypot(*(vertices - np.roll(vertices, 1, axis=0)).T)


class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(0.125) == 0.13

    def test_below_half_rounds_down(self):
        assert round_half_up(0.124) == 0.12


class TestDeduplication:
    def test_indices(self):
        vertices = np.array([(0, 0), (0, 0.00005), (1, 0), (1, 1), (0, 1), (0.00001, 0)])
        assert duplicate_vertex_indices(vertices) == [1, 5]

    def test_compares_with_last_kept_vertex(self):
        # Each point is within tolerance of its predecessor but not of the first
        vertices = np.array([(0, 0), (6e-5, 0), (1.2e-4, 0), (1, 0), (1, 1)])
        assert duplicate_vertex_indices(vertices) == [1]

    def test_cyclic_spacing_after_removal(self):
        rng = np.random.default_rng(7)
        base = np.array([(0, 0), (5, 0), (5, 5), (0, 5)], dtype=float)
        jittered = np.repeat(base, 3, axis=0) + rng.uniform(-3e-5, 3e-5, size=(12, 2))
        outline = Outline(jittered)
        removed = remove_duplicate_vertices(outline)
        assert removed == 8
        assert len(outline) == 4
        assert _cyclic_gaps(outline.vertices).min() >= DUPLICATE_TOLERANCE

    def test_too_short(self):
        assert duplicate_vertex_indices(np.array([(0.0, 0.0)])) == []


class TestStaircase:
    def test_distances(self):
        assert staircase_distances(1.0) == {1.41, 2.83}

    def test_run_interior_is_marked(self):
        indices = staircase_vertex_indices(np.array(STAIRCASE_RING, dtype=float), step=1.0)
        assert indices == [2, 3, 4, 5, 6]

    def test_simplify_keeps_run_ends(self):
        outline = Outline(STAIRCASE_RING)
        assert simplify_staircase(outline, step=1.0) == 5
        assert [tuple(p) for p in outline.points] == [(0, 0), (10, 0), (13, 3), (13, 13), (0, 13)]

    def test_plain_square_untouched(self):
        outline = Outline.rectangle(0, 0, 10, 10)
        assert simplify_staircase(outline, step=1.0) == 0
        assert len(outline) == 4

    def test_swept_square_loses_staircase(self):
        icon = Outline.rectangle(0, 0, 100, 100)
        step = sweep_step(math.sqrt(2) * 100)
        swept = sweep(icon, step)
        outline = Outline.from_path_data(swept.path_data)
        raw = len(outline)
        before = outline.bounds

        remove_duplicate_vertices(outline)
        simplify_staircase(outline, step)

        assert raw > 300
        assert len(outline) < 20
        after = outline.bounds
        assert after.x == pytest.approx(before.x, abs=1e-2)
        assert after.y == pytest.approx(before.y, abs=1e-2)
        assert after.width == pytest.approx(before.width, abs=1e-2)
        assert after.height == pytest.approx(before.height, abs=1e-2)
        corners = {(round(p.x, 2), round(p.y, 2)) for p in outline.points}
        assert {(0.0, 0.0), (100.0, 0.0), (0.0, 100.0)} <= corners


class TestTailExtension:
    def test_far_vertices_selected(self):
        outline = Outline.rectangle(0, 0, 10, 10)
        mask = far_vertex_mask(outline, diagonal=12)
        assert mask.tolist() == [False, False, True, False]

    def test_extend(self):
        outline = Outline.rectangle(0, 0, 10, 10)
        assert extend_tail(outline, diagonal=12) == 1
        assert tuple(outline.points[2]) == (1_000_010, 1_000_010)
        assert tuple(outline.points[0]) == (0, 0)

    def test_empty_outline(self):
        assert extend_tail(Outline(), diagonal=1) == 0
