"""Tests for path data parsing through the fontTools pen."""

from __future__ import annotations

import pytest

from longshadow.errors import GeometryError
from longshadow.shapes.pathdata import ContourPen, parse_contours, ring_path_data


def test_lines_record_end_points():
    assert parse_contours("M 0,0 L 4,0 L 4,4 Z") == [[(0, 0), (4, 0), (4, 4)]]


def test_explicit_closing_vertex_dropped():
    assert parse_contours("M 0,0 L 4,0 L 4,4 L 0,0 Z") == [[(0, 0), (4, 0), (4, 4)]]


def test_relative_commands():
    assert parse_contours("m 1,1 l 2,0 l 0,2 z") == [[(1, 1), (3, 1), (3, 3)]]


def test_open_subpath_kept():
    assert parse_contours("M 0,0 L 4,0 L 4,4") == [[(0, 0), (4, 0), (4, 4)]]


def test_subpaths_in_document_order():
    contours = parse_contours("M 0,0 L 1,0 L 1,1 Z M 5,5 L 6,5 L 6,6 Z")
    assert len(contours) == 2
    assert contours[1][0] == (5, 5)


def test_quadratic_sampled():
    contour = parse_contours("M 0,0 Q 5,10 10,0 Z", samples_per_curve=4)[0]
    assert len(contour) == 5
    assert contour[-1] == pytest.approx((10, 0))
    # midpoint of the curve
    assert contour[2] == pytest.approx((5, 5))


def test_arc_sampled():
    contour = parse_contours("M 0,0 A 5,5 0 0 1 10,0 Z", samples_per_curve=8)[0]
    assert contour[-1] == pytest.approx((10, 0))
    assert max(abs(y) for _, y in contour) == pytest.approx(5, abs=0.05)


def test_blank_is_empty():
    assert parse_contours("") == []
    assert parse_contours("  \n ") == []


def test_truncated_command_raises():
    with pytest.raises(GeometryError):
        parse_contours("M 0,0 L")


def test_pen_direct_use():
    pen = ContourPen()
    pen.moveTo((0, 0))
    pen.lineTo((2, 0))
    pen.lineTo((2, 2))
    pen.closePath()
    assert pen.contours == [[(0, 0), (2, 0), (2, 2)]]


def test_ring_path_data():
    assert ring_path_data([(0, 0), (1.5, 0), (1.5, 2)]) == "M 0.0,0.0 L 1.5,0.0 L 1.5,2.0 Z"
    assert ring_path_data([]) == ""
