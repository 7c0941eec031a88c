"""Tests for triangle / quadrilateral validity rules."""

from __future__ import annotations

import pytest

from shapesight.shapes import (
    GeometryConfig,
    Point,
    Quadrilateral,
    is_simple,
    is_valid,
    is_valid_quadrilateral,
    is_valid_triangle,
    quadrilateral_violation,
    triangle_violation,
)
from tests.conftest import ARROW, COLLINEAR, KITE, RIGHT_TRIANGLE, SAME_POINT, SQUARE, VERTICAL


class TestTriangleValidity:
    def test_valid(self):
        assert is_valid_triangle(RIGHT_TRIANGLE)
        assert triangle_violation(RIGHT_TRIANGLE) is None

    def test_horizontal_collinear(self):
        assert triangle_violation(COLLINEAR) == "vertices are collinear (zero area)"

    def test_same_x_short_circuit(self):
        assert triangle_violation(VERTICAL) == "all vertices share the same x-coordinate"

    def test_identical_points(self):
        assert not is_valid_triangle(SAME_POINT)

    def test_diagonal_collinear_with_float_noise(self):
        assert not is_valid_triangle([(0.1, 0.1), (0.2, 0.2), (0.3, 0.3)])

    def test_two_coincident_vertices(self):
        assert not is_valid_triangle([(0.0, 0.0), (0.0, 0.0), (1.0, 1.0)])

    def test_too_few(self):
        assert triangle_violation(RIGHT_TRIANGLE[:2]) == "expected at least 3 vertices, got 2"

    def test_non_finite(self):
        assert "non-finite" in triangle_violation([(float("nan"), 0.0), (1.0, 0.0), (0.0, 1.0)])

    def test_thin_triangle_respects_tolerance(self):
        thin = [(0.0, 0.0), (1.0, 0.0), (2.0, 1e-7)]
        assert is_valid_triangle(thin)
        strict = GeometryConfig(collinear_rel_tol=1e-6)
        assert triangle_violation(thin, strict) == "vertices are collinear within tolerance"


class TestQuadrilateralValidity:
    def test_valid(self):
        assert is_valid_quadrilateral(SQUARE)
        assert is_valid_quadrilateral(KITE)

    def test_valid_in_any_order(self):
        assert is_valid_quadrilateral([SQUARE[2], SQUARE[0], SQUARE[3], SQUARE[1]])

    def test_three_collinear(self):
        reason = quadrilateral_violation([(0.0, 0.0), (2.0, 0.0), (4.0, 0.0), (2.0, 3.0)])
        assert reason is not None
        assert "degenerate" in reason

    def test_repeated_vertex(self):
        assert not is_valid_quadrilateral([(0.0, 0.0), (0.0, 0.0), (4.0, 0.0), (0.0, 4.0)])

    def test_too_few(self):
        assert quadrilateral_violation(SQUARE[:3]) == "expected at least 4 vertices, got 3"

    def test_concave_passes(self):
        # The sub-triangle rule does not test convexity
        assert is_valid_quadrilateral(ARROW)

    def test_concave_area_uses_fan_decomposition(self):
        quad = Quadrilateral(ARROW)
        # Triangles [0, 1, 2] + [0, 2, 3] of the canonical order: 50 + 5
        assert quad.area() == pytest.approx(55.0)
        assert quad.to_shapely().area == pytest.approx(45.0)


class TestIsValidDispatch:
    def test_dispatch(self):
        assert is_valid(RIGHT_TRIANGLE, 3)
        assert is_valid(SQUARE, 4)
        assert not is_valid(COLLINEAR, 3)

    def test_unsupported_arity(self):
        with pytest.raises(ValueError):
            is_valid(SQUARE + [(5.0, 5.0)], 5)


class TestIsSimple:
    def test_square(self):
        assert is_simple([Point(*p) for p in SQUARE])

    def test_bow_tie(self):
        assert not is_simple([Point(0, 0), Point(4, 4), Point(4, 0), Point(0, 4)])

    def test_too_few(self):
        assert not is_simple([Point(0, 0), Point(1, 1)])
