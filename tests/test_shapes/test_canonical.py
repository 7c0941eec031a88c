"""Tests for vertex canonicalization and anchor ordering."""

from __future__ import annotations

import itertools

import pytest

from shapesight.shapes import Point, anchor_ordering, canonicalize
from shapesight.shapes.point import points_to_array
from shapesight.utils.geometry import winding_direction
from tests.conftest import RIGHT_TRIANGLE, SQUARE

SQUARE_CANONICAL = (Point(0, 0), Point(0, 4), Point(4, 4), Point(4, 0))


class TestCanonicalize:
    def test_square_clockwise_from_centroid(self):
        assert canonicalize(SQUARE, 4) == SQUARE_CANONICAL

    @pytest.mark.parametrize("perm", list(itertools.permutations(SQUARE)))
    def test_square_independent_of_input_order(self, perm):
        assert canonicalize(list(perm), 4) == SQUARE_CANONICAL

    def test_triangle(self):
        assert canonicalize(RIGHT_TRIANGLE, 3) == (Point(0, 0), Point(0, 3), Point(4, 0))

    def test_extra_points_ignored(self):
        assert canonicalize(SQUARE + [(100.0, 100.0)], 4) == SQUARE_CANONICAL

    def test_too_few_points(self):
        with pytest.raises(ValueError):
            canonicalize(SQUARE[:3], 4)

    def test_input_not_mutated(self):
        points = list(SQUARE)
        canonicalize(points, 4)
        assert points == SQUARE

    def test_output_winds_clockwise(self):
        for pts, n in ((RIGHT_TRIANGLE, 3), (SQUARE, 4)):
            assert winding_direction(points_to_array(canonicalize(pts, n))) == -1


class TestAnchorOrdering:
    def test_already_anchored(self):
        assert anchor_ordering(SQUARE_CANONICAL) == SQUARE_CANONICAL

    def test_rotates_to_min_x_min_y(self):
        rotated = SQUARE_CANONICAL[1:] + SQUARE_CANONICAL[:1]
        assert rotated[0] == Point(0, 4)
        assert anchor_ordering(rotated) == SQUARE_CANONICAL

    def test_tie_break_scans_only_tied_vertices(self):
        # Min-x vertices sit at indices 2 and 3; the lower one is at 3
        vertices = (Point(4, 4), Point(4, 0), Point(0, 4), Point(0, 0))
        assert anchor_ordering(vertices) == (Point(0, 0), Point(4, 4), Point(4, 0), Point(0, 4))

    def test_empty(self):
        assert anchor_ordering(()) == ()
