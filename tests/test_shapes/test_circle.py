"""Tests for Circle."""

from __future__ import annotations

import math

import pytest

from shapesight.shapes import Circle, InvalidShapeError, Point


class TestCircle:
    def test_metrics(self, circle):
        assert circle.area() == pytest.approx(16 * math.pi)
        assert circle.perimeter() == pytest.approx(8 * math.pi)

    def test_leftmost_x(self, circle):
        assert circle.leftmost_x() == -2.0

    def test_render(self, circle):
        assert str(circle) == "Circle[center: 2.00,3.00; radius: 4.00]"

    def test_position(self, circle):
        assert circle.position() == (Point(2.0, 3.0),)
        assert circle.center == Point(2.0, 3.0)
        assert circle.radius == 4.0

    def test_from_pair(self):
        assert str(Circle((1, 1), 0.5)) == "Circle[center: 1.00,1.00; radius: 0.50]"

    @pytest.mark.parametrize("radius", [0.0, -1.0, float("nan"), float("inf")])
    def test_bad_radius(self, radius):
        with pytest.raises(InvalidShapeError, match="Invalid inputs for a circle"):
            Circle.at(0, 0, radius)

    def test_bad_center(self):
        with pytest.raises(InvalidShapeError, match="non-finite"):
            Circle((float("nan"), 0.0), 1.0)

    def test_natural_order(self, circle):
        assert Circle.at(0, 0, 1) < circle


class TestCircleSnap:
    def test_snap(self):
        c = Circle.at(1.4, 2.6, 3.5)
        assert c.snap() is True
        assert c.center == Point(1.0, 3.0)
        assert c.radius == 4.0

    def test_snap_rejected_when_radius_vanishes(self):
        c = Circle.at(0.4, 0.4, 0.4)
        assert c.snap() is False
        assert c.center == Point(0.4, 0.4)
        assert c.radius == 0.4
