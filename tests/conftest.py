"""Shared test fixtures."""

from __future__ import annotations

import pytest

from shapesight.shapes import Circle, Quadrilateral, Triangle

# Point sets used across the suite

RIGHT_TRIANGLE = [(0.0, 0.0), (4.0, 0.0), (0.0, 3.0)]
RIGHT_TRIANGLE_STR = "Triangle[(0.00, 0.00), (0.00, 3.00), (4.00, 0.00)]"

SQUARE = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
SQUARE_STR = "Quadrilateral[(0.00, 0.00), (0.00, 4.00), (4.00, 4.00), (4.00, 0.00)]"

COLLINEAR = [(0.0, 0.0), (4.0, 0.0), (8.0, 0.0)]
VERTICAL = [(1.0, 0.0), (1.0, 5.0), (1.0, 9.0)]
SAME_POINT = [(2.0, 2.0), (2.0, 2.0), (2.0, 2.0)]

# Convex, not axis-aligned
KITE = [(0.0, 0.0), (5.0, -1.0), (6.0, 4.0), (1.0, 3.0)]

# Concave "arrow": (5, 1) is a reflex vertex
ARROW = [(0.0, 0.0), (10.0, 0.0), (5.0, 1.0), (5.0, 10.0)]

# Coordinates from the ordering demo
DEMO_POINTS = [(-3.0, 8.0), (4.0, 10.0), (6.0, -4.0), (-10.0, -10.0)]


@pytest.fixture
def right_triangle() -> Triangle:
    return Triangle(RIGHT_TRIANGLE)


@pytest.fixture
def square() -> Quadrilateral:
    return Quadrilateral(SQUARE)


@pytest.fixture
def circle() -> Circle:
    return Circle.at(2, 3, 4)
