"""Vertex canonicalization: clockwise order around the centroid, then anchoring.

Both functions are pure: they return new tuples and never touch the caller's
sequence.
"""

from __future__ import annotations

from collections.abc import Sequence

from shapesight.shapes.point import Point, PointLike, as_point, points_to_array
from shapesight.utils.geometry import anchor_index, clockwise_order


def canonicalize(points: Sequence[PointLike], n: int) -> tuple[Point, ...]:
    """Sort the first ``n`` points clockwise around their centroid.

    Extra points are ignored. The result is not yet anchored to any vertex;
    equal angles keep their input order.
    """
    if len(points) < n:
        raise ValueError(f"Need at least {n} points, got {len(points)}")
    selected = [as_point(p) for p in points[:n]]
    order = clockwise_order(points_to_array(selected))
    return tuple(selected[i] for i in order)


def anchor_ordering(vertices: Sequence[Point]) -> tuple[Point, ...]:
    """Rotate a canonical ordering to start at the min-x (then min-y) vertex."""
    n = len(vertices)
    if n == 0:
        return ()
    start = anchor_index(points_to_array(vertices))
    return tuple(vertices[(start + i) % n] for i in range(n))
