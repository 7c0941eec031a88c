"""Polygon validity: degenerate (zero-area) detection for triangles and quads.

The quadrilateral rule is a necessary condition only: each of the four
triangles left after omitting one vertex must be non-degenerate. A
self-intersecting quadrilateral whose sub-triangles all have area still
passes; ``is_simple`` reports that case without rejecting it.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon

from shapesight.shapes.canonical import canonicalize
from shapesight.shapes.config import DEFAULT_CONFIG, GeometryConfig
from shapesight.shapes.point import Point, PointLike, as_point, points_to_array
from shapesight.utils.geometry import side_lengths, triangle_area, twice_area

# Sub-triangles of a canonical quadrilateral, keyed by the omitted vertex
_QUAD_SUBTRIANGLES = {
    0: (1, 2, 3),
    1: (0, 2, 3),
    2: (0, 1, 3),
    3: (0, 1, 2),
}


def _finite_violation(points: Sequence[Point]) -> str | None:
    for p in points:
        if not p.is_finite():
            return f"non-finite coordinate in {p.coordinates()}"
    return None


def triangle_violation(
    points: Sequence[PointLike],
    config: GeometryConfig | None = None,
) -> str | None:
    """Return the rule the first three points break, or None if they form a triangle."""
    cfg = config or DEFAULT_CONFIG
    if len(points) < 3:
        return f"expected at least 3 vertices, got {len(points)}"
    pts = [as_point(p) for p in points[:3]]
    reason = _finite_violation(pts)
    if reason:
        return reason

    # Same x everywhere is collinear without computing anything
    if pts[0].x == pts[1].x == pts[2].x:
        return "all vertices share the same x-coordinate"

    arr = points_to_array(pts)
    if triangle_area(arr) == 0.0:
        return "vertices are collinear (zero area)"

    longest = float(np.max(side_lengths(arr)))
    if twice_area(arr) <= cfg.collinear_rel_tol * longest * longest:
        return "vertices are collinear within tolerance"
    return None


def is_valid_triangle(points: Sequence[PointLike], config: GeometryConfig | None = None) -> bool:
    return triangle_violation(points, config) is None


def quadrilateral_violation(
    points: Sequence[PointLike],
    config: GeometryConfig | None = None,
) -> str | None:
    """Return the rule the first four points break, or None if they form a quadrilateral."""
    if len(points) < 4:
        return f"expected at least 4 vertices, got {len(points)}"
    pts = [as_point(p) for p in points[:4]]
    reason = _finite_violation(pts)
    if reason:
        return reason

    canonical = canonicalize(pts, 4)
    for omitted, indices in _QUAD_SUBTRIANGLES.items():
        sub_reason = triangle_violation([canonical[i] for i in indices], config)
        if sub_reason:
            return f"triangle without vertex {omitted} is degenerate ({sub_reason})"
    return None


def is_valid_quadrilateral(points: Sequence[PointLike], config: GeometryConfig | None = None) -> bool:
    return quadrilateral_violation(points, config) is None


def is_valid(points: Sequence[PointLike], n: int, config: GeometryConfig | None = None) -> bool:
    """Validity for a polygon of arity ``n`` (3 or 4)."""
    if n == 3:
        return is_valid_triangle(points, config)
    if n == 4:
        return is_valid_quadrilateral(points, config)
    raise ValueError(f"Only triangles and quadrilaterals are supported, got n={n}")


def is_simple(vertices: Sequence[Point]) -> bool:
    """Whether the ring, taken in the given order, has no self-intersection."""
    if len(vertices) < 3:
        return False
    return bool(ShapelyPolygon([p.coordinates() for p in vertices]).is_valid)
