"""Triangle and Quadrilateral: canonical vertex storage with all-or-nothing construction."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, ClassVar

from shapely.geometry import Polygon as ShapelyPolygon

from shapesight.shapes.canonical import anchor_ordering, canonicalize
from shapesight.shapes.config import DEFAULT_CONFIG, GeometryConfig
from shapesight.shapes.errors import InvalidShapeError
from shapesight.shapes.point import Point, PointLike, as_point, points_to_array
from shapesight.shapes.registry import shape_kind
from shapesight.shapes.render import render_polygon
from shapesight.shapes.validity import is_simple, quadrilateral_violation, triangle_violation
from shapesight.utils.geometry import ring_perimeter, triangle_area
from shapesight.utils.math_helpers import snap_value

logger = logging.getLogger(__name__)


class Polygon:
    """A non-degenerate polygon with a fixed number of sides.

    The stored vertex tuple is always canonical (clockwise around the
    centroid) and always valid. It is only ever replaced as a whole.
    """

    sides: ClassVar[int]
    name: ClassVar[str]
    _violation: ClassVar[Callable[[Sequence[PointLike], GeometryConfig | None], str | None]]

    def __init__(self, points: Sequence[PointLike], config: GeometryConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        if len(points) < self.sides:
            raise InvalidShapeError(
                self.name, f"expected at least {self.sides} vertices, got {len(points)}"
            )
        try:
            selected = [as_point(p) for p in points[: self.sides]]
        except (TypeError, ValueError) as e:
            raise InvalidShapeError(self.name, str(e)) from e

        reason = type(self)._violation(selected, self._config)
        if reason:
            raise InvalidShapeError(self.name, reason)

        self._vertices: tuple[Point, ...] = canonicalize(selected, self.sides)
        logger.debug("Constructed %s with canonical vertices %s", self.name, self._vertices)

    @property
    def vertices(self) -> tuple[Point, ...]:
        """Canonical (centroid-angle sorted) vertices, not anchored."""
        return self._vertices

    @property
    def config(self) -> GeometryConfig:
        return self._config

    def num_sides(self) -> int:
        return self.sides

    def position(self) -> tuple[Point, ...]:
        """Vertices clockwise, starting at the least x (then least y) vertex."""
        return anchor_ordering(self._vertices)

    def leftmost_x(self) -> float:
        return self.position()[0].x

    def area(self) -> float:
        raise NotImplementedError

    def perimeter(self) -> float:
        return ring_perimeter(points_to_array(self._vertices))

    def snap(self) -> bool:
        """Round every vertex to the nearest integer grid point.

        Applied only when the rounded vertices still form a valid shape;
        otherwise the shape is left exactly as it was. Returns whether the
        snap was applied.
        """
        mode = self._config.snap_rounding
        rounded = [Point(snap_value(p.x, mode), snap_value(p.y, mode)) for p in self._vertices]
        reason = type(self)._violation(rounded, self._config)
        if reason:
            logger.debug("Snap rejected for %s: %s", self.name, reason)
            return False
        self._vertices = canonicalize(rounded, self.sides)
        return True

    def is_simple(self) -> bool:
        return is_simple(self._vertices)

    def to_shapely(self) -> ShapelyPolygon:
        return ShapelyPolygon([p.coordinates() for p in self.position()])

    def __lt__(self, other: Any) -> bool:
        # Natural order: area
        if not hasattr(other, "area"):
            return NotImplemented
        return self.area() < other.area()

    def __str__(self) -> str:
        return render_polygon(self.name, self.position())

    def __repr__(self) -> str:
        coords = ", ".join(f"({p.x!r}, {p.y!r})" for p in self.position())
        return f"{type(self).__name__}([{coords}])"


class Triangle(Polygon):
    sides = 3
    name = "Triangle"
    _violation = staticmethod(triangle_violation)

    def area(self) -> float:
        """Heron's formula over the canonical side lengths."""
        return triangle_area(points_to_array(self._vertices))


class Quadrilateral(Polygon):
    sides = 4
    name = "Quadrilateral"
    _violation = staticmethod(quadrilateral_violation)

    def area(self) -> float:
        """Sum of the Heron areas of triangles [0, 1, 2] and [0, 2, 3].

        Exact for convex quadrilaterals only.
        """
        v = self._vertices
        first = triangle_area(points_to_array([v[0], v[1], v[2]]))
        second = triangle_area(points_to_array([v[0], v[2], v[3]]))
        return first + second


@shape_kind(kind="triangle", vertex_count=3, description="Three-vertex polygon")
def _build_triangle(params: dict[str, Any], config: GeometryConfig) -> Triangle:
    return Triangle(params.get("points") or [], config=config)


@shape_kind(kind="quadrilateral", vertex_count=4, description="Four-vertex polygon")
def _build_quadrilateral(params: dict[str, Any], config: GeometryConfig) -> Quadrilateral:
    return Quadrilateral(params.get("points") or [], config=config)
