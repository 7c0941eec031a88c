"""Circle: centre plus positive radius. Takes part in shape ordering only."""

from __future__ import annotations

import logging
import math
from typing import Any

from shapesight.shapes.config import DEFAULT_CONFIG, GeometryConfig
from shapesight.shapes.errors import InvalidShapeError
from shapesight.shapes.point import Point, PointLike, as_point
from shapesight.shapes.registry import shape_kind
from shapesight.shapes.render import render_circle
from shapesight.utils.math_helpers import snap_value

logger = logging.getLogger(__name__)


class Circle:
    name = "Circle"

    def __init__(
        self,
        center: PointLike,
        radius: float,
        config: GeometryConfig | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        try:
            center = as_point(center)
            radius = float(radius)
        except (TypeError, ValueError) as e:
            raise InvalidShapeError(self.name, str(e)) from e
        if not center.is_finite():
            raise InvalidShapeError(self.name, f"non-finite coordinate in {center.coordinates()}")
        if not (math.isfinite(radius) and radius > 0):
            raise InvalidShapeError(self.name, f"radius must be positive, got {radius}")
        self._center = center
        self._radius = radius

    @classmethod
    def at(cls, x: float, y: float, radius: float, config: GeometryConfig | None = None) -> Circle:
        return cls(Point(float(x), float(y)), radius, config=config)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def config(self) -> GeometryConfig:
        return self._config

    def position(self) -> tuple[Point, ...]:
        return (self._center,)

    def leftmost_x(self) -> float:
        return self._center.x - self._radius

    def area(self) -> float:
        return math.pi * self._radius**2

    def perimeter(self) -> float:
        return 2 * math.pi * self._radius

    def snap(self) -> bool:
        """Round centre and radius to integers; rejected if the radius rounds to zero."""
        mode = self._config.snap_rounding
        radius = snap_value(self._radius, mode)
        if radius <= 0:
            logger.debug("Snap rejected for Circle: radius %s rounds to %s", self._radius, radius)
            return False
        self._center = Point(snap_value(self._center.x, mode), snap_value(self._center.y, mode))
        self._radius = radius
        return True

    def __lt__(self, other: Any) -> bool:
        if not hasattr(other, "area"):
            return NotImplemented
        return self.area() < other.area()

    def __str__(self) -> str:
        return render_circle(self._center, self._radius)

    def __repr__(self) -> str:
        return f"Circle(center=({self._center.x!r}, {self._center.y!r}), radius={self._radius!r})"


@shape_kind(kind="circle", description="Centre and positive radius")
def _build_circle(params: dict[str, Any], config: GeometryConfig) -> Circle:
    center = params.get("center")
    radius = params.get("radius")
    if center is None or radius is None:
        raise InvalidShapeError("Circle", "center and radius are required")
    return Circle(center, radius, config=config)
