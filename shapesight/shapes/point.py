"""Immutable 2D coordinate and conversions to and from numpy arrays."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    """A point on the x-y plane. Equality is by value."""

    x: float
    y: float

    def coordinates(self) -> tuple[float, float]:
        return (self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def distance(self, metric: str = "coordinate_sum") -> float:
        """Distance from the origin.

        The default ``coordinate_sum`` metric is ``sqrt(x + y)``, which is not
        Euclidean; a negative coordinate sum yields NaN. ``euclidean`` gives
        ``hypot(x, y)``.
        """
        if metric == "euclidean":
            return math.hypot(self.x, self.y)
        if metric != "coordinate_sum":
            raise ValueError(f"Unknown distance metric: {metric!r}")
        total = self.x + self.y
        if total < 0:
            return math.nan
        return math.sqrt(total)

    def __lt__(self, other: Point) -> bool:
        # Natural order: distance from origin
        if not isinstance(other, Point):
            return NotImplemented
        return self.distance() < other.distance()


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Accept a Point or an (x, y) pair."""
    if isinstance(value, Point):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {value!r}")
    return Point(float(value[0]), float(value[1]))


def points_from_doubles(values: Iterable[float]) -> list[Point]:
    """Pair up a flat ``[x1, y1, x2, y2, ...]`` list into Points."""
    flat = [float(v) for v in values]
    if len(flat) % 2 != 0:
        raise ValueError(f"Need an even number of coordinates, got {len(flat)}")
    return [Point(flat[i], flat[i + 1]) for i in range(0, len(flat), 2)]


def points_to_array(points: Sequence[Point]) -> NDArray[np.float64]:
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array([p.coordinates() for p in points], dtype=np.float64)
