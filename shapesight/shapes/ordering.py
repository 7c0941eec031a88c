"""Orderings over shapes and points.

Comparators return an int like ``cmp``; the sort helpers wrap them with
``functools.cmp_to_key`` and return new lists (Python's sort is stable).
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Sequence
from typing import Union

from shapesight.shapes.circle import Circle
from shapesight.shapes.config import DEFAULT_CONFIG, GeometryConfig
from shapesight.shapes.point import Point
from shapesight.shapes.polygons import Polygon, Quadrilateral, Triangle
from shapesight.utils.math_helpers import sign, truncate

Shape = Union[Circle, Triangle, Quadrilateral]


def _compare(delta: float, config: GeometryConfig) -> int:
    if config.comparator_precision == "truncated":
        return truncate(delta)
    return sign(delta)


def compare_leftmost(a: Shape | Polygon, b: Shape | Polygon, config: GeometryConfig | None = None) -> int:
    """Order shapes by their least x (a circle's is ``center.x - radius``)."""
    return _compare(a.leftmost_x() - b.leftmost_x(), config or DEFAULT_CONFIG)


def compare_area(a: Shape | Polygon, b: Shape | Polygon) -> int:
    """Natural order of shapes."""
    return sign(a.area() - b.area())


def compare_x(p: Point, q: Point, config: GeometryConfig | None = None) -> int:
    return _compare(p.x - q.x, config or DEFAULT_CONFIG)


def compare_distance(p: Point, q: Point, config: GeometryConfig | None = None) -> int:
    """Natural order of points: distance from the origin under the configured metric."""
    cfg = config or DEFAULT_CONFIG
    return _compare(p.distance(cfg.distance_metric) - q.distance(cfg.distance_metric), cfg)


def sort_shapes_by_leftmost(shapes: Iterable[Shape], config: GeometryConfig | None = None) -> list[Shape]:
    return sorted(shapes, key=functools.cmp_to_key(lambda a, b: compare_leftmost(a, b, config)))


def sort_shapes_by_area(shapes: Iterable[Shape]) -> list[Shape]:
    return sorted(shapes, key=functools.cmp_to_key(compare_area))


def sort_points_by_x(points: Iterable[Point], config: GeometryConfig | None = None) -> list[Point]:
    return sorted(points, key=functools.cmp_to_key(lambda p, q: compare_x(p, q, config)))


def sort_points_by_distance(points: Iterable[Point], config: GeometryConfig | None = None) -> list[Point]:
    return sorted(points, key=functools.cmp_to_key(lambda p, q: compare_distance(p, q, config)))


def least(shapes: Iterable[Shape]) -> Shape:
    """Smallest shape by area; the first one wins ties."""
    result = None
    for shape in shapes:
        if result is None or compare_area(result, shape) > 0:
            result = shape
    if result is None:
        raise ValueError("least() of an empty collection")
    return result


def print_all_and_return_least(
    shapes: Sequence[Shape],
    printer: Callable[[str], None] = print,
) -> Shape:
    """Print every shape's rendering in order, then return the least by area."""
    if not shapes:
        raise ValueError("print_all_and_return_least() of an empty collection")
    result = shapes[0]
    for shape in shapes:
        if compare_area(result, shape) > 0:
            result = shape
        printer(str(shape))
    return result
