"""ShapeSight shape core: canonical vertices, validity, metrics and ordering."""

from shapesight.shapes.canonical import anchor_ordering, canonicalize
from shapesight.shapes.circle import Circle
from shapesight.shapes.config import DEFAULT_CONFIG, GeometryConfig
from shapesight.shapes.errors import InvalidShapeError
from shapesight.shapes.ordering import (
    Shape,
    compare_area,
    compare_distance,
    compare_leftmost,
    compare_x,
    least,
    print_all_and_return_least,
    sort_points_by_distance,
    sort_points_by_x,
    sort_shapes_by_area,
    sort_shapes_by_leftmost,
)
from shapesight.shapes.point import Point, as_point, points_from_doubles
from shapesight.shapes.polygons import Polygon, Quadrilateral, Triangle
from shapesight.shapes.registry import ShapeRegistry, ShapeSpec, get_registry, shape_kind
from shapesight.shapes.validity import (
    is_simple,
    is_valid,
    is_valid_quadrilateral,
    is_valid_triangle,
    quadrilateral_violation,
    triangle_violation,
)

__all__ = [
    "Point",
    "as_point",
    "points_from_doubles",
    "canonicalize",
    "anchor_ordering",
    "is_valid",
    "is_valid_triangle",
    "is_valid_quadrilateral",
    "triangle_violation",
    "quadrilateral_violation",
    "is_simple",
    "Polygon",
    "Triangle",
    "Quadrilateral",
    "Circle",
    "Shape",
    "InvalidShapeError",
    "GeometryConfig",
    "DEFAULT_CONFIG",
    "compare_leftmost",
    "compare_area",
    "compare_x",
    "compare_distance",
    "sort_shapes_by_leftmost",
    "sort_shapes_by_area",
    "sort_points_by_x",
    "sort_points_by_distance",
    "least",
    "print_all_and_return_least",
    "ShapeRegistry",
    "ShapeSpec",
    "get_registry",
    "shape_kind",
]
