"""Text rendering: two decimal places, vertex lists in anchor order."""

from __future__ import annotations

from collections.abc import Sequence

from shapesight.shapes.point import Point


def format_coordinate(value: float) -> str:
    return f"{value:.2f}"


def format_point(point: Point) -> str:
    return f"({format_coordinate(point.x)}, {format_coordinate(point.y)})"


def render_polygon(name: str, vertices: Sequence[Point]) -> str:
    """``Triangle[(x1, y1), (x2, y2), (x3, y3)]``"""
    return f"{name}[{', '.join(format_point(p) for p in vertices)}]"


def render_circle(center: Point, radius: float) -> str:
    """``Circle[center: x,y; radius: r]``"""
    return (
        f"Circle[center: {format_coordinate(center.x)},{format_coordinate(center.y)}; "
        f"radius: {format_coordinate(radius)}]"
    )
