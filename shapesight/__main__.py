"""
Shape demo: builds a circle, a triangle and a quadrilateral and orders them.

Usage:
  python -m shapesight                                  # default coordinates
  python -m shapesight 0 0 4 0 4 4 0 4                  # flat x y list, 4 points
  python -m shapesight --log-level debug 0 0 4 0 0 3 1 5
"""

from __future__ import annotations

import argparse
import logging
import sys

from shapesight.shapes import (
    Circle,
    InvalidShapeError,
    Quadrilateral,
    Triangle,
    points_from_doubles,
    print_all_and_return_least,
    sort_shapes_by_leftmost,
)

DEFAULT_COORDS = [2.2, 3.4, -10.2, 4.3, -10.2, 5.6, -6.2, -4.87]


def run(coords: list[float], out=print) -> int:
    """Build the demo shapes, print them and return a process exit code."""
    try:
        points = points_from_doubles(coords)
        shapes = [Circle.at(2, 3, 4), Triangle(points), Quadrilateral(points)]
    except (InvalidShapeError, ValueError) as e:
        out(str(e))
        return 1

    out("By leftmost x:")
    for shape in sort_shapes_by_leftmost(shapes):
        out(f"  {shape}")

    out("All shapes:")
    smallest = print_all_and_return_least(shapes, printer=lambda s: out(f"  {s}"))
    out(f"least area: {smallest}")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="ShapeSight demo: canonical shapes and orderings")
    parser.add_argument("coords", nargs="*", type=float, help="Flat x y coordinate list (at least 4 points)")
    parser.add_argument("--log-level", default="warning", help="Logging level (debug, info, warning)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    sys.exit(run(args.coords or DEFAULT_COORDS))


if __name__ == "__main__":
    main()
