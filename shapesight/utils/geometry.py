"""Leaf-node geometry helpers. No shape imports.

Every function takes an ``Nx2`` float array of (x, y) vertices describing an
open ring: the closing edge from the last vertex back to the first is implied.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def centroid_angles(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Polar angle of each point around the centroid.

    Arguments to atan2 are (dx, dy), not (dy, dx): the angle is measured from
    the +y axis towards +x, so ascending angles walk the points clockwise.
    """
    cx, cy = centroid(points)
    return np.arctan2(points[:, 0] - cx, points[:, 1] - cy)


def clockwise_order(points: NDArray[np.float64]) -> NDArray[np.intp]:
    """Indices that sort the points by ascending centroid angle (stable)."""
    return np.argsort(centroid_angles(points), kind="stable")


def anchor_index(points: NDArray[np.float64]) -> int:
    """Index of the vertex with minimum x, ties broken by minimum y.

    Only the x-tied vertices take part in the y comparison. Exact duplicates
    resolve to the earliest index (lexsort is stable).
    """
    if len(points) == 0:
        raise ValueError("anchor_index of an empty point set")
    return int(np.lexsort((points[:, 1], points[:, 0]))[0])


def side_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Edge lengths of the closed ring, the last-to-first edge included."""
    diffs = np.roll(points, -1, axis=0) - points
    return np.hypot(diffs[:, 0], diffs[:, 1])


def ring_perimeter(points: NDArray[np.float64]) -> float:
    return float(np.sum(side_lengths(points)))


def heron_area(a: float, b: float, c: float) -> float:
    """Heron's formula in the stable arrangement (sides sorted a >= b >= c).

    Factors that go negative through rounding are clamped to zero, so
    collinear side lengths give 0.0 rather than NaN.
    """
    a, b, c = sorted((float(a), float(b), float(c)), reverse=True)
    product = (a + (b + c)) * (c - (a - b)) * (c + (a - b)) * (a + (b - c))
    if product <= 0.0:
        return 0.0
    return 0.25 * math.sqrt(product)


def triangle_area(points: NDArray[np.float64]) -> float:
    """Heron area of the first three points."""
    a, b, c = side_lengths(points[:3])
    return heron_area(a, b, c)


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def twice_area(points: NDArray[np.float64]) -> float:
    return abs(2.0 * signed_area(points))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0
