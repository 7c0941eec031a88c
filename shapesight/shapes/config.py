"""Geometry configuration: tolerances and the behaviour switches of the core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SnapRounding = Literal["half_away_from_zero", "half_even"]
ComparatorPrecision = Literal["exact", "truncated"]
DistanceMetric = Literal["coordinate_sum", "euclidean"]

_SNAP_ROUNDINGS = ("half_away_from_zero", "half_even")
_PRECISIONS = ("exact", "truncated")
_METRICS = ("coordinate_sum", "euclidean")


@dataclass(frozen=True)
class GeometryConfig:
    """Controls validity tolerance, snapping and ordering semantics."""

    # Triangle is degenerate when twice its area <= tol * longest_side**2.
    # 0.0 keeps only the exact-zero checks.
    collinear_rel_tol: float = 1e-12

    # Rounding applied by snap()
    snap_rounding: SnapRounding = "half_away_from_zero"

    # "truncated" reproduces int-cast comparators (differences < 1 compare equal)
    comparator_precision: ComparatorPrecision = "exact"

    # "coordinate_sum" is sqrt(x + y); "euclidean" is hypot(x, y)
    distance_metric: DistanceMetric = "coordinate_sum"

    def __post_init__(self) -> None:
        if not self.collinear_rel_tol >= 0.0:
            raise ValueError(f"collinear_rel_tol must be >= 0, got {self.collinear_rel_tol}")
        if self.snap_rounding not in _SNAP_ROUNDINGS:
            raise ValueError(f"Unknown snap_rounding: {self.snap_rounding!r}")
        if self.comparator_precision not in _PRECISIONS:
            raise ValueError(f"Unknown comparator_precision: {self.comparator_precision!r}")
        if self.distance_metric not in _METRICS:
            raise ValueError(f"Unknown distance_metric: {self.distance_metric!r}")


DEFAULT_CONFIG = GeometryConfig()
