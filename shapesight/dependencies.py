"""FastAPI dependency injection."""

from __future__ import annotations

from shapesight.config import Settings, settings
from shapesight.shapes.config import GeometryConfig


def get_settings() -> Settings:
    return settings


def get_geometry_config() -> GeometryConfig:
    return GeometryConfig(
        collinear_rel_tol=settings.shapesight_collinear_rel_tol,
        snap_rounding=settings.shapesight_snap_rounding,
        comparator_precision=settings.shapesight_comparator_precision,
        distance_metric=settings.shapesight_distance_metric,
    )
