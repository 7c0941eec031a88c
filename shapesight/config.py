"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    shapesight_env: str = "development"
    shapesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Geometry core (see shapesight.shapes.config.GeometryConfig)
    shapesight_collinear_rel_tol: float = 1e-12
    shapesight_snap_rounding: Literal["half_away_from_zero", "half_even"] = "half_away_from_zero"
    shapesight_comparator_precision: Literal["exact", "truncated"] = "exact"
    shapesight_distance_metric: Literal["coordinate_sum", "euclidean"] = "coordinate_sum"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
