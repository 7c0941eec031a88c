"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shape_kinds: int = 0


class ShapeResponse(BaseModel):
    kind: str
    rendered: str
    # Anchor order for polygons, [center] for circles
    vertices: list[tuple[float, float]] = Field(default_factory=list)
    area: float = 0.0
    perimeter: float = 0.0
    leftmost_x: float = 0.0
    # Polygons only; circles report None
    simple: bool | None = None


class SnapResponse(BaseModel):
    applied: bool
    shape: ShapeResponse


class SortShapesResponse(BaseModel):
    shapes: list[ShapeResponse] = Field(default_factory=list)
    least: ShapeResponse | None = None


class SortPointsResponse(BaseModel):
    points: list[tuple[float, float]] = Field(default_factory=list)
    # NaN distances (negative coordinate sum) are reported as null
    distances: list[float | None] = Field(default_factory=list)
