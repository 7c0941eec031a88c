"""API request models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class ShapeRequest(BaseModel):
    kind: str = Field(..., description="Registered shape kind (circle, triangle, quadrilateral)")
    points: list[tuple[float, float]] = Field(
        default_factory=list,
        description="Vertices for polygons, in any order; extras are ignored",
    )
    center: tuple[float, float] | None = Field(default=None, description="Circle centre")
    radius: float | None = Field(default=None, description="Circle radius")

    def params(self) -> dict[str, Any]:
        return {"points": self.points, "center": self.center, "radius": self.radius}


class SortShapesRequest(BaseModel):
    shapes: list[ShapeRequest] = Field(..., description="Shapes to sort")
    by: Literal["leftmost_x", "area"] = Field(default="leftmost_x", description="Sort key")


class SortPointsRequest(BaseModel):
    points: list[tuple[float, float]] = Field(..., description="Points to sort")
    by: Literal["x", "distance"] = Field(default="x", description="Sort key")
