"""POST /api/points/sort: order points by x or by distance from the origin."""

from __future__ import annotations

import math

from fastapi import APIRouter, Depends

from shapesight.dependencies import get_geometry_config
from shapesight.models.requests import SortPointsRequest
from shapesight.models.responses import SortPointsResponse
from shapesight.shapes import GeometryConfig, as_point, sort_points_by_distance, sort_points_by_x

router = APIRouter(prefix="/points")


@router.post("/sort", response_model=SortPointsResponse)
async def sort_points(
    request: SortPointsRequest,
    config: GeometryConfig = Depends(get_geometry_config),
) -> SortPointsResponse:
    points = [as_point(p) for p in request.points]
    if request.by == "distance":
        ordered = sort_points_by_distance(points, config)
    else:
        ordered = sort_points_by_x(points, config)

    distances: list[float | None] = []
    for p in ordered:
        d = p.distance(config.distance_metric)
        distances.append(None if math.isnan(d) else d)

    return SortPointsResponse(points=[p.coordinates() for p in ordered], distances=distances)
