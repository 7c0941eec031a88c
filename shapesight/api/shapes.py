"""POST /api/shapes/*: construct, snap and sort shapes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from shapesight.dependencies import get_geometry_config
from shapesight.models.requests import ShapeRequest, SortShapesRequest
from shapesight.models.responses import ShapeResponse, SnapResponse, SortShapesResponse
from shapesight.shapes import (
    GeometryConfig,
    InvalidShapeError,
    Polygon,
    Shape,
    get_registry,
    least,
    sort_shapes_by_area,
    sort_shapes_by_leftmost,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shapes")


def build_shape(request: ShapeRequest, config: GeometryConfig) -> Shape:
    """Build through the registry; maps domain failures to HTTP errors."""
    try:
        return get_registry().build(request.kind, request.params(), config)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown shape kind: {request.kind}") from None
    except InvalidShapeError as e:
        logger.warning("Rejected %s: %s", request.kind, e)
        raise HTTPException(status_code=422, detail=str(e)) from e


def shape_to_response(kind: str, shape: Shape) -> ShapeResponse:
    return ShapeResponse(
        kind=kind,
        rendered=str(shape),
        vertices=[p.coordinates() for p in shape.position()],
        area=shape.area(),
        perimeter=shape.perimeter(),
        leftmost_x=shape.leftmost_x(),
        simple=shape.is_simple() if isinstance(shape, Polygon) else None,
    )


@router.post("/describe", response_model=ShapeResponse)
async def describe(
    request: ShapeRequest,
    config: GeometryConfig = Depends(get_geometry_config),
) -> ShapeResponse:
    shape = build_shape(request, config)
    return shape_to_response(request.kind, shape)


@router.post("/snap", response_model=SnapResponse)
async def snap(
    request: ShapeRequest,
    config: GeometryConfig = Depends(get_geometry_config),
) -> SnapResponse:
    shape = build_shape(request, config)
    applied = shape.snap()
    return SnapResponse(applied=applied, shape=shape_to_response(request.kind, shape))


@router.post("/sort", response_model=SortShapesResponse)
async def sort(
    request: SortShapesRequest,
    config: GeometryConfig = Depends(get_geometry_config),
) -> SortShapesResponse:
    built = [(build_shape(r, config), r.kind) for r in request.shapes]
    kinds = {id(shape): kind for shape, kind in built}
    shapes = [shape for shape, _ in built]

    if request.by == "area":
        ordered = sort_shapes_by_area(shapes)
    else:
        ordered = sort_shapes_by_leftmost(shapes, config)

    smallest = least(shapes) if shapes else None
    return SortShapesResponse(
        shapes=[shape_to_response(kinds[id(s)], s) for s in ordered],
        least=shape_to_response(kinds[id(smallest)], smallest) if smallest is not None else None,
    )
