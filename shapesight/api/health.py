"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from shapesight import __version__
from shapesight.models.responses import HealthResponse
from shapesight.shapes import get_registry

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        shape_kinds=get_registry().count,
    )


@router.get("/kinds")
async def kinds() -> dict[str, str]:
    return {spec.kind: spec.description for spec in get_registry().all()}
