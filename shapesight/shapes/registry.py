"""Shape registry: every shape kind registers its builder via decorator.

Usage:
    @shape_kind(kind="triangle", vertex_count=3, description="Three-vertex polygon")
    def _build_triangle(params: dict[str, Any], config: GeometryConfig) -> Triangle:
        return Triangle(params.get("points") or [], config=config)

Adding a new shape kind = one decorated builder. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from shapesight.shapes.config import GeometryConfig

logger = logging.getLogger(__name__)


@dataclass
class ShapeSpec:
    kind: str
    factory: Callable[[dict[str, Any], "GeometryConfig"], Any]
    # None for shapes not defined by vertices (circle)
    vertex_count: int | None = None
    description: str = ""


class ShapeRegistry:
    """Registry of shape builders keyed by kind."""

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeSpec] = {}

    def register(self, spec: ShapeSpec) -> None:
        if spec.kind in self._shapes:
            raise ValueError(f"Duplicate shape kind: {spec.kind}")
        self._shapes[spec.kind] = spec
        logger.debug("Registered shape kind %s", spec.kind)

    def get(self, kind: str) -> ShapeSpec:
        return self._shapes[kind]

    def all(self) -> list[ShapeSpec]:
        return sorted(self._shapes.values(), key=lambda s: s.kind)

    def build(self, kind: str, params: dict[str, Any], config: GeometryConfig) -> Any:
        """Construct a shape of the given kind. Unknown kinds raise KeyError."""
        return self.get(kind).factory(params, config)

    @property
    def count(self) -> int:
        return len(self._shapes)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape_kind(
    *,
    kind: str,
    vertex_count: int | None = None,
    description: str = "",
):
    """Decorator to register a shape builder."""

    def decorator(fn: Callable[[dict[str, Any], "GeometryConfig"], Any]):
        _registry.register(
            ShapeSpec(kind=kind, factory=fn, vertex_count=vertex_count, description=description)
        )
        return fn

    return decorator
