"""Domain error raised when input points cannot form the requested shape."""

from __future__ import annotations


class InvalidShapeError(ValueError):
    """Construction failed; no shape instance exists."""

    def __init__(self, shape: str, reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Invalid inputs for a {shape.lower()}: {reason}")
