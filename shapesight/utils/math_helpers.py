"""Math helpers: rounding modes and comparator signs. No shape imports."""

from __future__ import annotations

import math


def round_half_away_from_zero(value: float) -> float:
    """2.5 -> 3.0, -2.5 -> -3.0. Never returns negative zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact for doubles, unlike floor(magnitude + 0.5)
    if magnitude - whole >= 0.5:
        whole += 1
    result = float(whole) if value >= 0 else -float(whole)
    return result + 0.0


def round_half_even(value: float) -> float:
    """Banker's rounding: 2.5 -> 2.0, 3.5 -> 4.0."""
    return float(round(value)) + 0.0


ROUNDING_MODES = {
    "half_away_from_zero": round_half_away_from_zero,
    "half_even": round_half_even,
}


def snap_value(value: float, mode: str = "half_away_from_zero") -> float:
    """Round a coordinate to the nearest integer using the named mode."""
    try:
        rounder = ROUNDING_MODES[mode]
    except KeyError:
        raise ValueError(f"Unknown rounding mode: {mode!r}") from None
    return rounder(value)


def sign(delta: float) -> int:
    """-1, 0 or 1. NaN compares as 0."""
    if delta > 0:
        return 1
    if delta < 0:
        return -1
    return 0


def truncate(delta: float) -> int:
    """Truncate towards zero like an int cast. NaN becomes 0."""
    if math.isnan(delta):
        return 0
    if math.isinf(delta):
        return 1 if delta > 0 else -1
    return int(delta)
