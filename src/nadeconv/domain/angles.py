"""Numeric helpers shared by the parser and the mappers."""
from __future__ import annotations

import math

FULL_TURN = 360.0


def normalize_yaw(value: float) -> float:
    """Fold any finite angle into the half-open range [0, 360)."""
    folded = math.fmod(value, FULL_TURN)
    if folded < 0.0:
        folded += FULL_TURN
    # -1e-20 + 360 rounds up to exactly 360
    if folded >= FULL_TURN:
        folded -= FULL_TURN
    return folded + 0.0


def is_near_integer(value: float, tolerance: float) -> bool:
    """Return True when value is closer than tolerance to the nearest integer."""
    return abs(value - round(value)) < tolerance


def format_number(value: float) -> str:
    """Render a float the way it appears in reports: 45 rather than 45.0."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))
