from __future__ import annotations

import math


def is_finite_number(value) -> bool:
    """True for ints/floats that are neither NaN nor infinite (bools excluded)."""
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def round_tenth(value: float) -> float:
    """Round to one decimal place, ties upward (72.25 -> 72.3, -0.05 -> 0.0)."""
    return math.floor(value * 10 + 0.5) / 10
