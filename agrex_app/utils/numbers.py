"""Numeric helpers."""

import math


def round_half_up(value: float, digits: int = 2) -> float:
    """
    Round half away from zero for positive values (money rounding).

    Values too large to scale are returned unchanged; at that magnitude
    they carry no fractional digits anyway.
    """
    factor = 10.0 ** digits
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed interval [lower, upper]."""
    return min(upper, max(lower, value))
