"""Scalar math helpers and constants."""

from __future__ import annotations

import math

PI = math.pi
TWO_PI = PI * 2.0
PI_OVER_2 = PI * 0.5
PI_OVER_4 = PI * 0.25
ONE_OVER_PI = 1.0 / PI
ONE_OVER_2PI = 1.0 / TWO_PI
SQRT2 = math.sqrt(2.0)
SQRT3 = math.sqrt(3.0)
SQRT_ONE_OVER_2 = math.sqrt(0.5)
SQRT_ONE_OVER_3 = math.sqrt(1.0 / 3.0)
INFINITY = math.inf
NEG_INFINITY = -math.inf


def to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return math.radians(degrees)


def to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return math.degrees(radians)


def near_zero(value: float, epsilon: float = 0.001) -> bool:
    """Tell whether a value is within epsilon of zero."""
    return abs(value) <= epsilon


def clamp(value, lower, upper):
    """Restrict a value to the range [lower, upper]."""
    return min(upper, max(lower, value))


def lerp(a: float, b: float, f: float) -> float:
    """Linear interpolation between a and b."""
    return a + f * (b - a)


def cot(angle: float) -> float:
    """Cotangent of an angle in radians."""
    return 1.0 / math.tan(angle)


def round_to_int(num: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(num) + 0.5)
    return int(rounded if num >= 0 else -rounded)


def is_power_of_two(value: int) -> bool:
    """Tell whether value is a power of two; zero is not."""
    return value != 0 and (value & (value - 1)) == 0