"""Interpolation helpers, S-curves and mathematical constants."""

import math

PI = math.pi
SQRT_2 = math.sqrt(2.0)
SQRT_3 = math.sqrt(3.0)
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 1.0 / DEG_TO_RAD


def cubic_interp(n0: float, n1: float, n2: float, n3: float, a: float) -> float:
    """Cubic interpolation between n1 (a=0) and n2 (a=1), bounded by n0 and n3."""
    p = (n3 - n2) - (n0 - n1)
    q = (n0 - n1) - p
    r = n2 - n0
    s = n1
    return p * a * a * a + q * a * a + r * a + s


def linear_interp(n0: float, n1: float, a: float) -> float:
    """Linear interpolation between n0 (a=0) and n1 (a=1)."""
    return ((1.0 - a) * n0) + (a * n1)


def s_curve3(a: float) -> float:
    """Map a value in [0, 1] onto a cubic S-curve."""
    return a * a * (3.0 - 2.0 * a)


def s_curve5(a: float) -> float:
    """Map a value in [0, 1] onto a quintic S-curve."""
    a3 = a * a * a
    a4 = a3 * a
    a5 = a4 * a
    return (6.0 * a5) - (15.0 * a4) + (10.0 * a3)


def clamp_value(value: int, lower_bound: int, upper_bound: int) -> int:
    """Clamp a value onto the range [lower_bound, upper_bound]."""
    if value < lower_bound:
        return lower_bound
    if value > upper_bound:
        return upper_bound
    return value