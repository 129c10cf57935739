"""
Tolerance Predicates
====================

Bounded Context: Numeric comparison for the geometry algebra.

Every equality test on a real-valued shape field goes through one of
these predicates.

Design:
- One fixed epsilon (EPSILON)
- Pure functions, no state
- Angle comparison wraps around the 0 / 2π boundary
"""

import math

EPSILON: float = 1e-5

TWO_PI: float = 2 * math.pi


def real_close(a: float, b: float) -> bool:
    """True if |a - b| < EPSILON."""
    return abs(a - b) < EPSILON


def angle_close(a: float, b: float) -> bool:
    """
    True if two angles denote the same direction.

    The difference is reduced into [0, 2π) first, so 0 and 2π - 1e-7
    compare as close.
    """
    diff = (a - b) % TWO_PI
    return diff < EPSILON or diff > TWO_PI - EPSILON


def between(lo: float, mid: float, hi: float) -> bool:
    """
    True if mid lies inside [min(lo, hi) - EPSILON, max(lo, hi) + EPSILON].

    lo and hi may be given in either order.
    """
    return min(lo, hi) - EPSILON < mid < max(lo, hi) + EPSILON


def points_close(x1: float, y1: float, x2: float, y2: float) -> bool:
    """True if both coordinates of two points are real_close."""
    return real_close(x1, x2) and real_close(y1, y2)
