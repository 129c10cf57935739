"""
Planar Geometry
===============

Bounded Context: The geometry algebra.

Responsibilities:
- Shape representation (immutable, canonical)
- Tolerance-based comparison
- Translation (shift) and intersection
- NO parsing, NO variables, NO serialization

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects

Usage:

    from planar_geometry import line_segment, intersect, shift

    a = line_segment(0, 0, 10, 0)
    b = line_segment(5, 0, 15, 0)
    intersect(a, b)          # LineSegment(x1=5.0, y1=0.0, x2=10.0, y2=0.0)
    shift(1, 1, a)           # LineSegment(x1=1.0, y1=1.0, x2=11.0, y2=1.0)
"""

from planar_geometry.tolerance import EPSILON, real_close, angle_close, between
from planar_geometry.shapes import (
    Shape,
    Nowhere,
    Everywhere,
    Point,
    Line,
    LineSegment,
    NOWHERE,
    EVERYWHERE,
    point,
    line,
    line_segment,
)
from planar_geometry.algebra import SHAPE_TYPES, shift, intersect, intersect_all

__all__ = [
    # Tolerance
    "EPSILON",
    "real_close",
    "angle_close",
    "between",
    # Shapes
    "Shape",
    "Nowhere",
    "Everywhere",
    "Point",
    "Line",
    "LineSegment",
    "NOWHERE",
    "EVERYWHERE",
    "SHAPE_TYPES",
    # Constructors
    "point",
    "line",
    "line_segment",
    # Operations
    "shift",
    "intersect",
    "intersect_all",
]

__version__ = "1.0.0"
