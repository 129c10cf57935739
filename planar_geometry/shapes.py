"""
Geometric Shapes Module
=======================

Pure geometric values - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Canonical form enforced at construction (__post_init__)
- Tolerance-based equality (see planar_geometry.tolerance)
- Thread-safe (immutable)

The closed set of shapes:
    Nowhere      the empty set
    Everywhere   the whole plane
    Point        (x, y)
    Line         sin(angle) * x + cos(angle) * y = d
    LineSegment  closed segment between two endpoints
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

from planar_geometry.tolerance import (
    TWO_PI,
    angle_close,
    between,
    points_close,
    real_close,
)


class Shape:
    """
    Base class of every geometric value.

    Subclasses are frozen dataclasses. Equality is tolerance based, so the
    hash only depends on the kind of shape.

    Class attributes:
        kind: Wire tag of the shape ("Point", "Line", ...)
        rank: Dispatch order used by intersect() (lower = simpler)
    """

    kind: ClassVar[str] = "Shape"
    rank: ClassVar[int] = -1

    def __eq__(self, other):
        if not isinstance(other, Shape):
            return NotImplemented
        return type(other) is type(self) and self._same(other)

    def __hash__(self) -> int:
        return hash(self.kind)

    def _same(self, other: "Shape") -> bool:
        """Field comparison between two shapes of the same kind."""
        return True


@dataclass(frozen=True, eq=False)
class Nowhere(Shape):
    """The empty set."""

    kind: ClassVar[str] = "Nowhere"
    rank: ClassVar[int] = 0


@dataclass(frozen=True, eq=False)
class Everywhere(Shape):
    """The entire plane."""

    kind: ClassVar[str] = "Everywhere"
    rank: ClassVar[int] = 1


NOWHERE = Nowhere()
EVERYWHERE = Everywhere()


@dataclass(frozen=True, eq=False)
class Point(Shape):
    """
    Immutable point.

    Attributes:
        x: x-coordinate
        y: y-coordinate
    """

    x: float
    y: float

    kind: ClassVar[str] = "Point"
    rank: ClassVar[int] = 2

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def _same(self, other: "Point") -> bool:
        return points_close(self.x, self.y, other.x, other.y)


@dataclass(frozen=True, eq=False)
class Line(Shape):
    """
    Immutable infinite line: sin(angle) * x + cos(angle) * y = d.

    Canonical form (applied in __post_init__):
        - d >= 0 (a negative d is negated and the normal flipped by π)
        - angle reduced into [0, 2π)

    Two canonical lines denote the same geometric line iff their fields are
    pairwise close, except for lines through the origin, whose normal may
    point either way.

    Attributes:
        angle: Direction of the line normal, radians
        d: Signed distance of the line from the origin along the normal

    Example:
        >>> Line(0.0, -5.0)
        Line(angle=3.141592653589793, d=5.0)
    """

    angle: float
    d: float

    kind: ClassVar[str] = "Line"
    rank: ClassVar[int] = 3

    def __post_init__(self):
        """Canonicalize (angle, d)."""
        angle = float(self.angle)
        d = float(self.d)
        if d < 0:
            angle += math.pi
        d = abs(d)

        angle %= TWO_PI
        # float modulo may round up to exactly 2π for tiny negative angles
        if angle >= TWO_PI:
            angle = 0.0

        object.__setattr__(self, 'angle', angle)
        object.__setattr__(self, 'd', d)

    def _same(self, other: "Line") -> bool:
        return self.coincides(other)

    def coincides(self, other: "Line") -> bool:
        """
        True if both lines are the same geometric line.

        Same normal: the offsets must match. Opposite normal: only lines
        through the origin coincide (canonical d is never negative).
        """
        if angle_close(self.angle, other.angle):
            return real_close(self.d, other.d)
        if angle_close(self.angle, other.angle + math.pi):
            return real_close(self.d, 0.0) and real_close(other.d, 0.0)
        return False

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) satisfies the line equation within tolerance."""
        return real_close(math.sin(self.angle) * x + math.cos(self.angle) * y, self.d)


@dataclass(frozen=True, eq=False)
class LineSegment(Shape):
    """
    Immutable closed line segment.

    Endpoints are ordered at construction: by y when the segment is
    vertical (x1 close to x2), by x otherwise, so (x1, y1) is always the
    lexicographically smaller endpoint.

    A segment whose endpoints coincide is not a segment. The constructor
    rejects it; use line_segment() to get a Point instead.

    Attributes:
        x1, y1: First (smaller) endpoint
        x2, y2: Second (larger) endpoint

    Raises:
        ValueError: If both endpoints are close
    """

    x1: float
    y1: float
    x2: float
    y2: float

    kind: ClassVar[str] = "LineSegment"
    rank: ClassVar[int] = 4

    def __post_init__(self):
        """Validate and order endpoints."""
        x1, y1 = float(self.x1), float(self.y1)
        x2, y2 = float(self.x2), float(self.y2)

        if points_close(x1, y1, x2, y2):
            raise ValueError(
                f"LineSegment endpoints coincide at ({x1}, {y1}); "
                f"use line_segment() for degenerate input"
            )

        if real_close(x1, x2):
            swap = y2 < y1
        else:
            swap = x2 < x1
        if swap:
            x1, y1, x2, y2 = x2, y2, x1, y1

        object.__setattr__(self, 'x1', x1)
        object.__setattr__(self, 'y1', y1)
        object.__setattr__(self, 'x2', x2)
        object.__setattr__(self, 'y2', y2)

    def _same(self, other: "LineSegment") -> bool:
        return (
            points_close(self.x1, self.y1, other.x1, other.y1)
            and points_close(self.x2, self.y2, other.x2, other.y2)
        )

    @property
    def start(self) -> Tuple[float, float]:
        return (self.x1, self.y1)

    @property
    def end(self) -> Tuple[float, float]:
        return (self.x2, self.y2)

    @property
    def is_vertical(self) -> bool:
        return real_close(self.x1, self.x2)

    def in_bounds(self, x: float, y: float) -> bool:
        """
        True if (x, y) lies inside the segment's bounding box.

        Only meaningful for points already known to be on the supporting
        line.
        """
        return between(self.x1, x, self.x2) and between(self.y1, y, self.y2)

    def supporting_line(self) -> Line:
        """
        Return the infinite line through both endpoints.

        The normal of a segment with slope m has angle atan(-m); a vertical
        segment gets angle π/2. The result goes through the canonical Line
        constructor, so it compares correctly with user-built lines.
        """
        if self.is_vertical:
            angle = math.pi / 2
        else:
            angle = math.atan((self.y2 - self.y1) / (self.x1 - self.x2))
        d = self.x1 * math.sin(angle) + self.y1 * math.cos(angle)
        return Line(angle, d)


# ---------------------------------------------------------------
# Canonical constructors
# ---------------------------------------------------------------

def point(x: float, y: float) -> Point:
    return Point(x, y)


def line(angle: float, d: float) -> Line:
    return Line(angle, d)


def line_segment(x1: float, y1: float, x2: float, y2: float) -> Shape:
    """
    Build a segment, collapsing coincident endpoints to a Point.

    Returns:
        Point at (x1, y1) if both endpoints are close, else a LineSegment
    """
    if points_close(x1, y1, x2, y2):
        return Point(x1, y1)
    return LineSegment(x1, y1, x2, y2)
