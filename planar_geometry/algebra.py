"""
Shape Algebra Module
====================

Stateless operations over shapes: rigid translation and set intersection.

Design:
- Pure functions (no state, inputs never mutated)
- Intersection dispatched through a table keyed by (type, type)
- Pairs are ordered by Shape.rank before lookup, so each unordered
  combination of shape kinds has exactly one handler
- Every handler is total: well-typed input always yields a Shape
"""

import math
from functools import reduce
from typing import Callable, Dict, Iterable, Tuple, Type

from planar_geometry.shapes import (
    EVERYWHERE,
    NOWHERE,
    Everywhere,
    Line,
    LineSegment,
    Nowhere,
    Point,
    Shape,
    line_segment,
)
from planar_geometry.tolerance import angle_close, points_close, real_close

Handler = Callable[[Shape, Shape], Shape]

SHAPE_TYPES: Tuple[Type[Shape], ...] = (Nowhere, Everywhere, Point, Line, LineSegment)

_INTERSECTIONS: Dict[Tuple[Type[Shape], Type[Shape]], Handler] = {}


def _check_shape(value) -> None:
    if not isinstance(value, Shape):
        raise TypeError(f"Expected a Shape, got {type(value).__name__}")


# ---------------------------------------------------------------
# Shift
# ---------------------------------------------------------------

def shift(dx: float, dy: float, shape: Shape) -> Shape:
    """
    Translate a shape by (dx, dy).

    Nowhere and Everywhere are translation invariant. A line keeps its
    normal angle; only the offset changes. Results are rebuilt through the
    canonical constructors.

    Args:
        dx: Translation along x
        dy: Translation along y
        shape: Shape to translate

    Returns:
        Translated shape of the same kind

    Raises:
        TypeError: If shape is not a Shape
    """
    _check_shape(shape)

    if isinstance(shape, (Nowhere, Everywhere)):
        return shape
    if isinstance(shape, Point):
        return Point(shape.x + dx, shape.y + dy)
    if isinstance(shape, Line):
        offset = math.sin(shape.angle) * dx + math.cos(shape.angle) * dy
        return Line(shape.angle, shape.d + offset)
    return line_segment(
        shape.x1 + dx, shape.y1 + dy,
        shape.x2 + dx, shape.y2 + dy,
    )


# ---------------------------------------------------------------
# Intersect
# ---------------------------------------------------------------

def intersect(a: Shape, b: Shape) -> Shape:
    """
    Intersect two shapes.

    The pair is reordered so the simpler shape comes first, then handed to
    the registered handler. Intersection is commutative up to tolerance.

    Raises:
        TypeError: If either argument is not a Shape
    """
    _check_shape(a)
    _check_shape(b)

    if a.rank > b.rank:
        a, b = b, a
    return _INTERSECTIONS[(type(a), type(b))](a, b)


def intersect_all(shapes: Iterable[Shape]) -> Shape:
    """Left fold of intersect() with EVERYWHERE as identity."""
    return reduce(intersect, shapes, EVERYWHERE)


def _handles(first: Type[Shape], second: Type[Shape]):
    """Register a handler for the ordered pair (first, second)."""
    def decorator(func: Handler) -> Handler:
        _INTERSECTIONS[(first, second)] = func
        return func
    return decorator


def _nothing(a: Nowhere, b: Shape) -> Shape:
    return NOWHERE


def _other(a: Everywhere, b: Shape) -> Shape:
    return b


for _kind in SHAPE_TYPES:
    _INTERSECTIONS[(Nowhere, _kind)] = _nothing
    if _kind is not Nowhere:
        _INTERSECTIONS[(Everywhere, _kind)] = _other


@_handles(Point, Point)
def _point_point(a: Point, b: Point) -> Shape:
    if points_close(a.x, a.y, b.x, b.y):
        return a
    return NOWHERE


@_handles(Point, Line)
def _point_line(p: Point, ln: Line) -> Shape:
    if ln.contains(p.x, p.y):
        return p
    return NOWHERE


@_handles(Point, LineSegment)
def _point_segment(p: Point, seg: LineSegment) -> Shape:
    if seg.supporting_line().contains(p.x, p.y) and seg.in_bounds(p.x, p.y):
        return p
    return NOWHERE


@_handles(Line, Line)
def _line_line(a: Line, b: Line) -> Shape:
    """
    Same normal: identical or disjoint parallel lines. Opposite normal:
    identical only through the origin. Otherwise the 2x2 system has a
    unique solution.
    """
    if angle_close(a.angle, b.angle):
        return a if real_close(a.d, b.d) else NOWHERE

    if angle_close(a.angle, b.angle + math.pi):
        if real_close(a.d, 0.0) and real_close(b.d, 0.0):
            return a
        return NOWHERE

    denom = math.sin(a.angle - b.angle)
    x = (a.d * math.cos(b.angle) - b.d * math.cos(a.angle)) / denom
    y = (b.d * math.sin(a.angle) - a.d * math.sin(b.angle)) / denom
    return Point(x, y)


@_handles(Line, LineSegment)
def _line_segment(ln: Line, seg: LineSegment) -> Shape:
    crossing = _line_line(seg.supporting_line(), ln)

    if isinstance(crossing, Point):
        return crossing if seg.in_bounds(crossing.x, crossing.y) else NOWHERE
    if isinstance(crossing, Line):
        return seg
    return NOWHERE


@_handles(LineSegment, LineSegment)
def _segment_segment(a: LineSegment, b: LineSegment) -> Shape:
    """
    Intersect a's supporting line with b first. A crossing point must also
    lie within a; a full match means the segments are collinear.
    """
    crossing = _line_segment(a.supporting_line(), b)

    if isinstance(crossing, Point):
        return crossing if a.in_bounds(crossing.x, crossing.y) else NOWHERE
    if isinstance(crossing, LineSegment):
        return _collinear_overlap(a, b)
    return NOWHERE


def _collinear_overlap(a: LineSegment, b: LineSegment) -> Shape:
    """
    Overlap of two segments on the same line.

    Relies on canonical endpoint order: start <= end along x (along y for
    vertical segments) for both segments.
    """
    if points_close(a.x1, a.y1, b.x2, b.y2):
        return Point(a.x1, a.y1)
    if points_close(a.x2, a.y2, b.x1, b.y1):
        return Point(a.x2, a.y2)

    if a.in_bounds(b.x1, b.y1):
        x2, y2 = b.end if a.in_bounds(b.x2, b.y2) else a.end
        return line_segment(b.x1, b.y1, x2, y2)

    if b.in_bounds(a.x1, a.y1):
        x2, y2 = a.end if b.in_bounds(a.x2, a.y2) else b.end
        return line_segment(a.x1, a.y1, x2, y2)

    return NOWHERE
