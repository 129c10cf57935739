"""
Geometry Algebra Tests
======================

Covers tolerance predicates, canonical constructors, shift and the full
intersection table, including collinear and degenerate cases.

Usage:
    pytest test_geometry.py
"""

import math

import pytest

from planar_geometry import (
    EPSILON,
    EVERYWHERE,
    NOWHERE,
    Everywhere,
    Line,
    LineSegment,
    Nowhere,
    Point,
    angle_close,
    between,
    intersect,
    intersect_all,
    line_segment,
    real_close,
    shift,
)
from planar_geometry.tolerance import TWO_PI

SAMPLES = [
    NOWHERE,
    EVERYWHERE,
    Point(0, 0),
    Point(5, 0),
    Point(2, 2),
    Line(0, 0),
    Line(math.pi / 2, 0),
    Line(-math.pi / 4, 0),
    Line(0, 2),
    line_segment(0, 0, 10, 0),
    line_segment(5, 0, 15, 0),
    line_segment(10, 0, 20, 0),
    line_segment(0, 0, 4, 4),
    line_segment(0, 10, 10, 0),
    line_segment(0, -1, 0, 1),
]


# ------------------------------------------------------------
# Tolerance predicates
# ------------------------------------------------------------

def test_real_close():
    assert real_close(1.0, 1.0 + EPSILON / 10)
    assert not real_close(1.0, 1.0 + EPSILON * 10)


def test_angle_close_wraps_around():
    assert angle_close(0.0, TWO_PI - 1e-7)
    assert angle_close(TWO_PI - 1e-7, 0.0)
    assert angle_close(0.1, 0.1 + 2 * TWO_PI)
    assert angle_close(-math.pi / 2, 3 * math.pi / 2)
    assert not angle_close(0.0, math.pi)


def test_between_accepts_either_bound_order():
    assert between(10, 5, 0)
    assert between(0, 10 + EPSILON / 10, 10)
    assert not between(0, 10.001, 10)
    assert not between(0, -0.001, 10)


# ------------------------------------------------------------
# Canonical constructors
# ------------------------------------------------------------

def test_line_negative_offset_flips_normal():
    ln = Line(0, -5)
    assert math.isclose(ln.angle, math.pi)
    assert ln.d == 5.0


def test_line_angle_reduced_into_range():
    assert math.isclose(Line(-math.pi / 2, 3).angle, 3 * math.pi / 2)
    assert Line(TWO_PI, 1).angle == 0.0
    assert 0.0 <= Line(-1e-18, 1).angle < TWO_PI


def test_line_canonicalization_law():
    assert Line(0.3, 2) == Line(0.3 + math.pi, -2)
    assert Line(1.0, -4) == Line(1.0 + math.pi, 4)


def test_lines_through_origin_with_opposite_normals_are_equal():
    assert Line(0.3, 0) == Line(0.3 + math.pi, 0)
    assert Line(0, 1) != Line(math.pi, 1)


def test_segment_endpoints_are_ordered_by_x():
    seg = LineSegment(10, 0, 0, 0)
    assert seg.start == (0.0, 0.0)
    assert seg.end == (10.0, 0.0)
    assert seg == LineSegment(0, 0, 10, 0)


def test_vertical_segment_endpoints_are_ordered_by_y():
    seg = line_segment(2, 5, 2, 1)
    assert seg.start == (2.0, 1.0)
    assert seg.end == (2.0, 5.0)

    nearly_vertical = line_segment(2 + EPSILON / 10, 5, 2, 1)
    assert nearly_vertical.start == (2.0, 1.0)


def test_coincident_endpoints_collapse_to_point():
    assert line_segment(3, 3, 3, 3) == Point(3, 3)
    assert isinstance(line_segment(3, 3, 3 + EPSILON / 10, 3), Point)


def test_segment_constructor_rejects_coincident_endpoints():
    with pytest.raises(ValueError):
        LineSegment(1, 1, 1, 1)


def test_equality_is_tolerant_and_kind_aware():
    assert Point(0, 0) == Point(EPSILON / 10, 0)
    assert hash(Point(0, 0)) == hash(Point(EPSILON / 10, 0))
    assert Point(0, 0) != Point(1, 0)
    assert Point(0, 0) != Line(0, 0)
    assert Point(0, 0) != (0, 0)
    assert NOWHERE == Nowhere()
    assert EVERYWHERE == Everywhere()
    assert NOWHERE != EVERYWHERE


def test_shapes_are_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


# ------------------------------------------------------------
# Supporting line
# ------------------------------------------------------------

def test_supporting_line_of_horizontal_segment_below_axis():
    assert line_segment(0, -5, 10, -5).supporting_line() == Line(0, -5)


def test_supporting_line_of_vertical_segments():
    assert line_segment(3, 0, 3, 4).supporting_line() == Line(math.pi / 2, 3)
    assert line_segment(-3, 0, -3, 4).supporting_line() == Line(math.pi / 2, -3)


def test_supporting_line_contains_both_endpoints():
    ln = line_segment(0, 1, 2, 3).supporting_line()
    assert ln.d >= 0
    assert ln.contains(0, 1)
    assert ln.contains(2, 3)
    assert ln.contains(5, 6)
    assert not ln.contains(5, 5)


# ------------------------------------------------------------
# Shift
# ------------------------------------------------------------

def test_shift_horizontal_line():
    assert shift(1, 1, Line(0, 5)) == Line(0, 6)


def test_shift_point_and_segment():
    assert shift(2, 3, Point(1, 1)) == Point(3, 4)
    assert shift(1, 1, line_segment(0, 0, 10, 0)) == LineSegment(1, 1, 11, 1)


def test_shift_vertical_line():
    assert shift(1, 0, Line(math.pi / 2, 3)) == Line(math.pi / 2, 4)


def test_shift_line_across_origin_stays_canonical():
    moved = shift(0, -3, Line(0, 1))
    assert moved.d >= 0
    assert moved == Line(0, -2)
    assert moved.contains(7, -2)


def test_shift_constants_are_invariant():
    assert shift(3, 4, NOWHERE) is NOWHERE
    assert shift(3, 4, EVERYWHERE) is EVERYWHERE


@pytest.mark.parametrize("shape", SAMPLES)
def test_shift_identity(shape):
    assert shift(0, 0, shape) == shape


@pytest.mark.parametrize("shape", SAMPLES)
def test_shift_composes(shape):
    twice = shift(-4.5, 0.25, shift(1.5, 2, shape))
    once = shift(1.5 - 4.5, 2 + 0.25, shape)
    assert twice == once


def test_shift_rejects_non_shapes():
    with pytest.raises(TypeError):
        shift(1, 1, (0, 0))


# ------------------------------------------------------------
# Intersect: constants and points
# ------------------------------------------------------------

@pytest.mark.parametrize("shape", SAMPLES)
def test_everywhere_is_identity(shape):
    assert intersect(EVERYWHERE, shape) == shape
    assert intersect(shape, EVERYWHERE) == shape


@pytest.mark.parametrize("shape", SAMPLES)
def test_nowhere_absorbs(shape):
    assert intersect(NOWHERE, shape) == NOWHERE
    assert intersect(shape, NOWHERE) == NOWHERE


def test_point_point():
    assert intersect(Point(0, 0), Point(0, 0)) == Point(0, 0)
    assert intersect(Point(0, 0), Point(1, 0)) == NOWHERE


def test_point_line():
    assert intersect(Point(3, 5), Line(0, 5)) == Point(3, 5)
    assert intersect(Line(0, 5), Point(3, 5)) == Point(3, 5)
    assert intersect(Point(3, 4), Line(0, 5)) == NOWHERE


def test_point_segment():
    seg = line_segment(0, 0, 10, 0)
    assert intersect(Point(5, 0), seg) == Point(5, 0)
    assert intersect(seg, Point(10, 0)) == Point(10, 0)
    assert intersect(Point(11, 0), seg) == NOWHERE
    assert intersect(Point(5, 1), seg) == NOWHERE


def test_point_vertical_segment():
    seg = line_segment(2, 0, 2, 4)
    assert intersect(Point(2, 3), seg) == Point(2, 3)
    assert intersect(Point(2, 5), seg) == NOWHERE


# ------------------------------------------------------------
# Intersect: lines
# ------------------------------------------------------------

def test_coordinate_axes_meet_at_origin():
    assert intersect(Line(0, 0), Line(math.pi / 2, 0)) == Point(0, 0)


def test_perpendicular_lines():
    assert intersect(Line(math.pi / 2, 3), Line(0, 5)) == Point(3, 5)


def test_diagonal_line_crossing():
    assert intersect(Line(-math.pi / 4, 0), Line(0, 2)) == Point(2, 2)


def test_parallel_lines():
    assert intersect(Line(0, 1), Line(0, 2)) == NOWHERE
    assert intersect(Line(0, 1), Line(math.pi, 1)) == NOWHERE
    assert intersect(Line(0, 1), Line(0, 1)) == Line(0, 1)


def test_opposite_normals_through_origin_coincide():
    assert intersect(Line(0.5, 0), Line(0.5 + math.pi, 0)) == Line(0.5, 0)


def test_line_segment():
    x_axis = Line(0, 0)
    assert intersect(x_axis, line_segment(3, -1, 3, 1)) == Point(3, 0)
    assert intersect(x_axis, line_segment(3, 1, 3, 4)) == NOWHERE
    assert intersect(x_axis, line_segment(0, 0, 5, 0)) == LineSegment(0, 0, 5, 0)
    assert intersect(line_segment(0, 1, 5, 1), x_axis) == NOWHERE


def test_segment_on_line_below_axis():
    seg = line_segment(0, -5, 10, -5)
    assert intersect(seg, Line(0, -5)) == seg


# ------------------------------------------------------------
# Intersect: segments
# ------------------------------------------------------------

def test_collinear_overlap():
    result = intersect(line_segment(0, 0, 10, 0), line_segment(5, 0, 15, 0))
    assert result == LineSegment(5, 0, 10, 0)


def test_collinear_touching_at_endpoint():
    result = intersect(line_segment(0, 0, 10, 0), line_segment(10, 0, 20, 0))
    assert result == Point(10, 0)


def test_collinear_touching_within_tolerance():
    result = intersect(line_segment(0, 0, 10, 0), line_segment(10 + EPSILON / 10, 0, 20, 0))
    assert result == Point(10, 0)


def test_collinear_disjoint():
    assert intersect(line_segment(0, 0, 10, 0), line_segment(20, 0, 30, 0)) == NOWHERE


def test_collinear_containment():
    outer = line_segment(0, 0, 10, 0)
    inner = line_segment(2, 0, 3, 0)
    assert intersect(outer, inner) == inner
    assert intersect(inner, outer) == inner


def test_identical_segments():
    seg = line_segment(1, 2, 3, 7)
    assert intersect(seg, seg) == seg


def test_vertical_collinear_cases():
    a = line_segment(0, 0, 0, 10)
    assert intersect(a, line_segment(0, 5, 0, 15)) == LineSegment(0, 5, 0, 10)
    assert intersect(a, line_segment(0, 10, 0, 20)) == Point(0, 10)
    assert intersect(line_segment(0, 0, 0, 1), line_segment(0, 2, 0, 3)) == NOWHERE


def test_diagonal_collinear_overlap():
    result = intersect(line_segment(0, 0, 4, 4), line_segment(2, 2, 6, 6))
    assert result == LineSegment(2, 2, 4, 4)


def test_crossing_segments():
    result = intersect(line_segment(0, 0, 10, 10), line_segment(0, 10, 10, 0))
    assert result == Point(5, 5)


def test_segments_whose_lines_cross_outside_one_segment():
    assert intersect(line_segment(0, 0, 1, 1), line_segment(0, 10, 10, 0)) == NOWHERE


def test_parallel_segments():
    assert intersect(line_segment(0, 0, 10, 0), line_segment(0, 1, 10, 1)) == NOWHERE


# ------------------------------------------------------------
# Laws
# ------------------------------------------------------------

@pytest.mark.parametrize("a", SAMPLES)
def test_intersect_is_commutative(a):
    for b in SAMPLES:
        assert intersect(a, b) == intersect(b, a), (a, b)


def test_intersect_all_folds_from_everywhere():
    assert intersect_all([]) == EVERYWHERE
    assert intersect_all([Point(1, 1)]) == Point(1, 1)
    shapes = [line_segment(0, 0, 10, 0), line_segment(5, 0, 15, 0), Point(7, 0)]
    assert intersect_all(shapes) == Point(7, 0)


def test_intersect_rejects_non_shapes():
    with pytest.raises(TypeError):
        intersect(Point(0, 0), 5)


def main():
    """Run the geometry tests without pytest's collector."""
    print("\nplanar_geometry - algebra tests")
    print("=" * 60)
    pytest.main([__file__, "-q"])


if __name__ == "__main__":
    main()
