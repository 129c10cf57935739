"""
Geometry Commands
=================

Registers the geometry algebra as language commands.

    Point        [x, y]                 -> point(x, y)
    Line         [angle, d]             -> line(angle, d)
    LineSegment  [x1, y1, x2, y2]       -> line_segment(x1, y1, x2, y2)
    Shift        [dx, dy, shape]        -> shift(dx, dy, shape)
    Intersect    [shape, shape, ...]    -> intersect_all(shapes)

Let / in is a special form handled by the evaluator, not a command.
"""

from planar_geometry import intersect_all, line, line_segment, point, shift
from .registry import ArgType, CommandRegistry

NUMBER = ArgType.NUMBER
SHAPE = ArgType.SHAPE


def _intersect(*shapes):
    return intersect_all(shapes)


def register_geometry_commands(registry: CommandRegistry) -> CommandRegistry:
    """Register the five geometry commands on an existing registry."""
    registry.register(
        "Point", point, "Point at (x, y)",
        params=(NUMBER, NUMBER),
    )
    registry.register(
        "Line", line, "Line sin(angle)*x + cos(angle)*y = d",
        params=(NUMBER, NUMBER),
    )
    registry.register(
        "LineSegment", line_segment, "Segment between (x1, y1) and (x2, y2)",
        params=(NUMBER, NUMBER, NUMBER, NUMBER),
    )
    registry.register(
        "Shift", shift, "Translate a shape by (dx, dy)",
        params=(NUMBER, NUMBER, SHAPE),
    )
    registry.register(
        "Intersect", _intersect, "Intersection of all shapes (Everywhere if none)",
        variadic=SHAPE,
    )
    return registry


def default_registry() -> CommandRegistry:
    return register_geometry_commands(CommandRegistry())
