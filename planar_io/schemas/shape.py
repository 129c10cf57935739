"""
Shape Wire Schema
=================

Bounded Context: Shape serialization

Tagged encoding of geometry values, independent of their in-memory
representation:

    Nowhere       "Nowhere"
    Everywhere    "Everywhere"
    Point         {"Point": [x, y]}
    Line          {"Line": [angle, d]}
    LineSegment   {"LineSegment": [x1, y1, x2, y2]}

decode_shape() goes through the canonical constructors, so a decoded
LineSegment with coincident endpoints comes back as a Point.
"""

import json
from typing import Any, Callable, Dict, List, Tuple, Union

from planar_geometry import (
    EVERYWHERE,
    NOWHERE,
    Everywhere,
    Line,
    LineSegment,
    Nowhere,
    Point,
    Shape,
    line,
    line_segment,
    point,
)
from .common import is_number

Encoded = Union[str, Dict[str, List[float]]]

_CONSTANTS: Dict[str, Shape] = {
    Nowhere.kind: NOWHERE,
    Everywhere.kind: EVERYWHERE,
}

# tag -> (arity, canonical constructor)
_TAGGED: Dict[str, Tuple[int, Callable[..., Shape]]] = {
    Point.kind: (2, point),
    Line.kind: (2, line),
    LineSegment.kind: (4, line_segment),
}

SHAPE_TAGS = frozenset(_CONSTANTS) | frozenset(_TAGGED)


def _fields(shape: Shape) -> List[float]:
    if isinstance(shape, Point):
        return [shape.x, shape.y]
    if isinstance(shape, Line):
        return [shape.angle, shape.d]
    return [shape.x1, shape.y1, shape.x2, shape.y2]


def encode_shape(shape: Shape) -> Encoded:
    """
    Serialize a shape to its JSON-compatible wire form.

    Raises:
        TypeError: If shape is not a Shape
    """
    if not isinstance(shape, Shape):
        raise TypeError(f"Cannot encode {type(shape).__name__} as a shape")
    if shape.kind in _CONSTANTS:
        return shape.kind
    return {shape.kind: _fields(shape)}


def decode_shape(data: Any) -> Shape:
    """
    Deserialize a shape from its wire form.

    Args:
        data: "Nowhere", "Everywhere" or a single-key tagged dict

    Returns:
        Shape built through the canonical constructors

    Raises:
        ValueError: If the tag is unknown, the field count is wrong or a
                    field is not a number
    """
    if isinstance(data, str):
        if data not in _CONSTANTS:
            raise ValueError(f"Unknown shape constant: {data!r}")
        return _CONSTANTS[data]

    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"Shape must be a constant or a single-key object, got {data!r}")

    (tag, values), = data.items()
    if tag not in _TAGGED:
        raise ValueError(f"Unknown shape tag: {tag!r}")

    arity, build = _TAGGED[tag]
    if not isinstance(values, list) or len(values) != arity:
        raise ValueError(f"{tag} expects a list of {arity} numbers, got {values!r}")
    if not all(is_number(v) for v in values):
        raise ValueError(f"{tag} fields must be numbers, got {values!r}")

    return build(*(float(v) for v in values))


def is_encoded_shape(data: Any) -> bool:
    """True if data looks like a wire-encoded shape (tag check only)."""
    if isinstance(data, str):
        return data in _CONSTANTS
    return isinstance(data, dict) and len(data) == 1 and next(iter(data)) in _TAGGED


def dumps_shape(shape: Shape, indent: Union[int, None] = None) -> str:
    """Encode a shape as JSON text."""
    return json.dumps(encode_shape(shape), indent=indent)


def loads_shape(text: str) -> Shape:
    """
    Decode a shape from JSON text.

    Raises:
        ValueError: On invalid JSON or an invalid shape
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid shape JSON: {e}") from e
    return decode_shape(data)
