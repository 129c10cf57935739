"""
Planar Wire Schemas
===================

Bounded Context: Data Structures

Design:
- Explicit tagged encode/decode for shapes
- Frozen dataclass for the evaluation result envelope
- to_dict() for JSON serialization, from_dict() for deserialization
- Schema versioning for evolution

Public API
----------
Shapes:
    encode_shape, decode_shape, dumps_shape, loads_shape, SHAPE_TAGS

Results:
    EvaluationResult, encode_value, decode_value

Common:
    Timestamp, is_number, SCHEMA_VERSION

Example:
    >>> from planar_io.schemas import encode_shape, decode_shape
    >>> encode_shape(Point(1, 2))
    {'Point': [1.0, 2.0]}
    >>> decode_shape("Nowhere")
    Nowhere()
"""

from .common import SCHEMA_VERSION, Timestamp, is_number
from .shape import (
    SHAPE_TAGS,
    encode_shape,
    decode_shape,
    dumps_shape,
    loads_shape,
    is_encoded_shape,
)
from .result import EvaluationResult, encode_value, decode_value

__all__ = [
    # Common types
    'SCHEMA_VERSION',
    'Timestamp',
    'is_number',
    # Shape codec
    'SHAPE_TAGS',
    'encode_shape',
    'decode_shape',
    'dumps_shape',
    'loads_shape',
    'is_encoded_shape',
    # Results
    'EvaluationResult',
    'encode_value',
    'decode_value',
]
