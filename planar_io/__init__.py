"""
Planar I/O Package
==================

Bounded Context: Data exchange and observability

Architecture:
- schemas/: Wire encoding of shapes and evaluation results
- logging/: Structured JSON logging

Design Philosophy:
- Cohesion > Location: Each module has one reason to change
- Immutability: frozen dataclasses for message DTOs
- Observability: Structured logs (JSON) for production queries
"""

from .schemas import (
    SCHEMA_VERSION,
    Timestamp,
    is_number,
    encode_shape,
    decode_shape,
    dumps_shape,
    loads_shape,
    EvaluationResult,
    encode_value,
    decode_value,
)
from .logging import LogEvent, StructuredLogger, create_logger

__all__ = [
    # Schemas
    'SCHEMA_VERSION',
    'Timestamp',
    'is_number',
    'encode_shape',
    'decode_shape',
    'dumps_shape',
    'loads_shape',
    'EvaluationResult',
    'encode_value',
    'decode_value',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]

__version__ = "1.0.0"
