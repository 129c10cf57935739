"""
Evaluation Result Schema
========================

Bounded Context: Evaluation outcome envelope

A program either evaluates to a value or fails with a typed error. Both
outcomes travel in the same immutable envelope so a caller (CLI, test
harness, service wrapper) can report the specific error kind.

Message Flow:
    program text -> ProgramRunner -> EvaluationResult -> to_dict() -> JSON
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from planar_geometry import Shape
from .common import SCHEMA_VERSION, Timestamp
from .shape import decode_shape, encode_shape, is_encoded_shape


def encode_value(value: Any) -> Any:
    """Encode a shape; raw literals pass through unchanged."""
    if isinstance(value, Shape):
        return encode_shape(value)
    return value


def decode_value(data: Any) -> Any:
    """Decode a wire-encoded shape; anything else is a raw literal."""
    if is_encoded_shape(data):
        return decode_shape(data)
    return data


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of evaluating one program.

    Attributes:
        value: Resulting shape, or a raw literal (None on failure)
        error_kind: ErrorKind value on failure (None on success)
        error_message: Human-readable error text (None on success)
        schema_version: Envelope schema version
        timestamp: When the result was produced

    Invariants:
        - error_kind and error_message are both set or both None
        - a failed result carries no value

    Example:
        >>> result = EvaluationResult.success(Point(0, 0))
        >>> result.to_dict()['value']
        {'Point': [0.0, 0.0]}
    """
    value: Any = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None
    schema_version: str = SCHEMA_VERSION
    timestamp: Timestamp = field(default_factory=Timestamp.now)

    def __post_init__(self):
        """Validate invariants."""
        if (self.error_kind is None) != (self.error_message is None):
            raise ValueError("error_kind and error_message must be set together")
        if self.error_kind is not None and self.value is not None:
            raise ValueError("A failed EvaluationResult cannot carry a value")

    @classmethod
    def success(cls, value: Any) -> 'EvaluationResult':
        return cls(value=value)

    @classmethod
    def failure(cls, error_kind: str, error_message: str) -> 'EvaluationResult':
        return cls(error_kind=error_kind, error_message=error_message)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        data: Dict[str, Any] = {
            'schema_version': self.schema_version,
            'timestamp': self.timestamp.to_dict(),
            'ok': self.ok,
        }
        if self.ok:
            data['value'] = encode_value(self.value)
        else:
            data['error'] = {
                'kind': self.error_kind,
                'message': self.error_message,
            }
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvaluationResult':
        """Deserialize from dict.

        Raises:
            ValueError: If required keys missing or invalid values (including a
                        timestamp that is not ISO 8601)
        """
        try:
            timestamp = Timestamp(value=data['timestamp'])
            timestamp.to_datetime()
            schema_version = data['schema_version']
            error = data.get('error')
            if error is not None:
                return cls(
                    error_kind=error['kind'],
                    error_message=error['message'],
                    schema_version=schema_version,
                    timestamp=timestamp,
                )
            return cls(
                value=decode_value(data.get('value')),
                schema_version=schema_version,
                timestamp=timestamp,
            )
        except KeyError as e:
            raise ValueError(f"Missing required EvaluationResult field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid EvaluationResult data: {e}")
