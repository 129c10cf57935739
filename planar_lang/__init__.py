"""
planar_lang - Expression language over the geometry algebra

Bounded Context: Program evaluation
Responsibilities:
  - Command registration and validation (CommandRegistry)
  - Layered variable environments (Environment)
  - Tree evaluation with concurrent argument slots (Evaluator)
  - Typed error taxonomy (EvaluationError, ErrorKind)

Design Philosophy:
  - Explicit registration (fail-fast, no runtime surprises)
  - Errors unwind to one top-level caller, never partially recovered
  - Clear error messages (lists available commands on error)
"""

from .errors import (
    ErrorKind,
    EvaluationError,
    UnknownVariableError,
    WrongParameterCountError,
    WrongArgumentTypeError,
    UnknownCommandError,
    MissingClauseError,
    InvalidSyntaxError,
    MalformedInputError,
)
from .environment import Environment, PREBOUND
from .registry import ArgType, Command, CommandRegistry
from .commands import default_registry, register_geometry_commands
from .evaluator import Evaluator

__all__ = [
    # Errors
    "ErrorKind",
    "EvaluationError",
    "UnknownVariableError",
    "WrongParameterCountError",
    "WrongArgumentTypeError",
    "UnknownCommandError",
    "MissingClauseError",
    "InvalidSyntaxError",
    "MalformedInputError",
    # Environment
    "Environment",
    "PREBOUND",
    # Registry
    "ArgType",
    "Command",
    "CommandRegistry",
    "default_registry",
    "register_geometry_commands",
    # Evaluation
    "Evaluator",
]
