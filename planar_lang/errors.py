"""
Evaluation Errors
=================

Bounded Context: Error taxonomy of the expression language

Every failure during decoding or evaluation is an EvaluationError carrying
an ErrorKind. Errors are never recovered inside an evaluation: they unwind
to the single top-level caller (ProgramRunner, CLI, tests), which reports
the kind.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Typed error kinds reported to callers."""

    UNKNOWN_VARIABLE = "UnknownVariable"
    WRONG_PARAMETER_COUNT = "WrongParameterCount"
    WRONG_ARGUMENT_TYPE = "WrongArgumentType"
    UNKNOWN_COMMAND = "UnknownCommand"
    MISSING_CLAUSE = "MissingClause"
    INVALID_SYNTAX = "InvalidSyntax"
    MALFORMED_INPUT = "MalformedInput"


class EvaluationError(Exception):
    """Base class for all evaluation failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownVariableError(EvaluationError):
    """Raised when a name is not bound in the current environment"""

    kind = ErrorKind.UNKNOWN_VARIABLE

    def __init__(self, name: str):
        super().__init__(f"Unknown variable '{name}'")
        self.name = name


class WrongParameterCountError(EvaluationError):
    """Raised when a known command gets the wrong number of arguments"""

    kind = ErrorKind.WRONG_PARAMETER_COUNT

    def __init__(self, command: str, expected: int, got: int):
        super().__init__(
            f"Command '{command}' expects {expected} parameters, got {got}"
        )
        self.command = command
        self.expected = expected
        self.got = got


class WrongArgumentTypeError(EvaluationError):
    """Raised when an argument evaluates to the wrong kind of value"""

    kind = ErrorKind.WRONG_ARGUMENT_TYPE


class UnknownCommandError(EvaluationError):
    """Raised for unregistered command names and malformed command shapes"""

    kind = ErrorKind.UNKNOWN_COMMAND


class MissingClauseError(EvaluationError):
    """Raised for a Let without its matching in"""

    kind = ErrorKind.MISSING_CLAUSE


class InvalidSyntaxError(EvaluationError):
    """Raised when a command object has neither one nor two keys"""

    kind = ErrorKind.INVALID_SYNTAX


class MalformedInputError(EvaluationError):
    """Raised when program text cannot be decoded"""

    kind = ErrorKind.MALFORMED_INPUT
