"""
CommandRegistry - Explicit command registration pattern

Bounded Context: Command registration and validation
Responsibilities:
  - Register commands with handlers and parameter signatures
  - Validate command existence before evaluation
  - Validate arity and argument types before invoking a handler
  - Provide introspection (available_commands, get_help)

Threading: Thread-safe (uses lock for write operations)
Pattern: Registry with explicit registration
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Set, Tuple

from planar_geometry import Shape
from planar_io.schemas import is_number
from .errors import (
    UnknownCommandError,
    WrongArgumentTypeError,
    WrongParameterCountError,
)


class ArgType(str, Enum):
    """Kinds of evaluated argument a command slot accepts."""
    NUMBER = "number"
    SHAPE = "shape"

    def accepts(self, value: Any) -> bool:
        if self is ArgType.NUMBER:
            return is_number(value)
        return isinstance(value, Shape)


@dataclass(frozen=True)
class Command:
    """
    A registered command.

    Attributes:
        name: Command name as it appears in programs
        handler: Callable receiving the evaluated arguments positionally
        params: Argument type per slot (fixed-arity commands)
        variadic: Argument type of every slot (variadic commands), or None
        description: Human-readable description for help text
    """
    name: str
    handler: Callable[..., Any]
    params: Tuple[ArgType, ...]
    variadic: Optional[ArgType]
    description: str

    @property
    def arity(self) -> Optional[int]:
        """Number of parameters, None for variadic commands."""
        return None if self.variadic is not None else len(self.params)

    def check_arity(self, count: int) -> None:
        """
        Raises:
            WrongParameterCountError: If count does not match a fixed arity
        """
        if self.arity is not None and count != self.arity:
            raise WrongParameterCountError(self.name, self.arity, count)

    def invoke(self, values: Sequence[Any]) -> Any:
        """
        Type-check evaluated arguments and call the handler.

        Raises:
            WrongParameterCountError: If the number of values is wrong
            WrongArgumentTypeError: If a value does not fit its slot
        """
        self.check_arity(len(values))
        for index, value in enumerate(values):
            expected = self.variadic if self.variadic is not None else self.params[index]
            if not expected.accepts(value):
                raise WrongArgumentTypeError(
                    f"Command '{self.name}' argument {index + 1} must be a "
                    f"{expected.value}, got {_describe(value)}"
                )
        return self.handler(*values)

    def signature(self) -> str:
        if self.variadic is not None:
            return f"{self.name}({self.variadic.value}...)"
        return f"{self.name}({', '.join(p.value for p in self.params)})"


def _describe(value: Any) -> str:
    if isinstance(value, Shape):
        return value.kind
    if isinstance(value, int) and not isinstance(value, bool) and not is_number(value):
        return "an integer beyond float range"
    return type(value).__name__


class CommandRegistry:
    """
    Registry for language commands with explicit registration.

    Key Features:
      - Fail-fast: Unknown commands rejected before arguments are evaluated
      - Introspection: Can query available commands at runtime
      - Self-Documenting: Each command has a description and signature

    Thread Safety:
      - Uses lock for write operations (register)
      - Read operations are lock-free (dict reads)

    Example:
        registry = CommandRegistry()
        registry.register(
            'Point', point, "Point at (x, y)",
            params=(ArgType.NUMBER, ArgType.NUMBER),
        )

        command = registry.resolve('Point')
        command.invoke([1.0, 2.0])
    """

    def __init__(self):
        self._commands: Dict[str, Command] = {}
        self._lock = threading.Lock()

    def register(
        self,
        name: str,
        handler: Callable[..., Any],
        description: str,
        params: Sequence[ArgType] = (),
        variadic: Optional[ArgType] = None,
    ) -> None:
        """
        Register a command with its handler function.

        Args:
            name: Command name
            handler: Callable that executes the command
            description: Human-readable description for help text
            params: Argument type per slot (fixed arity)
            variadic: Argument type for variadic commands (params must be empty)

        Raises:
            ValueError: If command already registered, or both params and
                        variadic are given

        Thread Safety: Uses lock for write operation
        """
        if variadic is not None and params:
            raise ValueError(f"Command '{name}' cannot be both fixed-arity and variadic")

        with self._lock:
            if name in self._commands:
                raise ValueError(f"Command '{name}' already registered")

            self._commands[name] = Command(
                name=name,
                handler=handler,
                params=tuple(params),
                variadic=variadic,
                description=description,
            )

    def resolve(self, name: str) -> Command:
        """
        Look up a registered command.

        Raises:
            UnknownCommandError: If command not registered
        """
        command = self._commands.get(name)
        if command is None:
            raise UnknownCommandError(
                f"Unknown command '{name}'. "
                f"Available commands: {', '.join(sorted(self.available_commands))}"
            )
        return command

    def is_available(self, name: str) -> bool:
        return name in self._commands

    @property
    def available_commands(self) -> Set[str]:
        """
        Get set of all registered commands.

        Returns: Set snapshot
        """
        return set(self._commands.keys())

    def get_help(self) -> Dict[str, str]:
        """
        Get dict of command signatures with descriptions.

        Returns: Dict copy (snapshot)
        """
        return {
            command.signature(): command.description
            for command in sorted(self._commands.values(), key=lambda c: c.name)
        }

    def count(self) -> int:
        return len(self._commands)
