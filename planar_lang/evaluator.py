"""
Expression Evaluator
====================

Bounded Context: Evaluation of decoded command trees

Tree shapes:
    {"Name": [arg, ...]}             command call (see commands.py)
    {"Let": {name: expr}, "in": e}   bind names, then evaluate e
    "name"                           variable lookup
    anything else                    raw literal, returned unchanged

Threading Model:
- Arguments of a command (and Let bindings) are independent. With
  concurrency enabled, each argument slot of a multi-argument command is
  evaluated on a thread pool owned by that command.
- The join collects exactly one result per slot, in slot order.
- All slots run to completion; the first failing slot (by position)
  re-raises its error. There is no cancellation.
- Environments are never mutated, so slots share them safely.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence

from planar_io.logging import LogEvent, StructuredLogger, create_logger
from .commands import default_registry
from .environment import Environment
from .errors import (
    InvalidSyntaxError,
    MissingClauseError,
    UnknownCommandError,
)
from .registry import CommandRegistry

LET = "Let"
IN = "in"


class Evaluator:
    """
    Evaluates command trees against a command registry.

    Attributes:
        registry: Commands available to programs
        concurrent: Evaluate sibling arguments on worker threads
        max_workers: Upper bound on threads per command (None = one per slot)
        logger: Structured logger (command dispatch is logged at DEBUG)

    Example:
        >>> evaluator = Evaluator()
        >>> evaluator.evaluate_program(
        ...     {"Intersect": [{"Point": [0, 0]}, "Everywhere"]}
        ... )
        Point(x=0.0, y=0.0)
    """

    def __init__(
        self,
        registry: Optional[CommandRegistry] = None,
        concurrent: bool = True,
        max_workers: Optional[int] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self.registry = registry or default_registry()
        self.concurrent = concurrent
        self.max_workers = max_workers
        self.logger = logger or create_logger("evaluator")

    def evaluate_program(self, tree: Any) -> Any:
        """Evaluate a whole program in the root environment."""
        return self.evaluate(tree)

    def evaluate(self, tree: Any, env: Optional[Environment] = None) -> Any:
        """
        Evaluate one tree node (in the root environment if env is None).

        Raises:
            EvaluationError: Any error kind; evaluation is aborted
        """
        if env is None:
            env = Environment.root()
        if isinstance(tree, dict):
            return self._evaluate_form(tree, env)
        if isinstance(tree, str):
            return env.lookup(tree)
        return tree

    # ------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------
    def _evaluate_form(self, form: Dict[str, Any], env: Environment) -> Any:
        if len(form) == 1:
            (name, args), = form.items()
            if name == LET:
                raise MissingClauseError(f"'{LET}' without '{IN}'")
            return self._apply(name, args, env)

        if len(form) == 2:
            return self._evaluate_let(form, env)

        raise InvalidSyntaxError(
            f"Command object must have 1 or 2 keys, got {len(form)}"
        )

    def _apply(self, name: Any, args: Any, env: Environment) -> Any:
        command = self.registry.resolve(name)
        if not isinstance(args, list):
            raise UnknownCommandError(
                f"Command '{name}' expects a list of arguments, "
                f"got {type(args).__name__}"
            )
        command.check_arity(len(args))

        values = self._evaluate_all(args, env)

        self.logger.debug(
            event=LogEvent.COMMAND_DISPATCHED,
            message=f"Dispatching {name}",
            metadata={'command': name, 'arguments': len(values)}
        )
        return command.invoke(values)

    def _evaluate_let(self, form: Dict[str, Any], env: Environment) -> Any:
        if LET not in form:
            raise UnknownCommandError(
                f"Unknown command form with keys {sorted(map(str, form))}"
            )
        if IN not in form:
            raise MissingClauseError(f"'{LET}' without '{IN}'")

        bindings = form[LET]
        if not isinstance(bindings, dict):
            raise UnknownCommandError(
                f"'{LET}' expects an object of bindings, got {type(bindings).__name__}"
            )
        names = list(bindings)
        if not all(isinstance(n, str) for n in names):
            raise UnknownCommandError(f"'{LET}' binding names must be strings")

        # bindings see the outer environment only
        values = self._evaluate_all([bindings[n] for n in names], env)
        return self.evaluate(form[IN], env.child(dict(zip(names, values))))

    # ------------------------------------------------------------
    # Argument evaluation
    # ------------------------------------------------------------
    def _evaluate_all(self, trees: Sequence[Any], env: Environment) -> List[Any]:
        """Evaluate independent trees; results are in input order."""
        if not self.concurrent or len(trees) < 2:
            return [self.evaluate(tree, env) for tree in trees]

        workers = len(trees)
        if self.max_workers is not None:
            workers = min(workers, self.max_workers)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="planar-arg") as pool:
            futures = [pool.submit(self.evaluate, tree, env) for tree in trees]
            return [future.result() for future in futures]
