"""
ProgramRunner - Decode, evaluate and render one program

Bounded Context: Top-level program execution
Responsibilities:
  - Decode program text (JSON, or YAML for program files)
  - Evaluate in the root environment
  - Capture any EvaluationError as a typed failure result
  - Render the result for output

Lifecycle:
    text -> decode() -> tree -> run_tree() -> EvaluationResult -> render()

Errors never escape run(): a caller always gets an EvaluationResult and
can inspect error_kind.
"""

import json
from typing import Any, Optional

import yaml

from planar_io import EvaluationResult, encode_value
from planar_io.logging import LogEvent, StructuredLogger, create_logger
from planar_lang import (
    EvaluationError,
    Evaluator,
    InvalidSyntaxError,
    MalformedInputError,
)
from planar_processor.config import RunnerConfig

FORMATS = ("json", "yaml")


class ProgramRunner:
    """
    Runs programs through the evaluator.

    Attributes:
        config: Runner configuration
        evaluator: Evaluator built from config.evaluator_config
        logger: Structured logger for the runner

    Example:
        >>> runner = ProgramRunner()
        >>> result = runner.run('{"Point": [1, 2]}')
        >>> runner.render(result)
        '{"Point": [1.0, 2.0]}'
    """

    def __init__(
        self,
        config: Optional[RunnerConfig] = None,
        evaluator: Optional[Evaluator] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.config = config or RunnerConfig()
        level = self.config.log_level_value
        self.logger = logger or create_logger("runner", level=level)

        if evaluator is None:
            eval_cfg = self.config.evaluator_config
            evaluator = Evaluator(
                concurrent=eval_cfg.concurrent_arguments,
                max_workers=eval_cfg.max_workers,
                logger=create_logger("evaluator", level=level),
            )
        self.evaluator = evaluator

        self.logger.debug(
            event=LogEvent.CONFIG_LOADED,
            message="Runner configured",
            metadata={
                'log_level': self.config.log_level,
                'concurrent_arguments': self.evaluator.concurrent,
                'max_workers': self.evaluator.max_workers,
            }
        )

    def decode(self, text: str, fmt: str = "json") -> Any:
        """
        Decode program text into a command tree.

        Args:
            text: Program source
            fmt: "json" (default) or "yaml"

        Raises:
            MalformedInputError: If the text cannot be decoded
            ValueError: If fmt is unknown
        """
        if fmt not in FORMATS:
            raise ValueError(f"Unknown program format: {fmt}. Must be one of {FORMATS}")

        try:
            if fmt == "yaml":
                tree = yaml.safe_load(text)
            else:
                tree = json.loads(text)
        except (ValueError, yaml.YAMLError, RecursionError) as e:
            self.logger.error(
                event=LogEvent.DECODE_ERROR,
                message=f"Failed to decode {fmt} program",
                exc_info=e,
            )
            raise MalformedInputError(f"Cannot decode {fmt} program: {e}") from e

        self.logger.debug(
            event=LogEvent.PROGRAM_DECODED,
            message=f"Decoded {fmt} program",
            metadata={'root_type': type(tree).__name__}
        )
        return tree

    def run_tree(self, tree: Any) -> EvaluationResult:
        """
        Evaluate an already decoded tree.

        Nesting deeper than the interpreter stack allows fails as InvalidSyntax.
        """
        try:
            value = self.evaluator.evaluate_program(tree)
        except EvaluationError as e:
            return self._failure(e)
        except RecursionError:
            return self._failure(InvalidSyntaxError("Program nesting is too deep to evaluate"))

        self.logger.info(
            event=LogEvent.EVALUATION_COMPLETED,
            message="Program evaluated",
            metadata={'result_type': getattr(value, 'kind', type(value).__name__)}
        )
        return EvaluationResult.success(value)

    def run(self, text: str, fmt: str = "json") -> EvaluationResult:
        """Decode and evaluate program text."""
        self.logger.debug(
            event=LogEvent.PROGRAM_RECEIVED,
            message="Program received",
            metadata={'length': len(text), 'format': fmt}
        )
        try:
            tree = self.decode(text, fmt)
        except MalformedInputError as e:
            return self._failure(e)
        return self.run_tree(tree)

    def render(self, result: EvaluationResult) -> str:
        """
        Render a result for output.

        Success: the wire-encoded value as JSON.
        Failure: "Error [<kind>]: <message>".
        """
        if not result.ok:
            return f"Error [{result.error_kind}]: {result.error_message}"

        text = json.dumps(encode_value(result.value), indent=self.config.indent, default=str)
        self.logger.debug(
            event=LogEvent.RESULT_SERIALIZED,
            message="Result serialized",
            metadata={'bytes': len(text)}
        )
        return text

    def render_envelope(self, result: EvaluationResult) -> str:
        """Render the full EvaluationResult envelope as JSON."""
        return json.dumps(result.to_dict(), indent=self.config.indent, default=str)

    def _failure(self, error: EvaluationError) -> EvaluationResult:
        self.logger.error(
            event=LogEvent.EVALUATION_ERROR,
            message="Evaluation aborted",
            metadata={'error_kind': error.kind.value},
            exc_info=error,
        )
        return EvaluationResult.failure(error.kind.value, error.message)
