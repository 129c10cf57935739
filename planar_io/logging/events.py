"""
Log event names.

Names are dotted, <area>.<what>, so a log query can filter on a prefix
(e.g. every "error.*" record carries metadata.error_kind or an exception).
"""

from enum import Enum


class LogEvent(str, Enum):
    """Event tag written into every structured log record."""

    # ========== Program Events ==========
    PROGRAM_RECEIVED = "program.received"
    """Raw program text received by the runner."""

    PROGRAM_DECODED = "program.decoded"
    """Program text decoded into a command tree."""

    # ========== Evaluation Events ==========
    EVALUATION_COMPLETED = "evaluation.completed"
    """Program evaluated to a value."""

    COMMAND_DISPATCHED = "command.dispatched"
    """Named command resolved and invoked by the evaluator."""

    # ========== Result Events ==========
    RESULT_SERIALIZED = "result.serialized"
    """Evaluation result encoded for output."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Runner configuration loaded."""

    # ========== Error Events ==========
    DECODE_ERROR = "error.decode"
    """Program text could not be decoded."""

    EVALUATION_ERROR = "error.evaluation"
    """Evaluation aborted with a typed error."""

