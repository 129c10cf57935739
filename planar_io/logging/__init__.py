"""
Structured logging for the evaluator and the program runner.

    logger = create_logger("runner", level=logging.DEBUG)
    logger.debug(event=LogEvent.PROGRAM_DECODED, message="Decoded json program")
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
