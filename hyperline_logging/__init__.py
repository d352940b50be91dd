"""
Structured Logging for Hyperline
================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from hyperline_logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="registry")
    >>> logger.warning(
    ...     event=LogEvent.POINT_SKIPPED,
    ...     message="Dimension mismatch",
    ...     metadata={'required': 4, 'supplied': 2}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
