"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Structured logger that writes one JSON object per record.

Design:
- JSON output (one line per record, greppable with jq)
- Built on Python's logging module (thread-safe)
- Typed events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="registry")
    >>> logger.info(
    ...     event=LogEvent.OBJECT_ADDED,
    ...     message="Added Line",
    ...     metadata={'index': 0, 'dimension': 2}
    ... )

Output:
    {
        "timestamp": "2026-10-18T09:30:45.123456+00:00",
        "level": "INFO",
        "component": "registry",
        "event": "object.added",
        "message": "Added Line",
        "metadata": {"index": 0, "dimension": 2}
    }
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "registry", "cli")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None,
        handler: Optional[logging.Handler] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "registry")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: hyperline.<component>)
            handler: Replaces the logger's handlers (default: JSON to stderr,
                added once per logger name)
        """
        self.component = component
        self.logger_name = logger_name or f"hyperline.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if handler is not None:
            self.logger.handlers.clear()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)
        elif not self.logger.handlers:
            handler = StderrHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context (index, object_type, ...)
            exc_info: Exception for ERROR logs
        """
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.CONFIG_LOADED,
            ...     message="Loaded scene",
            ...     metadata={'objects': 2}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log WARNING level message."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log ERROR level message.

        Example:
            >>> try:
            ...     line.distance_to_point((1.0, 1.0))
            ... except InvalidStateError as e:
            ...     logger.error(
            ...         event=LogEvent.POINT_CHECK_FAILED,
            ...         message="Distance failed",
            ...         exc_info=e,
            ...         metadata={'index': 0}
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class StderrHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever sys.stderr is when a record is emitted."""

    def emit(self, record: logging.LogRecord) -> None:
        # Called under the handler lock (Handler.handle)
        self.stream = sys.stderr
        super().emit(record)


class JSONFormatter(logging.Formatter):
    """
    Formatter used by StructuredLogger.

    The message is already a JSON document; pass it through.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


# Convenience factory function
def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("registry", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
