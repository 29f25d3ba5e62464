"""Logging integration for ravenlite."""

from __future__ import annotations

import logging

from ravenlite.client import capture_exception, capture_message
from ravenlite.types import LogLevel


class RavenLoggingHandler(logging.Handler):
    """
    Logging handler that reports records as events.

    Records carrying an exception are captured as exceptions, everything
    else as messages at the matching level. Records emitted by ravenlite
    itself are skipped.

    Usage:
        import logging
        import ravenlite
        from ravenlite.integrations.logging import RavenLoggingHandler

        ravenlite.config("https://key@sentry.example.com/42")

        logger = logging.getLogger()
        logger.addHandler(RavenLoggingHandler())
    """

    def __init__(self, level: int = logging.ERROR) -> None:
        super().__init__(level=level)

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a record."""
        try:
            self._handle_record(record)
        except Exception:
            self.handleError(record)

    def _handle_record(self, record: logging.LogRecord) -> None:
        if record.name == "ravenlite" or record.name.startswith("ravenlite."):
            return

        if record.exc_info and record.exc_info[1]:
            capture_exception(record.exc_info[1])
        else:
            capture_message(self.format(record), level=LogLevel.from_logging(record.levelno))
