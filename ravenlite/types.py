"""Type definitions for ravenlite."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LogLevel(str, Enum):
    """Event severity levels.

    The member values are the labels sent on the wire.
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @classmethod
    def from_logging(cls, levelno: int) -> LogLevel:
        """Map a stdlib logging level onto a LogLevel."""
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


@dataclass
class StackFrame:
    """A single stack frame."""

    filename: str
    abs_path: str
    lineno: int | None
    colno: int | None = None
    context_line: str | None = None
    function: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {
            "filename": self.filename,
            "abs_path": self.abs_path,
            "lineno": self.lineno,
            "colno": self.colno,
            "context_line": self.context_line,
        }
        if self.function:
            result["function"] = self.function
        return result


@dataclass
class ExceptionInfo:
    """The exception entry of an error event."""

    type: str
    value: str
    frames: list[StackFrame] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": self.type,
            "value": self.value,
            "stacktrace": {"frames": [f.to_dict() for f in self.frames]},
        }


@dataclass
class EventEnvelope:
    """An event to be sent to the collector."""

    event_id: str
    project: str
    timestamp: str
    level: LogLevel
    platform: str
    message: str
    tags: dict[str, str]
    extra: dict[str, Any]
    exception: list[ExceptionInfo] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON body expected by the store endpoint."""
        result: dict[str, Any] = {
            "event_id": self.event_id,
            "project": self.project,
            "timestamp": self.timestamp,
            "level": self.level.value,
            "platform": self.platform,
            "message": self.message,
            "tags": self.tags,
            "extra": self.extra,
        }
        if self.exception is not None:
            result["exception"] = [e.to_dict() for e in self.exception]
        return result
