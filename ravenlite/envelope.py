"""Event envelope construction."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from ravenlite.conf import ClientOptions, Endpoint, ParsedDSN
from ravenlite.context import UserContext
from ravenlite.device import PlatformInfo
from ravenlite.types import EventEnvelope, ExceptionInfo, LogLevel, StackFrame

PROTOCOL_VERSION = "7"


def generate_event_id() -> str:
    """32 lowercase hex chars, version nibble ``4``, variant nibble in ``89ab``."""
    return uuid.uuid4().hex


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_auth_params(
    dsn: ParsedDSN, client_name: str, secret_key: str = ""
) -> dict[str, str]:
    """
    Build the auth query parameters sent with each request.

    The secret never comes from the DSN itself (parsing rejects it); it is
    supplied separately and only ever placed on the outgoing request.
    """
    return {
        "sentry_version": PROTOCOL_VERSION,
        "sentry_client": client_name,
        "sentry_key": dsn.user,
        "sentry_secret": secret_key or dsn.password[1:],
    }


def build_envelope(
    endpoint: Endpoint,
    options: ClientOptions,
    platform: PlatformInfo,
    context: UserContext,
    level: LogLevel,
    message: str,
    error: BaseException | None = None,
    frames: list[StackFrame] | None = None,
) -> EventEnvelope:
    """
    Assemble one event.

    ``frames`` are expected most recent call first, as ``parse_stack``
    returns them, and are reversed so the outermost call comes first.
    """
    extra: dict[str, Any] = context.snapshot()
    extra["orientation"] = platform.orientation()

    exception = None
    if error is not None:
        exception = [
            ExceptionInfo(
                type=type(error).__name__,
                value=str(error),
                frames=list(reversed(frames or [])),
            )
        ]

    return EventEnvelope(
        event_id=generate_event_id(),
        project=endpoint.project,
        timestamp=utc_timestamp(),
        level=level,
        platform=options.platform,
        message=message,
        tags={
            "uuid": platform.device_id(),
            "os_version": platform.os_version(),
        },
        extra=extra,
        exception=exception,
    )
