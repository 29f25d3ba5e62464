"""
ravenlite

Minimal error and message reporting client for Sentry-compatible collectors.

Usage:
    import ravenlite

    # Configure with your DSN (never include the secret key in it)
    ravenlite.config("https://public_key@sentry.example.com/42")

    # Attach context to every event
    ravenlite.set_user_context({"user_id": "user-123"})

    # Report exceptions and wait for the collector
    try:
        risky_operation()
    except Exception as e:
        await ravenlite.error(e)

    # Report messages
    await ravenlite.log("User logged in", level=ravenlite.LogLevel.INFO)

    # Or fire and forget
    ravenlite.capture_message("Cache warmed")
"""

from ravenlite.client import (
    RavenClient,
    capture_exception,
    capture_message,
    close,
    config,
    error,
    flush,
    get_client,
    log,
    set_user_context,
)
from ravenlite.conf import SDK_VERSION, ClientOptions, Endpoint, ParsedDSN
from ravenlite.exceptions import (
    InvalidDsn,
    NotConfigured,
    RavenError,
    SecretInConfig,
    TransportError,
)
from ravenlite.types import LogLevel

__version__ = SDK_VERSION
__all__ = [
    # Core
    "config",
    "set_user_context",
    "error",
    "log",
    "capture_exception",
    "capture_message",
    "flush",
    "close",
    "get_client",
    "RavenClient",
    # Types
    "ClientOptions",
    "Endpoint",
    "ParsedDSN",
    "LogLevel",
    # Errors
    "RavenError",
    "InvalidDsn",
    "SecretInConfig",
    "NotConfigured",
    "TransportError",
]
