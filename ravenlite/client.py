"""Main ravenlite client."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Coroutine, Mapping
from typing import Any

from ravenlite.conf import ClientOptions, build_endpoint, parse_dsn
from ravenlite.context import UserContext
from ravenlite.device import HostPlatform, PlatformInfo
from ravenlite.envelope import build_auth_params, build_envelope
from ravenlite.exceptions import InvalidDsn, NotConfigured, TransportError
from ravenlite.stacktrace import parse_stack
from ravenlite.transport.base import BaseTransport
from ravenlite.transport.http import create_http_transport
from ravenlite.types import EventEnvelope, LogLevel

logger = logging.getLogger(__name__)

# Global client instance
_client: RavenClient | None = None

# Context set through the module API, carried over to every configured client
_user_context: dict[str, Any] = {}


class RavenClient:
    """
    Client bound to one collector endpoint.

    The DSN is parsed and the endpoint built on construction, so an
    invalid DSN raises before any event can be sent.
    """

    def __init__(
        self,
        options: ClientOptions,
        platform: PlatformInfo | None = None,
        transport: BaseTransport | None = None,
    ) -> None:
        self.options = options
        self.dsn = parse_dsn(options.dsn)
        self.endpoint = build_endpoint(self.dsn)
        self.context = UserContext()
        self.platform = platform or HostPlatform()
        self._transport = transport or create_http_transport(options)
        self._pending: set[asyncio.Task[None]] = set()

        if options.debug:
            logger.debug("Client configured for %s", self.endpoint.store_url)

    def set_user_context(self, context: Mapping[str, Any] | None) -> None:
        """Replace the user context attached to every event."""
        self.context.replace(context)

    def build_error_event(self, error: BaseException) -> EventEnvelope:
        """Build the envelope for an exception."""
        return build_envelope(
            self.endpoint,
            self.options,
            self.platform,
            self.context,
            level=LogLevel.ERROR,
            message=str(error),
            error=error,
            frames=parse_stack(error),
        )

    def build_message_event(
        self, message: str, level: LogLevel | str = LogLevel.INFO
    ) -> EventEnvelope:
        """Build the envelope for a plain message."""
        return build_envelope(
            self.endpoint,
            self.options,
            self.platform,
            self.context,
            level=LogLevel(level),
            message=message,
        )

    async def send_event(self, event: EventEnvelope) -> None:
        """Send one event. Raises TransportError if it was not accepted."""
        auth = build_auth_params(self.dsn, self.options.client_name, self.options.secret_key)
        await self._transport.send(self.endpoint, auth, event.to_dict())

    async def error(self, error: BaseException) -> None:
        """Report an exception and wait for the collector to accept it."""
        await self.send_event(self.build_error_event(error))

    async def log(self, message: str, level: LogLevel | str = LogLevel.INFO) -> None:
        """Report a message and wait for the collector to accept it."""
        await self.send_event(self.build_message_event(message, level))

    def capture_exception(self, error: BaseException) -> str:
        """Report an exception without waiting. Returns the event id."""
        event = self.build_error_event(error)
        self._dispatch(self._send_quietly(event))
        if self.options.debug:
            logger.debug("Captured exception: %s", event.event_id)
        return event.event_id

    def capture_message(self, message: str, level: LogLevel | str = LogLevel.INFO) -> str:
        """Report a message without waiting. Returns the event id."""
        event = self.build_message_event(message, level)
        self._dispatch(self._send_quietly(event))
        if self.options.debug:
            logger.debug("Captured message: %s", event.event_id)
        return event.event_id

    async def _send_quietly(self, event: EventEnvelope) -> None:
        try:
            await self.send_event(event)
        except TransportError as e:
            logger.error(
                "Failed to send event %s (status=%s): %s",
                event.event_id,
                e.status_code,
                e.body if e.body is not None else e,
            )

    def _dispatch(self, coro: Coroutine[Any, Any, None]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running event loop, send synchronously
            asyncio.run(coro)
            return

        task = loop.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def flush(self) -> None:
        """Wait for fire-and-forget sends still in flight."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    async def close(self) -> None:
        """Close the client."""
        await self.flush()
        await self._transport.close()


def config(dsn: str | None = None, **kwargs: Any) -> RavenClient:
    """
    Configure the process-wide client.

    Call once at startup, before any event is reported. When ``dsn`` is
    omitted the ``SENTRY_DSN`` environment variable is used. On failure
    the previous client is discarded, so nothing is sent to a stale
    endpoint.
    """
    global _client

    _client = None
    if dsn is None:
        dsn = os.environ.get("SENTRY_DSN", "")
        if not dsn:
            raise InvalidDsn("No DSN given and SENTRY_DSN is not set")

    client = RavenClient(ClientOptions(dsn=dsn, **kwargs))
    client.set_user_context(_user_context)
    _client = client
    return client


def get_client() -> RavenClient | None:
    """Get the current client."""
    return _client


def _require_client() -> RavenClient:
    if _client is None:
        raise NotConfigured("ravenlite.config() must succeed before reporting events")
    return _client


def set_user_context(context: Mapping[str, Any] | None) -> None:
    """Replace the user context. May be called before ``config``."""
    global _user_context
    _user_context = dict(context or {})
    if _client:
        _client.set_user_context(_user_context)


async def error(err: BaseException) -> None:
    """Report an exception. Raises TransportError if the collector refuses it."""
    await _require_client().error(err)


async def log(message: str, level: LogLevel | str = LogLevel.INFO) -> None:
    """Report a message. Raises TransportError if the collector refuses it."""
    await _require_client().log(message, level)


def capture_exception(err: BaseException) -> str:
    """Capture an exception."""
    if not _client:
        return ""
    return _client.capture_exception(err)


def capture_message(message: str, level: LogLevel | str = LogLevel.INFO) -> str:
    """Capture a message."""
    if not _client:
        return ""
    return _client.capture_message(message, level)


async def flush() -> None:
    """Flush pending events."""
    if not _client:
        return
    await _client.flush()


async def close() -> None:
    """Close the process-wide client."""
    global _client
    if not _client:
        return
    client = _client
    _client = None
    await client.close()
