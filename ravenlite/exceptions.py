"""Exceptions raised by the ravenlite client."""

from __future__ import annotations


class RavenError(Exception):
    """Base class for all ravenlite errors."""


class InvalidDsn(RavenError, ValueError):
    """The DSN could not be parsed."""


class SecretInConfig(InvalidDsn):
    """The DSN embeds a secret key."""


class NotConfigured(RavenError):
    """Reporting was attempted before a client was configured."""


class TransportError(RavenError):
    """
    An event could not be delivered to the collector.

    Raised for any non-200 answer, and for network or serialization
    failures, in which case ``status_code`` is ``None``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
