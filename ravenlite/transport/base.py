"""Base transport for ravenlite."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote, urlencode

from ravenlite.conf import Endpoint
from ravenlite.exceptions import TransportError
from ravenlite.serializer import dumps


class BaseTransport(ABC):
    """
    Abstract base class for transports.

    A transport delivers exactly one event per ``send`` call. There is no
    queueing and no retry: a failed event is reported to the caller as a
    ``TransportError`` and dropped.
    """

    def __init__(
        self,
        origin: str = "python://",
        timeout: float | None = 30.0,
        default_scheme: str = "https",
    ) -> None:
        self.origin = origin
        self.timeout = timeout
        self.default_scheme = default_scheme

    @abstractmethod
    async def send_payload(self, url: str, data: str, headers: dict[str, str]) -> None:
        """POST ``data`` to ``url``. Must raise TransportError on any failure."""

    def build_url(self, endpoint: Endpoint, auth: dict[str, str]) -> str:
        """Store URL with the auth parameters in the query string."""
        url = endpoint.store_url
        if url.startswith("//"):
            url = f"{self.default_scheme}:{url}"
        return f"{url}?{urlencode(auth, safe='', quote_via=quote)}"

    def build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Origin": self.origin,
        }

    async def send(
        self, endpoint: Endpoint, auth: dict[str, str], body: dict[str, Any]
    ) -> None:
        """Send one event body to the endpoint's store URL."""
        try:
            data = dumps(body)
        except (TypeError, ValueError) as e:
            raise TransportError(f"Could not serialize event: {e}") from e

        await self.send_payload(self.build_url(endpoint, auth), data, self.build_headers())

    async def close(self) -> None:
        """Release any resources held by the transport."""
