"""HTTP transport for ravenlite."""

from __future__ import annotations

import httpx

from ravenlite.conf import ClientOptions
from ravenlite.exceptions import TransportError
from ravenlite.transport.base import BaseTransport


class HttpTransport(BaseTransport):
    """HTTP transport - posts each event to the collector's store endpoint."""

    def __init__(
        self,
        origin: str = "python://",
        timeout: float | None = 30.0,
        default_scheme: str = "https",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(origin=origin, timeout=timeout, default_scheme=default_scheme)
        self._client = client

    async def send_payload(self, url: str, data: str, headers: dict[str, str]) -> None:
        """Send payload via HTTP POST."""
        try:
            if self._client is not None:
                response = await self._client.post(
                    url, content=data, headers=headers, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(url, content=data, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            raise TransportError(
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None


def create_http_transport(
    options: ClientOptions, client: httpx.AsyncClient | None = None
) -> HttpTransport:
    """Create HTTP transport from client options."""
    return HttpTransport(
        origin=options.origin,
        timeout=options.timeout,
        default_scheme=options.default_scheme,
        client=client,
    )
