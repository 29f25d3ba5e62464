"""Transport module for ravenlite."""

from ravenlite.transport.base import BaseTransport
from ravenlite.transport.http import HttpTransport, create_http_transport

__all__ = ["BaseTransport", "HttpTransport", "create_http_transport"]
