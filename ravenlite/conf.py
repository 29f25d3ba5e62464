"""Configuration and DSN parsing for ravenlite."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ravenlite.exceptions import InvalidDsn, SecretInConfig

SDK_NAME = "ravenlite"
SDK_VERSION = "0.1.0"

_DSN_PATTERN = re.compile(
    r"^(?:(\w+):)?//(?:(\w+)(:\w+)?@)?([\w.-]+)(?::(\d+))?(/.*)",
    re.ASCII,
)


@dataclass(frozen=True)
class ParsedDSN:
    """Parsed DSN components.

    ``password`` keeps the leading colon exactly as captured.
    """

    source: str
    protocol: str
    user: str
    password: str
    host: str
    port: str
    path: str


@dataclass(frozen=True)
class Endpoint:
    """Collector location derived from a DSN."""

    global_server: str
    project: str
    store_url: str


@dataclass
class ClientOptions:
    """Configuration options for a ravenlite client."""

    dsn: str
    secret_key: str = ""
    client_name: str = f"{SDK_NAME}/{SDK_VERSION}"
    app_scheme: str = "python"
    platform: str = "python"
    timeout: float | None = 30.0
    default_scheme: str = "https"
    debug: bool = False

    @property
    def origin(self) -> str:
        return f"{self.app_scheme}://"


def parse_dsn(dsn: str) -> ParsedDSN:
    """
    Parse a DSN string.

    Format: [<scheme>:]//[<key>@]<host>[:<port>]/[<base path>/]<project_id>

    Args:
        dsn: The DSN string to parse

    Returns:
        ParsedDSN with extracted components

    Raises:
        InvalidDsn: If the DSN does not match the expected format
        SecretInConfig: If the DSN carries a secret key

    Example:
        >>> parse_dsn("https://abc@example.com:9000/sentry/42").path
        '/sentry/42'
    """
    if not dsn:
        raise InvalidDsn("DSN is required")

    match = _DSN_PATTERN.match(dsn)
    if not match:
        raise InvalidDsn(f"Invalid DSN: {dsn}")

    protocol, user, password, host, port, path = (g or "" for g in match.groups())

    if password:
        raise SecretInConfig(
            "Do not specify your secret key in the DSN, pass it as secret_key instead"
        )

    return ParsedDSN(
        source=dsn,
        protocol=protocol,
        user=user,
        password=password,
        host=host,
        port=port,
        path=path,
    )


def build_global_server(dsn: ParsedDSN) -> str:
    """Assemble ``[scheme:]//host[:port]`` from the DSN pieces."""
    server = f"//{dsn.host}"
    if dsn.port:
        server += f":{dsn.port}"
    if dsn.protocol:
        server = f"{dsn.protocol}:{server}"
    return server


def build_endpoint(dsn: ParsedDSN) -> Endpoint:
    """Build the collector endpoint from a parsed DSN."""
    global_server = build_global_server(dsn)

    last_slash = dsn.path.rfind("/")
    base_path = dsn.path[1 : last_slash + 1]
    project = dsn.path[last_slash + 1 :]

    if not project:
        raise InvalidDsn(f"DSN missing project ID: {dsn.source}")

    return Endpoint(
        global_server=global_server,
        project=project,
        store_url=f"{global_server}/{base_path}api/{project}/store/",
    )


def is_valid_dsn(dsn: str) -> bool:
    """Check if DSN format is valid without throwing."""
    try:
        build_endpoint(parse_dsn(dsn))
        return True
    except InvalidDsn:
        return False
