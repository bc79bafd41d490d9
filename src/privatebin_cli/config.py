"""
Server connection configuration.

Settings are held in an immutable `ServerConfig` that is built once (from
defaults, a server URL, or environment variables) and passed into the paste
pipeline. Environment variables may also come from a `.env` file:

    PRIVATEBIN_PROTOCOL   http or https
    PRIVATEBIN_HOST       server host name (no port, no IPv6 literal)
    PRIVATEBIN_PORT       TCP port (defaults to the protocol's port)
    PRIVATEBIN_PATH       path the server is mounted at
    PRIVATEBIN_TIMEOUT    request timeout in seconds
"""

import dataclasses
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Union
from urllib.parse import urlparse

from dotenv import find_dotenv, load_dotenv

from .models import Protocol, parse_choice
from .types import (
    DEFAULT_HOST,
    DEFAULT_PATH,
    DEFAULT_TIMEOUT,
    ValidationError,
)

ENV_PREFIX = "PRIVATEBIN_"

MAX_PORT = 65535


@dataclass(frozen=True)
class ServerConfig:
    """Where and how to reach the paste server."""

    host: str = DEFAULT_HOST
    """Server host name."""

    protocol: Union[Protocol, str] = Protocol.HTTPS
    """Scheme, `http` or `https`."""

    port: Optional[int] = None
    """TCP port; None selects the protocol's default port."""

    path: str = DEFAULT_PATH
    """Path the server is mounted at, starting with `/`."""

    timeout: float = DEFAULT_TIMEOUT
    """Seconds to wait for the server before giving up."""

    def __post_init__(self) -> None:
        protocol = self.protocol
        if not isinstance(protocol, Protocol):
            protocol = parse_choice(Protocol, str(protocol), "Protocol")
            object.__setattr__(self, "protocol", protocol)

        if self.port is None:
            object.__setattr__(self, "port", protocol.default_port)
        elif isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValidationError(f"Port must be an integer between 0 and {MAX_PORT}")
        elif not 0 <= self.port <= MAX_PORT:
            raise ValidationError(f"Port must be an integer between 0 and {MAX_PORT}")

        if not self.host or any(c in self.host for c in "/?#@: \t\r\n"):
            raise ValidationError(f"Invalid host: {self.host!r}")

        if not self.path.startswith("/"):
            raise ValidationError(f"Path must start with '/': {self.path!r}")

        if not (math.isfinite(self.timeout) and self.timeout > 0):
            raise ValidationError(f"Timeout must be positive, got {self.timeout}")

    @classmethod
    def default(cls) -> "ServerConfig":
        """Creates the built-in default configuration."""
        return cls()

    @classmethod
    def from_url(cls, url: str, timeout: float = DEFAULT_TIMEOUT) -> "ServerConfig":
        """
        Creates configuration from a server URL such as `https://paste.example/`.

        Raises:
            ValidationError: If the URL is not an http(s) server address
        """
        parsed = urlparse(url)

        if not parsed.hostname:
            raise ValidationError(f"Server URL has no host: {url!r}")
        if parsed.query or parsed.fragment:
            raise ValidationError(f"Server URL must not contain a query or fragment: {url!r}")

        try:
            port = parsed.port
        except ValueError:
            raise ValidationError(
                f"Port must be an integer between 0 and {MAX_PORT}"
            ) from None

        return cls(
            host=parsed.hostname,
            protocol=parsed.scheme,
            port=port,
            path=parsed.path or DEFAULT_PATH,
            timeout=timeout,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """
        Creates configuration from `PRIVATEBIN_*` environment variables.

        When `environ` is omitted, the nearest `.env` at or above the working
        directory is loaded first and the process environment is read.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        def get(name: str) -> Optional[str]:
            value = environ.get(ENV_PREFIX + name)
            return value if value else None

        port = get("PORT")
        timeout = get("TIMEOUT")
        try:
            port_value = int(port) if port is not None else None
        except ValueError:
            raise ValidationError(
                f"Port must be an integer between 0 and {MAX_PORT}"
            ) from None
        try:
            timeout_value = float(timeout) if timeout is not None else DEFAULT_TIMEOUT
        except ValueError:
            raise ValidationError(f"Timeout must be a number, got {timeout!r}") from None

        return cls(
            host=get("HOST") or DEFAULT_HOST,
            protocol=get("PROTOCOL") or Protocol.HTTPS,
            port=port_value,
            path=get("PATH") or DEFAULT_PATH,
            timeout=timeout_value,
        )

    def with_overrides(self, **changes) -> "ServerConfig":
        """Returns a copy with every non-None value in `changes` applied."""
        updates = {name: value for name, value in changes.items() if value is not None}
        if "protocol" in updates and "port" not in updates and self.port == self.protocol.default_port:
            # implied port follows the scheme
            updates["port"] = None
        return dataclasses.replace(self, **updates)

    @property
    def base_url(self) -> str:
        """User-facing server URL, omitting the port when it is the scheme default."""
        port = ""
        if self.port != self.protocol.default_port:
            port = f":{self.port}"
        return f"{self.protocol.value}://{self.host}{port}{self.path}"

    @property
    def endpoint(self) -> str:
        """URL the paste is posted to, with an explicit port."""
        return f"{self.protocol.value}://{self.host}:{self.port}{self.path}"
