"""Connection settings for one agent destination.

Purpose
-------
Capture everything a client needs to reach the agent: which socket flavour,
the endpoint, the optional shared secret, and timeouts.

Contents
--------
* Default constants mirrored by the convenience constructors.
* :class:`ClientConfig` - validated, immutable settings.

System Role
-----------
Domain layer. ``retry_count`` and ``retry_delay`` are accepted and carried
along but nothing on the send path reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .errors import InvalidParameterError
from .kinds import ConnectionType

DEFAULT_TIMEOUT = 10.0
DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_SOCKET_PATH = "/tmp/logflux-agent.sock"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Immutable client configuration.

    Attributes
    ----------
    connection_type:
        Selects which endpoint fields are meaningful.
    socket_path:
        Filesystem path of the agent socket (Unix only).
    host, port:
        Dotted-quad IPv4 address and port of the agent (TCP only).
    shared_secret:
        Authentication token included in TCP payloads; ignored for Unix.
    timeout:
        Seconds applied to connect, send and receive.
    retry_count, retry_delay:
        Stored for callers; not consulted when sending.
    escape_strings:
        Opt in to JSON string escaping on the wire. Off by default so payloads
        stay byte-identical with what existing agents expect.

    Examples
    --------
    >>> ClientConfig.unix('/tmp/agent.sock').timeout
    10.0
    >>> ClientConfig.tcp('127.0.0.1', 0)
    Traceback (most recent call last):
    ...
    logflux_client.domain.errors.InvalidParameterError: Invalid parameter: port must be between 1 and 65535
    """

    connection_type: ConnectionType
    socket_path: str = ""
    host: str = ""
    port: int = 0
    shared_secret: str = ""
    timeout: float = DEFAULT_TIMEOUT
    retry_count: int = DEFAULT_RETRY_COUNT
    retry_delay: float = DEFAULT_RETRY_DELAY
    escape_strings: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.connection_type, ConnectionType):
            raise InvalidParameterError(f"unsupported connection type: {self.connection_type!r}")
        if self.connection_type is ConnectionType.UNIX:
            if not self.socket_path:
                raise InvalidParameterError("socket_path is required for unix connections")
        else:
            if not self.host:
                raise InvalidParameterError("host is required for tcp connections")
            if not _is_int(self.port) or not 0 < self.port <= 65535:
                raise InvalidParameterError("port must be between 1 and 65535")
        if not _is_number(self.timeout) or self.timeout <= 0:
            raise InvalidParameterError("timeout must be positive")
        if not _is_int(self.retry_count) or not _is_number(self.retry_delay):
            raise InvalidParameterError("retry settings must be numbers")
        if self.retry_count < 0 or self.retry_delay < 0:
            raise InvalidParameterError("retry settings must not be negative")
        if self.shared_secret is None:
            object.__setattr__(self, "shared_secret", "")

    @classmethod
    def unix(cls, socket_path: str, **overrides: object) -> "ClientConfig":
        """Return Unix-socket settings with library defaults."""

        return cls(ConnectionType.UNIX, socket_path=socket_path, **overrides)  # type: ignore[arg-type]

    @classmethod
    def tcp(cls, host: str, port: int, **overrides: object) -> "ClientConfig":
        """Return TCP settings with library defaults."""

        return cls(ConnectionType.TCP, host=host, port=port, **overrides)  # type: ignore[arg-type]

    @property
    def endpoint(self) -> str:
        """Human-readable endpoint used in log messages and CLI output."""

        if self.connection_type is ConnectionType.UNIX:
            return self.socket_path
        return f"{self.host}:{self.port}"

    @property
    def effective_secret(self) -> str | None:
        """Return the secret to embed in payloads, or ``None`` for Unix sockets."""

        if self.connection_type is ConnectionType.TCP and self.shared_secret:
            return self.shared_secret
        return None

    def with_secret(self, shared_secret: str) -> "ClientConfig":
        return replace(self, shared_secret=shared_secret)


__all__ = [
    "ClientConfig",
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_SOCKET_PATH",
    "DEFAULT_TIMEOUT",
]
