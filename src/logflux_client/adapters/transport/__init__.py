"""Stream-socket transports and the factory selecting one from settings."""

from __future__ import annotations

from logflux_client.domain.kinds import ConnectionType
from logflux_client.domain.settings import ClientConfig

from ._base import SocketFactory, SocketTransport
from .tcp_socket import TcpSocketTransport
from .unix_socket import SUN_PATH_CAPACITY, UnixSocketTransport


def create_transport(config: ClientConfig, *, socket_factory: SocketFactory | None = None) -> SocketTransport:
    """Return an unopened transport matching ``config.connection_type``."""

    if config.connection_type is ConnectionType.UNIX:
        return UnixSocketTransport(config.socket_path, timeout=config.timeout, socket_factory=socket_factory)
    return TcpSocketTransport(config.host, config.port, timeout=config.timeout, socket_factory=socket_factory)


__all__ = [
    "SUN_PATH_CAPACITY",
    "SocketFactory",
    "SocketTransport",
    "TcpSocketTransport",
    "UnixSocketTransport",
    "create_transport",
]
