"""TCP stream transport for agents reached over the network."""

from __future__ import annotations

import socket

from logflux_client.domain.errors import AgentConnectionError

from ._base import SocketFactory, SocketTransport


class TcpSocketTransport(SocketTransport):
    """Connect to ``host:port`` where ``host`` is a dotted-quad IPv4 address.

    Hostnames are rejected rather than resolved; the client performs no DNS
    lookups.
    """

    family = socket.AF_INET

    def __init__(self, host: str, port: int, *, timeout: float, socket_factory: SocketFactory | None = None) -> None:
        super().__init__(timeout=timeout, socket_factory=socket_factory)
        self._host = host
        self._port = port

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    def describe(self) -> str:
        return f"tcp:{self._host}:{self._port}"

    def _address(self) -> tuple[str, int]:
        try:
            socket.inet_pton(socket.AF_INET, self._host)
        except (OSError, ValueError) as exc:
            raise AgentConnectionError(f"host must be a dotted-quad IPv4 address: {self._host!r}") from exc
        return (self._host, self._port)


__all__ = ["TcpSocketTransport"]
