"""Shared socket lifecycle for the Unix-domain and TCP transports.

Every flavour follows the same sequence: create a stream socket, apply the
timeout, validate the address, connect. Any failure closes whatever was opened
and raises a tagged error, so a failed :meth:`open` never leaves a handle
behind.
"""

from __future__ import annotations

import logging
import socket
from typing import Any, Callable

from logflux_client.application.ports.transport import TransportPort
from logflux_client.domain.errors import AgentConnectionError, LogFluxError, SocketTimeoutError

logger = logging.getLogger(__name__)

SocketFactory = Callable[[int, int], socket.socket]


class SocketTransport(TransportPort):
    """Base class owning one connected stream socket."""

    family: int = socket.AF_INET

    def __init__(self, *, timeout: float, socket_factory: SocketFactory | None = None) -> None:
        self._timeout = timeout
        self._socket_factory: SocketFactory = socket_factory or socket.socket
        self._sock: socket.socket | None = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    @property
    def timeout(self) -> float:
        return self._timeout

    def describe(self) -> str:
        """Return a printable endpoint for log messages."""

        raise NotImplementedError

    def _address(self) -> Any:
        """Return the validated connect address or raise a tagged error."""

        raise NotImplementedError

    def open(self) -> None:
        """Connect to the agent, replacing any handle left by an earlier open."""

        self.close()
        try:
            sock = self._socket_factory(self.family, socket.SOCK_STREAM)
        except OSError as exc:
            raise AgentConnectionError(f"cannot create socket for {self.describe()}: {exc}") from exc

        try:
            self._apply_timeout(sock)
            address = self._address()
            try:
                sock.connect(address)
            except OSError as exc:
                raise AgentConnectionError(f"cannot connect to {self.describe()}: {exc}") from exc
        except LogFluxError:
            sock.close()
            raise

        self._sock = sock
        logger.debug("Connected to agent at %s", self.describe())

    def _apply_timeout(self, sock: socket.socket) -> None:
        try:
            sock.settimeout(self._timeout)
        except (OSError, ValueError, TypeError) as exc:
            raise SocketTimeoutError(f"cannot apply timeout {self._timeout!r}: {exc}") from exc

    def write(self, data: bytes) -> None:
        """Send ``data`` with a single ``send`` call."""

        sock = self._sock
        if sock is None:
            raise AgentConnectionError(f"transport to {self.describe()} is closed")
        try:
            sent = sock.send(data)
        except OSError as exc:
            raise AgentConnectionError(f"send to {self.describe()} failed: {exc}") from exc
        if sent != len(data):
            raise AgentConnectionError(f"short write to {self.describe()}: {sent} of {len(data)} bytes")

    def close(self) -> None:
        sock, self._sock = self._sock, None
        if sock is None:
            return
        try:
            sock.close()
        except OSError as exc:  # pragma: no cover - close rarely fails
            logger.debug("Ignoring error while closing %s: %s", self.describe(), exc)
        else:
            logger.debug("Closed connection to %s", self.describe())


__all__ = ["SocketFactory", "SocketTransport"]
