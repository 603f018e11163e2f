"""Unix-domain stream transport for agents on the same host."""

from __future__ import annotations

import os
import socket
import sys

from logflux_client.domain.errors import InvalidParameterError

from ._base import SocketFactory, SocketTransport

# Capacity of ``sockaddr_un.sun_path`` including the terminating NUL.
SUN_PATH_CAPACITY = 104 if sys.platform == "darwin" or "bsd" in sys.platform else 108


class UnixSocketTransport(SocketTransport):
    """Connect to the agent through a filesystem socket path."""

    family = getattr(socket, "AF_UNIX", -1)

    def __init__(self, socket_path: str, *, timeout: float, socket_factory: SocketFactory | None = None) -> None:
        super().__init__(timeout=timeout, socket_factory=socket_factory)
        self._socket_path = socket_path

    @property
    def socket_path(self) -> str:
        return self._socket_path

    def describe(self) -> str:
        return f"unix:{self._socket_path}"

    def _address(self) -> str:
        if len(os.fsencode(self._socket_path)) >= SUN_PATH_CAPACITY:
            raise InvalidParameterError(f"socket path exceeds {SUN_PATH_CAPACITY - 1} bytes: {self._socket_path}")
        return self._socket_path


__all__ = ["SUN_PATH_CAPACITY", "UnixSocketTransport"]
