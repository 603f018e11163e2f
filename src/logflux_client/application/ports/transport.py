"""Port describing the stream-socket transport used to reach the agent."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TransportPort(Protocol):
    """Own one connected stream socket."""

    @property
    def is_open(self) -> bool:
        """Return ``True`` while a connected socket handle is held."""

    def open(self) -> None:
        """Create the socket, apply timeouts and connect."""

    def write(self, data: bytes) -> None:
        """Send ``data`` in one write; short writes are failures."""

    def close(self) -> None:
        """Close the socket if open; safe to repeat."""


__all__ = ["TransportPort"]
