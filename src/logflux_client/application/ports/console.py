"""Console port describing terminal rendering of entries.

Purpose
-------
Let the CLI preview entries (``logflux send --dry-run``) without depending on a
specific terminal library.

Contents
--------
* :class:`EntryConsolePort` - runtime-checkable protocol with a single
  ``emit`` method supporting optional colour control.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from logflux_client.domain.entry import LogEntry


@runtime_checkable
class EntryConsolePort(Protocol):
    """Render a log entry to an interactive console."""

    def emit(self, entry: LogEntry, *, colorize: bool) -> None:
        """Render ``entry`` with optional colour control."""


__all__ = ["EntryConsolePort"]
