"""Rich-powered console adapter implementing :class:`EntryConsolePort`.

Purpose
-------
Preview entries in a terminal before (or instead of) sending them, styled by
severity.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleAdapter` - adapter used by ``logflux send --dry-run``.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console

from logflux_client.application.ports.console import EntryConsolePort
from logflux_client.domain.entry import LogEntry
from logflux_client.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.EMERGENCY: "bold white on red",
    LogLevel.ALERT: "bold red",
    LogLevel.CRITICAL: "bold red",
    LogLevel.ERROR: "red",
    LogLevel.WARNING: "yellow",
    LogLevel.NOTICE: "green",
    LogLevel.INFO: "cyan",
    LogLevel.DEBUG: "dim",
}

#: Default Rich styles keyed by :class:`LogLevel`.


class RichConsoleAdapter(EntryConsolePort):
    """Render log entries using Rich formatting with style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[LogLevel | str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            merged[LogLevel.coerce(key)] = value
        self._style_map = merged

    def emit(self, entry: LogEntry, *, colorize: bool) -> None:
        """Print ``entry`` on one line.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> RichConsoleAdapter(console=console).emit(LogEntry('msg', timestamp=0), colorize=False)
        >>> 'msg' in console.export_text()
        True
        """

        style = self._style_map.get(entry.level, "") if colorize and not self._no_color else ""
        self._console.print(self._format_line(entry), style=style, highlight=False, markup=False, soft_wrap=True)

    def print_payload(self, payload: str) -> None:
        """Print a raw wire payload without markup or highlighting."""

        self._console.print(payload, highlight=False, markup=False, soft_wrap=True)

    @staticmethod
    def _format_line(entry: LogEntry) -> str:
        """Return a human-friendly console line for ``entry``.

        Examples
        --------
        >>> line = RichConsoleAdapter._format_line(LogEntry('ready', source='svc', timestamp=0))
        >>> line
        '1970-01-01T00:00:00+00:00     INFO log svc - ready'
        """

        labels = " ".join(f"{label.key}={label.value}" for label in entry.labels)
        suffix = f" {labels}" if labels else ""
        return (
            f"{entry.timestamp.isoformat()} {entry.level.severity.upper():>8} "
            f"{entry.entry_type.name.lower()} {entry.source} - {entry.message}{suffix}"
        )


__all__ = ["RichConsoleAdapter"]
