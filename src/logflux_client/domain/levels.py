"""Syslog-compatible severities attached to every log entry.

Purpose
-------
Represent the eight agent severities (``emergency`` through ``debug``) and the
conversions callers need when the level arrives as text or a raw integer.

Contents
--------
* :class:`LogLevel` enum with parsing helpers.

System Role
-----------
Domain layer. The numeric value is what travels on the wire, so members must
never be renumbered.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidParameterError


class LogLevel(IntEnum):
    """Ordered severities; lower values are more severe."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def severity(self) -> str:
        """Return the lowercase severity name used in CLI output."""

        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Return the member matching a case-insensitive ``name``.

        Examples
        --------
        >>> LogLevel.from_name(' Notice ') is LogLevel.NOTICE
        True
        """

        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise InvalidParameterError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the member whose wire value is ``level``."""

        try:
            return cls(level)
        except ValueError as exc:
            raise InvalidParameterError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def coerce(cls, value: "LogLevel | int | str") -> "LogLevel":
        """Accept a member, its wire value, or its name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_numeric(value)
        raise InvalidParameterError(f"Unsupported log level: {value!r}")


__all__ = ["LogLevel"]
