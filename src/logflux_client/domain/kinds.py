"""Entry categories and connection flavours.

Both enums travel through configuration and CLI flags as text, so each offers
the same case-insensitive ``from_name`` helper as :class:`LogLevel`.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from .errors import InvalidParameterError


class EntryType(IntEnum):
    """Kind of record an entry carries; the value is sent as ``entry_type``."""

    LOG = 1
    METRIC = 2
    TRACE = 3
    EVENT = 4
    AUDIT = 5

    @classmethod
    def from_name(cls, name: str) -> "EntryType":
        """Return the member matching a case-insensitive ``name``.

        Examples
        --------
        >>> EntryType.from_name('audit') is EntryType.AUDIT
        True
        """

        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise InvalidParameterError(f"Unknown entry type: {name!r}") from exc

    @classmethod
    def coerce(cls, value: "EntryType | int | str") -> "EntryType":
        """Accept a member, its wire value, or its name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as exc:
                raise InvalidParameterError(f"Unsupported entry type numeric: {value}") from exc
        raise InvalidParameterError(f"Unsupported entry type: {value!r}")


class ConnectionType(Enum):
    """Stream-socket flavour used to reach the agent."""

    UNIX = "unix"
    TCP = "tcp"

    @classmethod
    def from_name(cls, name: str) -> "ConnectionType":
        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidParameterError(f"Unsupported connection type: {name!r}")


__all__ = ["ConnectionType", "EntryType"]
