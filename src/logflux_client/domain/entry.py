"""Structured log record delivered to the agent.

Purpose
-------
Model one entry (message, source, level, type, timestamp, labels) with the
invariants the agent relies on: the message is never blank and the level and
type are always valid members.

Contents
--------
* :data:`DEFAULT_SOURCE` - source tag applied when callers do not set one.
* :class:`LogEntry` - mutable entry with validating setters.
* ``_normalise_timestamp`` helper shared by the constructor and setter.

System Role
-----------
Domain layer. Entries are built by callers (or by
:meth:`logflux_client.LogFluxClient.send_log`) and rendered by
:mod:`logflux_client.domain.serialization`; sending never takes ownership.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from .errors import InvalidParameterError
from .kinds import EntryType
from .labels import LabelSet
from .levels import LogLevel

DEFAULT_SOURCE = "python-sdk"


def _normalise_timestamp(value: datetime | int | float) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive datetimes are read as local time, matching :meth:`datetime.timestamp`.
    """

    if isinstance(value, datetime):
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            value = value.astimezone()
        return value.astimezone(timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    raise InvalidParameterError(f"unsupported timestamp: {value!r}")


def _require_message(message: str | None) -> str:
    if message is None or not isinstance(message, str):
        raise InvalidParameterError("message is required")
    if not message.strip():
        raise InvalidParameterError("message must not be empty")
    return message


class LogEntry:
    """One structured log record.

    Attributes are read-only properties; use the ``set_*`` methods and
    :meth:`add_label` to change an entry. Invalid input raises
    :class:`~logflux_client.domain.errors.InvalidParameterError` and leaves the
    entry untouched.

    Examples
    --------
    >>> entry = LogEntry('Application started')
    >>> entry.set_level('warning')
    >>> entry.add_label('component', 'demo')
    >>> entry.level.name, entry.source, len(entry.labels)
    ('WARNING', 'python-sdk', 1)
    """

    __slots__ = ("_entry_id", "_message", "_source", "_level", "_entry_type", "_timestamp", "_labels")

    def __init__(
        self,
        message: str,
        *,
        source: str = DEFAULT_SOURCE,
        level: LogLevel | int | str = LogLevel.INFO,
        entry_type: EntryType | int | str = EntryType.LOG,
        timestamp: datetime | int | float | None = None,
        entry_id: str | None = None,
    ) -> None:
        self._message = _require_message(message)
        if source is None:
            raise InvalidParameterError("source must not be None")
        self._source = source
        self._level = LogLevel.coerce(level)
        self._entry_type = EntryType.coerce(entry_type)
        self._timestamp = _normalise_timestamp(timestamp) if timestamp is not None else datetime.now(timezone.utc)
        self._entry_id = entry_id or str(uuid4())
        self._labels = LabelSet()

    @property
    def entry_id(self) -> str:
        return self._entry_id

    @property
    def message(self) -> str:
        return self._message

    @property
    def source(self) -> str:
        return self._source

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def entry_type(self) -> EntryType:
        return self._entry_type

    @property
    def timestamp(self) -> datetime:
        """Aware UTC timestamp of the entry."""

        return self._timestamp

    @property
    def epoch_seconds(self) -> int:
        """Timestamp truncated to whole seconds, as sent on the wire."""

        return int(self._timestamp.timestamp())

    @property
    def labels(self) -> LabelSet:
        return self._labels

    def set_level(self, level: LogLevel | int | str) -> None:
        """Replace the severity; out-of-range values are rejected."""

        self._level = LogLevel.coerce(level)

    def set_type(self, entry_type: EntryType | int | str) -> None:
        """Replace the entry type; out-of-range values are rejected."""

        self._entry_type = EntryType.coerce(entry_type)

    def set_source(self, source: str) -> None:
        if source is None:
            raise InvalidParameterError("source must not be None")
        self._source = str(source)

    def set_timestamp(self, timestamp: datetime | int | float) -> None:
        """Overwrite the timestamp with a datetime or epoch seconds."""

        self._timestamp = _normalise_timestamp(timestamp)

    def add_label(self, key: str, value: str) -> None:
        """Append a key/value label; repeated keys are kept as separate pairs."""

        self._labels.add(key, value)

    def __repr__(self) -> str:
        return (
            f"LogEntry(entry_id={self._entry_id!r}, message={self._message!r}, source={self._source!r}, "
            f"level={self._level.name}, entry_type={self._entry_type.name}, timestamp={self._timestamp.isoformat()!r}, "
            f"labels={self._labels!r})"
        )


__all__ = ["DEFAULT_SOURCE", "LogEntry"]
