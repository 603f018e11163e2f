"""Render log entries into the agent's newline-delimited JSON wire format.

Purpose
-------
Produce exactly one JSON object per entry with a fixed field order::

    {"id":..,"message":..,"source":..,"entry_type":N,"level":N,"timestamp":N
     [,"shared_secret":..][,"labels":{..}]}

Contents
--------
* :func:`render_entry` - build the JSON text.
* :func:`encode_line` - newline-terminated UTF-8 bytes ready for the socket.

System Role
-----------
Domain layer, used by the delivery use case.

Alignment Notes
---------------
By default string values are inserted verbatim, without escaping. Quotes or
control characters in messages, sources or labels therefore corrupt the
object; callers must sanitise untrusted text first. ``escape=True`` switches to
JSON-escaped strings, which changes the bytes on the wire and must be enabled
deliberately (see :attr:`ClientConfig.escape_strings`). Labels are emitted as
repeated keys when a key was added more than once, so the output is built
by hand rather than with :func:`json.dumps` on a ``dict``.
"""

from __future__ import annotations

import json
from typing import Callable

from .entry import LogEntry
from .errors import InvalidParameterError, OutOfMemoryError


def _raw(text: str) -> str:
    return f'"{text}"'


def _escaped(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def render_entry(entry: LogEntry, *, shared_secret: str | None = None, escape: bool = False) -> str:
    """Return ``entry`` rendered as a single JSON object (no trailing newline).

    Examples
    --------
    >>> entry = LogEntry('Batch log entry #1', source='batch-example', entry_id='id-1', timestamp=0)
    >>> entry.add_label('sequence', '1')
    >>> render_entry(entry)
    '{"id":"id-1","message":"Batch log entry #1","source":"batch-example","entry_type":1,"level":6,"timestamp":0,"labels":{"sequence":"1"}}'
    >>> render_entry(LogEntry('hi', entry_id='x', timestamp=5), shared_secret='s3')
    '{"id":"x","message":"hi","source":"python-sdk","entry_type":1,"level":6,"timestamp":5,"shared_secret":"s3"}'
    """

    quote: Callable[[str], str] = _escaped if escape else _raw
    try:
        fields = [
            f'"id":{quote(entry.entry_id)}',
            f'"message":{quote(entry.message)}',
            f'"source":{quote(entry.source)}',
            f'"entry_type":{int(entry.entry_type)}',
            f'"level":{int(entry.level)}',
            f'"timestamp":{entry.epoch_seconds}',
        ]
        if shared_secret:
            fields.append(f'"shared_secret":{quote(shared_secret)}')
        if entry.labels:
            pairs = ",".join(f"{quote(label.key)}:{quote(label.value)}" for label in entry.labels)
            fields.append(f'"labels":{{{pairs}}}')
        return "{" + ",".join(fields) + "}"
    except MemoryError as exc:
        raise OutOfMemoryError("could not allocate serialization buffer") from exc


def encode_line(entry: LogEntry, *, shared_secret: str | None = None, escape: bool = False) -> bytes:
    """Return the newline-terminated UTF-8 payload for ``entry``.

    Text that has no UTF-8 form (lone surrogates from ``os.fsdecode`` and the
    like) raises :class:`InvalidParameterError`.
    """

    line = render_entry(entry, shared_secret=shared_secret, escape=escape) + "\n"
    try:
        return line.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidParameterError(f"entry {entry.entry_id} is not encodable as UTF-8: {exc.reason}") from exc


__all__ = ["encode_line", "render_entry"]
