"""Use cases turning entries into bytes on the agent socket.

Purpose
-------
Freeze the delivery wiring (transport, secret, encoding mode) into small
callables the client façade invokes once it has checked connection state.

Contents
--------
* :func:`create_send_entry` - serialise and write one entry.
* :func:`create_send_batch` - send entries in order, stopping at the first
  failure.

System Role
-----------
Application layer. Nothing here retries, queues or reconnects: each call is a
single synchronous write and failures surface immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from logflux_client.application.ports.transport import TransportPort
from logflux_client.domain.entry import LogEntry
from logflux_client.domain.errors import BatchSendError, InvalidParameterError, LogFluxError
from logflux_client.domain.serialization import encode_line

logger = logging.getLogger(__name__)

SendEntry = Callable[[LogEntry], None]
SendBatch = Callable[[Sequence[LogEntry]], int]


def create_send_entry(
    *,
    transport: TransportPort,
    shared_secret: str | None,
    escape: bool = False,
) -> SendEntry:
    """Build the callable delivering one entry over ``transport``.

    Parameters
    ----------
    transport:
        Connected transport; the caller guarantees it is open.
    shared_secret:
        Secret embedded in each payload, or ``None`` to omit the field.
    escape:
        Forwarded to :func:`encode_line`.
    """

    def send_entry(entry: LogEntry) -> None:
        if not isinstance(entry, LogEntry):
            raise InvalidParameterError(f"expected LogEntry, got {type(entry).__name__}")
        payload = encode_line(entry, shared_secret=shared_secret, escape=escape)
        transport.write(payload)
        logger.debug("Delivered entry %s (%d bytes)", entry.entry_id, len(payload))

    return send_entry


def create_send_batch(send_entry: SendEntry) -> SendBatch:
    """Build the callable sending a sequence of entries one by one.

    The batch is not atomic. When entry ``i`` fails, entries ``0..i-1`` have
    already been written and entries after ``i`` are skipped; the failure is
    raised as :class:`BatchSendError` chained to the original error.
    """

    def send_batch(entries: Sequence[LogEntry]) -> int:
        delivered = 0
        for index, entry in enumerate(entries):
            try:
                send_entry(entry)
            except LogFluxError as exc:
                logger.debug("Batch aborted at entry %d after %d delivered: %s", index, delivered, exc)
                raise BatchSendError(exc, delivered=delivered, failed_index=index) from exc
            delivered += 1
        return delivered

    return send_batch


__all__ = ["SendBatch", "SendEntry", "create_send_batch", "create_send_entry"]
