"""Delivery use cases assembled by the client façade."""

from __future__ import annotations

from .deliver import SendBatch, SendEntry, create_send_batch, create_send_entry

__all__ = ["SendBatch", "SendEntry", "create_send_batch", "create_send_entry"]
