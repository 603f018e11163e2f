"""Protocols separating the delivery use cases from concrete adapters."""

from __future__ import annotations

from .console import EntryConsolePort
from .secrets import SecretLoaderPort
from .transport import TransportPort

__all__ = ["EntryConsolePort", "SecretLoaderPort", "TransportPort"]
