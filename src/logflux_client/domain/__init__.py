"""Domain entities and value objects used by the delivery client."""

from __future__ import annotations

from .entry import DEFAULT_SOURCE, LogEntry
from .errors import (
    AgentConnectionError,
    BatchSendError,
    ErrorCode,
    InvalidParameterError,
    LogFluxError,
    NotConnectedError,
    OutOfMemoryError,
    SecretFormatError,
    SocketTimeoutError,
    error_string,
)
from .kinds import ConnectionType, EntryType
from .labels import Label, LabelSet
from .levels import LogLevel
from .serialization import encode_line, render_entry
from .settings import ClientConfig

__all__ = [
    "AgentConnectionError",
    "BatchSendError",
    "ClientConfig",
    "ConnectionType",
    "DEFAULT_SOURCE",
    "EntryType",
    "ErrorCode",
    "InvalidParameterError",
    "Label",
    "LabelSet",
    "LogEntry",
    "LogFluxError",
    "LogLevel",
    "NotConnectedError",
    "OutOfMemoryError",
    "SecretFormatError",
    "SocketTimeoutError",
    "encode_line",
    "error_string",
    "render_entry",
]
