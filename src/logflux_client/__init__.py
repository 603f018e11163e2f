"""Public package surface of the LogFlux delivery client.

Host applications normally only need :class:`LogFluxClient`, :class:`LogEntry`
and the enums; the error classes are exported so callers can branch on
failure conditions without reaching into submodules.

Examples
--------
>>> from logflux_client import LogEntry, LogLevel
>>> LogEntry('ready', level='error').level is LogLevel.ERROR
True
"""

from __future__ import annotations

from . import __init__conf__
from .__init__conf__ import summary_info
from .adapters.agent_files import is_agent_running, load_shared_secret
from .client import LogFluxClient
from .config import load_client_config
from .domain import (
    AgentConnectionError,
    BatchSendError,
    ClientConfig,
    ConnectionType,
    EntryType,
    ErrorCode,
    InvalidParameterError,
    LogEntry,
    LogFluxError,
    LogLevel,
    NotConnectedError,
    OutOfMemoryError,
    SecretFormatError,
    SocketTimeoutError,
    encode_line,
    error_string,
    render_entry,
)

__version__ = __init__conf__.version

__all__ = [
    "AgentConnectionError",
    "BatchSendError",
    "ClientConfig",
    "ConnectionType",
    "EntryType",
    "ErrorCode",
    "InvalidParameterError",
    "LogEntry",
    "LogFluxClient",
    "LogFluxError",
    "LogLevel",
    "NotConnectedError",
    "OutOfMemoryError",
    "SecretFormatError",
    "SocketTimeoutError",
    "__version__",
    "encode_line",
    "error_string",
    "is_agent_running",
    "load_client_config",
    "load_shared_secret",
    "render_entry",
    "summary_info",
]
