"""Adapters implementing the application ports."""

from __future__ import annotations

from .agent_files import is_agent_running, load_shared_secret
from .console import RichConsoleAdapter
from .transport import SocketTransport, TcpSocketTransport, UnixSocketTransport, create_transport

__all__ = [
    "RichConsoleAdapter",
    "SocketTransport",
    "TcpSocketTransport",
    "UnixSocketTransport",
    "create_transport",
    "is_agent_running",
    "load_shared_secret",
]
