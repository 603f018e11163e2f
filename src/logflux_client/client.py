"""Client façade delivering structured entries to a LogFlux agent.

Purpose
-------
Expose the create/connect/send/close lifecycle host code uses, composing the
transport adapter, the shared-secret loader and the delivery use cases.

Contents
--------
* :class:`LogFluxClient` - one client per agent destination.

System Role
-----------
Outer shell of the library. Connection state lives here; the use cases it
wires only run after :meth:`LogFluxClient.connect` succeeded. The client is
synchronous, performs no locking and never reconnects on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import TracebackType

from .adapters.agent_files import load_shared_secret
from .adapters.transport import create_transport
from .application.ports.secrets import SecretLoaderPort
from .application.ports.transport import TransportPort
from .application.use_cases.deliver import create_send_batch, create_send_entry
from .domain.entry import LogEntry
from .domain.errors import InvalidParameterError, LogFluxError, NotConnectedError
from .domain.kinds import ConnectionType
from .domain.settings import ClientConfig

logger = logging.getLogger(__name__)


class LogFluxClient:
    """Synchronous, best-effort delivery client.

    Use the :meth:`unix` / :meth:`tcp` constructors for library defaults
    (10 second timeout, 3 retries, 1 second retry delay) or pass a full
    :class:`ClientConfig`. Retry settings are kept on the configuration but
    are not applied when sending.

    Examples
    --------
    >>> client = LogFluxClient.unix('/tmp/does-not-exist.sock')
    >>> client.connected
    False
    >>> client.send_log('hello')
    Traceback (most recent call last):
    ...
    logflux_client.domain.errors.NotConnectedError: Not connected: client is not connected to unix:/tmp/does-not-exist.sock
    """

    def __init__(self, config: ClientConfig, *, transport: TransportPort | None = None) -> None:
        if not isinstance(config, ClientConfig):
            raise InvalidParameterError("config must be a ClientConfig")
        self._config = config
        self._transport: TransportPort | None = transport if transport is not None else create_transport(config)
        self._connected = False
        send_entry = create_send_entry(
            transport=self._transport,
            shared_secret=config.effective_secret,
            escape=config.escape_strings,
        )
        self._send_entry = send_entry
        self._send_batch = create_send_batch(send_entry)

    @classmethod
    def unix(cls, socket_path: str) -> "LogFluxClient":
        """Create a client for a Unix-domain socket path."""

        return cls(ClientConfig.unix(socket_path))

    @classmethod
    def tcp(cls, host: str, port: int, *, secret_loader: SecretLoaderPort = load_shared_secret) -> "LogFluxClient":
        """Create a TCP client, loading the shared secret when one is available.

        A missing or unreadable secret file is not fatal: the client is still
        created and payloads simply carry no ``shared_secret`` field.
        """

        config = ClientConfig.tcp(host, port)
        try:
            config = config.with_secret(secret_loader())
        except LogFluxError as exc:
            logger.debug("Continuing without shared secret: %s", exc)
        return cls(config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def connected(self) -> bool:
        """``True`` only while connected with a usable socket handle."""

        return self._connected and self._transport is not None and self._transport.is_open

    def _require_transport(self) -> TransportPort:
        if self._transport is None:
            raise InvalidParameterError("client has been destroyed")
        return self._transport

    def connect(self) -> None:
        """Open the connection; a no-op when already connected.

        On failure the client stays disconnected and the tagged error from the
        transport propagates.
        """

        transport = self._require_transport()
        if self._connected:
            return
        transport.open()
        self._connected = True
        logger.debug("Client connected to %s", self._config.endpoint)

    def _require_connection(self) -> None:
        if not self._connected:
            raise NotConnectedError(f"client is not connected to {self._describe()}")

    def _describe(self) -> str:
        prefix = "unix" if self._config.connection_type is ConnectionType.UNIX else "tcp"
        return f"{prefix}:{self._config.endpoint}"

    def send_log(self, message: str) -> None:
        """Send ``message`` as a default entry (info level, log type)."""

        self.send_entry(LogEntry(message))

    def send_entry(self, entry: LogEntry) -> None:
        """Serialise and write one entry.

        The shared secret is only embedded for TCP connections. The caller
        keeps ownership of ``entry``.
        """

        if entry is None:
            raise InvalidParameterError("entry is required")
        self._require_connection()
        self._send_entry(entry)

    def send_batch(self, entries: Sequence[LogEntry]) -> int:
        """Send ``entries`` in order and return how many were delivered.

        Raises :class:`~logflux_client.domain.errors.BatchSendError` at the
        first failure; earlier entries stay delivered and later ones are not
        attempted.
        """

        if not entries:
            raise InvalidParameterError("entries must not be empty")
        self._require_connection()
        return self._send_batch(entries)

    def close(self) -> None:
        """Close the socket if open and clear the connected flag."""

        if self._transport is not None:
            self._transport.close()
        if self._connected:
            logger.debug("Client disconnected from %s", self._config.endpoint)
        self._connected = False

    def destroy(self) -> None:
        """Close the connection and release the transport; safe to repeat."""

        self.close()
        self._transport = None

    def __enter__(self) -> "LogFluxClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()

    def __repr__(self) -> str:
        state = "connected" if self.connected else "disconnected"
        return f"LogFluxClient({self._describe()}, {state})"


__all__ = ["LogFluxClient"]
