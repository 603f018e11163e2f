from __future__ import annotations

import shutil
import socket
import sys
import tempfile
import threading
import time
from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from logflux_client.domain.entry import LogEntry
from logflux_client.domain.kinds import EntryType
from logflux_client.domain.levels import LogLevel
from tests.fakes import FakeTransport


@pytest.fixture
def sample_entry() -> LogEntry:
    entry = LogEntry(
        "Batch log entry #1",
        source="batch-example",
        level=LogLevel.INFO,
        entry_type=EntryType.LOG,
        timestamp=1700000000,
        entry_id="entry-1",
    )
    entry.add_label("sequence", "1")
    return entry


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, force_terminal=True, color_system="truecolor")


@pytest.fixture
def runtime_env(tmp_path: Path) -> dict[str, str]:
    """Environment whose runtime directory exists under ``tmp_path``."""

    (tmp_path / "logflux").mkdir()
    return {"XDG_RUNTIME_DIR": str(tmp_path), "HOME": str(tmp_path / "home")}


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


class _Server:
    """Threaded stream listener storing the bytes of every accepted connection."""

    def __init__(self, family: int, address: object) -> None:
        self._sock = socket.socket(family, socket.SOCK_STREAM)
        self._sock.bind(address)
        self._sock.listen(4)
        self._sock.settimeout(0.1)
        self.address = self._sock.getsockname()
        self.payloads: list[bytes] = []
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._running = threading.Event()

    def start(self) -> None:
        self._running.set()
        self._thread.start()

    def close(self) -> None:
        self._running.clear()
        self._thread.join(timeout=2)
        self._sock.close()

    def wait_for(self, count: int, timeout: float = 2.0) -> list[bytes]:
        deadline = time.monotonic() + timeout
        while len(self.payloads) < count and time.monotonic() < deadline:
            time.sleep(0.02)
        return self.payloads

    def lines(self) -> list[str]:
        return [line for payload in self.payloads for line in payload.decode("utf-8").splitlines()]

    def _run(self) -> None:
        while self._running.is_set():
            try:
                conn, _ = self._sock.accept()
            except socket.timeout:
                continue
            except OSError:
                break
            with conn:
                conn.settimeout(2)
                chunks: list[bytes] = []
                while True:
                    try:
                        data = conn.recv(4096)
                    except OSError:
                        break
                    if not data:
                        break
                    chunks.append(data)
                self.payloads.append(b"".join(chunks))


@pytest.fixture
def tcp_server() -> Iterator[_Server]:
    server = _Server(socket.AF_INET, ("127.0.0.1", 0))
    server.start()
    try:
        yield server
    finally:
        server.close()


@pytest.fixture
def short_socket_dir() -> Iterator[Path]:
    """Directory under ``/tmp`` short enough for ``sun_path``."""

    base = "/tmp" if Path("/tmp").is_dir() else None
    directory = Path(tempfile.mkdtemp(prefix="lf-", dir=base))
    try:
        yield directory
    finally:
        shutil.rmtree(directory, ignore_errors=True)


@pytest.fixture
def unix_server(short_socket_dir: Path) -> Iterator[_Server]:
    if sys.platform.startswith("win") or not hasattr(socket, "AF_UNIX"):
        pytest.skip("Unix-domain sockets unavailable")
    server = _Server(socket.AF_UNIX, str(short_socket_dir / "agent.sock"))
    server.start()
    try:
        yield server
    finally:
        server.close()
