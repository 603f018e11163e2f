"""CLI behaviour coverage for the ``logflux`` command."""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from logflux_client import __init__conf__
from logflux_client import cli as cli_mod
from logflux_client.__init__conf__ import summary_info
from tests.os_markers import OS_AGNOSTIC, POSIX_ONLY

pytestmark = [OS_AGNOSTIC]

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

BASE_ENV: dict[str, str | None] = {
    "LOGFLUX_USE_DOTENV": "0",
    "LOGFLUX_ENDPOINT": None,
    "LOGFLUX_SOCKET": None,
    "LOGFLUX_SHARED_SECRET": None,
    "LOGFLUX_TIMEOUT": None,
}


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None, env: dict[str, str | None] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click group with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(
        cli_mod.cli,
        args or [],
        prog_name=__init__conf__.shell_command,
        env={**BASE_ENV, **(env or {})},
    )
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert stdout.strip() == f"logflux version {__init__conf__.version}"


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_send_dry_run_prints_entry_and_payload() -> None:
    exit_code, stdout, _ = run_cli(
        ["send", "disk almost full", "--level", "warning", "--type", "event", "--source", "cron", "--label", "mount=/var", "--dry-run", "--no-color"]
    )

    assert exit_code == 0
    first, payload = strip_ansi(stdout).strip().splitlines()
    assert "WARNING event cron - disk almost full mount=/var" in first
    decoded = json.loads(payload)
    assert (decoded["level"], decoded["entry_type"]) == (4, 4)
    assert decoded["labels"] == {"mount": "/var"}
    assert "shared_secret" not in decoded


def test_send_dry_run_over_tcp_masks_secret() -> None:
    exit_code, stdout, _ = run_cli(
        ["send", "hi", "--host", "127.0.0.1", "--port", "9000", "--dry-run", "--no-color"],
        env={"LOGFLUX_SHARED_SECRET": "TOPSECRET"},
    )

    assert exit_code == 0
    assert "TOPSECRET" not in stdout
    payload = strip_ansi(stdout).strip().splitlines()[-1]
    assert json.loads(payload)["shared_secret"] == "***"


def test_send_rejects_malformed_label() -> None:
    exit_code, stdout, _ = run_cli(["send", "x", "--label", "novalue", "--dry-run"])

    assert exit_code == 2
    assert "KEY=VALUE" in stdout


def test_send_rejects_blank_message() -> None:
    exit_code, stdout, _ = run_cli(["send", "   ", "--dry-run"])

    assert exit_code == 2
    assert "Invalid parameter" in stdout


def test_send_host_requires_port() -> None:
    exit_code, stdout, _ = run_cli(["send", "x", "--host", "127.0.0.1"])

    assert exit_code == 2
    assert "--port" in stdout


def test_send_port_requires_host() -> None:
    exit_code, stdout, _ = run_cli(["send", "x", "--port", "9000", "--dry-run"])

    assert exit_code == 2
    assert "--port is only valid together with --host" in stdout


def test_send_rejects_socket_together_with_host() -> None:
    exit_code, stdout, _ = run_cli(
        ["send", "x", "--socket", "/tmp/agent.sock", "--host", "127.0.0.1", "--port", "9000", "--dry-run"]
    )

    assert exit_code == 2
    assert "--socket cannot be combined with --host" in stdout


def test_send_rejects_malformed_endpoint_variable() -> None:
    exit_code, stdout, _ = run_cli(["send", "x", "--dry-run"], env={"LOGFLUX_ENDPOINT": "nohost"})

    assert exit_code == 2
    assert "HOST:PORT" in stdout


def test_send_over_tcp(tcp_server) -> None:  # noqa: ANN001
    host, port = tcp_server.address

    exit_code, stdout, _ = run_cli(
        ["send", "hello agent", "--host", host, "--port", str(port), "--label", "k=v"],
        env={"LOGFLUX_SHARED_SECRET": "tok"},
    )

    assert exit_code == 0
    assert f"to {host}:{port}" in stdout
    tcp_server.wait_for(1)
    payload = json.loads(tcp_server.lines()[0])
    assert payload["message"] == "hello agent"
    assert payload["labels"] == {"k": "v"}
    assert payload["shared_secret"] == "tok"


@POSIX_ONLY
def test_send_reports_connection_failure(short_socket_dir: Path) -> None:
    exit_code, stdout, _ = run_cli(["send", "x", "--socket", str(short_socket_dir / "absent.sock")])

    assert exit_code == 1
    assert "Connection error" in stdout


def test_demo_sends_five_entries(tcp_server) -> None:  # noqa: ANN001
    host, port = tcp_server.address

    exit_code, stdout, _ = run_cli(["demo", "--host", host, "--port", str(port)], env={"LOGFLUX_SHARED_SECRET": "tok"})

    assert exit_code == 0
    assert "sent batch of 3 entries" in stdout
    tcp_server.wait_for(1)
    messages = [json.loads(line) for line in tcp_server.lines()]
    assert [item["message"] for item in messages] == [
        "Hello from LogFlux Python SDK!",
        "Application started",
        "Batch log entry #1",
        "Batch log entry #2",
        "Batch log entry #3",
    ]
    assert messages[1]["labels"] == {"component": "demo", "version": __init__conf__.version}
    assert [item["labels"]["sequence"] for item in messages[2:]] == ["1", "2", "3"]


def test_status_reports_runtime_files(tmp_path: Path) -> None:
    runtime = tmp_path / "logflux"
    runtime.mkdir()
    (runtime / "agent.secret").write_text("very-secret\n", encoding="utf-8")

    exit_code, stdout, _ = run_cli(["status"], env={"XDG_RUNTIME_DIR": str(tmp_path)})

    assert exit_code == 0
    assert "agent running : no" in stdout
    assert "shared secret : available" in stdout
    assert "very-secret" not in stdout
    assert str(runtime / "agent.pid") in stdout


def test_status_without_secret(tmp_path: Path) -> None:
    exit_code, stdout, _ = run_cli(["status"], env={"XDG_RUNTIME_DIR": str(tmp_path)})

    assert exit_code == 0
    assert "shared secret : unavailable (connection error)" in stdout


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["--no-traceback", "info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--no-traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": False, "traceback_force_color": False}
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)
    monkeypatch.setenv("LOGFLUX_USE_DOTENV", "0")

    exit_code = cli_mod.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Info for logflux_client" in captured.out
