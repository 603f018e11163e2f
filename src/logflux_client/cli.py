"""Click command line interface for the delivery client.

Purpose
-------
Give operators a way to check agent health and push entries from shell
scripts without writing Python.

Contents
--------
* :func:`cli` - root group with traceback and dotenv toggles.
* ``info``, ``status``, ``send`` and ``demo`` subcommands.
* :func:`main` - entry point wrapping :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer. Every command goes through :class:`LogFluxClient` and the
environment helpers in :mod:`logflux_client.config`, so the CLI exercises the
same paths host applications do.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .adapters.agent_files import is_agent_running, load_shared_secret
from .adapters.console import RichConsoleAdapter
from .client import LogFluxClient
from .domain.entry import DEFAULT_SOURCE, LogEntry
from .domain.errors import LogFluxError
from .domain.kinds import EntryType
from .domain.levels import LogLevel
from .domain.runtime_paths import PID_FILENAME, SECRET_FILENAME, resolve_runtime_path
from .domain.serialization import render_entry
from .domain.settings import ClientConfig

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
F = TypeVar("F", bound=Callable[..., Any])
_MASKED_SECRET = "***"


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load LOGFLUX_* variables from the nearest .env (default: ${config_module.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and preparing the environment."""

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(__init__conf__.summary_info(), nl=False)


def _connection_options(func: F) -> F:
    """Attach the shared ``--socket/--host/--port/--timeout`` options."""

    func = click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Socket timeout in seconds.")(func)
    func = click.option("--port", type=click.IntRange(1, 65535), default=None, help="TCP port of the agent.")(func)
    func = click.option("--host", default=None, help="Dotted-quad IPv4 address of a TCP agent.")(func)
    func = click.option("--socket", "socket_path", default=None, help="Unix socket path of the agent.")(func)
    return func


def _resolve_config(socket_path: str | None, host: str | None, port: int | None, timeout: float | None) -> ClientConfig:
    """Merge connection flags over ``LOGFLUX_*`` variables."""

    env = dict(os.environ)
    if host is not None and socket_path is not None:
        raise click.UsageError("--socket cannot be combined with --host")
    if port is not None and host is None:
        raise click.UsageError("--port is only valid together with --host")
    if host is not None:
        if port is None:
            raise click.UsageError("--port is required together with --host")
        env["LOGFLUX_ENDPOINT"] = f"{host}:{port}"
    elif socket_path is not None:
        env.pop("LOGFLUX_ENDPOINT", None)
        env["LOGFLUX_SOCKET"] = socket_path
    if timeout is not None:
        env["LOGFLUX_TIMEOUT"] = str(timeout)
    try:
        return config_module.load_client_config(env)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _parse_labels(_ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}")
        pairs.append((key, value))
    return pairs


@cli.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@_connection_options
@click.option(
    "--level",
    type=click.Choice([level.severity for level in LogLevel], case_sensitive=False),
    default=LogLevel.INFO.severity,
    show_default=True,
)
@click.option(
    "--type",
    "entry_type",
    type=click.Choice([kind.name.lower() for kind in EntryType], case_sensitive=False),
    default=EntryType.LOG.name.lower(),
    show_default=True,
)
@click.option("--source", default=DEFAULT_SOURCE, show_default=True)
@click.option("--label", "labels", multiple=True, metavar="KEY=VALUE", callback=_parse_labels, help="Repeatable.")
@click.option("--dry-run", is_flag=True, help="Print the entry and wire payload instead of sending.")
@click.option("--color/--no-color", default=None, help="Force or disable colours in --dry-run output.")
def cli_send(
    message: str,
    socket_path: str | None,
    host: str | None,
    port: int | None,
    timeout: float | None,
    level: str,
    entry_type: str,
    source: str,
    labels: list[tuple[str, str]],
    dry_run: bool,
    color: bool | None,
) -> None:
    """Send MESSAGE as one structured entry."""

    config = _resolve_config(socket_path, host, port, timeout)
    try:
        entry = LogEntry(message, source=source, level=level, entry_type=entry_type)
        for key, value in labels:
            entry.add_label(key, value)
    except LogFluxError as exc:
        raise click.BadParameter(str(exc)) from exc

    if dry_run:
        console = RichConsoleAdapter(force_color=bool(color), no_color=color is False)
        console.emit(entry, colorize=color is not False)
        masked = _MASKED_SECRET if config.effective_secret else None
        console.print_payload(render_entry(entry, shared_secret=masked, escape=config.escape_strings))
        return

    with LogFluxClient(config) as client:
        try:
            client.connect()
            client.send_entry(entry)
        except LogFluxError as exc:
            raise click.ClickException(str(exc)) from exc
    click.echo(f"sent {entry.entry_id} to {config.endpoint}")


@cli.command("status", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_status() -> None:
    """Report agent liveness and shared-secret availability."""

    secret_path = resolve_runtime_path(SECRET_FILENAME, os.environ)
    pid_path = resolve_runtime_path(PID_FILENAME, os.environ)
    try:
        load_shared_secret(path=secret_path)
    except LogFluxError as exc:
        secret_state = f"unavailable ({exc.code.description.lower()})"
    else:
        secret_state = "available"
    running = is_agent_running(path=pid_path)

    click.echo(f"agent running : {'yes' if running else 'no'}")
    click.echo(f"pid file      : {pid_path}")
    click.echo(f"secret file   : {secret_path}")
    click.echo(f"shared secret : {secret_state}")


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@_connection_options
def cli_demo(socket_path: str | None, host: str | None, port: int | None, timeout: float | None) -> None:
    """Send a plain message, a labelled entry and a batch of three."""

    config = _resolve_config(socket_path, host, port, timeout)
    with LogFluxClient(config) as client:
        try:
            client.connect()
            click.echo(f"connected to {config.endpoint}")

            client.send_log("Hello from LogFlux Python SDK!")
            click.echo("sent simple log message")

            entry = LogEntry("Application started", source="basic-example")
            entry.add_label("component", "demo")
            entry.add_label("version", __init__conf__.version)
            client.send_entry(entry)
            click.echo("sent structured log entry")

            batch = []
            for number in range(1, 4):
                item = LogEntry(f"Batch log entry #{number}", source="batch-example", level=LogLevel.INFO)
                item.add_label("sequence", str(number))
                batch.append(item)
            delivered = client.send_batch(batch)
            click.echo(f"sent batch of {delivered} entries")
        except LogFluxError as exc:
            raise click.ClickException(str(exc)) from exc


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    so embedding callers (and tests) see the configuration they started with.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
