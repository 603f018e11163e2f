"""Readers for the agent's runtime files (shared secret and PID).

Purpose
-------
Load the authentication token used by TCP clients and report whether a local
agent process is alive.

Contents
--------
* :func:`load_shared_secret` - read ``agent.secret``.
* :func:`is_agent_running` - probe the PID recorded in ``agent.pid``.

System Role
-----------
Adapters layer. Path resolution is delegated to the pure helpers in
:mod:`logflux_client.domain.runtime_paths`; both functions accept an explicit
``environ`` (or ``path``) so tests never depend on the real process
environment.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Callable, Mapping

from logflux_client.domain.errors import AgentConnectionError, SecretFormatError
from logflux_client.domain.runtime_paths import PID_FILENAME, SECRET_FILENAME, resolve_runtime_path

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def load_shared_secret(environ: Mapping[str, str] | None = None, *, path: Path | None = None) -> str:
    """Return the first line of the secret file without its trailing newline.

    Raises
    ------
    AgentConnectionError
        When the file does not exist or cannot be opened.
    SecretFormatError
        When the file is empty or its first line is not valid text.
    """

    target = path if path is not None else resolve_runtime_path(SECRET_FILENAME, os.environ if environ is None else environ)
    try:
        with target.open("r", encoding="utf-8", newline="") as handle:
            line = handle.readline()
    except UnicodeDecodeError as exc:
        raise SecretFormatError(f"secret file {target} is not valid text") from exc
    except OSError as exc:
        raise AgentConnectionError(f"secret file {target} not readable: {exc.strerror or exc}") from exc
    if not line:
        raise SecretFormatError(f"secret file {target} is empty")
    if line.endswith("\n"):
        line = line[:-1]
    logger.debug("Loaded shared secret from %s", target)
    return line


def is_agent_running(
    environ: Mapping[str, str] | None = None,
    *,
    path: Path | None = None,
    kill: Callable[[int, int], None] = os.kill,
) -> bool:
    """Return ``True`` when the PID in ``agent.pid`` accepts signal ``0``.

    Missing files, unparsable content, non-positive PIDs and failed probes
    all count as "not running".
    """

    target = path if path is not None else resolve_runtime_path(PID_FILENAME, os.environ if environ is None else environ)
    try:
        content = target.read_text(encoding="utf-8", errors="replace")
    except OSError:
        logger.debug("No agent pid file at %s", target)
        return False
    match = _LEADING_INT.match(content)
    if match is None:
        return False
    pid = int(match.group(1))
    if pid <= 0:
        return False
    try:
        kill(pid, 0)
    except (OSError, OverflowError):
        return False
    return True


__all__ = ["is_agent_running", "load_shared_secret"]
