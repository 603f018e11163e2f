"""Locate the agent's runtime files from environment inputs.

The agent drops ``agent.secret`` and ``agent.pid`` into a per-user runtime
directory. The lookup order is ``$XDG_RUNTIME_DIR/logflux``, then
``$HOME/.logflux/runtime``, then a fixed directory under ``/tmp``. The first
variable that is set wins; the files themselves are not probed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

SECRET_FILENAME = "agent.secret"
PID_FILENAME = "agent.pid"
FALLBACK_RUNTIME_DIR = Path("/tmp/.logflux-runtime")


def resolve_runtime_dir(environ: Mapping[str, str]) -> Path:
    """Return the agent runtime directory for ``environ``.

    Examples
    --------
    >>> resolve_runtime_dir({'XDG_RUNTIME_DIR': '/run/user/1000', 'HOME': '/home/a'}).as_posix()
    '/run/user/1000/logflux'
    >>> resolve_runtime_dir({'HOME': '/home/a'}).as_posix()
    '/home/a/.logflux/runtime'
    >>> resolve_runtime_dir({}).as_posix()
    '/tmp/.logflux-runtime'
    """

    xdg_runtime = environ.get("XDG_RUNTIME_DIR")
    if xdg_runtime:
        return Path(xdg_runtime) / "logflux"
    home = environ.get("HOME")
    if home:
        return Path(home) / ".logflux" / "runtime"
    return FALLBACK_RUNTIME_DIR


def resolve_runtime_path(filename: str, environ: Mapping[str, str]) -> Path:
    """Return the path of ``filename`` inside the runtime directory."""

    return resolve_runtime_dir(environ) / filename


__all__ = [
    "FALLBACK_RUNTIME_DIR",
    "PID_FILENAME",
    "SECRET_FILENAME",
    "resolve_runtime_dir",
    "resolve_runtime_path",
]
