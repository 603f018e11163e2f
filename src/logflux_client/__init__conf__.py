"""Static package metadata surfaced by the CLI banner.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

import sys
from typing import Callable

name = "logflux_client"
title = "Structured log delivery client for the LogFlux agent"
version = "1.0.0"
author = "LogFlux"
shell_command = "logflux"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Emit the metadata banner line by line through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for logflux_client:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    emit = writer if writer is not None else sys.stdout.write
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")


def summary_info() -> str:
    """Return the banner emitted by :func:`print_info` as one string.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["print_info", "summary_info", "name", "title", "version", "author", "shell_command"]
