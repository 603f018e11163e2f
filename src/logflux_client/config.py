"""Environment-driven configuration and optional ``.env`` loading.

Purpose
-------
Let scripts and the CLI describe the agent destination through environment
variables (optionally sourced from a nearby ``.env`` file) instead of code.

Contents
--------
* :data:`DOTENV_ENV_VAR` and the dotenv helpers :func:`should_use_dotenv`,
  :func:`enable_dotenv`.
* :func:`load_client_config` - build a :class:`ClientConfig` from variables.
* Parsing helpers for booleans, endpoints and positive numbers.

Recognised variables
--------------------
``LOGFLUX_SOCKET``
    Unix socket path (used when no endpoint is set).
``LOGFLUX_ENDPOINT``
    ``HOST:PORT`` of a TCP agent; selects the TCP transport.
``LOGFLUX_SHARED_SECRET``
    Secret for TCP payloads; when absent the agent secret file is consulted.
``LOGFLUX_TIMEOUT`` / ``LOGFLUX_RETRY_COUNT`` / ``LOGFLUX_RETRY_DELAY``
    Numeric overrides of the library defaults.
``LOGFLUX_ESCAPE_STRINGS``
    Opt in to JSON string escaping on the wire.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .adapters.agent_files import load_shared_secret
from .domain.errors import LogFluxError
from .domain.settings import (
    DEFAULT_RETRY_COUNT,
    DEFAULT_RETRY_DELAY,
    DEFAULT_SOCKET_PATH,
    DEFAULT_TIMEOUT,
    ClientConfig,
)

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOGFLUX_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}

_dotenv_loaded_path: Path | None = None
_dotenv_attempted = False


def _env_bool(value: str | None, default: bool) -> bool:
    """Interpret ``1/true/yes/on`` strings, falling back to ``default``.

    Examples
    --------
    >>> _env_bool(None, True)
    True
    >>> _env_bool(' On ', False)
    True
    >>> _env_bool('0', True)
    False
    """

    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag beats the variable."""

    if explicit is not None:
        return explicit
    return _env_bool(env_value, False)


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    Searches upwards from the working directory.
    Returns the loaded path, or ``None`` when no file was found. Repeated calls
    reuse the first result.
    """

    global _dotenv_loaded_path, _dotenv_attempted
    if _dotenv_attempted:
        return _dotenv_loaded_path
    _dotenv_attempted = True

    found = find_dotenv(usecwd=True)
    if not found:
        logger.debug("No .env file found")
        return None

    resolved = Path(found).resolve()
    load_dotenv(resolved, override=False)
    _dotenv_loaded_path = resolved
    logger.debug("Loaded environment from %s", resolved)
    return resolved


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded_path, _dotenv_attempted
    _dotenv_loaded_path = None
    _dotenv_attempted = False


def _coerce_endpoint(value: str) -> tuple[str, int]:
    """Parse ``HOST:PORT`` into a tuple, rejecting malformed input.

    Examples
    --------
    >>> _coerce_endpoint('127.0.0.1:8080')
    ('127.0.0.1', 8080)
    """

    host, sep, port_text = value.strip().rpartition(":")
    if not sep or not host:
        raise ValueError(f"LOGFLUX_ENDPOINT must be HOST:PORT, got {value!r}")
    try:
        port = int(port_text)
    except ValueError as exc:
        raise ValueError(f"LOGFLUX_ENDPOINT port must be an integer, got {port_text!r}") from exc
    if not 0 < port <= 65535:
        raise ValueError(f"LOGFLUX_ENDPOINT port must be positive and at most 65535, got {port}")
    return host, port


def _coerce_seconds(name: str, value: str | None, default: float, *, allow_zero: bool = False) -> float:
    if value is None or not value.strip():
        return default
    try:
        number = float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc
    if number < 0 or (number == 0 and not allow_zero):
        raise ValueError(f"{name} must be positive, got {value!r}")
    return number


def _coerce_count(name: str, value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        number = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if number < 0:
        raise ValueError(f"{name} must not be negative, got {value!r}")
    return number


def load_client_config(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """Build a :class:`ClientConfig` from ``LOGFLUX_*`` variables.

    ``LOGFLUX_ENDPOINT`` selects TCP; otherwise the Unix socket from
    ``LOGFLUX_SOCKET`` (default ``/tmp/logflux-agent.sock``) is used. For TCP
    without ``LOGFLUX_SHARED_SECRET`` the agent secret file is read
    best-effort.

    Raises
    ------
    ValueError
        When a variable is present but malformed.
    """

    env = os.environ if environ is None else environ
    common = {
        "timeout": _coerce_seconds("LOGFLUX_TIMEOUT", env.get("LOGFLUX_TIMEOUT"), DEFAULT_TIMEOUT),
        "retry_count": _coerce_count("LOGFLUX_RETRY_COUNT", env.get("LOGFLUX_RETRY_COUNT"), DEFAULT_RETRY_COUNT),
        "retry_delay": _coerce_seconds("LOGFLUX_RETRY_DELAY", env.get("LOGFLUX_RETRY_DELAY"), DEFAULT_RETRY_DELAY, allow_zero=True),
        "escape_strings": _env_bool(env.get("LOGFLUX_ESCAPE_STRINGS"), False),
    }

    endpoint = env.get("LOGFLUX_ENDPOINT")
    if endpoint and endpoint.strip():
        host, port = _coerce_endpoint(endpoint)
        secret = env.get("LOGFLUX_SHARED_SECRET", "")
        if not secret:
            try:
                secret = load_shared_secret(env)
            except LogFluxError as exc:
                logger.debug("Continuing without shared secret: %s", exc)
                secret = ""
        return ClientConfig.tcp(host, port, shared_secret=secret, **common)

    socket_path = env.get("LOGFLUX_SOCKET") or DEFAULT_SOCKET_PATH
    return ClientConfig.unix(socket_path, **common)


__all__ = [
    "DOTENV_ENV_VAR",
    "enable_dotenv",
    "load_client_config",
    "should_use_dotenv",
]
