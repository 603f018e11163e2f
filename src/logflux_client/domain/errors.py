"""Flat error taxonomy shared by every public operation.

Purpose
-------
Give callers one stable set of failure conditions regardless of which layer
raised them, plus the human-readable strings the agent tooling prints.

Contents
--------
* :class:`ErrorCode` - numeric condition tags (``OK`` plus six failures).
* :func:`error_string` - translate a code into display text.
* :class:`LogFluxError` and one subclass per failure condition.

System Role
-----------
Domain layer. Adapters translate :class:`OSError` and friends into these
exceptions so the client façade only ever surfaces tagged errors.
"""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Condition tags carried by every :class:`LogFluxError`."""

    OK = 0
    INVALID_PARAM = -1
    MEMORY = -2
    CONNECTION = -3
    TIMEOUT = -4
    FORMAT = -5
    NOT_CONNECTED = -6

    @property
    def description(self) -> str:
        """Return the human-readable text for this code."""

        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.OK: "Success",
    ErrorCode.INVALID_PARAM: "Invalid parameter",
    ErrorCode.MEMORY: "Memory allocation error",
    ErrorCode.CONNECTION: "Connection error",
    ErrorCode.TIMEOUT: "Timeout",
    ErrorCode.FORMAT: "Format error",
    ErrorCode.NOT_CONNECTED: "Not connected",
}


def error_string(code: ErrorCode | int) -> str:
    """Translate ``code`` into its display string.

    Examples
    --------
    >>> error_string(ErrorCode.NOT_CONNECTED)
    'Not connected'
    >>> error_string(-3)
    'Connection error'
    >>> error_string(42)
    'Unknown error'
    """

    try:
        return ErrorCode(code).description
    except ValueError:
        return "Unknown error"


class LogFluxError(Exception):
    """Base class for all client failures; ``code`` names the condition."""

    code: ErrorCode = ErrorCode.CONNECTION

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail or self.code.description)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.code.description}: {self.detail}"
        return self.code.description


class InvalidParameterError(LogFluxError, ValueError):
    """A required argument was missing or an enumerated value was out of range."""

    code = ErrorCode.INVALID_PARAM


class OutOfMemoryError(LogFluxError):
    """Allocation failed while building an entry or its wire payload."""

    code = ErrorCode.MEMORY


class AgentConnectionError(LogFluxError):
    """Socket creation, connect, or send failed at the OS level."""

    code = ErrorCode.CONNECTION


class SocketTimeoutError(LogFluxError):
    """The configured timeout could not be applied to the socket."""

    code = ErrorCode.TIMEOUT


class SecretFormatError(LogFluxError):
    """The shared-secret file was empty or not readable as a line."""

    code = ErrorCode.FORMAT


class NotConnectedError(LogFluxError):
    """An operation needing a live connection ran on a disconnected client."""

    code = ErrorCode.NOT_CONNECTED


class BatchSendError(LogFluxError):
    """A batch stopped at its first failing entry.

    ``code`` mirrors the failing entry's condition. Entries before
    ``failed_index`` were delivered; entries after it were never attempted.
    """

    def __init__(self, cause: LogFluxError, *, delivered: int, failed_index: int) -> None:
        self.code = cause.code
        self.delivered = delivered
        self.failed_index = failed_index
        super().__init__(f"entry {failed_index} failed after {delivered} delivered ({cause.detail or cause.code.description})")


__all__ = [
    "AgentConnectionError",
    "BatchSendError",
    "ErrorCode",
    "InvalidParameterError",
    "LogFluxError",
    "NotConnectedError",
    "OutOfMemoryError",
    "SecretFormatError",
    "SocketTimeoutError",
    "error_string",
]
