"""Port for retrieving the shared secret used by TCP transports."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SecretLoaderPort(Protocol):
    """Return the agent's shared secret or raise a tagged error."""

    def __call__(self) -> str: ...


__all__ = ["SecretLoaderPort"]
