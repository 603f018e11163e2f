from __future__ import annotations

import dataclasses

import pytest

from logflux_client.domain.errors import InvalidParameterError
from logflux_client.domain.kinds import ConnectionType
from logflux_client.domain.settings import (
    DEFAULT_RETRY_COUNT,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_unix_defaults() -> None:
    config = ClientConfig.unix("/tmp/logflux-agent.sock")

    assert config.connection_type is ConnectionType.UNIX
    assert (config.timeout, config.retry_count, config.retry_delay) == (DEFAULT_TIMEOUT, DEFAULT_RETRY_COUNT, DEFAULT_RETRY_DELAY)
    assert (DEFAULT_TIMEOUT, DEFAULT_RETRY_COUNT, DEFAULT_RETRY_DELAY) == (10.0, 3, 1.0)
    assert config.endpoint == "/tmp/logflux-agent.sock"
    assert config.escape_strings is False


def test_tcp_endpoint() -> None:
    assert ClientConfig.tcp("127.0.0.1", 8080).endpoint == "127.0.0.1:8080"


def test_effective_secret_only_for_tcp() -> None:
    assert ClientConfig.unix("/s", shared_secret="abc").effective_secret is None
    assert ClientConfig.tcp("127.0.0.1", 1).effective_secret is None
    assert ClientConfig.tcp("127.0.0.1", 1).with_secret("abc").effective_secret == "abc"


@pytest.mark.parametrize(
    "factory",
    [
        lambda: ClientConfig.unix(""),
        lambda: ClientConfig.tcp("", 80),
        lambda: ClientConfig.tcp("127.0.0.1", 0),
        lambda: ClientConfig.tcp("127.0.0.1", 70000),
        lambda: ClientConfig.unix("/s", timeout=0),
        lambda: ClientConfig.unix("/s", retry_count=-1),
        lambda: ClientConfig.unix("/s", retry_delay=-0.5),
        lambda: ClientConfig("unix", socket_path="/s"),  # type: ignore[arg-type]
        lambda: ClientConfig.tcp("127.0.0.1", "9000"),
        lambda: ClientConfig.tcp("127.0.0.1", True),
        lambda: ClientConfig.unix("/s", timeout=None),
        lambda: ClientConfig.unix("/s", timeout="5"),
        lambda: ClientConfig.unix("/s", retry_count=1.5),
        lambda: ClientConfig.unix("/s", retry_delay=None),
    ],
)
def test_invalid_settings_are_rejected(factory) -> None:  # noqa: ANN001
    with pytest.raises(InvalidParameterError):
        factory()


def test_config_is_frozen() -> None:
    config = ClientConfig.unix("/s")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.timeout = 1.0  # type: ignore[misc]
