from __future__ import annotations

import pytest

from logflux_client.domain.errors import InvalidParameterError
from logflux_client.domain.labels import Label, LabelSet
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_labels_keep_insertion_order() -> None:
    labels = LabelSet()
    labels.add("component", "demo")
    labels.add("version", "1.0.0")

    assert list(labels) == [Label("component", "demo"), Label("version", "1.0.0")]
    assert labels.keys() == ["component", "version"]


def test_duplicate_keys_are_appended_not_replaced() -> None:
    labels = LabelSet([("env", "a"), ("env", "b")])

    assert len(labels) == 2
    assert labels.values_for("env") == ["a", "b"]


def test_values_are_copied_as_text() -> None:
    labels = LabelSet()
    labels.add("sequence", 3)  # type: ignore[arg-type]

    assert labels.values_for("sequence") == ["3"]


@pytest.mark.parametrize("key, value", [(None, "v"), ("k", None)])
def test_none_is_rejected(key: object, value: object) -> None:
    labels = LabelSet()

    with pytest.raises(InvalidParameterError):
        labels.add(key, value)  # type: ignore[arg-type]
    assert not labels


def test_copy_is_independent() -> None:
    original = LabelSet([("a", "1")])
    clone = original.copy()
    clone.add("b", "2")

    assert original == LabelSet([("a", "1")])
    assert len(clone) == 2


def test_clear_drops_everything() -> None:
    labels = LabelSet([("a", "1")])
    labels.clear()

    assert len(labels) == 0
    assert repr(labels) == "LabelSet()"
