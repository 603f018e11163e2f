"""Append-only label collection owned by a log entry.

Purpose
-------
Hold caller-defined key/value annotations in insertion order. Adding a key a
second time appends another pair instead of replacing the first, which is why
this is not a ``dict``.

Contents
--------
* :class:`Label` - immutable key/value pair.
* :class:`LabelSet` - ordered container with append, iteration and lookup.
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

from .errors import InvalidParameterError, OutOfMemoryError


class Label(NamedTuple):
    """One key/value annotation."""

    key: str
    value: str


def _as_text(name: str, value: object) -> str:
    if value is None:
        raise InvalidParameterError(f"label {name} must not be None")
    return value if isinstance(value, str) else str(value)


class LabelSet:
    """Ordered, append-only collection of :class:`Label` pairs.

    Examples
    --------
    >>> labels = LabelSet()
    >>> labels.add('sequence', '1')
    >>> labels.add('sequence', '2')
    >>> len(labels), labels.values_for('sequence')
    (2, ['1', '2'])
    """

    __slots__ = ("_items",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._items: list[Label] = []
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Append a copy of ``key``/``value``; duplicates are kept."""

        label = Label(_as_text("key", key), _as_text("value", value))
        try:
            self._items.append(label)
        except MemoryError as exc:
            raise OutOfMemoryError("could not grow label storage") from exc

    def values_for(self, key: str) -> list[str]:
        """Return every value recorded under ``key`` in insertion order."""

        return [label.value for label in self._items if label.key == key]

    def keys(self) -> list[str]:
        return [label.key for label in self._items]

    def clear(self) -> None:
        """Drop every stored label."""

        self._items.clear()

    def copy(self) -> "LabelSet":
        return LabelSet(self._items)

    def __iter__(self) -> Iterator[Label]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        pairs = ", ".join(f"{label.key}={label.value!r}" for label in self._items)
        return f"LabelSet({pairs})"


__all__ = ["Label", "LabelSet"]
