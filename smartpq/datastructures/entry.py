from __future__ import annotations
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Entry(Generic[K, V]):
    """A priority key bound to an opaque payload.

    Ordering looks at the key only; equality looks at both key and value,
    so two entries with the same key but different payloads are distinct
    for remove/replace lookups.
    """

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value

    def __lt__(self, other: "Entry[K, Any]") -> bool:
        return self.key < other.key  # type: ignore[operator]

    def __gt__(self, other: "Entry[K, Any]") -> bool:
        return self.key > other.key  # type: ignore[operator]

    def __le__(self, other: "Entry[K, Any]") -> bool:
        return self.key <= other.key  # type: ignore[operator]

    def __ge__(self, other: "Entry[K, Any]") -> bool:
        return self.key >= other.key  # type: ignore[operator]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key == other.key and self.value == other.value

    __hash__ = None  # type: ignore[assignment]  # mutable

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self.key!r}, {self.value!r})"
