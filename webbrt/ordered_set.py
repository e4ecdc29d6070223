"""A sorted, duplicate-free set backed by a list."""

from __future__ import annotations

from bisect import bisect_left
from itertools import groupby
from typing import Any, Generic, Iterable, Iterator, TypeVar

__all__ = ["OrderedSet"]

T = TypeVar("T")


class OrderedSet(Generic[T]):
    """An ordered set whose elements are kept sorted and unique."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = [key for key, _ in groupby(sorted(items))]

    @classmethod
    def from_sorted_set(cls, items: Iterable[T]) -> "OrderedSet[T]":
        """Build a set from items already sorted and unique, without checking."""
        instance = cls()
        instance._items = list(items)
        return instance

    def _find(self, value: T) -> tuple[int, bool]:
        loc = bisect_left(self._items, value)
        found = loc < len(self._items) and self._items[loc] == value
        return loc, found

    def insert(self, value: T) -> bool:
        """Insert ``value``; return True if it was not already present."""
        loc, found = self._find(value)
        if found:
            return False
        self._items.insert(loc, value)
        return True

    def remove(self, value: T) -> bool:
        """Remove ``value``; return True if it was present."""
        loc, found = self._find(value)
        if not found:
            return False
        del self._items[loc]
        return True

    def __contains__(self, value: Any) -> bool:
        return self._find(value)[1]

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"OrderedSet({self._items!r})"