"""Key-value storage with nested, all-or-nothing transactions."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import MutableMapping
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, TypeVar

__all__ = ["DispatchError", "TransactionalStorage", "with_transaction_result"]

R = TypeVar("R")

_MISSING = object()


class DispatchError(Exception):
    """A dispatched call failed; changes made on its behalf are discarded."""


class TransactionalStorage(MutableMapping):
    """An ordered mapping whose changes can be grouped into transactions.

    Transactions nest to any depth. A transaction that ends with an
    exception undoes every change made inside it; one that ends normally
    hands its changes to the enclosing transaction, if there is one.
    """

    def __init__(self) -> None:
        self._data: dict[Any, Any] = {}
        self._keys: list[Any] = []
        self._journals: list[dict[Any, Any]] = []

    def _record(self, key: Any) -> None:
        if self._journals:
            journal = self._journals[-1]
            if key not in journal:
                journal[key] = self._data.get(key, _MISSING)

    def _store(self, key: Any, value: Any) -> None:
        if key not in self._data:
            insort(self._keys, key)
        self._data[key] = value

    def _erase(self, key: Any) -> None:
        del self._data[key]
        del self._keys[bisect_left(self._keys, key)]

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._record(key)
        self._store(key, value)

    def __delitem__(self, key: Any) -> None:
        if key not in self._data:
            raise KeyError(key)
        self._record(key)
        self._erase(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._keys))

    def __len__(self) -> int:
        return len(self._data)

    def next_key(self, key: Any) -> Optional[Any]:
        """Return the smallest stored key strictly greater than ``key``."""
        idx = bisect_right(self._keys, key)
        return self._keys[idx] if idx < len(self._keys) else None

    @contextmanager
    def transaction(self) -> Iterator["TransactionalStorage"]:
        """Run the enclosed block as one transaction."""
        journal: dict[Any, Any] = {}
        self._journals.append(journal)
        try:
            yield self
        except BaseException:
            self._journals.pop()
            for key, previous in journal.items():
                if previous is _MISSING:
                    if key in self._data:
                        self._erase(key)
                else:
                    self._store(key, previous)
            raise
        self._journals.pop()
        if self._journals:
            parent = self._journals[-1]
            for key, previous in journal.items():
                parent.setdefault(key, previous)


def with_transaction_result(
    storage: TransactionalStorage, func: Callable[[], R]
) -> R:
    """Call ``func`` in a new transaction on ``storage``.

    If ``func`` raises, every change it made is rolled back and the
    exception propagates; otherwise its result is returned and the
    changes are kept.
    """
    with storage.transaction():
        return func()