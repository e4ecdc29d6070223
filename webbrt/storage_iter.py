"""Resumable, bounded iteration over the keys of storage sharing a prefix."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .transactional import TransactionalStorage

__all__ = ["PrefixIterator", "iter_prefix", "drain_prefix"]

Decoder = Callable[[bytes, Any], Any]


def _pair(raw_key: bytes, value: Any) -> tuple[bytes, Any]:
    return raw_key, value


class PrefixIterator:
    """Iterates the entries whose keys start with ``prefix``, in key order.

    ``decode`` turns ``(key_without_prefix, value)`` into an item; entries
    for which it raises ``ValueError`` are skipped. At most
    ``max_iterations`` items are produced when it is given. Iteration
    starts after ``start_key`` when that key lies under the prefix, which
    lets a caller resume from :attr:`previous_key`. With ``drain`` set,
    each visited entry is removed from storage.
    """

    def __init__(
        self,
        storage: TransactionalStorage,
        prefix: bytes,
        decode: Optional[Decoder] = None,
        max_iterations: Optional[int] = None,
        start_key: Optional[bytes] = None,
        drain: bool = False,
    ) -> None:
        self.storage = storage
        self.prefix = bytes(prefix)
        self.decode = decode if decode is not None else _pair
        self.remain_iterator_count = max_iterations
        if start_key is not None and start_key.startswith(self.prefix):
            self.previous_key = bytes(start_key)
        else:
            self.previous_key = self.prefix
        self.drain = drain
        self.finished = False

    def __iter__(self) -> "PrefixIterator":
        return self

    def __next__(self) -> Any:
        if self.remain_iterator_count is not None:
            if self.remain_iterator_count == 0:
                raise StopIteration
            self.remain_iterator_count -= 1

        while True:
            key = self.storage.next_key(self.previous_key)
            if key is None or not key.startswith(self.prefix):
                self.finished = True
                raise StopIteration
            self.previous_key = key
            if key not in self.storage:
                continue
            raw_value = self.storage[key]
            if self.drain:
                del self.storage[key]
            try:
                return self.decode(key[len(self.prefix):], raw_value)
            except ValueError:
                continue


def iter_prefix(
    storage: TransactionalStorage,
    prefix: bytes,
    decode: Optional[Decoder] = None,
    max_iterations: Optional[int] = None,
    start_key: Optional[bytes] = None,
) -> PrefixIterator:
    """Iterate the entries under ``prefix`` without changing storage."""
    return PrefixIterator(storage, prefix, decode, max_iterations, start_key, drain=False)


def drain_prefix(
    storage: TransactionalStorage,
    prefix: bytes,
    decode: Optional[Decoder] = None,
    max_iterations: Optional[int] = None,
    start_key: Optional[bytes] = None,
) -> PrefixIterator:
    """Iterate the entries under ``prefix``, removing each one visited."""
    return PrefixIterator(storage, prefix, decode, max_iterations, start_key, drain=True)