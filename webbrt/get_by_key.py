"""Values looked up by key through a function."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

__all__ = ["GetByKey", "parameter_with_key"]

K = TypeVar("K")
V = TypeVar("V")


class GetByKey(Generic[K, V]):
    """Answers ``get(key)`` with the value a function gives for it."""

    def __init__(self, func: Callable[[K], V]) -> None:
        self._func = func

    def get(self, key: K) -> V:
        return self._func(key)


def parameter_with_key(func: Callable[[K], V]) -> GetByKey[K, V]:
    """Decorator turning a key function into a :class:`GetByKey`."""
    return GetByKey(func)