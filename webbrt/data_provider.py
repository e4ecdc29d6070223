"""Data provider interfaces and a median-combining provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Sequence, TypeVar

__all__ = [
    "DataProvider",
    "DataProviderExtended",
    "MedianValueDataProvider",
    "median",
]

T = TypeVar("T")


def median(items: Iterable[T]) -> Optional[T]:
    """Return the upper median of ``items``, or None if there are none."""
    ordered = sorted(items)
    if not ordered:
        return None
    return ordered[len(ordered) // 2]


class DataProvider(ABC):
    """A source of values looked up by key."""

    @abstractmethod
    def get(self, key: Any) -> Optional[Any]:
        """Return the value for ``key``, or None."""


class DataProviderExtended(ABC):
    """A source of timestamped values that can also list everything it holds."""

    @abstractmethod
    def get_no_op(self, key: Any) -> Optional[Any]:
        """Return the timestamped value for ``key`` without side effects."""

    @abstractmethod
    def get_all_values(self) -> list[tuple[Any, Optional[Any]]]:
        """Return every key with its timestamped value."""


class MedianValueDataProvider(DataProvider, DataProviderExtended):
    """Combines several providers by taking the median of their answers."""

    def __init__(self, providers: Sequence[Any]) -> None:
        self.providers = list(providers)

    def get(self, key: Any) -> Optional[Any]:
        return median(
            value
            for value in (p.get(key) for p in self.providers)
            if value is not None
        )

    def get_no_op(self, key: Any) -> Optional[Any]:
        return median(
            value
            for value in (p.get_no_op(key) for p in self.providers)
            if value is not None
        )

    def get_all_values(self) -> list[tuple[Any, Optional[Any]]]:
        keys = {key for p in self.providers for key, _ in p.get_all_values()}
        return [(key, self.get_no_op(key)) for key in sorted(keys)]