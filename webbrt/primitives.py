"""Shared value types and helpers for handler groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, Union

from .transactional import DispatchError, TransactionalStorage, with_transaction_result

__all__ = [
    "NoChange",
    "NewValue",
    "Change",
    "TimestampedValue",
    "AuctionInfo",
    "OnNewBidResult",
    "notify_all",
    "handle_all",
    "merge_account",
]

V = TypeVar("V")


@dataclass(frozen=True)
class NoChange:
    """Leave the value as it is."""


@dataclass(frozen=True)
class NewValue(Generic[V]):
    """Replace the value with ``value``."""

    value: V


Change = Union[NoChange, NewValue]


@dataclass(frozen=True, order=True)
class TimestampedValue(Generic[V]):
    """A value with the moment it was recorded; ordered by value, then time."""

    value: V
    timestamp: Any


@dataclass
class AuctionInfo:
    """State of an auction: current bid and its start and optional end block."""

    bid: Optional[tuple[Any, Any]]
    start: Any
    end: Optional[Any] = None


@dataclass
class OnNewBidResult:
    """Whether a bid was accepted and how the auction end changes."""

    accept_bid: bool
    auction_end_change: Change


def notify_all(handlers: Iterable[Callable[..., Any]], *args: Any) -> None:
    """Call every handler, in order, with the same arguments."""
    for handler in handlers:
        handler(*args)


def handle_all(handlers: Iterable[Callable[[Any], Any]], value: Any) -> None:
    """Pass ``value`` to every handler; a handler's failure does not stop the rest."""
    for handler in handlers:
        try:
            handler(value)
        except DispatchError:
            continue


def merge_account(
    mergers: Iterable[Callable[[Any, Any], Any]],
    storage: TransactionalStorage,
    source: Any,
    dest: Any,
) -> None:
    """Merge ``source`` into ``dest`` with every merger, as one transaction.

    The first merger to raise stops the merge, and everything written to
    ``storage`` by the earlier ones is rolled back.
    """
    merger_list = list(mergers)

    def run() -> None:
        for merger in merger_list:
            merger(source, dest)

    with_transaction_result(storage, run)