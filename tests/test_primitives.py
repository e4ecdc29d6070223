import pytest

from webbrt.primitives import (
    AuctionInfo,
    NewValue,
    NoChange,
    OnNewBidResult,
    TimestampedValue,
    handle_all,
    merge_account,
    notify_all,
)
from webbrt.transactional import DispatchError, TransactionalStorage


def test_change_variants_compare_by_value():
    assert NewValue(5) == NewValue(5)
    assert NewValue(5) != NewValue(6)
    assert NoChange() == NoChange()
    assert NoChange() != NewValue(None)


def test_timestamped_value_orders_by_value_then_timestamp():
    items = [
        TimestampedValue(2, 1),
        TimestampedValue(1, 9),
        TimestampedValue(2, 0),
    ]
    ordered = sorted(items)
    assert ordered == [
        TimestampedValue(1, 9),
        TimestampedValue(2, 0),
        TimestampedValue(2, 1),
    ]


def test_auction_info_defaults_end_to_none():
    info = AuctionInfo(bid=("alice", 100), start=10)
    assert info.end is None
    assert info.bid == ("alice", 100)
    assert info == AuctionInfo(("alice", 100), 10, None)


def test_on_new_bid_result_holds_change():
    result = OnNewBidResult(accept_bid=True, auction_end_change=NewValue(42))
    assert result.accept_bid is True
    assert result.auction_end_change == NewValue(42)


def test_notify_all_calls_each_handler_in_order():
    calls = []
    handlers = [
        lambda who, key, value: calls.append(("first", who, key, value)),
        lambda who, key, value: calls.append(("second", who, key, value)),
    ]
    result = notify_all(handlers, "who", "key", "value")
    assert result is None
    assert calls == [
        ("first", "who", "key", "value"),
        ("second", "who", "key", "value"),
    ]


def test_handle_all_ignores_failing_handlers():
    seen = []

    def failing(value):
        raise DispatchError("nope")

    handle_all([seen.append, failing, seen.append], 7)
    assert seen == [7, 7]


def test_merge_account_commits_when_all_succeed():
    storage = TransactionalStorage()
    storage[b"alice"] = 10
    storage[b"bob"] = 5

    def merge_balance(source, dest):
        storage[dest] = storage[dest] + storage[source]
        del storage[source]

    merge_account([merge_balance], storage, b"alice", b"bob")
    assert dict(storage) == {b"bob": 15}


def test_merge_account_rolls_back_on_failure():
    storage = TransactionalStorage()
    storage[b"alice"] = 10
    storage[b"bob"] = 5
    before = dict(storage)

    def merge_balance(source, dest):
        storage[dest] = storage[dest] + storage[source]
        del storage[source]

    def refuse(source, dest):
        raise DispatchError("locked")

    with pytest.raises(DispatchError, match="locked"):
        merge_account([merge_balance, refuse], storage, b"alice", b"bob")
    assert dict(storage) == before


def test_merge_account_stops_at_first_failure():
    storage = TransactionalStorage()
    called = []

    def refuse(source, dest):
        raise DispatchError("first")

    with pytest.raises(DispatchError):
        merge_account([refuse, lambda s, d: called.append((s, d))], storage, "a", "b")
    assert called == []