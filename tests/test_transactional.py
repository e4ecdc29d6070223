import pytest
from hypothesis import given, strategies as st

from webbrt.transactional import (
    DispatchError,
    TransactionalStorage,
    with_transaction_result,
)

VALUE = b"value"
MAP_VAL0 = b"map/val0"


def test_storage_transaction_basic_commit():
    storage = TransactionalStorage()
    assert storage.get(VALUE, 0) == 0
    assert MAP_VAL0 not in storage

    def body():
        storage[VALUE] = 99
        storage[MAP_VAL0] = 99
        assert storage[VALUE] == 99
        assert storage[MAP_VAL0] == 99
        return "ok"

    assert with_transaction_result(storage, body) == "ok"
    assert storage[VALUE] == 99
    assert storage[MAP_VAL0] == 99


def test_storage_transaction_basic_rollback():
    storage = TransactionalStorage()
    assert storage.get(VALUE, 0) == 0
    assert storage.get(MAP_VAL0, 0) == 0

    def body():
        storage[VALUE] = 99
        storage[MAP_VAL0] = 99
        assert storage[VALUE] == 99
        assert storage[MAP_VAL0] == 99
        raise DispatchError("test")

    with pytest.raises(DispatchError, match="test"):
        with_transaction_result(storage, body)

    assert storage.get(VALUE, 0) == 0
    assert storage.get(MAP_VAL0, 0) == 0
    assert len(storage) == 0


def test_rollback_restores_overwritten_and_deleted_values():
    storage = TransactionalStorage()
    storage[b"a"] = 1
    storage[b"b"] = 2

    with pytest.raises(DispatchError):
        with storage.transaction():
            storage[b"a"] = 10
            del storage[b"b"]
            storage[b"c"] = 3
            raise DispatchError("fail")

    assert dict(storage) == {b"a": 1, b"b": 2}
    assert list(storage) == [b"a", b"b"]


def test_nested_inner_rollback_keeps_outer_changes():
    storage = TransactionalStorage()
    with storage.transaction():
        storage[b"outer"] = 1
        with pytest.raises(DispatchError):
            with storage.transaction():
                storage[b"inner"] = 2
                storage[b"outer"] = 5
                raise DispatchError("inner")
        assert storage[b"outer"] == 1
        assert b"inner" not in storage
    assert dict(storage) == {b"outer": 1}


def test_inner_commit_is_undone_by_outer_rollback():
    storage = TransactionalStorage()
    storage[b"k"] = 1
    with pytest.raises(DispatchError):
        with storage.transaction():
            with storage.transaction():
                storage[b"k"] = 2
                storage[b"new"] = 3
            assert storage[b"k"] == 2
            raise DispatchError("outer")
    assert dict(storage) == {b"k": 1}


def test_next_key_is_strictly_greater_and_ordered():
    storage = TransactionalStorage()
    for key in (b"c", b"a", b"b"):
        storage[key] = key
    assert storage.next_key(b"") == b"a"
    assert storage.next_key(b"a") == b"b"
    assert storage.next_key(b"b") == b"c"
    assert storage.next_key(b"c") is None
    assert list(storage) == [b"a", b"b", b"c"]


def test_delete_missing_key_raises():
    storage = TransactionalStorage()
    storage[b"present"] = 1
    with pytest.raises(KeyError):
        del storage[b"missing"]
    assert dict(storage) == {b"present": 1}
    assert len(storage) == 1


_ops = st.lists(
    st.tuples(
        st.sampled_from(["set", "del"]),
        st.binary(max_size=2),
        st.integers(),
    ),
    max_size=30,
)


@given(initial=st.dictionaries(st.binary(max_size=2), st.integers(), max_size=8), ops=_ops)
def test_failed_transaction_leaves_storage_unchanged(initial, ops):
    storage = TransactionalStorage()
    storage.update(initial)

    def body():
        for op, key, value in ops:
            if op == "set":
                storage[key] = value
            elif key in storage:
                del storage[key]
        raise DispatchError("rollback")

    with pytest.raises(DispatchError):
        with_transaction_result(storage, body)

    assert dict(storage) == initial
    assert list(storage) == sorted(initial)