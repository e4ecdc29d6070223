# webbrt

Small, dependency-free building blocks for a chain runtime, each usable on
its own.

## Install

    pip install .
    pip install ".[test]"   # with the test tools

## What is inside

- `webbrt.encoding` — `ByteReader` consumes fields from the front of a byte
  payload (`read_u8`, `read_bytes32`, `read_rest`; `len()` gives what is
  left). A read that would run past the end raises `DecodeError` (a
  `ValueError`) and leaves the reader where it was.
- `webbrt.ordered_set` — `OrderedSet`, a sorted, duplicate-free collection
  with `insert` and `remove` (each returns whether anything changed),
  `clear`, `in`, iteration, `len()` and equality. `OrderedSet.from_sorted_set`
  takes items already sorted and unique without checking them.
- `webbrt.data_provider` — the abstract `DataProvider` and
  `DataProviderExtended`, `median` (the upper median, or `None` for no items)
  and `MedianValueDataProvider`, which asks several providers and returns the
  median of the answers that are not `None`.
- `webbrt.get_by_key` — `GetByKey`, which answers `get(key)` through a
  function, and the `parameter_with_key` decorator that builds one.
- `webbrt.price` — `FixedU128`, an unsigned fixed-point number with 18
  decimal places (`from_inner`, `saturating_from_rational`, `checked_div`),
  and `DefaultPriceProvider`, whose `get_price(base, quote)` divides the two
  prices from a data source and returns `None` when either is missing or the
  quote is zero.
- `webbrt.offchain` — the `OffchainErr` enum; `str()` of a member is its
  description.
- `webbrt.transactional` — `TransactionalStorage`, an ordered mutable mapping
  with `next_key` and a nestable `transaction()` context manager; a block that
  raises has all its changes undone. `with_transaction_result(storage, func)`
  runs `func` in a transaction and returns its result, rolling back and
  re-raising if it raises. `DispatchError` is the exception for failed calls.
- `webbrt.storage_iter` — `iter_prefix` and `drain_prefix` walk the byte keys
  of a `TransactionalStorage` that start with a prefix, in key order, with an
  optional decoder, iteration limit and start key. `drain_prefix` removes each
  entry it visits. The returned `PrefixIterator` exposes `previous_key` for
  resuming and `finished` once the prefix is exhausted.
- `webbrt.primitives` — `NoChange`, `NewValue`, `TimestampedValue`,
  `AuctionInfo`, `OnNewBidResult`; `notify_all` calls every handler with the
  same arguments; `handle_all` passes a value to every handler and carries on
  past a `DispatchError`; `merge_account` runs every merger in one transaction
  and rolls back all storage writes if one raises.
- `webbrt.runtime_config` — the runtime's constants (currency units, block
  timing, weight ratios, `VERSION`) and `deposit`, `mixer_sizes` and
  `block_weight_limits`.
- `webbrt.evm_config` — `gas_to_weight`, `weight_to_gas`, `author_address`,
  `storage_key` and `leaf_or_none`.

## Examples

    from webbrt.ordered_set import OrderedSet

    s = OrderedSet([4, 2, 3, 4, 3, 1])
    list(s)          # [1, 2, 3, 4]
    s.insert(3)      # False, already present

    from webbrt.data_provider import median
    median([5, 13, 2, 7])   # 7

    from webbrt.transactional import TransactionalStorage, with_transaction_result

    store = TransactionalStorage()

    def update():
        store[b"value"] = 99

    with_transaction_result(store, update)
    store[b"value"]  # 99

## What it does not do

There are no currency, balance, reservation or NFT interfaces here, no
proof verification, and no node: nothing produces blocks, executes
transactions or persists storage to disk. `TransactionalStorage` lives in
memory only.

## Tests

    pytest