"""Gas and weight conversion and EVM-facing helpers."""

from __future__ import annotations

from typing import Optional

from .runtime_config import WEIGHT_PER_SECOND

__all__ = [
    "GAS_PER_SECOND",
    "WEIGHT_PER_GAS",
    "gas_to_weight",
    "weight_to_gas",
    "author_address",
    "storage_key",
    "leaf_or_none",
]

_U64_MAX = (1 << 64) - 1
_U256_LIMIT = 1 << 256

# Approximate gas consumed per second of EVM execution over compiled code.
GAS_PER_SECOND = 40_000_000

# Approximate amount of weight per unit of gas.
WEIGHT_PER_GAS = WEIGHT_PER_SECOND // GAS_PER_SECOND

_EMPTY_LEAF = bytes(32)


def _check_u64(name: str, value: int) -> None:
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{name} must fit in an unsigned 64-bit integer")


def gas_to_weight(gas: int) -> int:
    """Weight charged for ``gas``, saturating at the largest 64-bit value."""
    _check_u64("gas", gas)
    return min(gas * WEIGHT_PER_GAS, _U64_MAX)


def weight_to_gas(weight: int) -> int:
    """Gas that ``weight`` pays for, rounded down."""
    _check_u64("weight", weight)
    return weight // WEIGHT_PER_GAS


def author_address(raw_key: bytes) -> bytes:
    """The 20-byte EVM address taken from bytes 4 to 24 of an authority key."""
    raw = bytes(raw_key)
    if len(raw) < 24:
        raise ValueError("authority key is too short to hold an address")
    return raw[4:24]


def storage_key(index: int) -> bytes:
    """The 32-byte big-endian storage slot for a 256-bit ``index``."""
    if not 0 <= index < _U256_LIMIT:
        raise ValueError("index must fit in an unsigned 256-bit integer")
    return index.to_bytes(32, "big")


def leaf_or_none(value: bytes) -> Optional[bytes]:
    """Return the leaf, or None when it is the empty (all-zero) leaf."""
    leaf = bytes(value)
    if leaf == _EMPTY_LEAF:
        return None
    return leaf