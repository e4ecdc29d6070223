"""Chain parameters: currency units, block timing, weight limits and mixer sizes."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

__all__ = [
    "RuntimeVersion",
    "BlockWeightLimits",
    "VERSION",
    "DOLLARS",
    "CENTS",
    "MILLICENTS",
    "MILLISECS_PER_BLOCK",
    "SLOT_DURATION",
    "MINUTES",
    "HOURS",
    "DAYS",
    "WEIGHT_PER_SECOND",
    "MAXIMUM_BLOCK_WEIGHT",
    "NORMAL_DISPATCH_RATIO",
    "AVERAGE_ON_INITIALIZE_RATIO",
    "MAX_BLOCK_LENGTH",
    "NORMAL_BLOCK_LENGTH",
    "deposit",
    "mixer_sizes",
    "block_weight_limits",
]

_U32_MAX = (1 << 32) - 1
_PERBILL = 1_000_000_000

# Currency units; 12 zeros for easier testing.
DOLLARS = 1_000_000_000_000
CENTS = DOLLARS // 100
MILLICENTS = CENTS // 1_000

MILLISECS_PER_BLOCK = 6000
SLOT_DURATION = MILLISECS_PER_BLOCK

# Time measured in blocks.
MINUTES = 60_000 // MILLISECS_PER_BLOCK
HOURS = MINUTES * 60
DAYS = HOURS * 24

WEIGHT_PER_SECOND = 1_000_000_000_000
MAXIMUM_BLOCK_WEIGHT = 2 * WEIGHT_PER_SECOND

# Ratios in parts per billion.
AVERAGE_ON_INITIALIZE_RATIO = 100_000_000
NORMAL_DISPATCH_RATIO = 750_000_000

if NORMAL_DISPATCH_RATIO < AVERAGE_ON_INITIALIZE_RATIO:
    raise ValueError("normal dispatch ratio must cover the initialization ratio")

SS58_PREFIX = 100
BLOCK_HASH_COUNT = 2400
MINIMUM_PERIOD = SLOT_DURATION // 2

EXISTENTIAL_DEPOSIT = 500
MAX_LOCKS = 50
MAX_RESERVES = 50

SURCHARGE_REWARD = 150 * MILLICENTS
SIGNED_CLAIM_HANDICAP = 2
MAX_VALUE_SIZE = 16 * 1024
RENT_FRACTION = Fraction(1, 30 * DAYS)

TRANSACTION_BYTE_FEE = 10 * MILLICENTS
TARGET_BLOCK_FULLNESS = Fraction(25, 100)
ADJUSTMENT_VARIABLE = Fraction(1, 100_000)
MINIMUM_MULTIPLIER = Fraction(1, 1_000_000_000)

MAX_TREE_DEPTH = 32
CACHE_BLOCK_LENGTH = 100

TOKENS_PALLET_ID = b"py/token"
MIXER_PALLET_ID = b"py/mixer"
NATIVE_CURRENCY_ID = 0
CURRENCY_DEPOSIT = 1
APPROVAL_DEPOSIT = 1
STRING_LIMIT = 50
METADATA_DEPOSIT_BASE = 1
METADATA_DEPOSIT_PER_BYTE = 1
MINIMUM_DEPOSIT_LENGTH = 10 * 60 * 24 * 28
DEFAULT_ADMIN_KEY = bytes(32)

CHAIN_ID = 42
BLOCK_GAS_LIMIT = _U32_MAX
MIN_GAS_PRICE_BOUND_DIVISOR = 1024


def _perbill_mul(parts: int, value: int) -> int:
    """Multiply ``value`` by ``parts`` per billion, rounding to nearest, ties down."""
    quotient, remainder = divmod(value * parts, _PERBILL)
    if remainder * 2 > _PERBILL:
        quotient += 1
    return quotient


MAX_BLOCK_LENGTH = 5 * 1024 * 1024
NORMAL_BLOCK_LENGTH = _perbill_mul(NORMAL_DISPATCH_RATIO, MAX_BLOCK_LENGTH)


@dataclass(frozen=True)
class RuntimeVersion:
    """Identifies a runtime build and its compatibility level."""

    spec_name: str
    impl_name: str
    authoring_version: int
    spec_version: int
    impl_version: int
    transaction_version: int


VERSION = RuntimeVersion(
    spec_name="webb-node",
    impl_name="webb-node",
    authoring_version=1,
    spec_version=1,
    impl_version=1,
    transaction_version=1,
)


@dataclass(frozen=True)
class BlockWeightLimits:
    """Weight budget of a block and how it is split between dispatch classes."""

    max_block: int
    normal_max_total: int
    operational_max_total: int
    operational_reserved: int
    initialization_budget: int


def deposit(items: int, size: int) -> int:
    """Storage deposit for ``items`` entries taking ``size`` bytes."""
    for name, value in (("items", items), ("size", size)):
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"{name} must fit in an unsigned 32-bit integer")
    return items * 15 * CENTS + size * 6 * CENTS


def mixer_sizes() -> list[int]:
    """Deposit sizes of the mixer groups, smallest first."""
    return [DOLLARS * 1_000, DOLLARS * 10_000, DOLLARS * 100_000, DOLLARS * 1_000_000]


def block_weight_limits() -> BlockWeightLimits:
    """Weight limits of a block under the normal and operational classes."""
    normal = _perbill_mul(NORMAL_DISPATCH_RATIO, MAXIMUM_BLOCK_WEIGHT)
    return BlockWeightLimits(
        max_block=MAXIMUM_BLOCK_WEIGHT,
        normal_max_total=normal,
        operational_max_total=MAXIMUM_BLOCK_WEIGHT,
        operational_reserved=MAXIMUM_BLOCK_WEIGHT - normal,
        initialization_budget=_perbill_mul(AVERAGE_ON_INITIALIZE_RATIO, MAXIMUM_BLOCK_WEIGHT),
    )