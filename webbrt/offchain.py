"""Errors that may occur while running off-chain code."""

from __future__ import annotations

from enum import Enum

__all__ = ["OffchainErr"]


class OffchainErr(Enum):
    """Kinds of off-chain failure, each with its description."""

    OFFCHAIN_STORE = "Failed to manipulate offchain store"
    SUBMIT_TRANSACTION = "Failed to submit transaction"
    NOT_VALIDATOR = "Is not validator"
    OFFCHAIN_LOCK = "Failed to manipulate offchain lock"

    def __str__(self) -> str:
        return self.value