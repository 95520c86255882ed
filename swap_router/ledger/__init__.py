"""Token custody: the TokenLedger protocol and an in-memory implementation."""

from swap_router.ledger.base import (
    InsufficientAllowance,
    InsufficientBalance,
    LedgerError,
    TokenLedger,
)
from swap_router.ledger.memory import InMemoryLedger

__all__ = [
    "TokenLedger",
    "InMemoryLedger",
    "LedgerError",
    "InsufficientBalance",
    "InsufficientAllowance",
]
