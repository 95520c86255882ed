"""Value-transfer primitive consumed by the router and adapters."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from swap_router.errors import ErrorCategory, RouterError


class LedgerError(RouterError):
    """Base error for failed value transfers."""

    category = ErrorCategory.FUNDS


class InsufficientBalance(LedgerError):
    """Holder balance is lower than the amount being moved."""


class InsufficientAllowance(LedgerError):
    """Spender allowance is lower than the amount being pulled."""


@runtime_checkable
class TokenLedger(Protocol):
    """Protocol for token custody and transfers.

    Transfers either fully succeed or raise, leaving balances untouched.
    ``approve`` sets an exact allowance value; it never adds to the
    existing one. ``atomic`` opens a scope whose mutations are discarded
    if the scope exits with an exception.
    """

    def balance_of(self, token: str, holder: str) -> int:
        """Return the holder's balance of token."""
        ...

    def allowance(self, token: str, owner: str, spender: str) -> int:
        """Return the amount spender may still pull from owner."""
        ...

    def approve(self, token: str, owner: str, spender: str, amount: int) -> None:
        """Set the allowance owner grants to spender."""
        ...

    def transfer(self, token: str, sender: str, to: str, amount: int) -> None:
        """Move amount from sender to to."""
        ...

    def transfer_from(self, token: str, spender: str, owner: str, to: str, amount: int) -> None:
        """Move amount from owner to to, consuming spender's allowance."""
        ...

    def atomic(self) -> AbstractContextManager[None]:
        """Scope in which all mutations commit together or not at all."""
        ...


__all__ = ["LedgerError", "InsufficientBalance", "InsufficientAllowance", "TokenLedger"]
