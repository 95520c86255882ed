"""In-memory token ledger with snapshot rollback."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from swap_router.ledger.base import InsufficientAllowance, InsufficientBalance
from swap_router.models.types import normalize_address
from swap_router.safe_int import S

logger = structlog.get_logger()


class InMemoryLedger:
    """Dictionary-backed TokenLedger.

    Balances are keyed by (token, holder) and allowances by
    (token, owner, spender), all addresses lowercased. ``atomic`` scopes
    snapshot both tables on entry and restore them if the scope raises, so
    nested scopes unwind independently.
    """

    def __init__(self) -> None:
        self._balances: dict[tuple[str, str], int] = {}
        self._allowances: dict[tuple[str, str, str], int] = {}

    def mint(self, token: str, holder: str, amount: int) -> None:
        """Credit holder with newly created tokens (test and bootstrap helper)."""
        key = (normalize_address(token), normalize_address(holder))
        self._balances[key] = (S(self._balances.get(key, 0)) + S(amount).to_uint256()).to_uint256()

    def balance_of(self, token: str, holder: str) -> int:
        return self._balances.get((normalize_address(token), normalize_address(holder)), 0)

    def allowance(self, token: str, owner: str, spender: str) -> int:
        key = (normalize_address(token), normalize_address(owner), normalize_address(spender))
        return self._allowances.get(key, 0)

    def approve(self, token: str, owner: str, spender: str, amount: int) -> None:
        key = (normalize_address(token), normalize_address(owner), normalize_address(spender))
        self._allowances[key] = S(amount).to_uint256()

    def transfer(self, token: str, sender: str, to: str, amount: int) -> None:
        self._move(
            normalize_address(token), normalize_address(sender), normalize_address(to), amount
        )

    def transfer_from(self, token: str, spender: str, owner: str, to: str, amount: int) -> None:
        token, owner = normalize_address(token), normalize_address(owner)
        key = (token, owner, normalize_address(spender))
        allowed = self._allowances.get(key, 0)
        if allowed < amount:
            raise InsufficientAllowance(
                f"allowance {allowed} of {spender} over {owner} is below {amount} ({token})",
                operation="transfer_from",
            )
        self._move(token, owner, normalize_address(to), amount)
        self._allowances[key] = (S(allowed) - amount).value

    def _move(self, token: str, sender: str, to: str, amount: int) -> None:
        amount = S(amount).to_uint256()
        balance = self._balances.get((token, sender), 0)
        if balance < amount:
            raise InsufficientBalance(
                f"balance {balance} of {sender} is below {amount} ({token})",
                operation="transfer",
            )
        self._balances[(token, sender)] = balance - amount
        self._balances[(token, to)] = self._balances.get((token, to), 0) + amount

    @contextmanager
    def atomic(self) -> Iterator[None]:
        balances = dict(self._balances)
        allowances = dict(self._allowances)
        try:
            yield
        except BaseException:
            self._balances = balances
            self._allowances = allowances
            logger.debug("ledger_rolled_back")
            raise


__all__ = ["InMemoryLedger"]
