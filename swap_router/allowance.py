"""Reset-then-raise allowance discipline toward downstream venues."""

from __future__ import annotations

import structlog

from swap_router.ledger.base import TokenLedger

logger = structlog.get_logger()


class AllowanceManager:
    """Grants venues exact allowances without ever stacking approvals.

    Some tokens reject a direct non-zero to non-zero allowance change, so
    any outstanding approval is always lowered to zero before the new value
    is set. The manager never assumes the single-step path is available.
    """

    def __init__(self, ledger: TokenLedger) -> None:
        self.ledger = ledger

    def ensure_exact_allowance(self, token: str, owner: str, spender: str, amount: int) -> None:
        """Leave spender with exactly ``amount`` of owner's token approved.

        Args:
            token: Token being approved
            owner: Account granting the allowance (the adapter)
            spender: Account allowed to pull (the venue)
            amount: Exact allowance to leave in place
        """
        current = self.ledger.allowance(token, owner, spender)
        if current > 0:
            self.ledger.approve(token, owner, spender, 0)
            logger.debug(
                "allowance_reset",
                token=token,
                owner=owner,
                spender=spender,
                previous=current,
            )
        self.ledger.approve(token, owner, spender, amount)
        logger.debug("allowance_raised", token=token, owner=owner, spender=spender, amount=amount)


__all__ = ["AllowanceManager"]
