"""Protocol fee deduction.

Uses SafeInt for the fee arithmetic so a misconfigured rate can never
produce a negative net amount:
    fee = floor(gross * fee_bps / 10000)
    net = gross - fee

The fee always rounds down. A gross amount too small to produce a non-zero
fee at the configured rate is fee-free by construction.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from swap_router.fees.config import BPS_DENOMINATOR, FeeConfig
from swap_router.ledger.base import TokenLedger
from swap_router.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class FeeQuote:
    """Fee split of a gross input amount.

    Attributes:
        gross: Amount committed by the payer
        fee: Amount going to the fee receiver
        net: Amount left for the swap
        exempt: True if the payer is on the exemption list
    """

    gross: int
    fee: int
    net: int
    exempt: bool = False

    @property
    def charges_fee(self) -> bool:
        """True if a fee transfer is required."""
        return self.fee > 0


class FeePolicy:
    """Computes and collects the protocol fee on swap inputs.

    Attributes:
        config: Current fee configuration (replaced, never mutated, by the router)
        ledger: Value-transfer primitive used to pay the fee receiver
        spender: Account pulling the fee from payers (the router)
    """

    def __init__(self, config: FeeConfig, ledger: TokenLedger, spender: str) -> None:
        self.config = config
        self.ledger = ledger
        self.spender = spender

    def quote(self, payer: str, gross_amount: int) -> FeeQuote:
        """Split gross_amount into fee and net without moving funds."""
        gross = S(gross_amount).to_uint256()
        if self.config.is_exempt(payer):
            return FeeQuote(gross=gross, fee=0, net=gross, exempt=True)
        if self.config.fee_bps == 0:
            return FeeQuote(gross=gross, fee=0, net=gross)

        fee = (S(gross) * self.config.fee_bps) // BPS_DENOMINATOR
        net = S(gross) - fee
        return FeeQuote(gross=gross, fee=fee.value, net=net.value)

    def apply(
        self,
        token: str,
        payer: str,
        gross_amount: int,
        *,
        from_custody: bool = False,
    ) -> int:
        """Collect the fee on gross_amount and return the net amount.

        Args:
            token: Token the fee is paid in
            payer: Account the fee is charged to (decides exemption)
            gross_amount: Amount committed by the payer
            from_custody: The funds already sit in the spender's own custody
                (native asset collected up front); pay the fee from there
                instead of pulling it from the payer

        Returns:
            gross_amount minus the fee
        """
        quote = self.quote(payer, gross_amount)
        if not quote.charges_fee:
            return quote.net

        receiver = self.config.fee_receiver
        if from_custody:
            self.ledger.transfer(token, self.spender, receiver, quote.fee)
        else:
            self.ledger.transfer_from(token, self.spender, payer, receiver, quote.fee)

        logger.debug(
            "fee_collected",
            token=token,
            payer=payer,
            receiver=receiver,
            fee=quote.fee,
            net=quote.net,
            fee_bps=self.config.fee_bps,
        )
        return quote.net


__all__ = ["FeeQuote", "FeePolicy"]
