"""Fee-tiered concentrated-liquidity venue adapter."""

from __future__ import annotations

from swap_router.adapters.concentrated import ConcentratedLiquidityAdapter
from swap_router.codec.aux_data import HopParams, decode_fee_tier, decode_fee_tiers
from swap_router.venues.base import FeeTierVenue
from swap_router.venues.params import ExactInputSingleParams, ExactOutputSingleParams


class FeeTierAdapter(ConcentratedLiquidityAdapter):
    """Adapter for routers whose pools are identified by fee tier.

    Aux grammar: ``(uint24 fee)`` for single hops, ``(uint24[] fees)`` for
    paths, each optionally followed by a ``uint256`` deadline.
    """

    kind = "fee_tier"
    hop_param_type = "uint24"
    venue: FeeTierVenue

    def _decode_single(self, aux_data: bytes) -> HopParams:
        return decode_fee_tier(aux_data)

    def _decode_path(self, aux_data: bytes) -> HopParams:
        return decode_fee_tiers(aux_data)

    def _exact_input_single_params(
        self,
        token_in: str,
        token_out: str,
        hop_param: int,
        recipient: str,
        deadline: int,
        amount_in: int,
        min_amount_out: int,
    ) -> ExactInputSingleParams:
        return ExactInputSingleParams(
            token_in=token_in,
            token_out=token_out,
            fee=hop_param,
            recipient=recipient,
            deadline=deadline,
            amount_in=amount_in,
            amount_out_minimum=min_amount_out,
        )

    def _exact_output_single_params(
        self,
        token_in: str,
        token_out: str,
        hop_param: int,
        recipient: str,
        deadline: int,
        amount_out: int,
        max_amount_in: int,
    ) -> ExactOutputSingleParams:
        return ExactOutputSingleParams(
            token_in=token_in,
            token_out=token_out,
            fee=hop_param,
            recipient=recipient,
            deadline=deadline,
            amount_out=amount_out,
            amount_in_maximum=max_amount_in,
        )


__all__ = ["FeeTierAdapter"]
