"""Tick-spaced concentrated-liquidity venue adapter."""

from __future__ import annotations

from swap_router.adapters.concentrated import ConcentratedLiquidityAdapter
from swap_router.codec.aux_data import HopParams, decode_tick_spacing, decode_tick_spacings
from swap_router.venues.base import TickSpacingVenue
from swap_router.venues.params import TickExactInputSingleParams, TickExactOutputSingleParams


class TickSpacingAdapter(ConcentratedLiquidityAdapter):
    """Adapter for routers whose pools are identified by tick spacing.

    Aux grammar: ``(int24 spacing)`` for single hops, ``(int24[] spacings)``
    for paths, each optionally followed by a ``uint256`` deadline where zero
    means the default. Every spacing must be strictly positive.
    """

    kind = "tick_spacing"
    hop_param_type = "int24"
    venue: TickSpacingVenue

    def _decode_single(self, aux_data: bytes) -> HopParams:
        return decode_tick_spacing(aux_data)

    def _decode_path(self, aux_data: bytes) -> HopParams:
        return decode_tick_spacings(aux_data)

    def _exact_input_single_params(
        self,
        token_in: str,
        token_out: str,
        hop_param: int,
        recipient: str,
        deadline: int,
        amount_in: int,
        min_amount_out: int,
    ) -> TickExactInputSingleParams:
        return TickExactInputSingleParams(
            token_in=token_in,
            token_out=token_out,
            tick_spacing=hop_param,
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
    ) -> TickExactOutputSingleParams:
        return TickExactOutputSingleParams(
            token_in=token_in,
            token_out=token_out,
            tick_spacing=hop_param,
            recipient=recipient,
            deadline=deadline,
            amount_out=amount_out,
            amount_in_maximum=max_amount_in,
        )


__all__ = ["TickSpacingAdapter"]
