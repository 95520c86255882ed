"""Shared adapter logic for concentrated-liquidity venues.

Fee-tiered and tick-spaced venues differ only in which per-hop parameter
identifies a pool. Both take a single-hop struct for one-pool swaps and a
packed byte path for multi-hop swaps, encoded input-first for exact-input
and output-first for exact-output.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from swap_router.adapters.base import VenueAdapter
from swap_router.adapters.types import SwapContext, SwapOperation
from swap_router.codec.aux_data import HopParams
from swap_router.codec.path import encode_packed_path
from swap_router.venues.params import ExactInputParams, ExactOutputParams


class ConcentratedLiquidityAdapter(VenueAdapter):
    """Base for adapters whose pools are keyed by one integer per hop.

    Subclasses provide the aux grammars and the single-hop struct builders.
    """

    # ABI type of the per-hop parameter inside packed paths
    hop_param_type: ClassVar[str] = "uint24"

    @abstractmethod
    def _decode_single(self, aux_data: bytes) -> HopParams: ...

    @abstractmethod
    def _decode_path(self, aux_data: bytes) -> HopParams: ...

    @abstractmethod
    def _exact_input_single_params(
        self,
        token_in: str,
        token_out: str,
        hop_param: int,
        recipient: str,
        deadline: int,
        amount_in: int,
        min_amount_out: int,
    ) -> Any: ...

    @abstractmethod
    def _exact_output_single_params(
        self,
        token_in: str,
        token_out: str,
        hop_param: int,
        recipient: str,
        deadline: int,
        amount_out: int,
        max_amount_in: int,
    ) -> Any: ...

    def swap_exact_input(
        self,
        token_in: str,
        token_out: str,
        amount_in: int,
        min_amount_out: int,
        recipient: str,
        aux_data: bytes,
        *,
        context: SwapContext,
    ) -> int:
        def invoke(params: HopParams, deadline: int) -> int:
            struct = self._exact_input_single_params(
                token_in,
                token_out,
                params.values[0],
                recipient,
                deadline,
                amount_in,
                min_amount_out,
            )
            return self.venue.exact_input_single(struct, sender=self.address)

        return self._execute(
            SwapOperation.EXACT_INPUT,
            token_in=token_in,
            token_out=token_out,
            committed=amount_in,
            context=context,
            decode=lambda: self._decode_single(aux_data),
            invoke=invoke,
        )

    def swap_exact_output(
        self,
        token_in: str,
        token_out: str,
        max_amount_in: int,
        amount_out: int,
        recipient: str,
        aux_data: bytes,
        *,
        context: SwapContext,
    ) -> int:
        def invoke(params: HopParams, deadline: int) -> int:
            struct = self._exact_output_single_params(
                token_in,
                token_out,
                params.values[0],
                recipient,
                deadline,
                amount_out,
                max_amount_in,
            )
            return self.venue.exact_output_single(struct, sender=self.address)

        return self._execute(
            SwapOperation.EXACT_OUTPUT,
            token_in=token_in,
            token_out=token_out,
            committed=max_amount_in,
            context=context,
            decode=lambda: self._decode_single(aux_data),
            invoke=invoke,
        )

    def swap_exact_input_path(
        self,
        path: Sequence[str],
        amount_in: int,
        min_amount_out: int,
        recipient: str,
        aux_data: bytes,
        *,
        context: SwapContext,
    ) -> int:
        operation = SwapOperation.EXACT_INPUT_PATH
        token_in, token_out = self._path_ends(path, operation)

        def invoke(params: HopParams, deadline: int) -> int:
            packed = encode_packed_path(path, params.values, param_type=self.hop_param_type)
            return self.venue.exact_input(
                ExactInputParams(
                    path=packed,
                    recipient=recipient,
                    deadline=deadline,
                    amount_in=amount_in,
                    amount_out_minimum=min_amount_out,
                ),
                sender=self.address,
            )

        return self._execute(
            operation,
            token_in=token_in,
            token_out=token_out,
            committed=amount_in,
            context=context,
            decode=lambda: self._decode_hops(aux_data, len(path) - 1),
            invoke=invoke,
        )

    def swap_exact_output_path(
        self,
        path: Sequence[str],
        max_amount_in: int,
        amount_out: int,
        recipient: str,
        aux_data: bytes,
        *,
        context: SwapContext,
    ) -> int:
        operation = SwapOperation.EXACT_OUTPUT_PATH
        token_in, token_out = self._path_ends(path, operation)

        def invoke(params: HopParams, deadline: int) -> int:
            packed = encode_packed_path(
                path, params.values, param_type=self.hop_param_type, reverse=True
            )
            return self.venue.exact_output(
                ExactOutputParams(
                    path=packed,
                    recipient=recipient,
                    deadline=deadline,
                    amount_out=amount_out,
                    amount_in_maximum=max_amount_in,
                ),
                sender=self.address,
            )

        return self._execute(
            operation,
            token_in=token_in,
            token_out=token_out,
            committed=max_amount_in,
            context=context,
            decode=lambda: self._decode_hops(aux_data, len(path) - 1),
            invoke=invoke,
        )

    def _decode_hops(self, aux_data: bytes, hops: int) -> HopParams:
        params = self._decode_path(aux_data)
        params.require_hops(hops)
        return params


__all__ = ["ConcentratedLiquidityAdapter"]
