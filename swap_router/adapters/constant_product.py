"""Constant-product pair venue adapter.

The venue resolves hops itself from a flat token list, so the only aux
parameter is an optional deadline on multi-hop swaps. Single-hop swaps take
no aux data and always use the default deadline.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from swap_router.adapters.base import VenueAdapter
from swap_router.adapters.types import SwapContext, SwapOperation
from swap_router.codec.aux_data import DeadlineParams, decode_deadline, decode_empty
from swap_router.venues.base import ConstantProductVenue


class ConstantProductAdapter(VenueAdapter):
    """Adapter for constant-product pair routers."""

    kind = "constant_product"
    venue: ConstantProductVenue

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
        return self._exact_input(
            SwapOperation.EXACT_INPUT,
            [token_in, token_out],
            amount_in,
            min_amount_out,
            recipient,
            lambda: decode_empty(aux_data),
            context,
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
        return self._exact_output(
            SwapOperation.EXACT_OUTPUT,
            [token_in, token_out],
            max_amount_in,
            amount_out,
            recipient,
            lambda: decode_empty(aux_data),
            context,
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
        return self._exact_input(
            SwapOperation.EXACT_INPUT_PATH,
            path,
            amount_in,
            min_amount_out,
            recipient,
            lambda: decode_deadline(aux_data),
            context,
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
        return self._exact_output(
            SwapOperation.EXACT_OUTPUT_PATH,
            path,
            max_amount_in,
            amount_out,
            recipient,
            lambda: decode_deadline(aux_data),
            context,
        )

    def _exact_input(
        self,
        operation: SwapOperation,
        path: Sequence[str],
        amount_in: int,
        min_amount_out: int,
        recipient: str,
        decode: Callable[[], DeadlineParams],
        context: SwapContext,
    ) -> int:
        token_in, token_out = self._path_ends(path, operation)

        def invoke(_params: DeadlineParams, deadline: int) -> list[int]:
            return self.venue.swap_exact_tokens_for_tokens(
                amount_in, min_amount_out, list(path), recipient, deadline, sender=self.address
            )

        return self._execute(
            operation,
            token_in=token_in,
            token_out=token_out,
            committed=amount_in,
            context=context,
            decode=decode,
            invoke=invoke,
        )

    def _exact_output(
        self,
        operation: SwapOperation,
        path: Sequence[str],
        max_amount_in: int,
        amount_out: int,
        recipient: str,
        decode: Callable[[], DeadlineParams],
        context: SwapContext,
    ) -> int:
        token_in, token_out = self._path_ends(path, operation)

        def invoke(_params: DeadlineParams, deadline: int) -> list[int]:
            return self.venue.swap_tokens_for_exact_tokens(
                amount_out, max_amount_in, list(path), recipient, deadline, sender=self.address
            )

        return self._execute(
            operation,
            token_in=token_in,
            token_out=token_out,
            committed=max_amount_in,
            context=context,
            decode=decode,
            invoke=invoke,
        )


__all__ = ["ConstantProductAdapter"]
