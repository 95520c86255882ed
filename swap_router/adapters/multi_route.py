"""Multi-route stable/volatile venue adapter."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from swap_router.adapters.base import VenueAdapter, require_venue_address
from swap_router.adapters.types import SwapContext, SwapOperation
from swap_router.codec.aux_data import RouteParams, decode_route, decode_routes
from swap_router.ledger.base import TokenLedger
from swap_router.models.types import is_zero_address
from swap_router.venues.base import MultiRouteVenue
from swap_router.venues.params import Route


class MultiRouteAdapter(VenueAdapter):
    """Adapter for routers that take one Route struct per hop.

    Each hop names whether it goes through a stable or a volatile pool and
    which pool factory owns that pool. A zero factory in the aux payload
    selects the adapter's default factory.

    Aux grammar: ``(bool stable, address factory)`` for single hops,
    ``(bool[] stable, address[] factories)`` for paths, each optionally
    followed by a ``uint256`` deadline.
    """

    kind = "multi_route"
    venue: MultiRouteVenue

    def __init__(
        self,
        address: str,
        venue: MultiRouteVenue,
        ledger: TokenLedger,
        default_factory: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(address, venue, ledger, **kwargs)
        self.default_factory = require_venue_address(default_factory, "factory")

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
            lambda: decode_route(aux_data),
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
            lambda: decode_route(aux_data),
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
            lambda: decode_routes(aux_data),
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
            lambda: decode_routes(aux_data),
            context,
        )

    def build_routes(self, path: Sequence[str], params: RouteParams) -> list[Route]:
        """Build one Route per hop of path.

        Raises:
            PathParameterMismatch: If the stable/factory arrays do not match the hops
        """
        params.require_hops(len(path) - 1)
        return [
            Route(
                from_token=path[i],
                to_token=path[i + 1],
                stable=params.stable[i],
                factory=self.default_factory
                if is_zero_address(params.factories[i])
                else params.factories[i],
            )
            for i in range(len(path) - 1)
        ]

    def _exact_input(
        self,
        operation: SwapOperation,
        path: Sequence[str],
        amount_in: int,
        min_amount_out: int,
        recipient: str,
        decode: Callable[[], RouteParams],
        context: SwapContext,
    ) -> int:
        token_in, token_out = self._path_ends(path, operation)

        def decode_hops() -> RouteParams:
            params = decode()
            params.require_hops(len(path) - 1)
            return params

        def invoke(params: RouteParams, deadline: int) -> list[int]:
            routes = self.build_routes(path, params)
            return self.venue.swap_exact_tokens_for_tokens(
                amount_in, min_amount_out, routes, recipient, deadline, sender=self.address
            )

        return self._execute(
            operation,
            token_in=token_in,
            token_out=token_out,
            committed=amount_in,
            context=context,
            decode=decode_hops,
            invoke=invoke,
        )

    def _exact_output(
        self,
        operation: SwapOperation,
        path: Sequence[str],
        max_amount_in: int,
        amount_out: int,
        recipient: str,
        decode: Callable[[], RouteParams],
        context: SwapContext,
    ) -> int:
        token_in, token_out = self._path_ends(path, operation)

        def decode_hops() -> RouteParams:
            params = decode()
            params.require_hops(len(path) - 1)
            return params

        def invoke(params: RouteParams, deadline: int) -> list[int]:
            routes = self.build_routes(path, params)
            return self.venue.swap_tokens_for_exact_tokens(
                amount_out, max_amount_in, routes, recipient, deadline, sender=self.address
            )

        return self._execute(
            operation,
            token_in=token_in,
            token_out=token_out,
            committed=max_amount_in,
            context=context,
            decode=decode_hops,
            invoke=invoke,
        )


__all__ = ["MultiRouteAdapter"]
