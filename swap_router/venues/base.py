"""Venue call interfaces and failure signals.

Venues are external black boxes: each exposes exact-input and exact-output
primitives in its own calling convention and either returns the realized
amounts or fails. A failure carries either a human-readable reason or an
opaque raw payload.

Every call takes ``sender``, the account invoking the venue (the adapter);
the venue pulls input from it through the allowance it was granted.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from swap_router.venues.params import (
    ExactInputParams,
    ExactInputSingleParams,
    ExactOutputParams,
    ExactOutputSingleParams,
    Route,
    TickExactInputSingleParams,
    TickExactOutputSingleParams,
)


class VenueRevert(Exception):
    """Base class for venue call failures."""

    pass


class ReasonRevert(VenueRevert):
    """Venue failure with a human-readable reason."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class RawRevert(VenueRevert):
    """Venue failure carrying only an opaque payload."""

    def __init__(self, payload: bytes) -> None:
        super().__init__(payload)
        self.payload = bytes(payload)


class Venue(Protocol):
    """Anything with an on-ledger address that adapters approve."""

    address: str


class ConstantProductVenue(Venue, Protocol):
    """Constant-product pair router.

    Both calls return one amount per token of the path.
    """

    def swap_exact_tokens_for_tokens(
        self,
        amount_in: int,
        amount_out_min: int,
        path: Sequence[str],
        to: str,
        deadline: int,
        *,
        sender: str,
    ) -> list[int]: ...

    def swap_tokens_for_exact_tokens(
        self,
        amount_out: int,
        amount_in_max: int,
        path: Sequence[str],
        to: str,
        deadline: int,
        *,
        sender: str,
    ) -> list[int]: ...


class FeeTierVenue(Venue, Protocol):
    """Concentrated-liquidity router keyed by fee tier."""

    def exact_input_single(self, params: ExactInputSingleParams, *, sender: str) -> int: ...

    def exact_output_single(self, params: ExactOutputSingleParams, *, sender: str) -> int: ...

    def exact_input(self, params: ExactInputParams, *, sender: str) -> int: ...

    def exact_output(self, params: ExactOutputParams, *, sender: str) -> int: ...


class TickSpacingVenue(Venue, Protocol):
    """Concentrated-liquidity router keyed by tick spacing."""

    def exact_input_single(self, params: TickExactInputSingleParams, *, sender: str) -> int: ...

    def exact_output_single(self, params: TickExactOutputSingleParams, *, sender: str) -> int: ...

    def exact_input(self, params: ExactInputParams, *, sender: str) -> int: ...

    def exact_output(self, params: ExactOutputParams, *, sender: str) -> int: ...


class MultiRouteVenue(Venue, Protocol):
    """Stable/volatile router taking one Route struct per hop.

    Both calls return one amount per route plus one (input first).
    """

    def swap_exact_tokens_for_tokens(
        self,
        amount_in: int,
        amount_out_min: int,
        routes: Sequence[Route],
        to: str,
        deadline: int,
        *,
        sender: str,
    ) -> list[int]: ...

    def swap_tokens_for_exact_tokens(
        self,
        amount_out: int,
        amount_in_max: int,
        routes: Sequence[Route],
        to: str,
        deadline: int,
        *,
        sender: str,
    ) -> list[int]: ...


__all__ = [
    "VenueRevert",
    "ReasonRevert",
    "RawRevert",
    "Venue",
    "ConstantProductVenue",
    "FeeTierVenue",
    "TickSpacingVenue",
    "MultiRouteVenue",
]
