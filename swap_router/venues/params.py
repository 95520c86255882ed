"""Native call parameter structures of the supported venues."""

from __future__ import annotations

from dataclasses import dataclass

from swap_router.models.types import ZERO_ADDRESS


@dataclass(frozen=True)
class ExactInputSingleParams:
    """Fee-tiered concentrated-liquidity exactInputSingle struct."""

    token_in: str
    token_out: str
    fee: int
    recipient: str
    deadline: int
    amount_in: int
    amount_out_minimum: int
    sqrt_price_limit_x96: int = 0


@dataclass(frozen=True)
class ExactOutputSingleParams:
    """Fee-tiered concentrated-liquidity exactOutputSingle struct."""

    token_in: str
    token_out: str
    fee: int
    recipient: str
    deadline: int
    amount_out: int
    amount_in_maximum: int
    sqrt_price_limit_x96: int = 0


@dataclass(frozen=True)
class TickExactInputSingleParams:
    """Tick-spaced concentrated-liquidity exactInputSingle struct."""

    token_in: str
    token_out: str
    tick_spacing: int
    recipient: str
    deadline: int
    amount_in: int
    amount_out_minimum: int
    sqrt_price_limit_x96: int = 0


@dataclass(frozen=True)
class TickExactOutputSingleParams:
    """Tick-spaced concentrated-liquidity exactOutputSingle struct."""

    token_in: str
    token_out: str
    tick_spacing: int
    recipient: str
    deadline: int
    amount_out: int
    amount_in_maximum: int
    sqrt_price_limit_x96: int = 0


@dataclass(frozen=True)
class ExactInputParams:
    """Multi-hop exactInput struct; path is packed input-first."""

    path: bytes
    recipient: str
    deadline: int
    amount_in: int
    amount_out_minimum: int


@dataclass(frozen=True)
class ExactOutputParams:
    """Multi-hop exactOutput struct; path is packed output-first."""

    path: bytes
    recipient: str
    deadline: int
    amount_out: int
    amount_in_maximum: int


@dataclass(frozen=True)
class Route:
    """One hop of a multi-route (stable/volatile) venue swap."""

    from_token: str
    to_token: str
    stable: bool
    factory: str = ZERO_ADDRESS


__all__ = [
    "ExactInputSingleParams",
    "ExactOutputSingleParams",
    "TickExactInputSingleParams",
    "TickExactOutputSingleParams",
    "ExactInputParams",
    "ExactOutputParams",
    "Route",
]
