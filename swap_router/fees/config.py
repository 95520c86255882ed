"""Protocol fee configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from swap_router.errors import FeeTooHigh, InvalidAddress, ZeroAddress
from swap_router.models.types import ZERO_ADDRESS, is_zero_address, normalize_address

# Fee denominator: rates are expressed in basis points
BPS_DENOMINATOR = 10_000

# Hard cap on the protocol fee (10%)
MAX_FEE_BPS = 1_000


@dataclass(frozen=True)
class FeeConfig:
    """Immutable fee settings owned by the router.

    The router never mutates a FeeConfig in place; each administrative
    setter produces a copy with exactly one field changed.

    Attributes:
        fee_bps: Protocol fee in basis points, 0..1000
        fee_receiver: Address collecting fees
        exempt: Payer addresses excluded from fees (lowercase)
    """

    fee_bps: int = 0
    fee_receiver: str = ZERO_ADDRESS
    exempt: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        validate_fee_bps(self.fee_bps)
        object.__setattr__(self, "fee_receiver", normalize_address(self.fee_receiver))
        object.__setattr__(self, "exempt", frozenset(normalize_address(a) for a in self.exempt))

    def is_exempt(self, payer: str) -> bool:
        return normalize_address(payer) in self.exempt

    def with_fee_bps(self, fee_bps: int) -> FeeConfig:
        return replace(self, fee_bps=validate_fee_bps(fee_bps))

    def with_fee_receiver(self, receiver: str) -> FeeConfig:
        if is_zero_address(receiver):
            raise ZeroAddress("fee receiver cannot be the zero address")
        return replace(self, fee_receiver=_checked_address(receiver, "fee receiver"))

    def with_exemption(self, wallet: str, exempt: bool) -> FeeConfig:
        if is_zero_address(wallet):
            raise ZeroAddress("cannot change exemption of the zero address")
        wallet = _checked_address(wallet, "exempt wallet")
        members = self.exempt | {wallet} if exempt else self.exempt - {wallet}
        return replace(self, exempt=frozenset(members))


def _checked_address(address: str, role: str) -> str:
    try:
        return normalize_address(address, validate=True)
    except ValueError as err:
        raise InvalidAddress(f"{role} {address!r} is not a valid address") from err


def validate_fee_bps(fee_bps: int) -> int:
    """Return fee_bps if it lies in [0, MAX_FEE_BPS].

    Raises:
        FeeTooHigh: If fee_bps exceeds the cap or is negative
    """
    if isinstance(fee_bps, bool) or not isinstance(fee_bps, int):
        raise FeeTooHigh(f"fee must be an integer number of basis points, got {fee_bps!r}")
    if fee_bps < 0 or fee_bps > MAX_FEE_BPS:
        raise FeeTooHigh(f"fee {fee_bps} bps outside [0, {MAX_FEE_BPS}]")
    return fee_bps


__all__ = ["BPS_DENOMINATOR", "MAX_FEE_BPS", "FeeConfig", "validate_fee_bps"]
