"""Per-venue auxiliary payload grammars.

Each adapter receives an opaque ``aux_data`` byte buffer alongside the swap
request. The buffer is ABI encoded and its grammar depends on the venue:

    Constant product   single: empty
                       path:   empty | (uint256 deadline)
    Fee tier           single: (uint24 fee) [+ uint256 deadline]
                       path:   (uint24[] fees) [+ uint256 deadline]
    Tick spacing       single: (int24 spacing) [+ uint256 deadline]
                       path:   (int24[] spacings) [+ uint256 deadline]
    Multi route        single: (bool stable, address factory) [+ uint256 deadline]
                       path:   (bool[] stable, address[] factories) [+ uint256 deadline]

Decoding is strict: a buffer is accepted only if re-encoding the decoded
values reproduces it byte for byte. Only the trailing deadline is optional;
a deadline of zero means "use the adapter default".
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError

from swap_router.errors import InvalidTickSpacing, MalformedAuxData, PathParameterMismatch
from swap_router.models.types import normalize_address

DEADLINE_TYPE = "uint256"


@dataclass(frozen=True)
class DeadlineParams:
    """Aux payload carrying only an optional deadline."""

    deadline: int | None = None


@dataclass(frozen=True)
class HopParams:
    """Per-hop integer parameters (fee tiers or tick spacings)."""

    values: tuple[int, ...]
    deadline: int | None = None

    def require_hops(self, hops: int) -> None:
        """Raise PathParameterMismatch unless there is one value per hop."""
        if len(self.values) != hops:
            raise PathParameterMismatch(f"path has {hops} hops but {len(self.values)} parameters")


@dataclass(frozen=True)
class RouteParams:
    """Per-hop stable flags and factory addresses for multi-route venues."""

    stable: tuple[bool, ...]
    factories: tuple[str, ...]
    deadline: int | None = None

    def require_hops(self, hops: int) -> None:
        """Raise PathParameterMismatch unless both arrays have one entry per hop."""
        if len(self.stable) != hops or len(self.factories) != hops:
            raise PathParameterMismatch(
                f"path has {hops} hops but {len(self.stable)} stable flags "
                f"and {len(self.factories)} factories"
            )


# =============================================================================
# Decoding
# =============================================================================


def decode_empty(data: bytes) -> DeadlineParams:
    """Decode a grammar that takes no parameters at all."""
    if data:
        raise MalformedAuxData(f"expected empty aux data, got {len(data)} bytes")
    return DeadlineParams()


def decode_deadline(data: bytes) -> DeadlineParams:
    """Decode an empty buffer or a single ``uint256`` deadline."""
    if not data:
        return DeadlineParams()
    values = _strict_decode([DEADLINE_TYPE], data)
    if values is None:
        raise MalformedAuxData("expected (uint256 deadline)")
    return DeadlineParams(deadline=_deadline(values[0]))


def decode_fee_tier(data: bytes) -> HopParams:
    """Decode ``(uint24 fee)`` with an optional trailing deadline."""
    (fee,), deadline = _decode_with_deadline(["uint24"], data, "(uint24 fee)")
    return HopParams(values=(fee,), deadline=deadline)


def decode_fee_tiers(data: bytes) -> HopParams:
    """Decode ``(uint24[] fees)`` with an optional trailing deadline."""
    (fees,), deadline = _decode_with_deadline(["uint24[]"], data, "(uint24[] fees)")
    return HopParams(values=tuple(fees), deadline=deadline)


def decode_tick_spacing(data: bytes) -> HopParams:
    """Decode ``(int24 spacing)`` with an optional trailing deadline.

    Raises:
        InvalidTickSpacing: If the spacing is not strictly positive
    """
    (spacing,), deadline = _decode_with_deadline(["int24"], data, "(int24 tickSpacing)")
    _require_positive_spacings((spacing,))
    return HopParams(values=(spacing,), deadline=deadline)


def decode_tick_spacings(data: bytes) -> HopParams:
    """Decode ``(int24[] spacings)`` with an optional trailing deadline.

    Raises:
        InvalidTickSpacing: If any spacing is not strictly positive
    """
    (spacings,), deadline = _decode_with_deadline(["int24[]"], data, "(int24[] tickSpacings)")
    _require_positive_spacings(spacings)
    return HopParams(values=tuple(spacings), deadline=deadline)


def decode_route(data: bytes) -> RouteParams:
    """Decode ``(bool stable, address factory)`` with an optional trailing deadline."""
    (stable, factory), deadline = _decode_with_deadline(
        ["bool", "address"], data, "(bool stable, address factory)"
    )
    return RouteParams(
        stable=(stable,),
        factories=(normalize_address(factory),),
        deadline=deadline,
    )


def decode_routes(data: bytes) -> RouteParams:
    """Decode ``(bool[] stable, address[] factories)`` with an optional trailing deadline."""
    (stable, factories), deadline = _decode_with_deadline(
        ["bool[]", "address[]"], data, "(bool[] stable, address[] factories)"
    )
    return RouteParams(
        stable=tuple(stable),
        factories=tuple(normalize_address(f) for f in factories),
        deadline=deadline,
    )


def _decode_with_deadline(
    types: list[str], data: bytes, grammar: str
) -> tuple[tuple[Any, ...], int | None]:
    with_deadline = _strict_decode([*types, DEADLINE_TYPE], data)
    if with_deadline is not None:
        return tuple(with_deadline[:-1]), _deadline(with_deadline[-1])

    values = _strict_decode(types, data)
    if values is None:
        raise MalformedAuxData(f"expected {grammar} with optional trailing uint256 deadline")
    return tuple(values), None


def _strict_decode(types: list[str], data: bytes) -> tuple[Any, ...] | None:
    """Decode ``data`` as ``types``, or None unless it is the canonical encoding."""
    try:
        values = decode(types, data)
    except (DecodingError, OverflowError, ValueError):
        return None
    try:
        reencoded = encode(types, list(values))
    except EncodingError:
        return None
    if reencoded != bytes(data):
        return None
    return tuple(values)


def _deadline(value: int) -> int | None:
    return value or None


def _require_positive_spacings(spacings: Sequence[int]) -> None:
    for spacing in spacings:
        if spacing <= 0:
            raise InvalidTickSpacing(f"tick spacing must be > 0, got {spacing}")


# =============================================================================
# Encoding (for callers building requests)
# =============================================================================


def encode_deadline(deadline: int) -> bytes:
    """Encode a bare ``(uint256 deadline)`` payload."""
    return encode([DEADLINE_TYPE], [deadline])


def encode_fee_tier(fee: int, deadline: int | None = None) -> bytes:
    """Encode a single-hop fee-tier payload."""
    return _encode(["uint24"], [fee], deadline)


def encode_fee_tiers(fees: Sequence[int], deadline: int | None = None) -> bytes:
    """Encode a multi-hop fee-tier payload."""
    return _encode(["uint24[]"], [list(fees)], deadline)


def encode_tick_spacing(spacing: int, deadline: int | None = None) -> bytes:
    """Encode a single-hop tick-spacing payload."""
    return _encode(["int24"], [spacing], deadline)


def encode_tick_spacings(spacings: Sequence[int], deadline: int | None = None) -> bytes:
    """Encode a multi-hop tick-spacing payload."""
    return _encode(["int24[]"], [list(spacings)], deadline)


def encode_route(stable: bool, factory: str, deadline: int | None = None) -> bytes:
    """Encode a single-hop stable flag and factory payload."""
    return _encode(["bool", "address"], [stable, _address_bytes(factory)], deadline)


def encode_routes(
    stable: Sequence[bool], factories: Sequence[str], deadline: int | None = None
) -> bytes:
    """Encode parallel per-hop stable flags and factory addresses."""
    return _encode(
        ["bool[]", "address[]"],
        [list(stable), [_address_bytes(f) for f in factories]],
        deadline,
    )


def _encode(types: list[str], values: list[Any], deadline: int | None) -> bytes:
    if deadline is not None:
        return encode([*types, DEADLINE_TYPE], [*values, deadline])
    return encode(types, values)


def _address_bytes(address: str) -> bytes:
    return bytes.fromhex(normalize_address(address, validate=True)[2:])


__all__ = [
    "DeadlineParams",
    "HopParams",
    "RouteParams",
    "decode_empty",
    "decode_deadline",
    "decode_fee_tier",
    "decode_fee_tiers",
    "decode_tick_spacing",
    "decode_tick_spacings",
    "decode_route",
    "decode_routes",
    "encode_deadline",
    "encode_fee_tier",
    "encode_fee_tiers",
    "encode_tick_spacing",
    "encode_tick_spacings",
    "encode_route",
    "encode_routes",
]
