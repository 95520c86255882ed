"""Byte-level codecs: hex rendering, packed paths, and aux payload grammars."""

from swap_router.codec.aux_data import (
    DeadlineParams,
    HopParams,
    RouteParams,
    decode_deadline,
    decode_empty,
    decode_fee_tier,
    decode_fee_tiers,
    decode_route,
    decode_routes,
    decode_tick_spacing,
    decode_tick_spacings,
    encode_deadline,
    encode_fee_tier,
    encode_fee_tiers,
    encode_route,
    encode_routes,
    encode_tick_spacing,
    encode_tick_spacings,
)
from swap_router.codec.hex import from_hex, to_hex
from swap_router.codec.path import decode_packed_path, encode_packed_path, validate_hops

__all__ = [
    # Hex
    "to_hex",
    "from_hex",
    # Packed paths
    "encode_packed_path",
    "decode_packed_path",
    "validate_hops",
    # Aux payloads
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
