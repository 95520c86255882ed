"""Packed multi-hop path encoding for concentrated-liquidity venues.

Concentrated-liquidity routers take a multi-hop route as a single byte
string: ``token0 ‖ param0 ‖ token1 ‖ param1 ‖ … ‖ tokenN``, where every token
is a 20-byte address and every per-hop parameter (fee tier or tick spacing)
is a 3-byte integer. Exact-input routes are encoded from the input token
forward; exact-output routes are encoded from the output token backward.
"""

from __future__ import annotations

from collections.abc import Sequence

from eth_abi.packed import encode_packed

from swap_router.errors import InvalidPath, PathParameterMismatch
from swap_router.models.types import normalize_address

ADDRESS_SIZE = 20
HOP_PARAM_SIZE = 3
HOP_SIZE = ADDRESS_SIZE + HOP_PARAM_SIZE


def validate_hops(tokens: Sequence[str], hop_params: Sequence[object]) -> None:
    """Check that a path has at least one hop and one parameter per hop.

    Raises:
        InvalidPath: If fewer than two tokens are given
        PathParameterMismatch: If ``len(hop_params) != len(tokens) - 1``
    """
    if len(tokens) < 2:
        raise InvalidPath(f"path needs at least 2 tokens, got {len(tokens)}")
    if len(hop_params) != len(tokens) - 1:
        raise PathParameterMismatch(
            f"path has {len(tokens) - 1} hops but {len(hop_params)} parameters"
        )


def encode_packed_path(
    tokens: Sequence[str],
    hop_params: Sequence[int],
    *,
    param_type: str = "uint24",
    reverse: bool = False,
) -> bytes:
    """Encode a token path with per-hop parameters as a packed byte string.

    Args:
        tokens: Token addresses from input to output
        hop_params: One parameter per hop (fee tier or tick spacing)
        param_type: ABI type of the hop parameter ("uint24" or "int24")
        reverse: Encode from the output token backward (exact-output routes)

    Returns:
        Packed path bytes

    Raises:
        InvalidPath: If fewer than two tokens are given
        PathParameterMismatch: If the parameter count does not match the hops
    """
    validate_hops(tokens, hop_params)

    ordered_tokens = list(tokens)
    ordered_params = list(hop_params)
    if reverse:
        ordered_tokens.reverse()
        ordered_params.reverse()

    types: list[str] = ["address"]
    values: list[object] = [_address_bytes(ordered_tokens[0])]
    for param, token in zip(ordered_params, ordered_tokens[1:], strict=True):
        types.extend([param_type, "address"])
        values.extend([param, _address_bytes(token)])

    return bytes(encode_packed(types, values))


def decode_packed_path(data: bytes, *, signed: bool = False) -> tuple[list[str], list[int]]:
    """Split a packed path back into tokens and per-hop parameters.

    Args:
        data: Packed path bytes
        signed: Interpret hop parameters as two's-complement int24

    Returns:
        Tuple of (lowercase token addresses, hop parameters), in encoded order

    Raises:
        ValueError: If the byte length is not ``20 + 23 * hops`` with hops >= 1
    """
    if len(data) < ADDRESS_SIZE + HOP_SIZE or (len(data) - ADDRESS_SIZE) % HOP_SIZE:
        raise ValueError(f"Invalid packed path length: {len(data)}")

    tokens = [_address_str(data[:ADDRESS_SIZE])]
    params: list[int] = []
    offset = ADDRESS_SIZE
    while offset < len(data):
        raw = data[offset : offset + HOP_PARAM_SIZE]
        params.append(int.from_bytes(raw, "big", signed=signed))
        offset += HOP_PARAM_SIZE
        tokens.append(_address_str(data[offset : offset + ADDRESS_SIZE]))
        offset += ADDRESS_SIZE

    return tokens, params


def _address_bytes(address: str) -> bytes:
    return bytes.fromhex(normalize_address(address, validate=True)[2:])


def _address_str(raw: bytes) -> str:
    return "0x" + raw.hex()


__all__ = [
    "ADDRESS_SIZE",
    "HOP_PARAM_SIZE",
    "validate_hops",
    "encode_packed_path",
    "decode_packed_path",
]
