"""Shared type definitions for swap router models.

These types are used across request, outcome, and API models.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

# Maximum uint256 value
UINT256_MAX = 2**256 - 1

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Pseudo-address identifying the chain's native asset
NATIVE_ASSET = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"


def validate_uint256(value: Any) -> int:
    """Validate that a value is a valid uint256.

    Args:
        value: Value to validate (decimal string or int)

    Returns:
        The value as an int

    Raises:
        ValueError: If value is not a non-negative integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint256 cannot be a boolean")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err

    if not isinstance(value, int):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return value


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def is_zero_address(address: str | None) -> bool:
    """True for a missing address or the all-zero address."""
    if not address:
        return True
    return normalize_address(address) == ZERO_ADDRESS


def _normalize_address_field(value: Any) -> Any:
    if isinstance(value, str):
        return normalize_address(value)
    return value


# Ethereum address (40 hex chars after 0x prefix), stored lowercase
Address = Annotated[
    str,
    BeforeValidator(_normalize_address_field),
    Field(pattern=r"^0x[a-f0-9]{40}$"),
]


def _parse_hex_bytes(value: Any) -> Any:
    from swap_router.codec.hex import from_hex

    if isinstance(value, str):
        return from_hex(value)
    return value


def _render_hex_bytes(value: bytes) -> str:
    from swap_router.codec.hex import to_hex

    return to_hex(value)


# 256-bit unsigned integer, accepted as int or decimal string, emitted as decimal string
Uint256 = Annotated[
    int,
    BeforeValidator(validate_uint256),
    PlainSerializer(str, return_type=str, when_used="json"),
    Field(description="256-bit unsigned integer"),
]

# Arbitrary bytes, 0x-prefixed hex on the wire
HexBytes = Annotated[
    bytes,
    BeforeValidator(_parse_hex_bytes),
    PlainSerializer(_render_hex_bytes, return_type=str, when_used="json"),
]
