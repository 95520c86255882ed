"""Hex rendering for opaque byte payloads."""

from __future__ import annotations


def to_hex(payload: bytes) -> str:
    """Render bytes as lowercase hex with a 0x prefix.

    The output is always ``2 + 2 * len(payload)`` characters long; an empty
    payload renders as ``"0x"``.
    """
    return "0x" + bytes(payload).hex()


def from_hex(value: str) -> bytes:
    """Parse a 0x-prefixed hex string into bytes.

    Raises:
        ValueError: If the prefix is missing, the length is odd, or a
            character is not a hex digit
    """
    if not isinstance(value, str) or not value.startswith(("0x", "0X")):
        raise ValueError(f"Hex string must start with 0x: {value!r}")
    digits = value[2:]
    if len(digits) % 2:
        raise ValueError(f"Hex string has odd length: {value!r}")
    try:
        return bytes.fromhex(digits)
    except ValueError as err:
        raise ValueError(f"Invalid hex string: {value!r}") from err


__all__ = ["to_hex", "from_hex"]
