"""Request, outcome, and shared type models."""

from swap_router.models.requests import (
    ExactInputRequest,
    ExactOutputRequest,
    SwapOutcome,
    SwapRequest,
    SwapRequestBase,
)
from swap_router.models.types import (
    NATIVE_ASSET,
    UINT256_MAX,
    ZERO_ADDRESS,
    Address,
    HexBytes,
    Uint256,
    is_valid_address,
    is_zero_address,
    normalize_address,
)

__all__ = [
    "SwapRequest",
    "SwapRequestBase",
    "ExactInputRequest",
    "ExactOutputRequest",
    "SwapOutcome",
    "Address",
    "HexBytes",
    "Uint256",
    "NATIVE_ASSET",
    "UINT256_MAX",
    "ZERO_ADDRESS",
    "normalize_address",
    "is_valid_address",
    "is_zero_address",
]
