"""Protocol fee configuration and deduction."""

from swap_router.fees.config import BPS_DENOMINATOR, MAX_FEE_BPS, FeeConfig, validate_fee_bps
from swap_router.fees.policy import FeePolicy, FeeQuote

__all__ = [
    "BPS_DENOMINATOR",
    "MAX_FEE_BPS",
    "FeeConfig",
    "FeePolicy",
    "FeeQuote",
    "validate_fee_bps",
]
