"""Venue adapters.

Module structure:
- base.py: VenueAdapter with the shared funds/allowance/decode/call/refund protocol
- types.py: SwapOperation, SwapContext, and the two-armed VenueCallResult
- constant_product.py: flat address-list pair routers
- concentrated.py: shared packed-path logic for concentrated-liquidity venues
- fee_tier.py: concentrated liquidity keyed by fee tier
- tick_spacing.py: concentrated liquidity keyed by tick spacing
- multi_route.py: stable/volatile routers taking per-hop Route structs
"""

from swap_router.adapters.base import VenueAdapter, require_venue_address
from swap_router.adapters.constant_product import ConstantProductAdapter
from swap_router.adapters.fee_tier import FeeTierAdapter
from swap_router.adapters.multi_route import MultiRouteAdapter
from swap_router.adapters.tick_spacing import TickSpacingAdapter
from swap_router.adapters.types import (
    RevertPayload,
    RevertReason,
    SwapContext,
    SwapOperation,
    VenueCallResult,
)

__all__ = [
    "VenueAdapter",
    "require_venue_address",
    "ConstantProductAdapter",
    "FeeTierAdapter",
    "TickSpacingAdapter",
    "MultiRouteAdapter",
    "SwapContext",
    "SwapOperation",
    "RevertReason",
    "RevertPayload",
    "VenueCallResult",
]
