"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Token and account addresses
- factories: Request and context factory functions
- venues: Scripted venues and recording ledgers
"""

from tests.helpers.constants import (
    ALICE,
    BOB,
    CP_ADAPTER,
    CP_VENUE,
    DAI,
    DEFAULT_FACTORY,
    FEE_RECEIVER,
    FEE_TIER_ADAPTER,
    FEE_TIER_VENUE,
    NATIVE,
    NOW,
    OWNER,
    RECIPIENT,
    ROUTE_ADAPTER,
    ROUTE_VENUE,
    ROUTER,
    STABLE_FACTORY,
    TICK_ADAPTER,
    TICK_VENUE,
    USDC,
    WBTC,
    WETH,
)
from tests.helpers.factories import make_context, make_exact_input, make_exact_output
from tests.helpers.venues import (
    RecordingLedger,
    ScriptedConstantProductVenue,
    ScriptedFeeTierVenue,
    ScriptedMultiRouteVenue,
    ScriptedTickSpacingVenue,
    StrictApprovalLedger,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "WBTC",
    "NATIVE",
    "OWNER",
    "ALICE",
    "BOB",
    "RECIPIENT",
    "FEE_RECEIVER",
    "ROUTER",
    "CP_ADAPTER",
    "FEE_TIER_ADAPTER",
    "TICK_ADAPTER",
    "ROUTE_ADAPTER",
    "CP_VENUE",
    "FEE_TIER_VENUE",
    "TICK_VENUE",
    "ROUTE_VENUE",
    "DEFAULT_FACTORY",
    "STABLE_FACTORY",
    "NOW",
    # Factories
    "make_exact_input",
    "make_exact_output",
    "make_context",
    # Venues and ledgers
    "ScriptedConstantProductVenue",
    "ScriptedFeeTierVenue",
    "ScriptedTickSpacingVenue",
    "ScriptedMultiRouteVenue",
    "RecordingLedger",
    "StrictApprovalLedger",
]
