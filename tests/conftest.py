"""Pytest configuration and fixtures."""

import pytest

from swap_router.adapters import (
    ConstantProductAdapter,
    FeeTierAdapter,
    MultiRouteAdapter,
    TickSpacingAdapter,
    VenueAdapter,
)
from swap_router.events import EventLog
from swap_router.fees import FeeConfig
from swap_router.models.types import UINT256_MAX
from swap_router.routing import OwnerAuthorizer, Router
from tests.helpers.constants import (
    ALICE,
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
    ROUTE_ADAPTER,
    ROUTE_VENUE,
    ROUTER,
    TICK_ADAPTER,
    TICK_VENUE,
    USDC,
    WBTC,
    WETH,
)
from tests.helpers.venues import (
    RecordingLedger,
    ScriptedConstantProductVenue,
    ScriptedFeeTierVenue,
    ScriptedMultiRouteVenue,
    ScriptedTickSpacingVenue,
)

ALL_TOKENS = (WETH, USDC, DAI, WBTC, NATIVE)

# Balance minted to ALICE for every token
ALICE_BALANCE = 10**24


def fixed_clock() -> float:
    return NOW


def fund_adapter(ledger: RecordingLedger, adapter: VenueAdapter, token: str, amount: int) -> None:
    """Place input in adapter custody, as the router does before a call."""
    ledger.mint(token, adapter.address, amount)


@pytest.fixture
def ledger() -> RecordingLedger:
    """Empty in-memory ledger that records approvals."""
    return RecordingLedger()


@pytest.fixture
def events() -> EventLog:
    """Audit log shared by the router and all adapters."""
    return EventLog()


@pytest.fixture
def cp_venue(ledger: RecordingLedger) -> ScriptedConstantProductVenue:
    venue = ScriptedConstantProductVenue(CP_VENUE, ledger, clock=fixed_clock)
    venue.fund(*ALL_TOKENS)
    return venue


@pytest.fixture
def fee_tier_venue(ledger: RecordingLedger) -> ScriptedFeeTierVenue:
    venue = ScriptedFeeTierVenue(FEE_TIER_VENUE, ledger, clock=fixed_clock)
    venue.fund(*ALL_TOKENS)
    return venue


@pytest.fixture
def tick_venue(ledger: RecordingLedger) -> ScriptedTickSpacingVenue:
    venue = ScriptedTickSpacingVenue(TICK_VENUE, ledger, clock=fixed_clock)
    venue.fund(*ALL_TOKENS)
    return venue


@pytest.fixture
def route_venue(ledger: RecordingLedger) -> ScriptedMultiRouteVenue:
    venue = ScriptedMultiRouteVenue(ROUTE_VENUE, ledger, clock=fixed_clock)
    venue.fund(*ALL_TOKENS)
    return venue


@pytest.fixture
def cp_adapter(
    ledger: RecordingLedger, events: EventLog, cp_venue: ScriptedConstantProductVenue
) -> ConstantProductAdapter:
    return ConstantProductAdapter(CP_ADAPTER, cp_venue, ledger, events=events, clock=fixed_clock)


@pytest.fixture
def fee_tier_adapter(
    ledger: RecordingLedger, events: EventLog, fee_tier_venue: ScriptedFeeTierVenue
) -> FeeTierAdapter:
    return FeeTierAdapter(
        FEE_TIER_ADAPTER, fee_tier_venue, ledger, events=events, clock=fixed_clock
    )


@pytest.fixture
def tick_adapter(
    ledger: RecordingLedger, events: EventLog, tick_venue: ScriptedTickSpacingVenue
) -> TickSpacingAdapter:
    return TickSpacingAdapter(TICK_ADAPTER, tick_venue, ledger, events=events, clock=fixed_clock)


@pytest.fixture
def route_adapter(
    ledger: RecordingLedger, events: EventLog, route_venue: ScriptedMultiRouteVenue
) -> MultiRouteAdapter:
    return MultiRouteAdapter(
        ROUTE_ADAPTER, route_venue, ledger, DEFAULT_FACTORY, events=events, clock=fixed_clock
    )


@pytest.fixture
def router(
    ledger: RecordingLedger,
    events: EventLog,
    cp_adapter: ConstantProductAdapter,
    fee_tier_adapter: FeeTierAdapter,
    tick_adapter: TickSpacingAdapter,
    route_adapter: MultiRouteAdapter,
) -> Router:
    """Router with all four adapters approved, zero fee, and a funded ALICE."""
    swap_router = Router(
        ROUTER,
        ledger,
        OwnerAuthorizer(OWNER),
        fee_config=FeeConfig(fee_receiver=FEE_RECEIVER),
        events=events,
    )
    for adapter in (cp_adapter, fee_tier_adapter, tick_adapter, route_adapter):
        swap_router.set_adapter_approval(OWNER, adapter, True)

    for token in ALL_TOKENS:
        ledger.mint(token, ALICE, ALICE_BALANCE)
        if token != NATIVE:
            ledger.approve(token, ALICE, ROUTER, UINT256_MAX)
    return swap_router
