"""Unit tests for the tick-spaced concentrated-liquidity adapter."""

import pytest

from swap_router.adapters import TickSpacingAdapter
from swap_router.codec.aux_data import encode_tick_spacing, encode_tick_spacings
from swap_router.codec.path import encode_packed_path
from swap_router.errors import InvalidTickSpacing, InvalidVenueAddress, MalformedAuxData
from swap_router.ledger import InMemoryLedger
from swap_router.models.types import ZERO_ADDRESS
from swap_router.venues.params import TickExactInputSingleParams, TickExactOutputSingleParams
from tests.conftest import fund_adapter
from tests.helpers import (
    DAI,
    NOW,
    RECIPIENT,
    TICK_ADAPTER,
    USDC,
    WETH,
    ScriptedTickSpacingVenue,
    make_context,
)


class TestSingleHop:
    """Single-pool swaps carry the tick spacing in the struct."""

    def test_exact_input_struct(self, tick_adapter, tick_venue, ledger):
        """The spacing from aux data lands in the venue struct."""
        fund_adapter(ledger, tick_adapter, WETH, 1_000)

        amount_out = tick_adapter.swap_exact_input(
            WETH, USDC, 1_000, 0, RECIPIENT, encode_tick_spacing(100), context=make_context()
        )

        assert amount_out == 1_000
        call = tick_venue.last_call
        assert call.method == "exact_input_single"
        assert call.sender == TICK_ADAPTER
        assert call.args["params"] == TickExactInputSingleParams(
            token_in=WETH,
            token_out=USDC,
            tick_spacing=100,
            recipient=RECIPIENT,
            deadline=NOW + 300,
            amount_in=1_000,
            amount_out_minimum=0,
        )

    def test_exact_output_struct(self, tick_adapter, tick_venue, ledger):
        """Exact-output structs carry the spacing and an explicit deadline."""
        fund_adapter(ledger, tick_adapter, WETH, 1_000)

        tick_adapter.swap_exact_output(
            WETH,
            USDC,
            1_000,
            250,
            RECIPIENT,
            encode_tick_spacing(1, deadline=NOW + 60),
            context=make_context(),
        )

        assert tick_venue.last_call.args["params"] == TickExactOutputSingleParams(
            token_in=WETH,
            token_out=USDC,
            tick_spacing=1,
            recipient=RECIPIENT,
            deadline=NOW + 60,
            amount_out=250,
            amount_in_maximum=1_000,
        )

    @pytest.mark.parametrize("spacing", [0, -1, -60])
    def test_non_positive_spacing_rejected(self, tick_adapter, tick_venue, ledger, spacing):
        """Spacings of zero or below never reach the venue."""
        fund_adapter(ledger, tick_adapter, WETH, 10)

        with pytest.raises(InvalidTickSpacing) as exc_info:
            tick_adapter.swap_exact_input(
                WETH, USDC, 10, 0, RECIPIENT, encode_tick_spacing(spacing), context=make_context()
            )

        assert exc_info.value.operation == "swap_exact_input"
        assert tick_venue.calls == []
        assert ledger.balance_of(WETH, TICK_ADAPTER) == 10

    def test_fee_tier_width_payload_rejected(self, tick_adapter, tick_venue, ledger):
        """A payload that is not canonical int24 is malformed."""
        fund_adapter(ledger, tick_adapter, WETH, 10)

        with pytest.raises(MalformedAuxData):
            tick_adapter.swap_exact_input(
                WETH, USDC, 10, 0, RECIPIENT, b"\x01" * 32, context=make_context()
            )

        assert tick_venue.calls == []


class TestMultiHop:
    """Multi-pool swaps pack spacings as signed 3-byte integers."""

    def test_exact_input_path_packed(self, tick_adapter, tick_venue, ledger):
        """The venue sees the int24-packed path input first."""
        fund_adapter(ledger, tick_adapter, WETH, 1_000)

        tick_adapter.swap_exact_input_path(
            [WETH, USDC, DAI],
            1_000,
            0,
            RECIPIENT,
            encode_tick_spacings([60, 1]),
            context=make_context(),
        )

        call = tick_venue.last_call
        assert call.method == "exact_input"
        assert call.args["params"].path == encode_packed_path(
            [WETH, USDC, DAI], [60, 1], param_type="int24"
        )
        assert call.args["tokens"] == [WETH, USDC, DAI]
        assert call.args["hop_params"] == [60, 1]

    def test_exact_output_path_reversed(self, tick_adapter, tick_venue, ledger):
        """Exact-output paths are packed output first."""
        fund_adapter(ledger, tick_adapter, WETH, 1_000)

        tick_adapter.swap_exact_output_path(
            [WETH, USDC, DAI],
            1_000,
            100,
            RECIPIENT,
            encode_tick_spacings([60, 1]),
            context=make_context(),
        )

        call = tick_venue.last_call
        assert call.method == "exact_output"
        assert call.args["tokens"] == [DAI, USDC, WETH]
        assert call.args["hop_params"] == [1, 60]

    def test_one_bad_spacing_in_path(self, tick_adapter, tick_venue, ledger):
        """A single non-positive spacing anywhere in the path is rejected."""
        fund_adapter(ledger, tick_adapter, WETH, 10)

        with pytest.raises(InvalidTickSpacing) as exc_info:
            tick_adapter.swap_exact_input_path(
                [WETH, USDC, DAI],
                10,
                0,
                RECIPIENT,
                encode_tick_spacings([60, 0]),
                context=make_context(),
            )

        assert exc_info.value.operation == "swap_exact_input_path"
        assert tick_venue.calls == []


class TestConstruction:
    """Venue validation."""

    def test_zero_venue(self):
        """A zero venue address is refused."""
        ledger = InMemoryLedger()
        venue = ScriptedTickSpacingVenue(ZERO_ADDRESS, ledger)
        with pytest.raises(InvalidVenueAddress):
            TickSpacingAdapter(TICK_ADAPTER, venue, ledger)
