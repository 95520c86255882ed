"""Unit tests for the fee-tiered concentrated-liquidity adapter."""

import pytest

from swap_router.adapters import FeeTierAdapter
from swap_router.codec.aux_data import encode_fee_tier, encode_fee_tiers
from swap_router.codec.path import encode_packed_path
from swap_router.constants import FEE_TIER_LOW, FEE_TIER_MEDIUM
from swap_router.errors import InvalidVenueAddress, MalformedAuxData, PathParameterMismatch
from swap_router.ledger import InMemoryLedger
from swap_router.venues.params import ExactInputSingleParams, ExactOutputSingleParams
from tests.conftest import fund_adapter
from tests.helpers import (
    DAI,
    FEE_TIER_ADAPTER,
    NOW,
    RECIPIENT,
    USDC,
    WETH,
    ScriptedFeeTierVenue,
    make_context,
)


class TestSingleHop:
    """Single-pool swaps use the exact*Single structs."""

    def test_exact_input_struct(self, fee_tier_adapter, fee_tier_venue, ledger):
        """The fee tier from aux data lands in the venue struct."""
        fund_adapter(ledger, fee_tier_adapter, WETH, 1_000)

        fee_tier_adapter.swap_exact_input(
            WETH,
            USDC,
            1_000,
            950,
            RECIPIENT,
            encode_fee_tier(FEE_TIER_MEDIUM),
            context=make_context(),
        )

        call = fee_tier_venue.last_call
        assert call.method == "exact_input_single"
        assert call.sender == FEE_TIER_ADAPTER
        assert call.args["params"] == ExactInputSingleParams(
            token_in=WETH,
            token_out=USDC,
            fee=FEE_TIER_MEDIUM,
            recipient=RECIPIENT,
            deadline=NOW + 300,
            amount_in=1_000,
            amount_out_minimum=950,
        )

    def test_exact_output_struct(self, fee_tier_adapter, fee_tier_venue, ledger):
        """Exact-output structs carry the output amount and the input maximum."""
        fund_adapter(ledger, fee_tier_adapter, WETH, 1_000)

        used = fee_tier_adapter.swap_exact_output(
            WETH,
            USDC,
            1_000,
            400,
            RECIPIENT,
            encode_fee_tier(FEE_TIER_LOW, deadline=NOW + 9),
            context=make_context(),
        )

        assert used == 400
        assert fee_tier_venue.last_call.args["params"] == ExactOutputSingleParams(
            token_in=WETH,
            token_out=USDC,
            fee=FEE_TIER_LOW,
            recipient=RECIPIENT,
            deadline=NOW + 9,
            amount_out=400,
            amount_in_maximum=1_000,
        )

    def test_missing_fee_rejected(self, fee_tier_adapter, fee_tier_venue, ledger):
        """The fee tier is required for single hops."""
        fund_adapter(ledger, fee_tier_adapter, WETH, 10)

        with pytest.raises(MalformedAuxData):
            fee_tier_adapter.swap_exact_input(
                WETH, USDC, 10, 0, RECIPIENT, b"", context=make_context()
            )

        assert fee_tier_venue.calls == []


class TestMultiHop:
    """Multi-pool swaps use packed paths."""

    def test_exact_input_path_forward(self, fee_tier_adapter, fee_tier_venue, ledger):
        """Exact-input paths are packed input first."""
        fund_adapter(ledger, fee_tier_adapter, WETH, 1_000)

        fee_tier_adapter.swap_exact_input_path(
            [WETH, USDC, DAI],
            1_000,
            0,
            RECIPIENT,
            encode_fee_tiers([FEE_TIER_MEDIUM, FEE_TIER_LOW]),
            context=make_context(),
        )

        params = fee_tier_venue.last_call.args["params"]
        assert params.path == encode_packed_path(
            [WETH, USDC, DAI], [FEE_TIER_MEDIUM, FEE_TIER_LOW]
        )
        assert params.amount_in == 1_000

    def test_exact_output_path_reversed(self, fee_tier_adapter, fee_tier_venue, ledger):
        """Exact-output paths are packed output first."""
        fund_adapter(ledger, fee_tier_adapter, WETH, 1_000)

        fee_tier_adapter.swap_exact_output_path(
            [WETH, USDC, DAI],
            1_000,
            500,
            RECIPIENT,
            encode_fee_tiers([FEE_TIER_MEDIUM, FEE_TIER_LOW]),
            context=make_context(),
        )

        call = fee_tier_venue.last_call
        assert call.args["tokens"] == [DAI, USDC, WETH]
        assert call.args["hop_params"] == [FEE_TIER_LOW, FEE_TIER_MEDIUM]
        assert call.args["params"].amount_in_maximum == 1_000

    def test_tier_count_mismatch(self, fee_tier_adapter, fee_tier_venue, ledger):
        """A 3-hop path with 2 tiers fails before the venue is called."""
        fund_adapter(ledger, fee_tier_adapter, WETH, 1_000)

        with pytest.raises(PathParameterMismatch) as exc_info:
            fee_tier_adapter.swap_exact_input_path(
                [WETH, USDC, DAI, WETH],
                1_000,
                0,
                RECIPIENT,
                encode_fee_tiers([FEE_TIER_MEDIUM, FEE_TIER_LOW]),
                context=make_context(),
            )

        assert exc_info.value.operation == "swap_exact_input_path"
        assert fee_tier_venue.calls == []

    def test_truncated_payload_rejected(self, fee_tier_adapter, ledger):
        """A payload cut short of a full word is malformed."""
        fund_adapter(ledger, fee_tier_adapter, WETH, 10)

        with pytest.raises(MalformedAuxData):
            fee_tier_adapter.swap_exact_input_path(
                [WETH, USDC],
                10,
                0,
                RECIPIENT,
                encode_fee_tiers([FEE_TIER_LOW])[:-1],
                context=make_context(),
            )


class TestConstruction:
    """Venue validation."""

    def test_zero_venue(self):
        """A zero venue address is refused."""
        ledger = InMemoryLedger()
        venue = ScriptedFeeTierVenue("0x" + "00" * 20, ledger)
        with pytest.raises(InvalidVenueAddress):
            FeeTierAdapter(FEE_TIER_ADAPTER, venue, ledger)
