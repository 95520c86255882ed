"""Unit tests for the constant-product pair adapter."""

import pytest

from swap_router.adapters import ConstantProductAdapter
from swap_router.codec.aux_data import encode_deadline, encode_fee_tier
from swap_router.errors import InvalidPath, InvalidVenueAddress, MalformedAuxData
from swap_router.ledger import InMemoryLedger
from swap_router.models.types import ZERO_ADDRESS
from tests.conftest import fund_adapter
from tests.helpers import (
    CP_ADAPTER,
    DAI,
    NOW,
    RECIPIENT,
    USDC,
    WBTC,
    WETH,
    ScriptedConstantProductVenue,
    make_context,
)


class TestConstruction:
    """Venue address validation at construction time."""

    def test_zero_venue_rejected(self):
        """A zero venue address is refused."""
        ledger = InMemoryLedger()
        with pytest.raises(InvalidVenueAddress):
            venue = ScriptedConstantProductVenue(ZERO_ADDRESS, ledger)
            ConstantProductAdapter(CP_ADAPTER, venue, ledger)

    def test_malformed_venue_rejected(self):
        """A venue without a valid address is refused."""
        ledger = InMemoryLedger()
        with pytest.raises(InvalidVenueAddress):
            venue = ScriptedConstantProductVenue("0x1234", ledger)
            ConstantProductAdapter(CP_ADAPTER, venue, ledger)


class TestVenueCalls:
    """The adapter speaks the flat address-list convention."""

    def test_pair_exact_input_call(self, cp_adapter, cp_venue, ledger):
        """A pair swap passes a two-address path and the adapter as sender."""
        fund_adapter(ledger, cp_adapter, WETH, 1_000)

        cp_adapter.swap_exact_input(WETH, USDC, 1_000, 990, RECIPIENT, b"", context=make_context())

        call = cp_venue.last_call
        assert call.method == "swap_exact_tokens_for_tokens"
        assert call.sender == CP_ADAPTER
        assert call.args == {
            "amount_in": 1_000,
            "amount_out_min": 990,
            "path": [WETH, USDC],
            "to": RECIPIENT,
            "deadline": NOW + 300,
        }

    def test_path_exact_output_call(self, cp_adapter, cp_venue, ledger):
        """A path exact-output swap passes the path input first."""
        fund_adapter(ledger, cp_adapter, WETH, 1_000)

        cp_adapter.swap_exact_output_path(
            [WETH, DAI, USDC], 1_000, 300, RECIPIENT, b"", context=make_context()
        )

        call = cp_venue.last_call
        assert call.method == "swap_tokens_for_exact_tokens"
        assert call.args["path"] == [WETH, DAI, USDC]
        assert call.args["amount_out"] == 300
        assert call.args["amount_in_max"] == 1_000

    def test_four_token_path(self, cp_adapter, cp_venue, ledger):
        """Longer paths pass straight through; the last amount is the output."""
        cp_venue.rate = 3
        fund_adapter(ledger, cp_adapter, WETH, 10)

        amount_out = cp_adapter.swap_exact_input_path(
            [WETH, USDC, DAI, WBTC], 10, 0, RECIPIENT, b"", context=make_context()
        )

        assert amount_out == 270
        assert cp_venue.last_call.args["path"] == [WETH, USDC, DAI, WBTC]


class TestAuxData:
    """Single hops take no aux data; paths take an optional deadline."""

    def test_single_hop_rejects_aux(self, cp_adapter, cp_venue, ledger):
        """Any aux payload on a single-hop swap is malformed."""
        fund_adapter(ledger, cp_adapter, WETH, 10)

        with pytest.raises(MalformedAuxData) as exc_info:
            cp_adapter.swap_exact_input(
                WETH, USDC, 10, 0, RECIPIENT, encode_deadline(NOW + 5), context=make_context()
            )

        assert exc_info.value.operation == "swap_exact_input"
        assert cp_venue.calls == []

    def test_path_deadline(self, cp_adapter, cp_venue, ledger):
        """A path swap honors an explicit deadline."""
        fund_adapter(ledger, cp_adapter, WETH, 10)

        cp_adapter.swap_exact_input_path(
            [WETH, USDC], 10, 0, RECIPIENT, encode_deadline(NOW + 5), context=make_context()
        )

        assert cp_venue.last_call.args["deadline"] == NOW + 5

    def test_path_rejects_other_grammar(self, cp_adapter, ledger):
        """A fee-tier payload is not a deadline payload."""
        fund_adapter(ledger, cp_adapter, WETH, 10)

        with pytest.raises(MalformedAuxData):
            cp_adapter.swap_exact_input_path(
                [WETH, USDC],
                10,
                0,
                RECIPIENT,
                encode_fee_tier(3000) + b"\x00",
                context=make_context(),
            )

    def test_short_path(self, cp_adapter, ledger):
        """A one-token path is invalid."""
        with pytest.raises(InvalidPath) as exc_info:
            cp_adapter.swap_exact_input_path([WETH], 10, 0, RECIPIENT, b"", context=make_context())

        assert exc_info.value.operation == "swap_exact_input_path"
