"""Unit tests for RouterSettings and router construction from settings."""

import logging

import pytest

from swap_router.models.types import ZERO_ADDRESS
from swap_router.routing import create_router
from swap_router.settings import DEFAULT_OWNER, DEFAULT_ROUTER_ADDRESS, RouterSettings
from tests.helpers import ALICE, BOB, OWNER


class TestFromEnv:
    """Tests for RouterSettings.from_env."""

    def test_defaults(self):
        """An empty environment yields the documented defaults."""
        settings = RouterSettings.from_env({})

        assert settings == RouterSettings()
        assert settings.address == DEFAULT_ROUTER_ADDRESS
        assert settings.owner == DEFAULT_OWNER
        assert settings.deadline_window == 300
        assert settings.port == 8000
        assert settings.debug is False

    def test_values_parsed(self):
        """Every variable is read and converted."""
        settings = RouterSettings.from_env(
            {
                "SWAP_ROUTER_ADDRESS": ALICE.upper().replace("0X", "0x"),
                "SWAP_ROUTER_OWNER": OWNER,
                "SWAP_ROUTER_FEE_BPS": "25",
                "SWAP_ROUTER_FEE_RECEIVER": BOB,
                "SWAP_ROUTER_DEADLINE_WINDOW": "90",
                "SWAP_ROUTER_HOST": "127.0.0.1",
                "SWAP_ROUTER_PORT": "9000",
                "SWAP_ROUTER_DEBUG": "yes",
                "SWAP_ROUTER_LOG_LEVEL": "DEBUG",
            }
        )

        assert settings.address == ALICE
        assert settings.owner == OWNER
        assert settings.fee_bps == 25
        assert settings.fee_receiver == BOB
        assert settings.deadline_window == 90
        assert settings.host == "127.0.0.1"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_level == "debug"

    def test_invalid_owner(self):
        """A malformed owner address is rejected."""
        with pytest.raises(ValueError):
            RouterSettings.from_env({"SWAP_ROUTER_OWNER": "0x1234"})


class TestDerivedValues:
    """Tests for values computed from settings."""

    def test_fee_receiver_defaults_to_owner(self):
        """Without an explicit receiver, fees go to the owner."""
        config = RouterSettings(owner=OWNER, fee_bps=10).fee_config()

        assert config.fee_receiver == OWNER
        assert config.fee_bps == 10

    def test_explicit_fee_receiver(self):
        """An explicit receiver is used as given."""
        assert RouterSettings(fee_receiver=BOB).fee_config().fee_receiver == BOB

    def test_zero_fee_receiver_falls_back_to_owner(self):
        """A zero receiver is treated as unset."""
        config = RouterSettings(owner=OWNER, fee_receiver=ZERO_ADDRESS).fee_config()

        assert config.fee_receiver == OWNER

    @pytest.mark.parametrize(
        "name,level",
        [("debug", logging.DEBUG), ("warning", logging.WARNING), ("verbose", logging.INFO)],
    )
    def test_log_level_value(self, name, level):
        """Level names map to logging levels, unknown names to INFO."""
        assert RouterSettings(log_level=name).log_level_value == level


class TestCreateRouter:
    """Tests for create_router."""

    def test_router_from_settings(self):
        """The router takes its address, owner, fee and window from settings."""
        settings = RouterSettings(address=ALICE, owner=OWNER, fee_bps=5, deadline_window=45)

        router = create_router(settings)

        assert router.address == ALICE
        assert router.fee_config.fee_bps == 5
        assert router.fee_config.fee_receiver == OWNER
        assert router.deadline_window == 45
        assert router.authorizer.is_authorized(OWNER)
        assert not router.authorizer.is_authorized(BOB)
        assert len(router.registry) == 0
