"""Unit tests for AdapterRegistry."""

import pytest

from swap_router.errors import UnknownAdapter
from swap_router.models.types import ZERO_ADDRESS
from swap_router.routing import AdapterRegistry
from tests.helpers import BOB, CP_ADAPTER, FEE_TIER_ADAPTER


class TestAdapterRegistry:
    """Tests for registration, approval and lookup."""

    def test_register_approved(self, cp_adapter):
        """A newly approved adapter can be looked up by identity."""
        registry = AdapterRegistry()

        entry = registry.set_approval(cp_adapter, True)

        assert entry.approved is True
        assert registry.get_approved(CP_ADAPTER) is cp_adapter
        assert registry.is_approved(CP_ADAPTER)
        assert len(registry) == 1

    def test_register_unapproved(self, cp_adapter):
        """Registering without approval keeps the adapter unusable."""
        registry = AdapterRegistry()
        registry.set_approval(cp_adapter, False)

        assert CP_ADAPTER in registry
        assert not registry.is_approved(CP_ADAPTER)
        with pytest.raises(UnknownAdapter, match="not an approved adapter"):
            registry.get_approved(CP_ADAPTER)

    def test_update_keeps_single_entry(self, cp_adapter):
        """Re-approving updates the existing entry."""
        registry = AdapterRegistry()
        registry.set_approval(cp_adapter, False)
        registry.set_approval(cp_adapter, True)

        assert len(registry) == 1
        assert registry.entries()[CP_ADAPTER].approved is True

    @pytest.mark.parametrize("adapter_id", [None, "", ZERO_ADDRESS])
    def test_zero_identity(self, adapter_id):
        """Missing and zero identities are unknown."""
        with pytest.raises(UnknownAdapter, match="zero address"):
            AdapterRegistry().get_approved(adapter_id)

    def test_unregistered_identity(self, cp_adapter):
        """Identities never registered are unknown."""
        registry = AdapterRegistry()
        registry.set_approval(cp_adapter, True)

        with pytest.raises(UnknownAdapter):
            registry.get_approved(BOB)

    def test_entries_is_a_snapshot(self, cp_adapter, fee_tier_adapter):
        """Mutating the returned mapping does not touch the registry."""
        registry = AdapterRegistry()
        registry.set_approval(cp_adapter, True)
        registry.set_approval(fee_tier_adapter, False)

        snapshot = registry.entries()
        snapshot.clear()

        assert set(registry.entries()) == {CP_ADAPTER, FEE_TIER_ADAPTER}

    def test_contains_ignores_non_strings(self):
        """Membership checks with non-string keys are simply false."""
        assert 42 not in AdapterRegistry()

    def test_get_returns_unapproved_entry(self, cp_adapter):
        """get finds registered adapters regardless of approval."""
        registry = AdapterRegistry()
        registry.set_approval(cp_adapter, False)

        entry = registry.get(CP_ADAPTER)

        assert entry.adapter is cp_adapter
        assert entry.approved is False

    @pytest.mark.parametrize("adapter_id", [None, ZERO_ADDRESS, BOB])
    def test_get_unknown(self, adapter_id):
        """get rejects missing, zero and unregistered identities."""
        with pytest.raises(UnknownAdapter):
            AdapterRegistry().get(adapter_id)
