"""Registry of venue adapters the router may dispatch to.

Adapters are looked up by identity (their own address). The registry is a
closed, explicit map: a new venue is supported by registering an adapter
instance, never by reflection or dynamic lookup.
"""

from __future__ import annotations

from dataclasses import dataclass

from swap_router.adapters.base import VenueAdapter
from swap_router.errors import UnknownAdapter
from swap_router.models.types import is_zero_address, normalize_address


@dataclass
class AdapterEntry:
    """A registered adapter and its approval flag."""

    adapter: VenueAdapter
    approved: bool


class AdapterRegistry:
    """Maps adapter identity to {adapter, approved}.

    Usage:
        registry = AdapterRegistry()
        registry.set_approval(adapter, approved=True)

        # Later, in dispatch:
        adapter = registry.get_approved(adapter_id)  # raises UnknownAdapter
    """

    def __init__(self) -> None:
        self._entries: dict[str, AdapterEntry] = {}

    def set_approval(self, adapter: VenueAdapter, approved: bool) -> AdapterEntry:
        """Register adapter if new, and set its approval flag.

        Args:
            adapter: The adapter instance; its address is its identity
            approved: Whether dispatch to this adapter is allowed

        Returns:
            The updated registry entry
        """
        adapter_id = normalize_address(adapter.address)
        entry = self._entries.get(adapter_id)
        if entry is None:
            entry = AdapterEntry(adapter=adapter, approved=approved)
            self._entries[adapter_id] = entry
        else:
            entry.adapter = adapter
            entry.approved = approved
        return entry

    def get_approved(self, adapter_id: str | None) -> VenueAdapter:
        """Return the adapter registered as approved under adapter_id.

        Raises:
            UnknownAdapter: If adapter_id is zero, unknown, or not approved
        """
        entry = self.get(adapter_id)
        if not entry.approved:
            raise UnknownAdapter(f"adapter {adapter_id} is not an approved adapter")
        return entry.adapter

    def get(self, adapter_id: str | None) -> AdapterEntry:
        """Return the entry registered under adapter_id, approved or not.

        Raises:
            UnknownAdapter: If adapter_id is zero or was never registered
        """
        if adapter_id is None or is_zero_address(adapter_id):
            raise UnknownAdapter("adapter identity cannot be the zero address")
        entry = self._entries.get(normalize_address(adapter_id))
        if entry is None:
            raise UnknownAdapter(f"adapter {adapter_id} is not registered")
        return entry

    def is_approved(self, adapter_id: str) -> bool:
        entry = self._entries.get(normalize_address(adapter_id))
        return entry is not None and entry.approved

    def entries(self) -> dict[str, AdapterEntry]:
        """Snapshot of all registered adapters, approved or not."""
        return dict(self._entries)

    def __contains__(self, adapter_id: object) -> bool:
        return isinstance(adapter_id, str) and normalize_address(adapter_id) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["AdapterEntry", "AdapterRegistry"]
