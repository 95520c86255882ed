"""Authorization gate for administrative operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from swap_router.models.types import normalize_address


@runtime_checkable
class Authorizer(Protocol):
    """Answers whether a caller may mutate router configuration.

    The router trusts this answer completely and performs no authorization
    logic of its own.
    """

    def is_authorized(self, caller: str) -> bool: ...


class OwnerAuthorizer:
    """Single-owner gate: only the configured owner is authorized."""

    def __init__(self, owner: str) -> None:
        self.owner = normalize_address(owner, validate=True)

    def is_authorized(self, caller: str) -> bool:
        return normalize_address(caller) == self.owner


__all__ = ["Authorizer", "OwnerAuthorizer"]
