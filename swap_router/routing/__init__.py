"""Router, adapter registry, and authorization gate."""

from swap_router.routing.auth import Authorizer, OwnerAuthorizer
from swap_router.routing.registry import AdapterEntry, AdapterRegistry
from swap_router.routing.router import (
    Router,
    create_router,
    validate_deadline_window,
)

__all__ = [
    "Authorizer",
    "OwnerAuthorizer",
    "AdapterEntry",
    "AdapterRegistry",
    "Router",
    "create_router",
    "validate_deadline_window",
]
