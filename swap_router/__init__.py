"""Multi-venue swap router."""

from swap_router.routing.router import Router, create_router

__version__ = "0.1.0"
__all__ = ["Router", "create_router", "__version__"]
