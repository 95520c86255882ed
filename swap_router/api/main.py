"""FastAPI application for the swap router.

The app serves one prepared Router: build it (create_router, then register
adapters and fund the ledger), then pass it to create_app or serve.

Note: Authentication of API callers is not implemented at the application
level. The ``caller`` field of a request body is trusted as given; deploy
behind a gateway that binds it to the authenticated identity.
"""

import structlog
import uvicorn
from fastapi import FastAPI

from swap_router import __version__
from swap_router.api.endpoints import router
from swap_router.routing.router import Router
from swap_router.settings import RouterSettings

logger = structlog.get_logger()


async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def create_app(swap_router: Router, *, debug: bool = False) -> FastAPI:
    """Create the API app serving swap_router.

    Endpoints reach the router through the get_router dependency, which
    reads it from ``app.state.router``.
    """
    app = FastAPI(
        title="Swap Router",
        description="Routes swap requests to pluggable exchange venue adapters",
        version=__version__,
        debug=debug,
    )
    app.state.router = swap_router
    app.include_router(router)
    app.get("/health")(health)
    return app


def configure_logging(settings: RouterSettings) -> None:
    """Configure structlog console output at the configured level."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_value),
    )


def serve(swap_router: Router, settings: RouterSettings | None = None) -> None:
    """Run the API server for a prepared router.

    Configuration via environment variables (see swap_router.settings):
    - SWAP_ROUTER_HOST: Host to bind to (default: 0.0.0.0)
    - SWAP_ROUTER_PORT: Port to bind to (default: 8000)
    - SWAP_ROUTER_DEBUG: Enable FastAPI debug mode (default: false)
    - SWAP_ROUTER_LOG_LEVEL: Minimum log level (default: info)
    """
    settings = settings or RouterSettings.from_env()
    configure_logging(settings)
    logger.info(
        "serving_router",
        address=swap_router.address,
        adapters=len(swap_router.registry),
        host=settings.host,
        port=settings.port,
    )
    uvicorn.run(
        create_app(swap_router, debug=settings.debug),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
