"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rewards_gateway import __version__
from rewards_gateway.config import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Rewards Gateway API",
        description="Staking reward withdrawal transactions for Cosmos chains",
        version=__version__,
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from rewards_gateway.api.routers import distribution
    from rewards_gateway.api.routes import health

    app.include_router(health.router, tags=["Health"])
    app.include_router(distribution.router)

    logger.debug(f"Application created for chain {settings.chain_id}")
    return app
