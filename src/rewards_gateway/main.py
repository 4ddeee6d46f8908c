"""Main entry point - runs the REST API."""

import logging

import uvicorn

from rewards_gateway.api.app import create_app
from rewards_gateway.config import get_settings

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.debug)

    logger.info("Starting rewards gateway...")
    logger.info(f"Environment: {settings.environment}")
    if settings.dry_run:
        logger.warning("DRY_RUN enabled - broadcast requests will not reach the network")

    app = create_app()
    logger.info(f"Starting API server on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
