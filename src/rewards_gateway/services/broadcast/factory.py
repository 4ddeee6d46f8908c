"""Broadcaster factory.

Creates the appropriate broadcast backend based on configuration.
"""

import logging
from typing import Optional

from rewards_gateway.config import get_settings
from rewards_gateway.services.broadcast.base import Broadcaster, BroadcasterType

logger = logging.getLogger(__name__)

_broadcaster_instance: Optional[Broadcaster] = None


def get_broadcaster_type() -> BroadcasterType:
    """Determine which broadcaster to use.

    DRY_RUN=true (default) always wins; otherwise SIGNER_URL must be set.
    """
    settings = get_settings()
    if settings.dry_run:
        return BroadcasterType.DRY_RUN
    if not settings.signer_url:
        logger.warning("DRY_RUN is disabled but SIGNER_URL is not set - using dry-run broadcaster")
        return BroadcasterType.DRY_RUN
    return BroadcasterType.SIGNING_SERVICE


def get_broadcaster() -> Broadcaster:
    """Get the configured broadcaster instance (singleton)."""
    global _broadcaster_instance

    if _broadcaster_instance is not None:
        return _broadcaster_instance

    broadcaster_type = get_broadcaster_type()
    logger.info(f"Initializing {broadcaster_type.value} broadcaster")

    if broadcaster_type == BroadcasterType.SIGNING_SERVICE:
        from rewards_gateway.services.broadcast.signing_service import SigningServiceBroadcaster

        settings = get_settings()
        _broadcaster_instance = SigningServiceBroadcaster(
            base_url=settings.signer_url,
            token=settings.signer_token,
        )
    else:
        from rewards_gateway.services.broadcast.dryrun import DryRunBroadcaster
        _broadcaster_instance = DryRunBroadcaster()

    return _broadcaster_instance


def reset_broadcaster() -> None:
    """Reset the broadcaster instance (for testing)."""
    global _broadcaster_instance
    _broadcaster_instance = None
