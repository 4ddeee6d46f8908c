"""Sign-and-broadcast backends."""

from rewards_gateway.services.broadcast.base import Broadcaster, BroadcasterType
from rewards_gateway.services.broadcast.factory import get_broadcaster, reset_broadcaster

__all__ = [
    "Broadcaster",
    "BroadcasterType",
    "get_broadcaster",
    "reset_broadcaster",
]
