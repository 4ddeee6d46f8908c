"""Base interface for the sign-and-broadcast collaborator.

Broadcast flow (all outside this service's control):
1. Resolve the signing key named by base_req.from
2. Sign the transaction built from the messages
3. Submit it to the network
4. Report the node's answer

The gateway calls sign_and_broadcast exactly once per request and never
retries it.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum

from rewards_gateway.contracts.base_request import BaseReq
from rewards_gateway.contracts.transactions import BroadcastResult
from rewards_gateway.types.msgs import Msg

logger = logging.getLogger(__name__)


class BroadcasterType(str, Enum):
    """Type of broadcast backend."""
    DRY_RUN = "dry_run"              # Nothing leaves the process
    SIGNING_SERVICE = "signing_service"  # External signer over HTTP


class Broadcaster(ABC):
    """Abstract base class for sign-and-broadcast backends."""

    def __init__(self, broadcaster_type: BroadcasterType):
        self.broadcaster_type = broadcaster_type

    @abstractmethod
    async def sign_and_broadcast(self, base_req: BaseReq, msgs: list[Msg]) -> BroadcastResult:
        """Sign and submit a transaction.

        Args:
            base_req: Validated request envelope (key name, fees, sequence, ...)
            msgs: Messages to include, in order

        Returns:
            BroadcastResult reported by the backend

        Raises:
            BroadcastError: If the backend rejects or cannot be reached
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.broadcaster_type.value})"
