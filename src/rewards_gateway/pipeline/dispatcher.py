"""Dispatcher: the single generate-vs-broadcast decision point."""

import logging
from typing import Union

from rewards_gateway.contracts.base_request import BaseReq
from rewards_gateway.contracts.transactions import BroadcastResult, UnsignedTransaction
from rewards_gateway.services.broadcast.base import Broadcaster
from rewards_gateway.services.tx_generator import TxGenerator
from rewards_gateway.types.msgs import Msg

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes built messages to the generator or the broadcaster."""

    def __init__(self, generator: TxGenerator, broadcaster: Broadcaster):
        self.generator = generator
        self.broadcaster = broadcaster

    async def dispatch(
        self, base_req: BaseReq, msgs: list[Msg]
    ) -> Union[UnsignedTransaction, BroadcastResult]:
        """Generate an unsigned tx or sign and broadcast, exactly once.

        Raises:
            ValidationError: Generate path cannot build the transaction
            BroadcastError: Broadcast collaborator failed
        """
        if base_req.generate_only:
            return self.generator.generate(base_req, msgs)

        logger.debug(f"Forwarding {len(msgs)} msg(s) to {self.broadcaster!r}")
        return await self.broadcaster.sign_and_broadcast(base_req, msgs)
