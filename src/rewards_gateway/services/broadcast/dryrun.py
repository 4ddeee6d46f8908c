"""Dry-run broadcaster for development and testing (nothing is sent)."""

import hashlib
import json
import logging

from rewards_gateway.contracts.base_request import BaseReq
from rewards_gateway.contracts.transactions import BroadcastResult
from rewards_gateway.services.broadcast.base import Broadcaster, BroadcasterType
from rewards_gateway.types.msgs import Msg

logger = logging.getLogger(__name__)


class DryRunBroadcaster(Broadcaster):
    """Returns a deterministic fake tx hash instead of broadcasting."""

    def __init__(self):
        super().__init__(BroadcasterType.DRY_RUN)

    async def sign_and_broadcast(self, base_req: BaseReq, msgs: list[Msg]) -> BroadcastResult:
        payload = json.dumps(
            {
                "chain_id": base_req.chain_id,
                "from": base_req.from_,
                "sequence": base_req.sequence,
                "msgs": [msg.to_amino() for msg in msgs],
            },
            sort_keys=True,
        )
        txhash = hashlib.sha256(payload.encode()).hexdigest().upper()

        logger.info(
            f"[DRY RUN] Broadcast of {len(msgs)} msg(s) from {base_req.from_} "
            f"on {base_req.chain_id or '(no chain)'}: {txhash}"
        )

        return BroadcastResult(
            txhash=txhash,
            raw_log="dry run: transaction was not broadcast",
            dry_run=True,
        )
