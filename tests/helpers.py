"""Shared test doubles and address helpers."""

from typing import Optional

from rewards_gateway.contracts.base_request import BaseReq
from rewards_gateway.contracts.transactions import BroadcastResult
from rewards_gateway.errors import QueryError
from rewards_gateway.services.broadcast import Broadcaster, BroadcasterType
from rewards_gateway.services.querier import RewardsQuerier
from rewards_gateway.types.address import AccAddress, ValAddress
from rewards_gateway.types.msgs import Msg


def make_acc(seed: int) -> AccAddress:
    return AccAddress(bytes([seed] * 20))


def make_val(seed: int) -> ValAddress:
    return ValAddress(bytes([seed] * 20))


class FakeQuerier(RewardsQuerier):
    """Querier returning canned validators, or failing."""

    def __init__(self, validators: Optional[list[ValAddress]] = None, error: Optional[str] = None):
        self.validators = validators or []
        self.error = error
        self.calls: list[AccAddress] = []

    async def delegator_validators(self, delegator: AccAddress) -> list[ValAddress]:
        self.calls.append(delegator)
        if self.error:
            raise QueryError(self.error)
        return list(self.validators)


class RecordingBroadcaster(Broadcaster):
    """Broadcaster that records calls instead of broadcasting."""

    def __init__(self):
        super().__init__(BroadcasterType.DRY_RUN)
        self.calls: list[tuple[BaseReq, list[Msg]]] = []

    async def sign_and_broadcast(self, base_req: BaseReq, msgs: list[Msg]) -> BroadcastResult:
        self.calls.append((base_req, msgs))
        return BroadcastResult(height="42", txhash="ABCDEF", raw_log="[]")
