"""Message builders, one per withdrawal endpoint.

A builder names the path variables it needs and turns the resolved
addresses into the messages to dispatch.
"""

import logging
from abc import ABC, abstractmethod

from rewards_gateway.errors import BuildError, ValidationError
from rewards_gateway.pipeline.policy import Endpoint
from rewards_gateway.pipeline.resolver import DELEGATOR_VAR, VALIDATOR_VAR
from rewards_gateway.services.querier import RewardsQuerier
from rewards_gateway.types.address import AccAddress, Address, ValAddress
from rewards_gateway.types.msgs import (
    Msg,
    MsgWithdrawDelegatorReward,
    MsgWithdrawValidatorCommission,
)

logger = logging.getLogger(__name__)


class MessageBuilder(ABC):
    """Builds the messages for one endpoint."""

    endpoint: Endpoint
    path_vars: tuple[tuple[str, type[Address]], ...] = ()

    @abstractmethod
    async def build(self, resolved: dict[str, Address]) -> list[Msg]:
        """Build messages from resolved path addresses.

        Raises:
            BuildError: Backend or construction failure
            ValidationError: A message failed its own validation
        """
        pass


async def withdraw_all_delegator_rewards(
    querier: RewardsQuerier, delegator: AccAddress
) -> list[Msg]:
    """One withdrawal message per validator the delegator is bonded to."""
    validators = await querier.delegator_validators(delegator)
    return [MsgWithdrawDelegatorReward(delegator, validator) for validator in validators]


def withdraw_validator_rewards_and_commission(validator: ValAddress) -> list[Msg]:
    """Self-delegation reward plus commission withdrawal for a validator.

    Raises:
        BuildError: If either message fails validation
    """
    msgs = [
        MsgWithdrawDelegatorReward(AccAddress.from_validator(validator), validator),
        MsgWithdrawValidatorCommission(validator),
    ]
    for msg in msgs:
        try:
            msg.validate_basic()
        except ValidationError as e:
            raise BuildError(e.message)
    return msgs


class DelegatorRewardsBuilder(MessageBuilder):
    """All outstanding rewards of a delegator."""

    endpoint = Endpoint.DELEGATOR_REWARDS
    path_vars = ((DELEGATOR_VAR, AccAddress),)

    def __init__(self, querier: RewardsQuerier):
        self.querier = querier

    async def build(self, resolved: dict[str, Address]) -> list[Msg]:
        delegator = resolved[DELEGATOR_VAR]
        msgs = await withdraw_all_delegator_rewards(self.querier, delegator)
        logger.info(f"Built {len(msgs)} reward withdrawal(s) for delegator {delegator}")
        return msgs


class DelegationRewardBuilder(MessageBuilder):
    """Rewards of a single delegation."""

    endpoint = Endpoint.DELEGATION_REWARDS
    path_vars = ((DELEGATOR_VAR, AccAddress), (VALIDATOR_VAR, ValAddress))

    async def build(self, resolved: dict[str, Address]) -> list[Msg]:
        msg = MsgWithdrawDelegatorReward(resolved[DELEGATOR_VAR], resolved[VALIDATOR_VAR])
        msg.validate_basic()
        return [msg]


class ValidatorRewardsBuilder(MessageBuilder):
    """Validator self-delegation rewards and commission."""

    endpoint = Endpoint.VALIDATOR_REWARDS
    path_vars = ((VALIDATOR_VAR, ValAddress),)

    async def build(self, resolved: dict[str, Address]) -> list[Msg]:
        return withdraw_validator_rewards_and_commission(resolved[VALIDATOR_VAR])
