"""Tests for distribution messages and the per-endpoint message builders."""

import dataclasses

import pytest

from rewards_gateway.errors import BuildError, QueryError, ValidationError
from rewards_gateway.pipeline.builders import (
    DelegationRewardBuilder,
    DelegatorRewardsBuilder,
    ValidatorRewardsBuilder,
    withdraw_validator_rewards_and_commission,
)
from rewards_gateway.types.address import AccAddress, ValAddress
from rewards_gateway.types.msgs import (
    MsgWithdrawDelegatorReward,
    MsgWithdrawValidatorCommission,
)

from helpers import FakeQuerier, make_acc, make_val


class TestMessages:
    """Message structure and self-validation."""

    def test_withdraw_delegator_reward_amino(self):
        delegator, validator = make_acc(1), make_val(2)
        msg = MsgWithdrawDelegatorReward(delegator, validator)

        assert msg.route() == "distr"
        assert msg.type() == "withdraw_delegator_reward"
        assert msg.get_signers() == [delegator]
        assert msg.to_amino() == {
            "type": "cosmos-sdk/MsgWithdrawDelegationReward",
            "value": {
                "delegator_address": delegator.to_bech32(),
                "validator_address": validator.to_bech32(),
            },
        }
        msg.validate_basic()

    def test_withdraw_commission_signer_is_operator_account(self):
        validator = make_val(2)
        msg = MsgWithdrawValidatorCommission(validator)

        assert msg.type() == "withdraw_validator_commission"
        assert msg.get_signers() == [AccAddress(validator.raw)]
        assert msg.to_amino()["type"] == "cosmos-sdk/MsgWithdrawValidatorCommission"

    def test_empty_addresses_fail_validation(self):
        with pytest.raises(ValidationError, match="delegator address is nil"):
            MsgWithdrawDelegatorReward(AccAddress(b""), make_val(1)).validate_basic()

        with pytest.raises(ValidationError, match="validator address is nil"):
            MsgWithdrawDelegatorReward(make_acc(1), ValAddress(b"")).validate_basic()

        with pytest.raises(ValidationError, match="validator address is nil"):
            MsgWithdrawValidatorCommission(ValAddress(b"")).validate_basic()

    def test_messages_are_immutable(self):
        msg = MsgWithdrawDelegatorReward(make_acc(1), make_val(2))

        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.validator_address = make_val(3)


class TestDelegatorRewardsBuilder:
    """All rewards of a delegator."""

    @pytest.mark.asyncio
    async def test_one_message_per_validator(self, validators):
        querier = FakeQuerier(validators)
        delegator = make_acc(7)

        msgs = await DelegatorRewardsBuilder(querier).build({"delegatorAddr": delegator})

        assert querier.calls == [delegator]
        assert [m.validator_address for m in msgs] == validators
        assert all(m.delegator_address == delegator for m in msgs)

    @pytest.mark.asyncio
    async def test_no_delegations_builds_nothing(self):
        msgs = await DelegatorRewardsBuilder(FakeQuerier([])).build({"delegatorAddr": make_acc(7)})

        assert msgs == []

    @pytest.mark.asyncio
    async def test_query_failure_is_build_error(self):
        builder = DelegatorRewardsBuilder(FakeQuerier(error="node unreachable"))

        with pytest.raises(BuildError, match="node unreachable") as exc_info:
            await builder.build({"delegatorAddr": make_acc(7)})
        assert isinstance(exc_info.value, QueryError)


class TestDelegationRewardBuilder:
    """Single delegation rewards."""

    @pytest.mark.asyncio
    async def test_builds_exactly_one_message(self):
        delegator, validator = make_acc(1), make_val(2)

        msgs = await DelegationRewardBuilder().build(
            {"delegatorAddr": delegator, "validatorAddr": validator}
        )

        assert msgs == [MsgWithdrawDelegatorReward(delegator, validator)]

    @pytest.mark.asyncio
    async def test_invalid_message_raises_validation_error(self):
        with pytest.raises(ValidationError):
            await DelegationRewardBuilder().build(
                {"delegatorAddr": AccAddress(b""), "validatorAddr": make_val(2)}
            )


class TestValidatorRewardsBuilder:
    """Validator rewards plus commission."""

    @pytest.mark.asyncio
    async def test_builds_reward_and_commission(self):
        validator = make_val(3)

        msgs = await ValidatorRewardsBuilder().build({"validatorAddr": validator})

        assert msgs == [
            MsgWithdrawDelegatorReward(AccAddress(validator.raw), validator),
            MsgWithdrawValidatorCommission(validator),
        ]

    def test_empty_validator_is_build_error(self):
        with pytest.raises(BuildError, match="nil"):
            withdraw_validator_rewards_and_commission(ValAddress(b""))
