"""Request-to-transaction pipeline shared by the withdrawal endpoints."""

from rewards_gateway.pipeline.builders import (
    DelegationRewardBuilder,
    DelegatorRewardsBuilder,
    MessageBuilder,
    ValidatorRewardsBuilder,
)
from rewards_gateway.pipeline.dispatcher import Dispatcher
from rewards_gateway.pipeline.pipeline import WithdrawPipeline, error_response
from rewards_gateway.pipeline.policy import Endpoint, ErrorStatusPolicy, build_policy
from rewards_gateway.pipeline.results import StepResult

__all__ = [
    "DelegationRewardBuilder",
    "DelegatorRewardsBuilder",
    "MessageBuilder",
    "ValidatorRewardsBuilder",
    "Dispatcher",
    "WithdrawPipeline",
    "error_response",
    "Endpoint",
    "ErrorStatusPolicy",
    "build_policy",
    "StepResult",
]
