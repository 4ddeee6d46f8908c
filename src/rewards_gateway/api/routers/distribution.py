"""Distribution transaction endpoints.

Each route hands the raw body and path variables to a WithdrawPipeline
configured with the endpoint's message builder. Bodies are decoded by the
pipeline itself so malformed JSON is answered with 400 {"error": ...}.
"""

import logging
from typing import Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from rewards_gateway.contracts.transactions import (
    BroadcastResult,
    ErrorResponse,
    UnsignedTransaction,
)
from rewards_gateway.pipeline import (
    DelegationRewardBuilder,
    DelegatorRewardsBuilder,
    Dispatcher,
    ErrorStatusPolicy,
    MessageBuilder,
    ValidatorRewardsBuilder,
    WithdrawPipeline,
    build_policy,
)
from rewards_gateway.services.broadcast import Broadcaster, get_broadcaster
from rewards_gateway.services.querier import LcdRewardsQuerier, RewardsQuerier
from rewards_gateway.services.tx_generator import TxGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/distribution", tags=["Distribution"])

# Unsigned tx when generate_only, broadcast outcome otherwise
WithdrawResponse = Union[UnsignedTransaction, BroadcastResult]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed body, envelope or address"},
    500: {"model": ErrorResponse, "description": "Chain query failed"},
    502: {"model": ErrorResponse, "description": "Broadcast backend failed"},
}


# Dependencies (overridable in tests)

def get_querier() -> RewardsQuerier:
    return LcdRewardsQuerier()


def get_tx_generator() -> TxGenerator:
    return TxGenerator()


def get_policy() -> ErrorStatusPolicy:
    return build_policy()


def get_dispatcher(
    generator: TxGenerator = Depends(get_tx_generator),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> Dispatcher:
    return Dispatcher(generator, broadcaster)


async def _run(
    builder: MessageBuilder,
    request: Request,
    dispatcher: Dispatcher,
    policy: ErrorStatusPolicy,
) -> JSONResponse:
    body = await request.body()
    pipeline = WithdrawPipeline(builder, dispatcher, policy)
    return await pipeline.run(body, request.path_params)


@router.post(
    "/delegators/{delegatorAddr}/rewards",
    response_model=WithdrawResponse,
    responses=ERROR_RESPONSES,
)
async def withdraw_delegator_rewards(
    request: Request,
    querier: RewardsQuerier = Depends(get_querier),
    dispatcher: Dispatcher = Depends(get_dispatcher),
    policy: ErrorStatusPolicy = Depends(get_policy),
) -> JSONResponse:
    """Withdraw all rewards of a delegator, one message per validator."""
    return await _run(DelegatorRewardsBuilder(querier), request, dispatcher, policy)


@router.post(
    "/delegators/{delegatorAddr}/rewards/{validatorAddr}",
    response_model=WithdrawResponse,
    responses=ERROR_RESPONSES,
)
async def withdraw_delegation_rewards(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    policy: ErrorStatusPolicy = Depends(get_policy),
) -> JSONResponse:
    """Withdraw the rewards of a single delegation."""
    return await _run(DelegationRewardBuilder(), request, dispatcher, policy)


@router.post(
    "/validators/{validatorAddr}/rewards",
    response_model=WithdrawResponse,
    responses=ERROR_RESPONSES,
)
async def withdraw_validator_rewards(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    policy: ErrorStatusPolicy = Depends(get_policy),
) -> JSONResponse:
    """Withdraw a validator's self-delegation rewards and commission."""
    return await _run(ValidatorRewardsBuilder(), request, dispatcher, policy)
