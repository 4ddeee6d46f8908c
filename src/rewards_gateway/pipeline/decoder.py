"""Request body decoding and envelope validation."""

import logging

from pydantic import ValidationError as PydanticValidationError

from rewards_gateway.contracts.base_request import BaseReq, WithdrawRewardsReq
from rewards_gateway.errors import DecodeError, ValidationError
from rewards_gateway.pipeline.results import StepResult

logger = logging.getLogger(__name__)


def _format_errors(error: PydanticValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def decode_withdraw_request(body: bytes) -> StepResult[WithdrawRewardsReq]:
    """Decode a JSON body into the withdrawal request envelope."""
    try:
        return StepResult.success(WithdrawRewardsReq.model_validate_json(body or b""))
    except PydanticValidationError as e:
        logger.debug(f"Rejected request body: {e}")
        return StepResult.failure(DecodeError(f"failed to decode request body: {_format_errors(e)}"))


def validate_base_request(base_req: BaseReq) -> StepResult[BaseReq]:
    """Run BaseReq.validate_basic and tag the outcome.

    The envelope is expected to be sanitized already.
    """
    try:
        base_req.validate_basic()
    except ValidationError as e:
        return StepResult.failure(e)
    return StepResult.success(base_req)
