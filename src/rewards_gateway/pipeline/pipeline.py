"""Generic withdrawal request pipeline.

decode -> sanitize -> validate -> resolve path addresses -> build -> dispatch

The first failing step writes the error response and ends the request.
Only this module turns errors into HTTP responses.
"""

import logging
from typing import Mapping

from fastapi.responses import JSONResponse

from rewards_gateway.errors import GatewayError
from rewards_gateway.pipeline.builders import MessageBuilder
from rewards_gateway.pipeline.decoder import decode_withdraw_request, validate_base_request
from rewards_gateway.pipeline.dispatcher import Dispatcher
from rewards_gateway.pipeline.policy import ErrorStatusPolicy
from rewards_gateway.pipeline.resolver import resolve_address

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


class WithdrawPipeline:
    """Runs one request through the shared pipeline with a pluggable builder."""

    def __init__(
        self,
        builder: MessageBuilder,
        dispatcher: Dispatcher,
        policy: ErrorStatusPolicy,
    ):
        self.builder = builder
        self.dispatcher = dispatcher
        self.policy = policy

    def _fail(self, error: GatewayError) -> JSONResponse:
        status = self.policy.status_for(self.builder.endpoint, error)
        if status >= 500:
            logger.error(f"{self.builder.endpoint.value} failed ({status}): {error.message}")
        else:
            logger.info(f"{self.builder.endpoint.value} rejected ({status}): {error.message}")
        return error_response(status, error.message)

    async def run(self, body: bytes, path_params: Mapping[str, str]) -> JSONResponse:
        decoded = decode_withdraw_request(body)
        if not decoded.ok:
            return self._fail(decoded.error)

        validated = validate_base_request(decoded.unwrap().base_req.sanitize())
        if not validated.ok:
            return self._fail(validated.error)
        base_req = validated.unwrap()

        resolved = {}
        for name, address_cls in self.builder.path_vars:
            result = resolve_address(path_params, name, address_cls)
            if not result.ok:
                return self._fail(result.error)
            resolved[name] = result.unwrap()

        try:
            msgs = await self.builder.build(resolved)
        except GatewayError as e:
            return self._fail(e)

        try:
            outcome = await self.dispatcher.dispatch(base_req, msgs)
        except GatewayError as e:
            return self._fail(e)

        return JSONResponse(status_code=200, content=outcome.model_dump(mode="json"))
