"""Broadcaster backed by an external signing service.

The service owns the keys. This backend only forwards the envelope and
the amino messages and relays the answer:

    POST {signer_url}/txs
    {"base_req": {...}, "msgs": [{"type": ..., "value": {...}}]}
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from rewards_gateway.config import get_settings
from rewards_gateway.contracts.base_request import BaseReq
from rewards_gateway.contracts.transactions import BroadcastResult
from rewards_gateway.errors import BroadcastError
from rewards_gateway.services.broadcast.base import Broadcaster, BroadcasterType
from rewards_gateway.types.msgs import Msg

logger = logging.getLogger(__name__)


class SigningServiceBroadcaster(Broadcaster):
    """Forwards sign-and-broadcast requests to a remote signer."""

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(BroadcasterType.SIGNING_SERVICE)
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout or get_settings().signer_timeout
        self._transport = transport

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def sign_and_broadcast(self, base_req: BaseReq, msgs: list[Msg]) -> BroadcastResult:
        payload = {
            "base_req": base_req.model_dump(mode="json", by_alias=True),
            "msgs": [msg.to_amino() for msg in msgs],
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{self.base_url}/txs",
                    json=payload,
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            logger.error(f"Signing service unreachable: {e}")
            raise BroadcastError(f"signing service unreachable: {e}", status_code=502)

        if response.status_code != 200:
            detail = self._error_detail(response)
            logger.warning(f"Signing service returned {response.status_code}: {detail}")
            raise BroadcastError(detail, status_code=response.status_code)

        try:
            result = BroadcastResult.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise BroadcastError(f"invalid response from signing service: {e}", status_code=502)

        logger.info(f"Broadcast {len(msgs)} msg(s) from {base_req.from_}: {result.txhash}")
        return result

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return response.text
