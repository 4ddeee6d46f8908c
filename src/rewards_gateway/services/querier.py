"""Distribution queries against a Cosmos REST (LCD) endpoint.

Used by the delegator rewards endpoint to find every validator a
delegator can withdraw rewards from.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from rewards_gateway.config import get_settings
from rewards_gateway.errors import AddressDecodeError, QueryError
from rewards_gateway.types.address import AccAddress, ValAddress

logger = logging.getLogger(__name__)

DELEGATOR_VALIDATORS_PATH = "/cosmos/distribution/v1beta1/delegators/{delegator}/validators"


class RewardsQuerier(ABC):
    """Chain state queries needed to build withdrawal messages."""

    @abstractmethod
    async def delegator_validators(self, delegator: AccAddress) -> list[ValAddress]:
        """Validators the delegator has delegations (and thus rewards) with.

        Raises:
            QueryError: If the query fails or returns malformed data
        """
        pass


class LcdRewardsQuerier(RewardsQuerier):
    """Queries distribution state over the Cosmos REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.lcd_url).rstrip("/")
        self.timeout = timeout or settings.lcd_timeout
        self._transport = transport

    async def delegator_validators(self, delegator: AccAddress) -> list[ValAddress]:
        url = self.base_url + DELEGATOR_VALIDATORS_PATH.format(delegator=delegator)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"LCD query failed for {delegator}: {e}")
            raise QueryError(f"failed to query delegator validators: {e}")

        if response.status_code != 200:
            logger.error(
                f"LCD query for {delegator} returned {response.status_code}: {response.text[:200]}"
            )
            raise QueryError(
                f"failed to query delegator validators: HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError:
            raise QueryError("failed to query delegator validators: invalid JSON response")

        entries = data.get("validators") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise QueryError("failed to query delegator validators: missing 'validators' list")

        validators = []
        for entry in entries:
            try:
                validators.append(ValAddress.from_bech32(str(entry)))
            except AddressDecodeError as e:
                raise QueryError(f"chain returned an invalid validator address: {e}")

        logger.debug(f"Delegator {delegator} has {len(validators)} validator(s)")
        return validators
