"""HTTP status policy for pipeline errors.

Statuses are looked up per (endpoint, error class) first, then per error
class, walking the exception's MRO so subclasses inherit their parent's
mapping.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from rewards_gateway.config import Settings, get_settings
from rewards_gateway.errors import (
    AddressDecodeError,
    BroadcastError,
    BuildError,
    DecodeError,
    GatewayError,
    ValidationError,
)


class Endpoint(str, Enum):
    """Withdrawal endpoints served by the pipeline."""
    DELEGATOR_REWARDS = "withdraw_delegator_rewards"
    DELEGATION_REWARDS = "withdraw_delegation_rewards"
    VALIDATOR_REWARDS = "withdraw_validator_rewards"


DEFAULT_STATUSES: dict[type, int] = {
    DecodeError: 400,
    ValidationError: 400,
    AddressDecodeError: 400,
    BuildError: 500,
    BroadcastError: 502,
}

FALLBACK_STATUS = 500


@dataclass
class ErrorStatusPolicy:
    """Maps pipeline errors to HTTP status codes."""

    defaults: dict[type, int] = field(default_factory=lambda: dict(DEFAULT_STATUSES))
    overrides: dict[tuple[Endpoint, type], int] = field(default_factory=dict)

    def status_for(self, endpoint: Endpoint, error: GatewayError) -> int:
        # Broadcast backends report their own status
        if isinstance(error, BroadcastError) and error.status_code:
            return error.status_code

        for cls in type(error).__mro__:
            if (endpoint, cls) in self.overrides:
                return self.overrides[(endpoint, cls)]
            if cls in self.defaults:
                return self.defaults[cls]
        return FALLBACK_STATUS


def build_policy(settings: Optional[Settings] = None) -> ErrorStatusPolicy:
    """Default policy with configured per-endpoint overrides.

    Build failures on the validator rewards endpoint default to 400 to
    match existing clients; VALIDATOR_BUILD_ERROR_STATUS=500 aligns it
    with the delegator endpoint.
    """
    settings = settings or get_settings()
    return ErrorStatusPolicy(
        overrides={
            (Endpoint.VALIDATOR_REWARDS, BuildError): settings.validator_build_error_status,
        }
    )
