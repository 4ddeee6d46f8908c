"""Error taxonomy for the withdrawal pipeline.

Every failure is terminal for the request. The HTTP status for each class
is decided by the pipeline's ErrorStatusPolicy, not by the exception.
"""

from typing import Optional


class GatewayError(Exception):
    """Base class for all request pipeline failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DecodeError(GatewayError):
    """Request body is not valid JSON or does not match the envelope shape."""
    pass


class ValidationError(GatewayError):
    """Envelope or message failed structural validation."""
    pass


class AddressDecodeError(GatewayError):
    """Address text could not be decoded to a typed address."""
    pass


class BuildError(GatewayError):
    """Messages could not be built from chain state."""
    pass


class QueryError(BuildError):
    """Query against the chain REST endpoint failed."""
    pass


class BroadcastError(GatewayError):
    """Sign-and-broadcast collaborator reported a failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
