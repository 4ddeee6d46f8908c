"""Tagged step results.

A StepResult holds either a value or the error that ended the request.
unwrap() raises the carried error, so a failed step's value can never be
used by accident.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from rewards_gateway.errors import GatewayError

T = TypeVar("T")


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Outcome of a single pipeline step."""

    value: Optional[T] = None
    error: Optional[GatewayError] = None

    @classmethod
    def success(cls, value: T) -> "StepResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GatewayError) -> "StepResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
