"""Distribution module transaction messages.

Messages are immutable once built. Each one validates its own structure
independently of the request envelope.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rewards_gateway.errors import ValidationError
from rewards_gateway.types.address import AccAddress, ValAddress

ROUTER_KEY = "distr"


class Msg(ABC):
    """Abstract transaction message."""

    AMINO_NAME: str = ""

    def route(self) -> str:
        return ROUTER_KEY

    @abstractmethod
    def type(self) -> str:
        pass

    @abstractmethod
    def validate_basic(self) -> None:
        """Raise ValidationError if the message is malformed."""
        pass

    @abstractmethod
    def get_signers(self) -> list[AccAddress]:
        pass

    @abstractmethod
    def value(self) -> dict:
        pass

    def to_amino(self) -> dict:
        """Amino JSON form used in StdTx documents."""
        return {"type": self.AMINO_NAME, "value": self.value()}


@dataclass(frozen=True)
class MsgWithdrawDelegatorReward(Msg):
    """Withdraw a delegator's rewards from a single validator."""

    delegator_address: AccAddress
    validator_address: ValAddress

    AMINO_NAME = "cosmos-sdk/MsgWithdrawDelegationReward"

    def type(self) -> str:
        return "withdraw_delegator_reward"

    def validate_basic(self) -> None:
        if self.delegator_address.empty():
            raise ValidationError("delegator address is nil")
        if self.validator_address.empty():
            raise ValidationError("validator address is nil")

    def get_signers(self) -> list[AccAddress]:
        return [self.delegator_address]

    def value(self) -> dict:
        return {
            "delegator_address": str(self.delegator_address),
            "validator_address": str(self.validator_address),
        }


@dataclass(frozen=True)
class MsgWithdrawValidatorCommission(Msg):
    """Withdraw the commission accumulated by a validator."""

    validator_address: ValAddress

    AMINO_NAME = "cosmos-sdk/MsgWithdrawValidatorCommission"

    def type(self) -> str:
        return "withdraw_validator_commission"

    def validate_basic(self) -> None:
        if self.validator_address.empty():
            raise ValidationError("validator address is nil")

    def get_signers(self) -> list[AccAddress]:
        return [AccAddress.from_validator(self.validator_address)]

    def value(self) -> dict:
        return {"validator_address": str(self.validator_address)}
