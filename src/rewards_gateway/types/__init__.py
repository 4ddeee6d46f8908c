"""Core chain types: addresses, coins and messages."""

from rewards_gateway.types.address import AccAddress, ValAddress
from rewards_gateway.types.msgs import (
    Msg,
    MsgWithdrawDelegatorReward,
    MsgWithdrawValidatorCommission,
)

__all__ = [
    "AccAddress",
    "ValAddress",
    "Msg",
    "MsgWithdrawDelegatorReward",
    "MsgWithdrawValidatorCommission",
]
