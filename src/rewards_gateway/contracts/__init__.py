"""Request and response contracts for the REST layer.

These Pydantic models define the JSON interface of the withdrawal
endpoints.
"""

from rewards_gateway.contracts.base_request import (
    BaseReq,
    Coin,
    DecCoin,
    WithdrawRewardsReq,
)
from rewards_gateway.contracts.transactions import (
    BroadcastResult,
    ErrorResponse,
    StdFee,
    UnsignedTransaction,
)

__all__ = [
    # Request contracts
    "BaseReq",
    "Coin",
    "DecCoin",
    "WithdrawRewardsReq",
    # Transaction contracts
    "BroadcastResult",
    "ErrorResponse",
    "StdFee",
    "UnsignedTransaction",
]
