"""Transaction contracts returned by the withdrawal endpoints.

Generate-only requests receive an UnsignedTransaction (an amino StdTx with
no signatures) that the client signs locally. Broadcast requests receive
whatever the sign-and-broadcast collaborator reports.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from rewards_gateway.contracts.base_request import Coin


class StdFee(BaseModel):
    """Fee and gas limit of a transaction."""

    amount: list[Coin] = Field(default_factory=list, description="Fee coins")
    gas: str = Field(..., description="Gas limit (decimal string)")


class StdTxValue(BaseModel):
    """Body of an amino StdTx."""

    msg: list[dict[str, Any]] = Field(..., description="Amino JSON messages")
    fee: StdFee
    signatures: Optional[list[dict[str, Any]]] = Field(
        None, description="Always null for unsigned transactions"
    )
    memo: str = Field(default="")


class UnsignedTransaction(BaseModel):
    """An unsigned transaction for client-side signing.

    The client is responsible for:
    1. Signing this transaction with their private key
    2. Broadcasting the signed transaction to the network
    """

    type: str = Field(default="cosmos-sdk/StdTx")
    value: StdTxValue


class BroadcastResult(BaseModel):
    """Result reported by the sign-and-broadcast collaborator."""

    height: str = Field(default="0", description="Block height (0 until committed)")
    txhash: str = Field(default="", description="Transaction hash")
    code: int = Field(default=0, description="ABCI result code (0 = success)")
    raw_log: str = Field(default="", description="Raw log from the node")
    gas_wanted: Optional[str] = Field(None)
    gas_used: Optional[str] = Field(None)
    dry_run: bool = Field(default=False, description="True when nothing was broadcast")


class ErrorResponse(BaseModel):
    """Error body written for every failed request."""

    error: str
