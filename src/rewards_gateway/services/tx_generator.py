"""Transaction generator for preparing unsigned transactions.

Builds an amino StdTx from the request envelope and messages for
client-side signing. NO signing or broadcasting happens here.
"""

import logging
from typing import Optional

from rewards_gateway.config import get_settings
from rewards_gateway.contracts.base_request import BaseReq, Coin
from rewards_gateway.contracts.transactions import (
    StdFee,
    StdTxValue,
    UnsignedTransaction,
)
from rewards_gateway.errors import ValidationError
from rewards_gateway.types.coins import fee_from_gas_price, parse_dec_amount
from rewards_gateway.types.msgs import Msg

logger = logging.getLogger(__name__)


class TxGenerator:
    """Builds unsigned transactions for client-side signing.

    Gas simulation needs a live node, so ``gas=auto`` and ``simulate``
    are rejected here and left to the broadcast path.
    """

    def __init__(self, default_gas: Optional[int] = None):
        self.default_gas = default_gas or get_settings().default_gas

    def generate(self, base_req: BaseReq, msgs: list[Msg]) -> UnsignedTransaction:
        """Build an unsigned StdTx.

        Args:
            base_req: Validated request envelope
            msgs: Messages to include, in order

        Returns:
            UnsignedTransaction for client to sign

        Raises:
            ValidationError: If gas cannot be determined without simulation
        """
        if base_req.simulate:
            raise ValidationError("simulation is not supported in generate-only mode")

        gas = base_req.gas_limit(self.default_gas)
        if gas is None:
            raise ValidationError("gas 'auto' requires simulation; set an explicit gas limit")

        fee = StdFee(amount=self._fee_amount(base_req, gas), gas=str(gas))

        logger.debug(
            f"Generated unsigned tx with {len(msgs)} msg(s), gas={gas}, from={base_req.from_}"
        )

        return UnsignedTransaction(
            value=StdTxValue(
                msg=[msg.to_amino() for msg in msgs],
                fee=fee,
                signatures=None,
                memo=base_req.memo,
            )
        )

    def _fee_amount(self, base_req: BaseReq, gas: int) -> list[Coin]:
        """Explicit fees, or fees derived from gas prices."""
        prices = []
        for price in base_req.gas_prices:
            try:
                prices.append((price.denom, parse_dec_amount(price.amount)))
            except ValueError:
                raise ValidationError(f"invalid gas price: {price.amount!r}")

        if not any(amount > 0 for _, amount in prices):
            return [Coin(denom=c.denom, amount=c.amount) for c in base_req.fees]

        if base_req.has_fees():
            raise ValidationError("cannot provide both fees and gas prices")

        fees = []
        for denom, amount in prices:
            try:
                fee = fee_from_gas_price(amount, gas)
            except ArithmeticError:
                raise ValidationError(f"invalid gas price: {amount}")
            fees.append(Coin(denom=denom, amount=str(fee)))
        return fees
