"""Request contracts shared by every write endpoint.

BaseReq carries the transaction-construction parameters; each endpoint
body wraps it under the ``base_req`` key.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rewards_gateway.errors import ValidationError
from rewards_gateway.types.coins import (
    is_valid_denom,
    parse_dec_amount,
    parse_gas,
    parse_int_amount,
)

GAS_AUTO = "auto"


class Coin(BaseModel):
    """Integer coin amount (fees)."""

    denom: str
    amount: str


class DecCoin(BaseModel):
    """Decimal coin amount (gas prices)."""

    denom: str
    amount: str


class BaseReq(BaseModel):
    """Common envelope of transaction-construction parameters."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(default="", alias="from", description="Key name or address of the sender")
    password: str = Field(default="", description="Key password, forwarded to the signer only")
    memo: str = Field(default="", description="Transaction memo")
    chain_id: str = Field(default="", description="Chain ID")
    account_number: int = Field(default=0, description="Account number of the sender")
    sequence: int = Field(default=0, description="Account sequence of the sender")
    fees: list[Coin] = Field(default_factory=list, description="Explicit transaction fees")
    gas_prices: list[DecCoin] = Field(default_factory=list, description="Gas prices")
    gas: str = Field(default="", description="Gas limit, or 'auto'")
    gas_adjustment: str = Field(default="", description="Multiplier for simulated gas")
    generate_only: bool = Field(default=False, description="Return an unsigned transaction")
    simulate: bool = Field(default=False, description="Estimate gas instead of broadcasting")

    def sanitize(self) -> "BaseReq":
        """Return a copy with surrounding whitespace stripped from text fields."""
        return self.model_copy(
            update={
                "from_": self.from_.strip(),
                "password": self.password.strip(),
                "memo": self.memo.strip(),
                "chain_id": self.chain_id.strip(),
                "gas": self.gas.strip(),
                "gas_adjustment": self.gas_adjustment.strip(),
            }
        )

    def validate_basic(self) -> None:
        """Check structural correctness.

        Raises:
            ValidationError: Describing the first problem found
        """
        if not self.generate_only and not self.simulate:
            if not self.chain_id:
                raise ValidationError("chain-id required but not specified")
            if self.has_fees() and self.has_gas_prices():
                raise ValidationError("cannot provide both fees and gas prices")

        if not self.from_:
            raise ValidationError("name or address required but not specified")

        if self.account_number < 0:
            raise ValidationError(f"invalid account number: {self.account_number}")
        if self.sequence < 0:
            raise ValidationError(f"invalid sequence: {self.sequence}")

        for coin in self.fees:
            if not is_valid_denom(coin.denom):
                raise ValidationError(f"invalid fee denom: {coin.denom!r}")
            try:
                parse_int_amount(coin.amount)
            except ValueError as e:
                raise ValidationError(f"invalid fees: {e}")

        for coin in self.gas_prices:
            if not is_valid_denom(coin.denom):
                raise ValidationError(f"invalid gas price denom: {coin.denom!r}")
            try:
                parse_dec_amount(coin.amount)
            except ValueError as e:
                raise ValidationError(f"invalid gas prices: {e}")

        if self.gas and self.gas != GAS_AUTO:
            try:
                parse_gas(self.gas)
            except ValueError:
                raise ValidationError(f"invalid gas amount: {self.gas!r}")

        if self.gas_adjustment:
            try:
                adjustment = float(self.gas_adjustment)
            except ValueError:
                raise ValidationError(f"invalid gas adjustment: {self.gas_adjustment!r}")
            if not math.isfinite(adjustment) or adjustment < 0:
                raise ValidationError(f"invalid gas adjustment: {self.gas_adjustment!r}")

    def has_fees(self) -> bool:
        return any(parse_int_amount_or_zero(c.amount) > 0 for c in self.fees)

    def has_gas_prices(self) -> bool:
        return any(parse_dec_amount_or_zero(c.amount) > 0 for c in self.gas_prices)

    def gas_limit(self, default: int) -> Optional[int]:
        """Explicit gas limit, the default when unset, None for 'auto'."""
        if self.gas == GAS_AUTO:
            return None
        if not self.gas:
            return default
        return parse_gas(self.gas)


def parse_int_amount_or_zero(amount: str) -> int:
    try:
        return parse_int_amount(amount)
    except ValueError:
        return 0


def parse_dec_amount_or_zero(amount: str):
    try:
        return parse_dec_amount(amount)
    except ValueError:
        return 0


class WithdrawRewardsReq(BaseModel):
    """Body of every reward withdrawal endpoint."""

    base_req: BaseReq
