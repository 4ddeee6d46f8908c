"""Coin amount helpers for fees and gas prices."""

import math
import re
from decimal import Decimal, InvalidOperation

DENOM_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9/:._-]{2,127}$")
UINT_PATTERN = re.compile(r"^[0-9]+$")

# Coin amounts are 256-bit integers on chain, gas limits are uint64
MAX_AMOUNT_BITS = 256
MAX_GAS = 2**64 - 1


def is_valid_denom(denom: str) -> bool:
    return bool(DENOM_PATTERN.match(denom or ""))


def parse_uint(text: str) -> int:
    """Parse an ASCII decimal digit string.

    Raises:
        ValueError: If text holds anything but the digits 0-9
    """
    if not text or not UINT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    return int(text)


def parse_int_amount(amount: str) -> int:
    """Parse a non-negative integer coin amount.

    Raises:
        ValueError: If amount is not a non-negative integer string
    """
    try:
        value = parse_uint(amount)
    except ValueError:
        raise ValueError(f"invalid coin amount: {amount!r}")
    if value.bit_length() > MAX_AMOUNT_BITS:
        raise ValueError(f"coin amount out of range: {amount!r}")
    return value


def parse_gas(gas: str) -> int:
    """Parse an explicit gas limit."""
    value = parse_uint(gas)
    if value > MAX_GAS:
        raise ValueError(f"gas limit out of range: {gas!r}")
    return value


def parse_dec_amount(amount: str) -> Decimal:
    """Parse a non-negative decimal coin amount."""
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError):
        raise ValueError(f"invalid decimal coin amount: {amount!r}")
    if not value.is_finite() or value < 0:
        raise ValueError(f"invalid decimal coin amount: {amount!r}")
    if value >= 2**MAX_AMOUNT_BITS:
        raise ValueError(f"decimal coin amount out of range: {amount!r}")
    return value


def fee_from_gas_price(price: Decimal, gas: int) -> int:
    """Fee in the smallest unit, rounded up."""
    return int(math.ceil(price * Decimal(gas)))
