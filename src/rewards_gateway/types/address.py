"""Bech32 account and validator addresses.

Cosmos addresses are 20-byte RIPEMD160(SHA256(pubkey)) identities encoded
as bech32 with a chain-specific prefix. Account and validator operator
addresses share the same bytes format but use different prefixes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from bip_utils import Bech32ChecksumError, Bech32Decoder, Bech32Encoder

from rewards_gateway.config import get_settings
from rewards_gateway.errors import AddressDecodeError

ADDRESS_LENGTH = 20


@dataclass(frozen=True)
class Address(ABC):
    """Base for typed bech32 addresses."""

    raw: bytes

    KIND: ClassVar[str] = "address"

    @classmethod
    @abstractmethod
    def prefix(cls) -> str:
        """Bech32 human-readable part for this kind of address."""

    @classmethod
    def from_bech32(cls, text: str):
        """Decode canonical bech32 text.

        Raises:
            AddressDecodeError: On empty text, wrong prefix, bad checksum
                or a payload that is not 20 bytes long.
        """
        text = text or ""
        if not text.strip():
            raise AddressDecodeError(f"empty {cls.KIND} address string is not allowed")

        hrp = cls.prefix()
        try:
            data = Bech32Decoder.Decode(hrp, text)
        except Bech32ChecksumError as e:
            raise AddressDecodeError(f"decoding bech32 {cls.KIND} address failed: {e}")
        except ValueError as e:
            raise AddressDecodeError(f"decoding bech32 {cls.KIND} address failed: {e}")

        if len(data) != ADDRESS_LENGTH:
            raise AddressDecodeError(
                f"incorrect {cls.KIND} address length "
                f"(expected: {ADDRESS_LENGTH}, actual: {len(data)})"
            )
        return cls(bytes(data))

    def to_bech32(self) -> str:
        return Bech32Encoder.Encode(self.prefix(), self.raw)

    def empty(self) -> bool:
        return len(self.raw) == 0

    def __str__(self) -> str:
        if self.empty():
            return ""
        return self.to_bech32()


@dataclass(frozen=True)
class AccAddress(Address):
    """Account (delegator) address, e.g. cosmos1..."""

    KIND: ClassVar[str] = "account"

    @classmethod
    def prefix(cls) -> str:
        return get_settings().bech32_account_prefix

    @classmethod
    def from_validator(cls, val_addr: "ValAddress") -> "AccAddress":
        """Account address that owns a validator operator address."""
        return cls(val_addr.raw)


@dataclass(frozen=True)
class ValAddress(Address):
    """Validator operator address, e.g. cosmosvaloper1..."""

    KIND: ClassVar[str] = "validator"

    @classmethod
    def prefix(cls) -> str:
        return get_settings().bech32_validator_prefix
