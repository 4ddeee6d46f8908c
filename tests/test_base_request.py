"""Tests for request decoding, sanitizing and envelope validation."""

import json

import pytest

from rewards_gateway.contracts.base_request import BaseReq
from rewards_gateway.errors import DecodeError, ValidationError
from rewards_gateway.pipeline.decoder import decode_withdraw_request, validate_base_request


def _body(base_req: dict) -> bytes:
    return json.dumps({"base_req": base_req}).encode()


class TestDecode:
    """Decoding JSON bodies into the request envelope."""

    def test_decodes_valid_body(self, base_req_body):
        result = decode_withdraw_request(_body(base_req_body))

        assert result.ok
        base_req = result.unwrap().base_req
        assert base_req.from_ == "alice"
        assert base_req.account_number == 7
        assert base_req.sequence == 3
        assert base_req.fees[0].denom == "uatom"

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"{not json",
            b"[]",
            b'{"something_else": {}}',
            b'{"base_req": {"account_number": "seven"}}',
            b'{"base_req": {"fees": "5000uatom"}}',
        ],
    )
    def test_malformed_bodies_fail(self, body):
        result = decode_withdraw_request(body)

        assert not result.ok
        assert isinstance(result.error, DecodeError)
        assert result.error.message.startswith("failed to decode request body")


class TestSanitize:
    """Sanitize trims text fields without mutating the input."""

    def test_trims_whitespace(self):
        original = BaseReq.model_validate(
            {"from": "  alice ", "chain_id": " cosmoshub-4\n", "gas": " 1000 ", "memo": " hi "}
        )
        sanitized = original.sanitize()

        assert sanitized.from_ == "alice"
        assert sanitized.chain_id == "cosmoshub-4"
        assert sanitized.gas == "1000"
        assert sanitized.memo == "hi"
        assert original.from_ == "  alice "


class TestValidateBasic:
    """Structural validation of the envelope."""

    def _validate(self, **fields) -> BaseReq:
        base_req = BaseReq.model_validate(fields).sanitize()
        base_req.validate_basic()
        return base_req

    def test_valid_broadcast_request(self, base_req_body):
        self._validate(**base_req_body)

    def test_generate_only_needs_only_from(self):
        self._validate(**{"from": "alice", "generate_only": True})

    def test_missing_from(self):
        with pytest.raises(ValidationError, match="name or address required"):
            self._validate(chain_id="cosmoshub-4")

    def test_whitespace_from_is_missing(self):
        with pytest.raises(ValidationError, match="name or address required"):
            self._validate(**{"from": "   ", "generate_only": True})

    def test_missing_chain_id_when_broadcasting(self):
        with pytest.raises(ValidationError, match="chain-id required"):
            self._validate(**{"from": "alice"})

    def test_fees_and_gas_prices_exclusive(self):
        with pytest.raises(ValidationError, match="both fees and gas prices"):
            self._validate(
                **{
                    "from": "alice",
                    "chain_id": "cosmoshub-4",
                    "fees": [{"denom": "uatom", "amount": "10"}],
                    "gas_prices": [{"denom": "uatom", "amount": "0.025"}],
                }
            )

    def test_negative_sequence(self):
        with pytest.raises(ValidationError, match="sequence"):
            self._validate(**{"from": "alice", "generate_only": True, "sequence": -1})

    def test_negative_account_number(self):
        with pytest.raises(ValidationError, match="account number"):
            self._validate(**{"from": "alice", "generate_only": True, "account_number": "-2"})

    @pytest.mark.parametrize(
        "fees",
        [
            [{"denom": "uatom", "amount": "-5"}],
            [{"denom": "uatom", "amount": "1.5"}],
            [{"denom": "1x", "amount": "5"}],
        ],
    )
    def test_invalid_fees(self, fees):
        with pytest.raises(ValidationError):
            self._validate(**{"from": "alice", "generate_only": True, "fees": fees})

    def test_invalid_gas(self):
        with pytest.raises(ValidationError, match="gas amount"):
            self._validate(**{"from": "alice", "generate_only": True, "gas": "lots"})

    def test_auto_gas_accepted(self):
        self._validate(**{"from": "alice", "generate_only": True, "gas": "auto"})

    def test_invalid_gas_adjustment(self):
        with pytest.raises(ValidationError, match="gas adjustment"):
            self._validate(**{"from": "alice", "generate_only": True, "gas_adjustment": "-1"})

    def test_validate_base_request_tags_failure(self):
        result = validate_base_request(BaseReq())

        assert not result.ok
        assert isinstance(result.error, ValidationError)

    def test_validate_base_request_tags_success(self, base_req_body):
        base_req = BaseReq.model_validate(base_req_body)
        result = validate_base_request(base_req)

        assert result.ok
        assert result.unwrap() is base_req

    @pytest.mark.parametrize("gas", ["²", "¹²", "١٢٣", "18446744073709551616", "1" * 5000])
    def test_non_ascii_or_out_of_range_gas(self, gas):
        with pytest.raises(ValidationError, match="gas amount"):
            self._validate(**{"from": "alice", "generate_only": True, "gas": gas})

    def test_max_gas_accepted(self):
        base_req = self._validate(
            **{"from": "alice", "generate_only": True, "gas": "18446744073709551615"}
        )

        assert base_req.gas_limit(200000) == 2**64 - 1

    @pytest.mark.parametrize("amount", ["²", "1" * 5000])
    def test_non_ascii_or_oversized_fee_amount(self, amount):
        fees = [{"denom": "uatom", "amount": amount}]

        with pytest.raises(ValidationError, match="invalid fees"):
            self._validate(**{"from": "alice", "generate_only": True, "fees": fees})

    @pytest.mark.parametrize("amount", ["1e5000", "1e1000000", "nan", "inf"])
    def test_out_of_range_gas_price(self, amount):
        gas_prices = [{"denom": "uatom", "amount": amount}]

        with pytest.raises(ValidationError, match="invalid gas prices"):
            self._validate(**{"from": "alice", "generate_only": True, "gas_prices": gas_prices})

    @pytest.mark.parametrize("adjustment", ["nan", "inf", "-inf", "NaN"])
    def test_non_finite_gas_adjustment(self, adjustment):
        with pytest.raises(ValidationError, match="gas adjustment"):
            self._validate(
                **{"from": "alice", "generate_only": True, "gas_adjustment": adjustment}
            )
