"""Path variable resolution into typed addresses."""

from typing import Mapping

from rewards_gateway.errors import AddressDecodeError
from rewards_gateway.pipeline.results import StepResult
from rewards_gateway.types.address import AccAddress, Address, ValAddress

DELEGATOR_VAR = "delegatorAddr"
VALIDATOR_VAR = "validatorAddr"


def resolve_address(
    path_params: Mapping[str, str],
    name: str,
    address_cls: type[Address],
) -> StepResult[Address]:
    """Decode the path variable ``name`` as ``address_cls``."""
    try:
        return StepResult.success(address_cls.from_bech32(path_params.get(name, "")))
    except AddressDecodeError as e:
        return StepResult.failure(e)


def resolve_account_address(
    path_params: Mapping[str, str], name: str = DELEGATOR_VAR
) -> StepResult[AccAddress]:
    return resolve_address(path_params, name, AccAddress)


def resolve_validator_address(
    path_params: Mapping[str, str], name: str = VALIDATOR_VAR
) -> StepResult[ValAddress]:
    return resolve_address(path_params, name, ValAddress)
