import typing
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Optional

import yaml
from eth_typing import ChecksumAddress
from eth_utils import is_address, to_checksum_address
from web3 import Web3

from dao_deployment.constants import (
    ARTIFACTS_DIR,
    DAO_FUNDING_CONSTANT,
    NFT_CONTRACT_ADDRESS_CONSTANT,
)
from dao_deployment.exceptions import ConfigurationError
from dao_deployment.utils import _load_yaml


def parse_value(raw_value: Any) -> int:
    """
    Converts a configured value transfer into wei.

    Accepts an integer amount of wei, or a string of the form "<amount> <unit>"
    (e.g. "0.005 ether") where unit is any denomination known to web3.
    A bare numeric string is taken as wei.
    """
    if isinstance(raw_value, bool):
        raise DeploymentParameters.Invalid(f"Invalid value amount '{raw_value}'.")

    if isinstance(raw_value, int):
        amount, unit = Decimal(raw_value), "wei"
    elif isinstance(raw_value, str):
        elements = raw_value.split()
        if len(elements) == 1:
            elements.append("wei")
        if len(elements) != 2:
            raise DeploymentParameters.Invalid(f"Invalid value amount '{raw_value}'.")
        try:
            amount = Decimal(elements[0])
        except InvalidOperation:
            raise DeploymentParameters.Invalid(f"Invalid value amount '{raw_value}'.")
        unit = elements[1].lower()
    else:
        # floats are ambiguous without a denomination
        raise DeploymentParameters.Invalid(
            f"Value amount '{raw_value}' must be wei or a string like '0.005 ether'."
        )

    if not amount.is_finite():
        raise DeploymentParameters.Invalid(f"Invalid value amount '{raw_value}'.")
    if amount < 0:
        raise DeploymentParameters.Invalid(f"Value amount '{raw_value}' cannot be negative.")

    try:
        wei = Web3.to_wei(amount, unit)
    except ValueError as e:
        raise DeploymentParameters.Invalid(f"Invalid value amount '{raw_value}': {e}")
    if Web3.from_wei(wei, unit) != amount:
        raise DeploymentParameters.Invalid(
            f"Value amount '{raw_value}' is not a whole number of wei."
        )
    return wei


def _parse_address(name: str, raw_address: Any) -> ChecksumAddress:
    if not raw_address:
        raise DeploymentParameters.Invalid(f"{name} is not set in params file.")
    if not isinstance(raw_address, str) or not is_address(raw_address):
        raise DeploymentParameters.Invalid(f"{name} '{raw_address}' is not a valid address.")
    return to_checksum_address(raw_address)


class DeploymentParameters:
    """Represents the constants and value transfer used to deploy the DAO."""

    class Invalid(ConfigurationError):
        """Raised when the deployment parameters are invalid"""

    def __init__(
        self,
        chain_id: int,
        nft_contract_address: ChecksumAddress,
        value: int,
        artifact_filepath: Optional[Path] = None,
    ):
        self.chain_id = chain_id
        self.nft_contract_address = nft_contract_address
        self.value = value
        self.artifact_filepath = artifact_filepath

    @classmethod
    def from_yaml(cls, filepath: Path) -> "DeploymentParameters":
        try:
            config = _load_yaml(filepath)
        except FileNotFoundError:
            raise cls.Invalid(f"Params file not found at {filepath}")
        except yaml.YAMLError as e:
            raise cls.Invalid(f"Malformed params file {filepath}: {e}")
        if not isinstance(config, dict):
            raise cls.Invalid(f"Malformed params file {filepath}.")
        return cls.from_config(config)

    @classmethod
    def from_config(cls, config: typing.Dict) -> "DeploymentParameters":
        deployment = config.get("deployment")
        if not deployment:
            raise cls.Invalid("deployment is not set in params file.")
        if not isinstance(deployment, dict):
            raise cls.Invalid("deployment in params file must be a mapping.")

        chain_id = deployment.get("chain_id")
        if chain_id is None:
            raise cls.Invalid("chain_id is not set in params file.")
        try:
            chain_id = int(chain_id)
        except (TypeError, ValueError):
            raise cls.Invalid(f"chain_id '{chain_id}' is not an integer.")

        constants = config.get("constants")
        if not constants:
            raise cls.Invalid("Params file missing 'constants' field.")
        if not isinstance(constants, dict):
            raise cls.Invalid("constants in params file must be a mapping.")

        nft_contract_address = _parse_address(
            NFT_CONTRACT_ADDRESS_CONSTANT, constants.get(NFT_CONTRACT_ADDRESS_CONSTANT)
        )

        if constants.get(DAO_FUNDING_CONSTANT) is None:
            raise cls.Invalid(f"{DAO_FUNDING_CONSTANT} is not set in params file.")
        value = parse_value(constants[DAO_FUNDING_CONSTANT])

        return cls(
            chain_id=chain_id,
            nft_contract_address=nft_contract_address,
            value=value,
            artifact_filepath=cls._get_artifact_filepath(config),
        )

    @staticmethod
    def _get_artifact_filepath(config: typing.Dict) -> Optional[Path]:
        artifact_config = config.get("artifacts") or {}
        if not isinstance(artifact_config, dict):
            raise DeploymentParameters.Invalid("artifacts in params file must be a mapping.")
        filename = artifact_config.get("filename")
        if not filename:
            return None
        artifact_dir = Path(artifact_config.get("dir", ARTIFACTS_DIR))
        return artifact_dir / filename

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(chain_id={self.chain_id}, "
            f"nft_contract_address={self.nft_contract_address}, value={self.value})"
        )
