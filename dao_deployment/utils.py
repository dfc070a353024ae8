import json
import os
from pathlib import Path
from typing import Optional

import yaml
from ape import accounts, networks, project
from ape.api import AccountAPI, NetworkAPI
from ape.contracts import ContractContainer
from ape.exceptions import ApeException, ProviderNotConnectedError

from dao_deployment.constants import (
    CONSTRUCTOR_PARAMS_DIR,
    ETHERSCAN_API_KEY_ENVVAR,
    LOCAL_NETWORKS,
)
from dao_deployment.exceptions import ConfigurationError


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def get_network() -> NetworkAPI:
    """Returns the network of the connected provider."""
    try:
        return networks.provider.network
    except ProviderNotConnectedError:
        raise ConfigurationError("Not connected to a network provider.")


def is_local_network() -> bool:
    return get_network().name in LOCAL_NETWORKS


def default_params_filepath(network_name: str) -> Path:
    """Returns the parameters file shipped for the given network."""
    filepath = CONSTRUCTOR_PARAMS_DIR / f"{network_name}.yml"
    if not filepath.exists():
        raise ConfigurationError(f"No parameters file found for network '{network_name}'")
    return filepath


def check_chain_id(chain_id: int) -> None:
    """
    Checks that the chain_id specified in the params file matches the
    chain_id of the connected network. Local networks are not checked.
    """
    network_chain_id = get_network().chain_id
    if chain_id != network_chain_id and not is_local_network():
        raise ConfigurationError(
            f"chain_id in params file ({chain_id}) does not match "
            f"chain_id of current network ({network_chain_id})."
        )


def get_account(account_id: Optional[str]) -> AccountAPI:
    if is_local_network():
        return accounts.test_accounts[0]
    if account_id is None:
        raise ConfigurationError("Must specify account id when deploying to live networks")
    try:
        return accounts.load(account_id)
    except (ApeException, IndexError, KeyError, ValueError) as e:
        raise ConfigurationError(f"Could not load account '{account_id}': {e}")


def get_contract_container(contract: str) -> ContractContainer:
    try:
        return getattr(project, contract)
    except AttributeError:
        raise ConfigurationError(f"No contract found with name '{contract}'.")


def check_etherscan_plugin() -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the explorer API key environment variable is set.
    """
    if is_local_network():
        # unnecessary for local deployment
        return
    try:
        import ape_etherscan  # noqa: F401
    except ImportError:
        raise ConfigurationError("Please install the ape-etherscan plugin to verify contracts.")
    if not os.environ.get(ETHERSCAN_API_KEY_ENVVAR):
        raise ConfigurationError(f"{ETHERSCAN_API_KEY_ENVVAR} is not set.")
