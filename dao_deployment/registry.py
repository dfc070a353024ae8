import json
from pathlib import Path
from typing import Dict, List

from ape.contracts import ContractInstance
from eth_utils import to_checksum_address

from dao_deployment.utils import _load_json


def _get_artifacts(contract_instance: ContractInstance) -> Dict:
    receipt = contract_instance.receipt
    return {
        "address": to_checksum_address(contract_instance.address),
        "tx_hash": receipt.txn_hash,
        "block_number": int(receipt.block_number),
        "deployer": receipt.transaction.sender,
    }


def registry_from_ape_deployments(
    deployments: List[ContractInstance], output_filepath: Path
) -> Path:
    """
    Records where each contract was deployed, keyed by chain id.

    Only the latest deployment on a chain is kept; redeploying replaces the
    chain's entries and leaves other chains in the file untouched.
    """
    data = _load_json(output_filepath) if output_filepath.exists() else dict()

    for contract_instance in deployments:
        chain_id = str(contract_instance.receipt.chain_id)
        chain_deployments = data.setdefault(chain_id, dict())
        chain_deployments[contract_instance.contract_type.name] = _get_artifacts(
            contract_instance
        )

    output_filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(output_filepath, "w") as file:
        json.dump(data, file, indent=4, sort_keys=True)

    return output_filepath
