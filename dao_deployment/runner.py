import sys
from pathlib import Path
from typing import Any, Callable, NamedTuple, Optional

from ape.api import AccountAPI
from ape.contracts import ContractContainer, ContractInstance

from dao_deployment.constants import (
    CRYPTO_DEVS_DAO,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    FAKE_NFT_MARKETPLACE,
)
from dao_deployment.exceptions import DeploymentError
from dao_deployment.params import DeploymentParameters
from dao_deployment.registry import registry_from_ape_deployments
from dao_deployment.utils import (
    check_chain_id,
    check_etherscan_plugin,
    default_params_filepath,
    get_account,
    get_contract_container,
    get_network,
)


class DeploymentResult(NamedTuple):
    marketplace: ContractInstance
    dao: ContractInstance


class DeploymentRunner:
    """
    Deploys the FakeNFTMarketplace and the CryptoDevsDAO, in that order,
    from a single deployer account.

    Each deployment blocks until the provider confirms it. The DAO is
    constructed with the marketplace address and the Crypto Devs NFT
    address, and is funded with the configured value transfer.
    """

    def __init__(
        self,
        deployer: AccountAPI,
        parameters: DeploymentParameters,
        get_factory: Callable[[str], ContractContainer] = get_contract_container,
        verify: bool = False,
    ):
        self.deployer = deployer
        self.parameters = parameters
        self.get_factory = get_factory
        self.verify = verify

    def deploy(self, contract_name: str, *args: Any, **kwargs: Any) -> ContractInstance:
        """Deploys a single contract and waits for its confirmation."""
        try:
            container = self.get_factory(contract_name)
            instance = container.deploy(
                *args, sender=self.deployer, publish=self.verify, **kwargs
            )
            instance.receipt.await_confirmations()
        except DeploymentError:
            raise
        except Exception as e:
            raise DeploymentError(f"{contract_name} deployment failed: {e}") from e

        print(f"{contract_name} deployed at {instance.address}")
        return instance

    def run(self) -> DeploymentResult:
        marketplace = self.deploy(FAKE_NFT_MARKETPLACE)
        dao = self.deploy(
            CRYPTO_DEVS_DAO,
            marketplace.address,
            self.parameters.nft_contract_address,
            value=self.parameters.value,
        )
        result = DeploymentResult(marketplace=marketplace, dao=dao)

        if self.parameters.artifact_filepath:
            self.finalize(result)
        return result

    def finalize(self, result: DeploymentResult) -> Path:
        """Records the deployments in the registry file named by the parameters."""
        try:
            return registry_from_ape_deployments(
                deployments=list(result),
                output_filepath=self.parameters.artifact_filepath,
            )
        except (OSError, ValueError) as e:
            raise DeploymentError(f"Could not write registry: {e}") from e


def main(
    params_filepath: Optional[Path] = None,
    account_id: Optional[str] = None,
    verify: bool = False,
    get_deployer: Callable[[Optional[str]], AccountAPI] = get_account,
    get_factory: Callable[[str], ContractContainer] = get_contract_container,
    check_network: bool = True,
) -> int:
    """Deploys the DAO and maps the outcome onto a process exit code."""
    try:
        if params_filepath is None:
            params_filepath = default_params_filepath(get_network().name)
        parameters = DeploymentParameters.from_yaml(params_filepath)
        if check_network:
            check_chain_id(parameters.chain_id)
        if verify:
            check_etherscan_plugin()
        runner = DeploymentRunner(
            deployer=get_deployer(account_id),
            parameters=parameters,
            get_factory=get_factory,
            verify=verify,
        )
        runner.run()
    except DeploymentError as error:
        print(error, file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS
