from types import SimpleNamespace

import pytest

from dao_deployment.constants import CRYPTO_DEVS_DAO, FAKE_NFT_MARKETPLACE
from dao_deployment.params import DeploymentParameters

# Common constants
MARKETPLACE_ADDRESS = "0x" + "A" * 40
DAO_ADDRESS = "0x" + "B" * 40
DEPLOYER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
NFT_CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
DAO_FUNDING = 5 * 10**15  # 0.005 ether

PARAMS_YAML = f"""deployment:
  name: crypto-devs-dao-test
  chain_id: 1337

constants:
  CRYPTO_DEVS_NFT_CONTRACT_ADDRESS: "{NFT_CONTRACT_ADDRESS}"
  DAO_FUNDING: 0.005 ether
"""


# Fake chain provider
class FakeReceipt:
    def __init__(self, contract_name, events, chain_id=1337, block_number=1):
        self.contract_name = contract_name
        self.events = events
        self.chain_id = chain_id
        self.block_number = block_number
        self.txn_hash = "0x" + contract_name.encode().hex()
        self.transaction = SimpleNamespace(sender=DEPLOYER_ADDRESS)

    def await_confirmations(self):
        self.events.append(("confirm", self.contract_name))
        return self


class FakeInstance:
    def __init__(self, contract_name, address, events):
        self.address = address
        self.contract_type = SimpleNamespace(name=contract_name)
        self.receipt = FakeReceipt(contract_name, events)


class FakeContainer:
    def __init__(self, contract_name, address, events, error=None):
        self.contract_name = contract_name
        self.address = address
        self.events = events
        self.error = error
        self.calls = list()

    def deploy(self, *args, **kwargs):
        self.events.append(("deploy", self.contract_name))
        self.calls.append((args, kwargs))
        if self.error is not None:
            raise self.error
        return FakeInstance(self.contract_name, self.address, self.events)


class FakeProvider:
    """Stands in for the ape project: resolves contract names to fake containers."""

    def __init__(self, errors=None):
        errors = errors or dict()
        self.events = list()
        self.containers = {
            FAKE_NFT_MARKETPLACE: FakeContainer(
                FAKE_NFT_MARKETPLACE,
                MARKETPLACE_ADDRESS,
                self.events,
                error=errors.get(FAKE_NFT_MARKETPLACE),
            ),
            CRYPTO_DEVS_DAO: FakeContainer(
                CRYPTO_DEVS_DAO, DAO_ADDRESS, self.events, error=errors.get(CRYPTO_DEVS_DAO)
            ),
        }

    def get_factory(self, contract_name):
        return self.containers[contract_name]


# Fixtures
@pytest.fixture
def creator(accounts):
    return accounts[0]


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def parameters():
    return DeploymentParameters(
        chain_id=1337, nft_contract_address=NFT_CONTRACT_ADDRESS, value=DAO_FUNDING
    )


@pytest.fixture
def params_filepath(tmp_path):
    filepath = tmp_path / "params.yml"
    filepath.write_text(PARAMS_YAML)
    return filepath


def fake_network(name, chain_id):
    """A stand-in for ape's network manager connected to the given network."""
    network = SimpleNamespace(name=name, chain_id=chain_id)
    return SimpleNamespace(provider=SimpleNamespace(network=network))


@pytest.fixture
def live_network(monkeypatch):
    network = fake_network("sepolia", 11155111)
    monkeypatch.setattr("dao_deployment.utils.networks", network)
    return network.provider.network


@pytest.fixture
def local_network(monkeypatch):
    network = fake_network("local", 1337)
    monkeypatch.setattr("dao_deployment.utils.networks", network)
    return network.provider.network
