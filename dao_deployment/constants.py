from pathlib import Path

import dao_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(dao_deployment.__file__).parent
CONSTRUCTOR_PARAMS_DIR = DEPLOYMENT_DIR / "constructor_params"
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"

#
# Networks
#

LOCAL_NETWORKS = ["local"]

#
# Contracts
#

FAKE_NFT_MARKETPLACE = "FakeNFTMarketplace"
CRYPTO_DEVS_DAO = "CryptoDevsDAO"

#
# Parameters file
#

NFT_CONTRACT_ADDRESS_CONSTANT = "CRYPTO_DEVS_NFT_CONTRACT_ADDRESS"
DAO_FUNDING_CONSTANT = "DAO_FUNDING"

ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"

#
# Exit codes
#

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
