#!/usr/bin/python3
import sys

import click
from ape.cli import ConnectedProviderCommand, network_option

from dao_deployment.options import account_option, params_filepath_option, verify_option
from dao_deployment.runner import main


@click.command(cls=ConnectedProviderCommand)
@network_option()
@account_option
@params_filepath_option
@verify_option
def cli(network, account_id, params_filepath, verify):
    """
    Deploys the FakeNFTMarketplace and the CryptoDevsDAO, funding the DAO
    with the DAO_FUNDING amount from the parameters file.

    ape run deploy_dao --network ethereum:goerli:infura --account <alias>
    """
    sys.exit(main(params_filepath=params_filepath, account_id=account_id, verify=verify))


if __name__ == "__main__":
    cli()
