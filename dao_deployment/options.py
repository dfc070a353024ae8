from pathlib import Path

import click

account_option = click.option(
    "--account",
    "-a",
    "account_id",
    help="Alias of the deployer account; ignored on local networks.",
    type=click.STRING,
    required=False,
)

params_filepath_option = click.option(
    "--params-filepath",
    "-p",
    help="Deployment parameters file; defaults to the file shipped for the network.",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=False,
)

verify_option = click.option(
    "--verify",
    help="Publish the contracts to the block explorer.",
    is_flag=True,
    default=False,
)
