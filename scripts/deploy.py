#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from nft_deployment.client import ApeChainClient
from nft_deployment.constants import BRAND_VERIFICATION_NFT
from nft_deployment.options import (
    autosign_option,
    contract_option,
    publish_option,
    verification_address_option,
)
from nft_deployment.orchestrator import PLANS, DeploymentOrchestrator


@click.command(cls=ConnectedProviderCommand)
@account_option()
@network_option(required=True)
@contract_option
@verification_address_option
@autosign_option
@publish_option
def cli(account, network, contract_name, verification_address, autosign, publish):
    """Deploy BrandVerificationNFT or ProductSeriesNFT to the selected network."""
    click.echo(f"Connected to {network.name} network.")

    client = ApeChainClient(account=account, autosign=autosign, publish=publish)
    orchestrator = DeploymentOrchestrator(client=client, interactive=not autosign)
    result = orchestrator.run(
        plan=PLANS[contract_name],
        prior_addresses={BRAND_VERIFICATION_NFT: verification_address},
    )
    if not result.ok:
        raise click.exceptions.Exit(result.exit_code)
    return result.address


if __name__ == "__main__":
    cli()
