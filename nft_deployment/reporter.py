import traceback
from typing import Dict, Optional

import click

from nft_deployment.constants import EXPLORERS, Explorer
from nft_deployment.errors import DeploymentError


class DeploymentReporter:
    """Writes deployment progress for the operator; failures go to stderr."""

    def __init__(self, explorers: Optional[Dict[str, Explorer]] = None):
        self.explorers = EXPLORERS if explorers is None else explorers

    def deploying(self, contract_name: str, network: str) -> None:
        print(f"Deploying {contract_name} to {network} network...")

    def submitting(self) -> None:
        print("Initiating deployment transaction...")

    def confirming(self) -> None:
        print("Waiting for deployment transaction confirmation...")

    def report(self, network: str, address: str, contract_name: str) -> None:
        print(f"{contract_name} deployed successfully to: {address}")
        explorer = self.explorers.get(network)
        if explorer is None:
            return
        print(f"\nView your contract on {explorer.label}:")
        print(explorer.address_url(address))

    def failed(self, contract_name: str, error: BaseException) -> None:
        click.echo(f"Deployment of {contract_name} failed with error:", err=True)
        details = traceback.format_exception(type(error), error, error.__traceback__)
        click.echo("".join(details).rstrip(), err=True)
        if isinstance(error, DeploymentError) and error.hint:
            click.echo(f"(i) {error.hint}", err=True)
