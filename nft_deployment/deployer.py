from typing import Any, Callable, Optional, Sequence

from eth_typing import ChecksumAddress

from nft_deployment.client import ChainClient, ContractFactory, DeploymentHandle
from nft_deployment.errors import (
    ConfirmationError,
    ConnectivityError,
    ContractNotConfirmed,
    DeploymentError,
    SubmissionError,
    TemplateResolutionError,
)


class NetworkResolver:
    def __init__(self, client: ChainClient):
        self.client = client

    def resolve(self) -> str:
        """Queries the connected chain endpoint for the active network identity."""
        try:
            network = self.client.get_network()
        except Exception as e:
            raise ConnectivityError(f"Unable to query the connected network: {e}") from e
        if not isinstance(network, str) or not network:
            raise ConnectivityError(f"Malformed network identity: {network!r}")
        return network


class ContractDeployer:
    """
    Submits contract creation transactions and blocks until they are confirmed.
    Nothing is retried; the caller decides whether to run the deployment again.
    """

    def __init__(self, client: ChainClient):
        self.client = client

    def get_template(self, name: str) -> ContractFactory:
        try:
            return self.client.get_contract_factory(name)
        except TemplateResolutionError:
            raise
        except Exception as e:
            raise TemplateResolutionError(f"Contract template '{name}' not available: {e}") from e

    def submit(self, template: ContractFactory, args: Sequence[Any]) -> DeploymentHandle:
        try:
            return template.deploy(*args)
        except DeploymentError:
            # already classified, e.g. constructor ABI mismatch
            raise
        except Exception as e:
            raise SubmissionError(f"{template.name} creation transaction rejected: {e}") from e

    def confirm(self, template: ContractFactory, handle: DeploymentHandle) -> DeploymentHandle:
        try:
            handle.wait_for_deployment()
        except Exception as e:
            raise ConfirmationError(
                f"{template.name} creation transaction was not confirmed: {e}"
            ) from e
        if not handle.confirmed:
            raise ConfirmationError(f"{template.name} deployment did not reach confirmation")
        return handle

    def deploy(
        self,
        template: ContractFactory,
        args: Sequence[Any],
        on_submitted: Optional[Callable[[DeploymentHandle], None]] = None,
    ) -> DeploymentHandle:
        handle = self.submit(template, args)
        if on_submitted:
            on_submitted(handle)
        return self.confirm(template, handle)


class AddressExtractor:
    def address_of(self, handle: DeploymentHandle) -> ChecksumAddress:
        if not handle.confirmed:
            raise ContractNotConfirmed(
                "Address requested for a deployment that has not been confirmed"
            )
        return handle.get_address()
