from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ape import networks, project
from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts import ContractContainer, ContractInstance
from ape.exceptions import TransactionNotFoundError
from ape_accounts import KeyfileAccount
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from nft_deployment.errors import ConfirmationError, TemplateResolutionError
from nft_deployment.networks import network_identity
from nft_deployment.utils import (
    check_explorer_plugin,
    print_deployment_info,
    validate_constructor_args,
)

#
# Chain client surface
#


class DeploymentHandle(ABC):
    """A contract creation; pending until ``wait_for_deployment`` returns."""

    @property
    @abstractmethod
    def confirmed(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def wait_for_deployment(self) -> None:
        """Blocks until the creation transaction is mined and the contract is live."""
        raise NotImplementedError

    @abstractmethod
    def get_address(self) -> ChecksumAddress:
        raise NotImplementedError


class ContractFactory(ABC):
    """A compiled contract template able to create new instances."""

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def deploy(self, *args) -> DeploymentHandle:
        """Submits exactly one creation transaction carrying ``args``."""
        raise NotImplementedError


class ChainClient(ABC):
    @abstractmethod
    def get_network(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_contract_factory(self, name: str) -> ContractFactory:
        raise NotImplementedError


#
# ape
#


class ApeDeployment(DeploymentHandle):
    """
    A mined creation transaction. ``wait_for_deployment`` waits for the
    confirmations the network requires before the contract counts as live.
    """

    def __init__(self, instance: ContractInstance, required_confirmations: int = 0):
        self._instance = instance
        self._required_confirmations = required_confirmations
        self._confirmed = False

    @property
    def confirmed(self) -> bool:
        return self._confirmed

    def wait_for_deployment(self) -> None:
        receipt = self._instance.receipt.model_copy(
            update={"required_confirmations": self._required_confirmations}
        )
        receipt.await_confirmations()
        self._confirmed = True

    def get_address(self) -> ChecksumAddress:
        return to_checksum_address(self._instance.address)


class ApeContractFactory(ContractFactory):
    def __init__(
        self,
        container: ContractContainer,
        account: AccountAPI,
        publish: bool = False,
        required_confirmations: int = 0,
    ):
        self._container = container
        self._account = account
        self._publish = publish
        self._required_confirmations = required_confirmations

    @property
    def name(self) -> str:
        return self._container.contract_type.name

    @property
    def constructor_inputs(self) -> List[Any]:
        return self._container.constructor.abi.inputs

    def deploy(self, *args) -> ApeDeployment:
        validate_constructor_args(
            contract_name=self.name, abi_inputs=self.constructor_inputs, args=args
        )
        try:
            # confirmations are awaited by the returned handle
            instance = self._account.deploy(
                self._container, *args, publish=self._publish, required_confirmations=0
            )
        except TransactionNotFoundError as e:
            # broadcast, but no receipt
            raise ConfirmationError(
                f"{self.name} creation transaction was sent but not mined: {e}"
            ) from e
        return ApeDeployment(instance, required_confirmations=self._required_confirmations)


def _find_contract_container(name: str) -> ContractContainer:
    """Looks up a compiled contract in the project, then in its dependencies."""
    container = getattr(project, name, None)
    if container is not None:
        return container

    matches = dict()
    for dependency_name, dependency_versions in project.dependencies.items():
        for version, dependency in dependency_versions.items():
            container = getattr(dependency, name, None)
            if container is not None:
                matches[f"{dependency_name}@{version}"] = container
    if not matches:
        raise TemplateResolutionError(f"No contract found with name '{name}'.")
    if len(matches) > 1:
        raise TemplateResolutionError(
            f"Contract '{name}' is ambiguous; found in {', '.join(matches)}"
        )
    return list(matches.values())[0]


class ApeChainClient(ChainClient):
    """
    Chain client backed by the connected ape provider, the ape project
    and a deployer account.
    """

    def __init__(
        self,
        account: Optional[AccountAPI] = None,
        autosign: bool = False,
        publish: bool = False,
    ):
        if account is None:
            self._account = select_account()
        else:
            self._account = account
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        if isinstance(self._account, KeyfileAccount):
            # test accounts always sign automatically
            self._account.set_autosign(autosign)
        if publish:
            check_explorer_plugin()
        self.publish = publish
        print_deployment_info(account_address=self._account.address, publish=publish)

    def get_network(self) -> str:
        return network_identity(networks.provider.network)

    def get_contract_factory(self, name: str) -> ApeContractFactory:
        container = _find_contract_container(name)
        return ApeContractFactory(
            container=container,
            account=self._account,
            publish=self.publish,
            required_confirmations=networks.provider.network.required_confirmations,
        )
