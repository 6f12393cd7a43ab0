from typing import Any, Callable, Dict, List, NamedTuple, Optional

import click
from eth_typing import ChecksumAddress

from nft_deployment.client import ChainClient, DeploymentHandle
from nft_deployment.confirm import _confirm_arguments
from nft_deployment.constants import (
    BRAND_VERIFICATION_NFT,
    PRODUCT_SERIES_NFT,
    TERMINAL_STATES,
    DeploymentState,
)
from nft_deployment.deployer import AddressExtractor, ContractDeployer, NetworkResolver
from nft_deployment.errors import ConstructorArgumentsError, DeploymentError
from nft_deployment.reporter import DeploymentReporter

PriorAddresses = Dict[str, ChecksumAddress]


class ContractPlan(NamedTuple):
    """A contract template plus the way its constructor arguments are built."""

    template_name: str
    build_args: Callable[[PriorAddresses], List[Any]]


def no_arguments(prior_addresses: PriorAddresses) -> List[Any]:
    return []


def verification_contract_argument(prior_addresses: PriorAddresses) -> List[Any]:
    try:
        return [prior_addresses[BRAND_VERIFICATION_NFT]]
    except KeyError:
        raise ConstructorArgumentsError(
            f"{PRODUCT_SERIES_NFT} requires the address of a deployed {BRAND_VERIFICATION_NFT}"
        )


BRAND_VERIFICATION_PLAN = ContractPlan(BRAND_VERIFICATION_NFT, no_arguments)
PRODUCT_SERIES_PLAN = ContractPlan(PRODUCT_SERIES_NFT, verification_contract_argument)

PLANS = {plan.template_name: plan for plan in (BRAND_VERIFICATION_PLAN, PRODUCT_SERIES_PLAN)}


class DeploymentResult(NamedTuple):
    template_name: str
    state: DeploymentState
    network: Optional[str] = None
    address: Optional[ChecksumAddress] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.state == DeploymentState.REPORTED

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


class DeploymentOrchestrator:
    """
    Runs a single contract deployment:

        IDLE -> NETWORK_RESOLVED -> SUBMITTED -> CONFIRMED -> REPORTED

    Any failure before REPORTED ends the run in FAILED. A failed run is
    reported once and returned as a result; it is never retried.
    """

    def __init__(
        self,
        client: ChainClient,
        reporter: Optional[DeploymentReporter] = None,
        interactive: bool = False,
    ):
        self.resolver = NetworkResolver(client)
        self.deployer = ContractDeployer(client)
        self.extractor = AddressExtractor()
        self.reporter = reporter or DeploymentReporter()
        self.interactive = interactive
        self.state = DeploymentState.IDLE

    def _transition(self, state: DeploymentState) -> None:
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"Deployment already finished in state '{self.state.value}'")
        self.state = state

    def _on_submitted(self, handle: DeploymentHandle) -> None:
        self._transition(DeploymentState.SUBMITTED)
        self.reporter.confirming()

    def run(
        self, plan: ContractPlan, prior_addresses: Optional[PriorAddresses] = None
    ) -> DeploymentResult:
        self.state = DeploymentState.IDLE
        prior_addresses = prior_addresses or dict()
        network = None
        try:
            network = self.resolver.resolve()
            self._transition(DeploymentState.NETWORK_RESOLVED)
            self.reporter.deploying(plan.template_name, network)

            template = self.deployer.get_template(plan.template_name)
            args = plan.build_args(prior_addresses)
            if self.interactive:
                _confirm_arguments(args, plan.template_name)

            self.reporter.submitting()
            handle = self.deployer.deploy(template, args, on_submitted=self._on_submitted)
            self._transition(DeploymentState.CONFIRMED)

            address = self.extractor.address_of(handle)
            self.reporter.report(network, address, plan.template_name)
            self._transition(DeploymentState.REPORTED)
        except (DeploymentError, click.Abort) as e:
            self._transition(DeploymentState.FAILED)
            self.reporter.failed(plan.template_name, e)
            return DeploymentResult(
                template_name=plan.template_name, state=self.state, network=network, error=e
            )

        return DeploymentResult(
            template_name=plan.template_name, state=self.state, network=network, address=address
        )
