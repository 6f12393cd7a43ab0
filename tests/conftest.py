import pytest
from eth_utils import to_checksum_address

from nft_deployment.client import ChainClient, ContractFactory, DeploymentHandle
from nft_deployment.constants import (
    BRAND_VERIFICATION_NFT,
    LOCAL_NET,
    MONAD_TESTNET,
    PRODUCT_SERIES_NFT,
)
from nft_deployment.errors import TemplateResolutionError
from nft_deployment.reporter import DeploymentReporter

# Common constants
EXPLORER_URL = "https://testnet.monadexplorer.com/address/"

ADDRESS_1 = to_checksum_address("0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa1")
ADDRESS_2 = to_checksum_address("0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb2")
ADDRESS_3 = to_checksum_address("0xccccccccccccccccccccccccccccccccccccccc3")


class FakeHandle(DeploymentHandle):
    def __init__(self, client, address, confirm_error=None):
        self.client = client
        self.address = address
        self.confirm_error = confirm_error
        self._confirmed = False

    @property
    def confirmed(self):
        return self._confirmed

    def wait_for_deployment(self):
        self.client.calls.append("wait_for_deployment")
        if self.confirm_error:
            raise self.confirm_error
        self._confirmed = True

    def get_address(self):
        self.client.calls.append("get_address")
        return self.address


class FakeFactory(ContractFactory):
    def __init__(self, client, name):
        self.client = client
        self._name = name
        self.deployments = list()

    @property
    def name(self):
        return self._name

    def deploy(self, *args):
        self.client.calls.append("deploy")
        self.deployments.append(list(args))
        if self.client.submit_error:
            raise self.client.submit_error
        return FakeHandle(
            self.client, address=self.client.address, confirm_error=self.client.confirm_error
        )


class FakeChainClient(ChainClient):
    """In-memory chain client recording every call made through it."""

    def __init__(
        self,
        network=LOCAL_NET,
        address=ADDRESS_1,
        templates=(BRAND_VERIFICATION_NFT, PRODUCT_SERIES_NFT),
    ):
        self.network = network
        self.address = address
        self.factories = {name: FakeFactory(self, name) for name in templates}
        self.calls = list()
        self.network_error = None
        self.submit_error = None
        self.confirm_error = None

    def get_network(self):
        self.calls.append("get_network")
        if self.network_error:
            raise self.network_error
        return self.network

    def get_contract_factory(self, name):
        self.calls.append("get_contract_factory")
        try:
            return self.factories[name]
        except KeyError:
            raise TemplateResolutionError(f"No contract found with name '{name}'.")


# Fixtures
@pytest.fixture
def client():
    return FakeChainClient()


@pytest.fixture
def testnet_client():
    return FakeChainClient(network=MONAD_TESTNET, address=ADDRESS_2)


@pytest.fixture
def reporter():
    return DeploymentReporter()
