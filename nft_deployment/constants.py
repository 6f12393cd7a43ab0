from enum import Enum
from typing import NamedTuple

#
# Contracts
#

BRAND_VERIFICATION_NFT = "BrandVerificationNFT"
PRODUCT_SERIES_NFT = "ProductSeriesNFT"

# BrandVerificationNFT deployment consumed by ProductSeriesNFT's constructor
VERIFICATION_CONTRACT_ADDRESS = "0x8aCF80674385Bc8e7dd91dddA56A8e6464eBe35a"
VERIFICATION_CONTRACT_ENVVAR = "VERIFICATION_CONTRACT_ADDRESS"

#
# Networks
#

LOCAL_NET = "localNet"
MONAD_TESTNET = "monadTestnet"

# (ecosystem, network) -> network identity
NETWORK_IDENTITIES = {
    ("ethereum", "local"): LOCAL_NET,
    ("monad", "testnet"): MONAD_TESTNET,
}

#
# Explorers
#


class Explorer(NamedTuple):
    label: str
    base_url: str

    def address_url(self, address: str) -> str:
        return f"{self.base_url}/address/{address}"


EXPLORERS = {
    MONAD_TESTNET: Explorer(
        label="Monad Testnet Explorer",
        base_url="https://testnet.monadexplorer.com",
    ),
}

#
# Deployment states as traversed by the orchestrator
#


class DeploymentState(Enum):
    IDLE = "idle"
    NETWORK_RESOLVED = "network resolved"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    REPORTED = "reported"
    FAILED = "failed"


TERMINAL_STATES = (DeploymentState.REPORTED, DeploymentState.FAILED)
