from ape import networks
from ape.api import NetworkAPI
from ape.api.networks import LOCAL_NETWORK_NAME

from nft_deployment.constants import NETWORK_IDENTITIES


def is_local_network() -> bool:
    """Returns True if the connected provider runs an ephemeral local network."""
    return networks.provider.network.name == LOCAL_NETWORK_NAME


def network_identity(network: NetworkAPI) -> str:
    """
    Returns the identity used to report a deployment on the given network.
    Known (ecosystem, network) pairs map to a canonical name; anything else
    is reported under its ape network name.
    """
    key = (network.ecosystem.name, network.name)
    return NETWORK_IDENTITIES.get(key, network.name)
