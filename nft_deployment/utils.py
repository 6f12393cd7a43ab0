from typing import Any, List, Sequence

from ape import networks
from web3.auto import w3

from nft_deployment.errors import ConstructorArgumentsError
from nft_deployment.networks import is_local_network


def validate_constructor_args(
    contract_name: str, abi_inputs: List[Any], args: Sequence[Any]
) -> None:
    """Validates positional constructor arguments against the constructor ABI."""
    if len(args) != len(abi_inputs):
        raise ConstructorArgumentsError(
            f"Constructor arguments length mismatch - "
            f"{contract_name} ABI requires {len(abi_inputs)}, Got {len(args)}."
        )

    for position, (abi_input, value) in enumerate(zip(abi_inputs, args)):
        if not w3.is_encodable(abi_input.type, value):
            raise ConstructorArgumentsError(
                f"{contract_name} constructor argument '{abi_input.name}' at position {position} "
                f"has a value '{value}' whose type does not match expected ABI type "
                f"'{abi_input.type}'"
            )


def check_explorer_plugin() -> None:
    """Checks that an explorer plugin is available to publish contracts on this network."""
    if is_local_network():
        # unnecessary for local deployment
        return
    network = networks.provider.network
    if network.explorer is None:
        raise ValueError(
            f"No explorer plugin installed for {network.ecosystem.name}:{network.name}; "
            "cannot publish contracts."
        )


def print_deployment_info(account_address: str, publish: bool) -> None:
    network = networks.provider.network
    print(
        f"Account: {account_address}",
        f"Publish: {publish}",
        f"Ecosystem: {network.ecosystem.name}",
        f"Network: {network.name}",
        f"Chain ID: {network.chain_id}",
        sep="\n",
    )
