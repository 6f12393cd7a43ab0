import click

from nft_deployment.constants import VERIFICATION_CONTRACT_ADDRESS, VERIFICATION_CONTRACT_ENVVAR
from nft_deployment.orchestrator import PLANS
from nft_deployment.types import ChecksumAddress

contract_option = click.option(
    "--contract",
    "-c",
    "contract_name",
    help="Contract to deploy",
    type=click.Choice(list(PLANS)),
    required=True,
)

verification_address_option = click.option(
    "--verification-address",
    "-v",
    help="Address of the deployed BrandVerificationNFT passed to ProductSeriesNFT",
    type=ChecksumAddress(),
    envvar=VERIFICATION_CONTRACT_ENVVAR,
    default=VERIFICATION_CONTRACT_ADDRESS,
    show_default=True,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions and skip confirmation prompts",
    is_flag=True,
    default=False,
)

publish_option = click.option(
    "--publish",
    help="Publish the deployed contract to the network explorer",
    is_flag=True,
    default=False,
)
