#!/usr/bin/python3

import sys

from nft_deployment.client import ApeChainClient
from nft_deployment.constants import BRAND_VERIFICATION_NFT, VERIFICATION_CONTRACT_ADDRESS
from nft_deployment.orchestrator import PRODUCT_SERIES_PLAN, DeploymentOrchestrator

PUBLISH = False
AUTOSIGN = False

# Update after each BrandVerificationNFT deployment
VERIFICATION_CONTRACT = VERIFICATION_CONTRACT_ADDRESS


def main():
    """
    Deploys ProductSeriesNFT wired to an existing BrandVerificationNFT.

    ape run deploy_product_series_nft --network monad:testnet:node
    """
    client = ApeChainClient(autosign=AUTOSIGN, publish=PUBLISH)
    orchestrator = DeploymentOrchestrator(client=client, interactive=not AUTOSIGN)
    result = orchestrator.run(
        plan=PRODUCT_SERIES_PLAN,
        prior_addresses={BRAND_VERIFICATION_NFT: VERIFICATION_CONTRACT},
    )
    if not result.ok:
        sys.exit(result.exit_code)
    return result.address
