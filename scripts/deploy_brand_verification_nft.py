#!/usr/bin/python3

import sys

from nft_deployment.client import ApeChainClient
from nft_deployment.orchestrator import BRAND_VERIFICATION_PLAN, DeploymentOrchestrator

PUBLISH = False
AUTOSIGN = False


def main():
    """
    Deploys BrandVerificationNFT.

    ape run deploy_brand_verification_nft --network monad:testnet:node
    """
    client = ApeChainClient(autosign=AUTOSIGN, publish=PUBLISH)
    orchestrator = DeploymentOrchestrator(client=client, interactive=not AUTOSIGN)
    result = orchestrator.run(plan=BRAND_VERIFICATION_PLAN)
    if not result.ok:
        sys.exit(result.exit_code)
    return result.address
