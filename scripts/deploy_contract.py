"""
Smart Contract Deployment Script
Deploys the SecureSwapDEX contract to the active network
"""

import sys
import asyncio
from loguru import logger

from blockchain.contract_factory import get_contract_factory
from utils.logger_setup import configure_logging


CONTRACT_NAME = "SecureSwapDEX"


async def main():
    """Deploy SecureSwapDEX and print its address"""
    factory = get_contract_factory(CONTRACT_NAME)
    contract = factory.deploy()

    await contract.deployed()

    print(f"{CONTRACT_NAME} contract deployed to: {contract.address}")


def run() -> int:
    """
    Run the deployment once

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    try:
        configure_logging()
        asyncio.run(main())
    except Exception as e:
        logger.opt(exception=e).error(f"{CONTRACT_NAME} deployment failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(run())
