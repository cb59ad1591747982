"""
Wallet Manager
Holds the deployer account and sends transactions from it
"""

import os
from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

from .exceptions import WalletError

load_dotenv()


class WalletManager:
    """
    Deployer wallet

    With DEPLOYER_PRIVATE_KEY set, transactions are signed locally and sent
    raw. Without it, the node's first unlocked account is used, as on a
    local development node.
    """

    def __init__(self, w3: Web3, private_key: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            w3: Web3 instance
            private_key: Deployer key (None = DEPLOYER_PRIVATE_KEY env)
        """
        self.w3 = w3
        private_key = private_key or os.getenv('DEPLOYER_PRIVATE_KEY')

        if private_key:
            self.account = Account.from_key(private_key)
            self.address = self.account.address
        else:
            self.account = None
            accounts = w3.eth.accounts
            if not accounts:
                raise WalletError(
                    "DEPLOYER_PRIVATE_KEY not set and node has no unlocked accounts"
                )
            self.address = Web3.to_checksum_address(accounts[0])

        logger.info(f"Deployer wallet: {self.address}")

    @property
    def is_local_signer(self) -> bool:
        """True when transactions are signed with a local private key"""
        return self.account is not None

    def send_transaction(self, transaction: Dict) -> bytes:
        """
        Sign (if needed) and send a transaction

        Args:
            transaction: Transaction dict

        Returns:
            Transaction hash
        """
        if self.account is None:
            return self.w3.eth.send_transaction(transaction)

        try:
            signed_tx = self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
