"""
Contract Factory
Builds and submits contract deployment transactions
"""

import asyncio
from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from .artifacts import ArtifactStore, ContractArtifact
from .exceptions import DeploymentError
from .network_config import NetworkConfig
from .wallet_manager import WalletManager


class DeployedContract:
    """
    Handle for a submitted deployment

    The address is known once deployed() has returned.
    """

    def __init__(
        self,
        w3: Web3,
        contract_name: str,
        tx_hash: bytes,
        network: NetworkConfig
    ):
        self.w3 = w3
        self.contract_name = contract_name
        self.tx_hash = tx_hash
        self.network = network
        self.receipt = None
        self._address = None

    @property
    def address(self) -> str:
        if self._address is None:
            raise DeploymentError(f"{self.contract_name} deployment not confirmed yet")
        return self._address

    async def deployed(self) -> 'DeployedContract':
        """
        Wait until the deployment transaction is mined

        Raises web3's TimeExhausted if no receipt arrives within the
        network's confirmation timeout.

        Returns:
            self, with address and receipt set
        """
        logger.info(f"Waiting for confirmation of {Web3.to_hex(self.tx_hash)}...")

        receipt = await asyncio.get_event_loop().run_in_executor(
            None,
            self.w3.eth.wait_for_transaction_receipt,
            self.tx_hash,
            self.network.confirmation_timeout,
            self.network.poll_latency
        )

        if receipt['status'] != 1:
            raise DeploymentError(
                f"{self.contract_name} deployment reverted "
                f"(tx {Web3.to_hex(self.tx_hash)})"
            )

        contract_address = receipt['contractAddress']
        if not contract_address:
            raise DeploymentError(
                f"Receipt for {Web3.to_hex(self.tx_hash)} has no contract address"
            )

        self.receipt = receipt
        self._address = Web3.to_checksum_address(contract_address)

        logger.success(f"{self.contract_name} mined in block {receipt['blockNumber']}")
        logger.info(f"Gas used: {receipt['gasUsed']}")

        return self


class ContractFactory:
    """
    Deploys one compiled contract from a wallet on a network
    """

    def __init__(
        self,
        artifact: ContractArtifact,
        w3: Web3,
        wallet: WalletManager,
        network: NetworkConfig
    ):
        """
        Initialize Contract Factory

        Args:
            artifact: Compiled contract
            w3: Web3 instance
            wallet: Deployer wallet
            network: Active network settings
        """
        self.artifact = artifact
        self.w3 = w3
        self.wallet = wallet
        self.network = network
        self.contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    @property
    def contract_name(self) -> str:
        return self.artifact.contract_name

    def deploy(self, *constructor_args) -> DeployedContract:
        """
        Submit the deployment transaction

        Args:
            constructor_args: Constructor arguments

        Returns:
            DeployedContract (not yet confirmed)
        """
        constructor = self.contract.constructor(*constructor_args)

        logger.info(f"Building deployment transaction for {self.contract_name}...")

        transaction = constructor.build_transaction(self._transaction_params(constructor))

        logger.info(f"Gas limit: {transaction['gas']}")
        logger.info(f"Gas price: {self.w3.from_wei(transaction['gasPrice'], 'gwei')} gwei")

        tx_hash = self.wallet.send_transaction(transaction)

        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")

        return DeployedContract(self.w3, self.contract_name, tx_hash, self.network)

    def _transaction_params(self, constructor) -> Dict:
        """Sender, nonce, gas and chain id for the deployment"""
        params = {
            'from': self.wallet.address,
            'nonce': self.w3.eth.get_transaction_count(self.wallet.address, 'pending'),
            'gasPrice': self.w3.eth.gas_price,
            'chainId': self.w3.eth.chain_id
        }
        params['gas'] = self._estimate_gas_limit(constructor)
        return params

    def _estimate_gas_limit(self, constructor) -> int:
        """Node estimate with the network's buffer, or its default limit"""
        try:
            gas_estimate = constructor.estimate_gas({'from': self.wallet.address})
            return int(gas_estimate * self.network.gas_multiplier)
        except Exception as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            return self.network.default_gas_limit


def get_contract_factory(
    contract_name: str,
    network: Optional[NetworkConfig] = None,
    wallet: Optional[WalletManager] = None,
    artifacts: Optional[ArtifactStore] = None
) -> ContractFactory:
    """
    Resolve a factory for a named contract

    Args:
        contract_name: Contract name, e.g. 'SecureSwapDEX'
        network: Network settings (None = active network from config)
        wallet: Deployer wallet (None = from environment)
        artifacts: Artifact store (None = ARTIFACTS_PATH or 'artifacts')

    Returns:
        ContractFactory
    """
    artifact = (artifacts or ArtifactStore()).get(contract_name)

    network = network or NetworkConfig.load()
    w3 = wallet.w3 if wallet else network.connect()
    wallet = wallet or WalletManager(w3)

    return ContractFactory(artifact, w3, wallet, network)
