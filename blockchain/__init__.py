"""
Blockchain Deployment Package
Handles networks, the deployer wallet, artifacts and contract factories
"""

from .exceptions import (
    DeployError,
    NetworkConfigError,
    NetworkConnectionError,
    WalletError,
    ArtifactNotFoundError,
    DeploymentError
)
from .artifacts import ArtifactStore, ContractArtifact
from .network_config import NetworkConfig
from .wallet_manager import WalletManager
from .contract_factory import ContractFactory, DeployedContract, get_contract_factory

__all__ = [
    'DeployError',
    'NetworkConfigError',
    'NetworkConnectionError',
    'WalletError',
    'ArtifactNotFoundError',
    'DeploymentError',
    'ArtifactStore',
    'ContractArtifact',
    'NetworkConfig',
    'WalletManager',
    'ContractFactory',
    'DeployedContract',
    'get_contract_factory'
]
