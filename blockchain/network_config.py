"""
Network Configuration
Selects the target network and builds a connected Web3 client
"""

import os
import json
from typing import Dict, Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from .exceptions import NetworkConfigError, NetworkConnectionError

load_dotenv()


DEFAULT_NETWORK = 'localhost'
DEFAULT_CONFIG_PATH = 'config/networks.json'

# Used when no networks file is present
DEFAULT_NETWORKS = {
    'localhost': {
        'url': 'http://127.0.0.1:8545',
        'chain_id': 31337
    }
}


class NetworkConfig:
    """
    Settings for one named network

    Entries come from config/networks.json:
        url / url_env, chain_id, confirmation_timeout,
        poll_latency, gas_multiplier, default_gas_limit
    """

    def __init__(self, name: str, settings: Dict):
        """
        Initialize Network Config

        Args:
            name: Network name
            settings: Raw network entry from the networks file
        """
        self.name = name
        self.url = self._resolve_url(name, settings)
        self.chain_id = settings.get('chain_id')
        self.confirmation_timeout = float(settings.get('confirmation_timeout', 120))
        self.poll_latency = float(settings.get('poll_latency', 0.5))
        self.gas_multiplier = float(settings.get('gas_multiplier', 1.2))
        self.default_gas_limit = int(settings.get('default_gas_limit', 3_000_000))

    @staticmethod
    def _resolve_url(name: str, settings: Dict) -> str:
        """Literal url wins, otherwise read it from url_env"""
        if settings.get('url'):
            return settings['url']

        url_env = settings.get('url_env')
        if url_env:
            url = os.getenv(url_env)
            if url:
                return url
            raise NetworkConfigError(f"{url_env} must be set for network '{name}'")

        raise NetworkConfigError(f"Network '{name}' has no url or url_env")

    @classmethod
    def load(
        cls,
        name: Optional[str] = None,
        config_path: Optional[str] = None
    ) -> 'NetworkConfig':
        """
        Load the active network

        Args:
            name: Network name (None = DEPLOY_NETWORK env or 'localhost')
            config_path: Networks file (None = NETWORKS_CONFIG env or default)

        Returns:
            NetworkConfig
        """
        network_name = name or os.getenv('DEPLOY_NETWORK', DEFAULT_NETWORK)
        path = config_path or os.getenv('NETWORKS_CONFIG', DEFAULT_CONFIG_PATH)

        if os.path.exists(path):
            with open(path, 'r') as f:
                networks = json.load(f).get('networks')

            if not isinstance(networks, dict):
                raise NetworkConfigError(f"{path} has no 'networks' table")
        else:
            logger.debug(f"Networks file {path} not found, using built-in defaults")
            networks = DEFAULT_NETWORKS

        if network_name not in networks:
            available = ', '.join(sorted(networks))
            raise NetworkConfigError(
                f"Unknown network '{network_name}' (available: {available})"
            )

        return cls(network_name, networks[network_name])

    def connect(self) -> Web3:
        """
        Create a Web3 client for this network and check it answers

        Returns:
            Connected Web3 instance
        """
        w3 = Web3(Web3.HTTPProvider(self.url))

        if not w3.is_connected():
            raise NetworkConnectionError(
                f"Failed to connect to network '{self.name}' at {self.url}"
            )

        if self.chain_id is not None:
            node_chain_id = w3.eth.chain_id
            if node_chain_id != self.chain_id:
                raise NetworkConfigError(
                    f"Network '{self.name}' expects chain id {self.chain_id}, "
                    f"node reports {node_chain_id}"
                )

        logger.info(f"Connected to {self.name}")
        return w3
