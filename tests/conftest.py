"""
Shared fixtures for deployment tests
"""

import json
import pytest
from unittest.mock import Mock
from loguru import logger
from web3 import Web3

from blockchain.network_config import NetworkConfig


DEPLOYER = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'
DEPLOYER_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'
CONTRACT_ADDRESS = '0xabcdef0123456789abcdef0123456789abcdef01'
TX_HASH = bytes.fromhex('12' * 32)

SECURESWAP_ABI = [
    {
        "inputs": [],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "owner",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]
SECURESWAP_BYTECODE = '0x600a600c600039600a6000f3602a60005260206000f3'


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks bound to a test's captured stderr"""
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env settings out of the tests"""
    for var in (
        'DEPLOY_NETWORK',
        'NETWORKS_CONFIG',
        'DEPLOYER_PRIVATE_KEY',
        'ARTIFACTS_PATH',
        'LOG_LEVEL',
        'DEPLOY_LOG_FILE'
    ):
        monkeypatch.delenv(var, raising=False)


def write_artifact(root, contract_name, abi=None, bytecode=SECURESWAP_BYTECODE, subdir=None):
    """Write an artifact JSON the way the compiler lays it out"""
    directory = root / (subdir or f'contracts/{contract_name}.sol')
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / f'{contract_name}.json'
    path.write_text(json.dumps({
        'contractName': contract_name,
        'abi': SECURESWAP_ABI if abi is None else abi,
        'bytecode': bytecode
    }))
    return path


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts directory holding a compiled SecureSwapDEX"""
    root = tmp_path / 'artifacts'
    write_artifact(root, 'SecureSwapDEX')
    return root


@pytest.fixture
def network():
    """Local network settings"""
    return NetworkConfig('localhost', {
        'url': 'http://127.0.0.1:8545',
        'chain_id': 31337,
        'confirmation_timeout': 30,
        'poll_latency': 0.1
    })


@pytest.fixture
def receipt():
    """Successful deployment receipt"""
    return {
        'status': 1,
        'contractAddress': CONTRACT_ADDRESS,
        'blockNumber': 1,
        'gasUsed': 250000
    }


@pytest.fixture
def w3(receipt):
    """Mock Web3 instance behaving like a local development node"""
    w3 = Mock()
    w3.from_wei = Web3.from_wei

    constructor = Mock()
    constructor.estimate_gas.return_value = 100000
    constructor.build_transaction.side_effect = lambda params: dict(
        params, data=SECURESWAP_BYTECODE, value=0
    )

    contract = Mock()
    contract.constructor.return_value = constructor

    w3.eth.contract.return_value = contract
    w3.eth.accounts = [DEPLOYER]
    w3.eth.chain_id = 31337
    w3.eth.gas_price = Web3.to_wei(2, 'gwei')
    w3.eth.get_transaction_count.return_value = 7
    w3.eth.send_transaction.return_value = TX_HASH
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = receipt

    return w3


@pytest.fixture
def wallet():
    """Mock deployer wallet"""
    wallet = Mock()
    wallet.address = DEPLOYER
    wallet.send_transaction.return_value = TX_HASH
    return wallet
