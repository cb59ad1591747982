"""
Artifact Store
Resolves compiled contract artifacts (ABI + bytecode) by contract name
"""

import os
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional
from loguru import logger

from .exceptions import ArtifactNotFoundError


DEFAULT_ARTIFACTS_PATH = "artifacts"


@dataclass
class ContractArtifact:
    """Compiled contract as written by the compiler toolchain"""
    contract_name: str
    abi: List[Dict]
    bytecode: str
    source_path: Path


class ArtifactStore:
    """
    Looks up artifacts under an artifacts directory

    Layout: <root>/contracts/<Name>.sol/<Name>.json, with a fallback search
    for any <Name>.json below the root.
    """

    def __init__(self, root: Optional[str] = None):
        """
        Initialize Artifact Store

        Args:
            root: Artifacts directory (None = ARTIFACTS_PATH env or 'artifacts')
        """
        self.root = Path(root or os.getenv('ARTIFACTS_PATH', DEFAULT_ARTIFACTS_PATH))

    def get(self, contract_name: str) -> ContractArtifact:
        """
        Load artifact for a contract

        Args:
            contract_name: Contract name, e.g. 'SecureSwapDEX'

        Returns:
            ContractArtifact
        """
        path = self._find(contract_name)

        with open(path, 'r') as f:
            artifact_json = json.load(f)

        abi = artifact_json.get('abi')
        bytecode = artifact_json.get('bytecode') or ''

        if abi is None:
            raise ArtifactNotFoundError(f"Artifact for {contract_name} has no ABI: {path}")

        # Interfaces and abstract contracts compile to empty bytecode
        if bytecode in ('', '0x'):
            raise ArtifactNotFoundError(
                f"Artifact for {contract_name} has no bytecode and cannot be deployed"
            )

        logger.debug(f"Loaded artifact {contract_name} from {path}")

        return ContractArtifact(
            contract_name=artifact_json.get('contractName', contract_name),
            abi=abi,
            bytecode=bytecode,
            source_path=path
        )

    def _find(self, contract_name: str) -> Path:
        """Resolve the artifact file for a contract name"""
        conventional = self.root / 'contracts' / f'{contract_name}.sol' / f'{contract_name}.json'

        if conventional.is_file():
            return conventional

        candidates = []

        if self.root.is_dir():
            for path in sorted(self.root.rglob(f'{contract_name}.json')):
                if 'build-info' in path.parts:
                    continue
                candidates.append(path)

        if not candidates:
            raise ArtifactNotFoundError(f"No artifact named {contract_name}")

        if len(candidates) > 1:
            listed = ', '.join(str(p) for p in candidates)
            raise ArtifactNotFoundError(
                f"Multiple artifacts named {contract_name}: {listed}"
            )

        return candidates[0]
