"""
Deployment Errors
Raised by the network, wallet, artifact and factory layers
"""


class DeployError(Exception):
    """Base class for deployment failures"""


class NetworkConfigError(DeployError):
    """Network is unknown or misconfigured"""


class NetworkConnectionError(DeployError):
    """RPC endpoint did not answer"""


class WalletError(DeployError):
    """No usable deployer account"""


class ArtifactNotFoundError(DeployError):
    """Compiled contract artifact missing or not deployable"""


class DeploymentError(DeployError):
    """Deployment transaction reverted or was not yet confirmed"""
