"""
Token deployer: creates mock token contracts on a local chain or binds to the
canonical DAI/LINK/USDC/WETH contracts on testnet and mainnet.
"""

from token_deployer.environments import Environment, parse_environment
from token_deployer.errors import (
    TokenDeployerError,
    InvalidEnvironmentError,
    ArtifactNotFoundError,
    InvalidAddressError,
    DeploymentError,
    ConfigurationError,
)
from token_deployer.models.token_deployment import TokenReference, TokenDeployment
from token_deployer.loader import ArtifactLoader, ContractArtifactFactory
from token_deployer.deployer import deploy_tokens

__all__ = [
    'Environment',
    'parse_environment',
    'TokenDeployerError',
    'InvalidEnvironmentError',
    'ArtifactNotFoundError',
    'InvalidAddressError',
    'DeploymentError',
    'ConfigurationError',
    'TokenReference',
    'TokenDeployment',
    'ArtifactLoader',
    'ContractArtifactFactory',
    'deploy_tokens',
]
