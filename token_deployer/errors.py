"""Exceptions raised by the token deployer."""


class TokenDeployerError(Exception):
    """Base class for every error raised by this package."""


class InvalidEnvironmentError(TokenDeployerError, ValueError):
    """Raised when an environment label is not one of the known environments."""

    def __init__(self, environment):
        self.environment = environment
        super().__init__(f"Invalid environment, found {environment}")


class ArtifactNotFoundError(TokenDeployerError):
    """Raised when a contract artifact is missing or has no ABI."""


class InvalidAddressError(TokenDeployerError, ValueError):
    """Raised when a contract address is not a 20-byte hex address."""


class DeploymentError(TokenDeployerError):
    """Raised when a contract creation transaction does not produce a contract."""


class ConfigurationError(TokenDeployerError, ValueError):
    """Raised when an environment variable holds an unusable value."""
