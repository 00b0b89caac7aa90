from .token_deployment import TokenReference, TokenDeployment

__all__ = [
    "TokenReference",
    "TokenDeployment"
]
