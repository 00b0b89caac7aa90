"""ABIs bundled with the deployer."""

from token_deployer.config.abis.erc20 import ERC20_ABI

__all__ = ["ERC20_ABI"]
