"""
Configuration package for the token deployer.
"""

from token_deployer.config.network import (
    DEFAULT_RPC_URLS,
    CHAIN_IDS,
    get_rpc_url
)

from token_deployer.config.tokens import (
    TOKEN_SYMBOLS,
    TOKEN_ADDRESSES,
    DEPLOY_GAS_LIMIT,
    BOUND_ARTIFACT,
    MOCK_ARTIFACTS,
    load_token_addresses,
    read_gas_limit
)

from token_deployer.config.abis import (
    ERC20_ABI
)

__all__ = [
    # Network
    'DEFAULT_RPC_URLS',
    'CHAIN_IDS',
    'get_rpc_url',

    # Tokens
    'TOKEN_SYMBOLS',
    'TOKEN_ADDRESSES',
    'DEPLOY_GAS_LIMIT',
    'BOUND_ARTIFACT',
    'MOCK_ARTIFACTS',
    'load_token_addresses',
    'read_gas_limit',

    # ABIs
    'ERC20_ABI'
]
