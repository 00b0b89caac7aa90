"""
Token address tables and deployment constants.

Testnet and mainnet addresses are data, not logic: each one can be replaced
with a ``<ENV>_<SYMBOL>_ADDRESS`` environment variable, e.g.
``TESTNET_LINK_ADDRESS``. Nothing here touches the chain.
"""

import os
from typing import Dict

from token_deployer.errors import ConfigurationError

# Resolution order is fixed
TOKEN_SYMBOLS = ("DAI", "LINK", "USDC", "WETH")

_DEFAULT_GAS_LIMIT = 6_000_000


def read_gas_limit(environ=None) -> int:
    """Reads ``DEPLOY_GAS_LIMIT``, falling back to 6,000,000 when unset."""
    environ = os.environ if environ is None else environ
    raw = environ.get("DEPLOY_GAS_LIMIT")
    if raw is None or not str(raw).strip():
        return _DEFAULT_GAS_LIMIT
    try:
        gas_limit = int(str(raw).strip())
    except ValueError as e:
        raise ConfigurationError(f"DEPLOY_GAS_LIMIT must be an integer, found {raw!r}") from e
    if gas_limit <= 0:
        raise ConfigurationError(f"DEPLOY_GAS_LIMIT must be positive, found {raw!r}")
    return gas_limit


# Gas allowance for each mock creation on LOCAL
DEPLOY_GAS_LIMIT = read_gas_limit()

# Artifact used to bind existing tokens
BOUND_ARTIFACT = "ERC20"

# Artifacts instantiated on LOCAL, per symbol
MOCK_ARTIFACTS = {
    "DAI": "ERC20Mock",
    "LINK": "ERC20Mock",
    "USDC": "ERC20Mock",
    "WETH": "WETHMock",
}

_DEFAULT_TOKEN_ADDRESSES = {
    "TESTNET": {
        "DAI": "0x6b175474e89094c44da98b954eedeac495271d0f",
        "LINK": "0x01BE23585060835E02B77ef475b0Cc51aA1e0709",
        "USDC": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        "WETH": "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
    },
    "PRODUCTION": {
        "DAI": "0x6b175474e89094c44da98b954eedeac495271d0f",
        "LINK": "0x514910771af9ca656af840dff83e8264ecf986ca",
        "USDC": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        "WETH": "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
    },
}


def load_token_addresses(environ=None) -> Dict[str, Dict[str, str]]:
    """
    Builds the address table, applying environment variable overrides.

    Args:
        environ: Mapping to read overrides from (defaults to ``os.environ``).

    Returns:
        ``{environment_label: {symbol: address}}``
    """
    environ = os.environ if environ is None else environ
    return {
        env_label: {
            symbol: environ.get(f"{env_label}_{symbol}_ADDRESS", address)
            for symbol, address in addresses.items()
        }
        for env_label, addresses in _DEFAULT_TOKEN_ADDRESSES.items()
    }


TOKEN_ADDRESSES = load_token_addresses()
