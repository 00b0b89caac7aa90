"""
Network settings for each deployment environment.

Values can be overridden with environment variables (``.env`` is loaded by
``main.py``).
"""

import os

DEFAULT_RPC_URLS = {
    "LOCAL": os.environ.get("LOCAL_RPC_URL", "http://127.0.0.1:8545"),
    "TESTNET": os.environ.get("TESTNET_RPC_URL", "https://rinkeby.infura.io/v3/"),
    "PRODUCTION": os.environ.get("PRODUCTION_RPC_URL", "https://mainnet.infura.io/v3/"),
}

# Expected chain ids, used only to warn about a mismatched RPC endpoint
CHAIN_IDS = {
    "LOCAL": int(os.environ.get("LOCAL_CHAIN_ID", 1337)),
    "TESTNET": 4,       # Rinkeby
    "PRODUCTION": 1,    # Ethereum mainnet
}


def get_rpc_url(environment_label: str, override: str = None) -> str:
    """Returns the RPC URL for an environment; ``override`` or ``RPC_URL`` win."""
    if override:
        return override
    return os.environ.get("RPC_URL") or DEFAULT_RPC_URLS[environment_label]
