import os
from typing import Optional

from web3 import Web3
from eth_account import Account

from token_deployer.config.network import CHAIN_IDS, get_rpc_url


class DeployerContext:
    """Holds the Web3 connection and the optional signing account."""

    def __init__(self, environment_label: str = "LOCAL", rpc_url: Optional[str] = None,
                 private_key: Optional[str] = None):
        self.environment_label = environment_label
        self.rpc_url = get_rpc_url(environment_label, rpc_url)

        self.w3 = Web3(Web3.HTTPProvider(self.rpc_url))

        # Same env var the rest of the tooling relies on
        private_key = private_key or os.getenv("PRIVATE_KEY")
        self.account = Account.from_key(private_key) if private_key else None
        self.address = self.account.address if self.account else None

    def is_connected(self) -> bool:
        return self.w3.is_connected()

    def chain_id_mismatch(self) -> Optional[str]:
        """Returns a warning message when the node's chain id is not the expected one."""
        expected = CHAIN_IDS.get(self.environment_label)
        actual = self.w3.eth.chain_id
        if expected is not None and actual != expected:
            return f"Connected to chain {actual}, expected {expected} for {self.environment_label}"
        return None
