"""Artifact loader: resolves compiled contracts by name and either deploys a
new instance or binds to an existing address.

Artifacts are JSON files named ``<artifact>.json`` inside the artifacts
directory, in Truffle (``"bytecode": "0x..."``) or Hardhat/Foundry
(``"bytecode": {"object": "0x..."}``) layout.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from eth_utils import is_address, to_checksum_address
from web3 import Web3

from token_deployer.config.abis import ERC20_ABI
from token_deployer.config.tokens import BOUND_ARTIFACT, DEPLOY_GAS_LIMIT
from token_deployer.errors import ArtifactNotFoundError, DeploymentError, InvalidAddressError
from token_deployer.models.token_deployment import TokenReference

logger = logging.getLogger(__name__)

# ABIs usable without an artifact file (binding only)
BUILTIN_ABIS = {BOUND_ARTIFACT: ERC20_ABI}


def _read_bytecode(raw: Any) -> Optional[str]:
    if isinstance(raw, dict):
        raw = raw.get("object")
    if not raw or raw in ("0x", "0x0"):
        return None
    return raw if raw.startswith("0x") else "0x" + raw


class ContractArtifactFactory:
    """A resolved artifact that can create new contract instances."""

    def __init__(self, loader: "ArtifactLoader", name: str, abi: List[Dict[str, Any]], bytecode: Optional[str]):
        self.loader = loader
        self.name = name
        self.abi = abi
        self.bytecode = bytecode

    def new(self, gas: int = DEPLOY_GAS_LIMIT, symbol: Optional[str] = None) -> TokenReference:
        """
        Deploys a new instance of the artifact.

        Args:
            gas: Gas limit for the creation transaction.
            symbol: Token symbol recorded on the returned reference (defaults to the artifact name).

        Returns:
            TokenReference for the created contract.
        """
        if not self.bytecode:
            raise DeploymentError(f"Artifact {self.name} has no bytecode; it cannot be deployed")

        w3 = self.loader.w3
        factory = w3.eth.contract(abi=self.abi, bytecode=self.bytecode)
        tx_hash = self.loader.send_creation(factory.constructor(), gas)
        logger.debug("Sent %s creation transaction %s", self.name, tx_hash)

        receipt = w3.eth.wait_for_transaction_receipt(tx_hash)
        if receipt["status"] != 1 or not receipt.get("contractAddress"):
            raise DeploymentError(f"Creation of {self.name} failed (tx {Web3.to_hex(tx_hash)})")

        address = to_checksum_address(receipt["contractAddress"])
        logger.debug("Deployed %s at %s", self.name, address)
        return TokenReference(
            symbol=symbol or self.name,
            address=address,
            contract=w3.eth.contract(address=address, abi=self.abi),
            created=True,
        )


class ArtifactLoader:
    """Resolves artifacts against a Web3 connection."""

    def __init__(self, w3: Web3, artifacts_dir: Union[str, Path] = "build/contracts", account=None, sender: Optional[str] = None):
        """
        Args:
            w3: Connected Web3 instance.
            artifacts_dir: Directory holding ``<name>.json`` artifacts.
            account: Optional eth_account ``LocalAccount`` used to sign creation transactions.
            sender: Unlocked node account used when no signing account is given
                    (defaults to the node's first account).
        """
        self.w3 = w3
        self.artifacts_dir = Path(artifacts_dir)
        self.account = account
        self.sender = sender
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_artifact(self, name: str) -> Dict[str, Any]:
        """Reads and caches ``{"abi": [...], "bytecode": str | None}`` for an artifact."""
        if name in self._cache:
            return self._cache[name]

        path = self.artifacts_dir / f"{name}.json"
        if path.is_file():
            try:
                data = json.loads(path.read_text())
            except json.JSONDecodeError as e:
                raise ArtifactNotFoundError(f"Artifact {path} is not valid JSON: {e}") from e
            abi = data.get("abi") if isinstance(data, dict) else None
            if not abi:
                raise ArtifactNotFoundError(f"Artifact {path} has no ABI")
            artifact = {"abi": abi, "bytecode": _read_bytecode(data.get("bytecode"))}
        elif name in BUILTIN_ABIS:
            artifact = {"abi": BUILTIN_ABIS[name], "bytecode": None}
        else:
            raise ArtifactNotFoundError(f"Artifact {name} not found in {self.artifacts_dir}")

        self._cache[name] = artifact
        return artifact

    def from_artifact(self, name: str, address: Optional[str] = None, symbol: Optional[str] = None):
        """
        Resolves an artifact by name.

        Without ``address`` the result is a ``ContractArtifactFactory`` whose
        ``new()`` creates a fresh instance. With ``address`` the result is a
        ``TokenReference`` bound to the existing contract.
        """
        artifact = self.load_artifact(name)
        if address is None:
            return ContractArtifactFactory(self, name, artifact["abi"], artifact["bytecode"])

        if not isinstance(address, str) or not is_address(address.lower()):
            raise InvalidAddressError(f"Invalid address for {symbol or name}: {address!r}")
        checksum = to_checksum_address(address)
        return TokenReference(
            symbol=symbol or name,
            address=checksum,
            contract=self.w3.eth.contract(address=checksum, abi=artifact["abi"]),
            created=False,
        )

    def send_creation(self, constructor, gas: int):
        """Sends a constructor call, signed locally when an account is configured."""
        if self.account is not None:
            tx = constructor.build_transaction({
                "from": self.account.address,
                "gas": gas,
                "nonce": self.w3.eth.get_transaction_count(self.account.address),
                "chainId": self.w3.eth.chain_id,
            })
            signed_tx = self.account.sign_transaction(tx)
            return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

        sender = self.sender
        if sender is None:
            accounts = self.w3.eth.accounts
            if not accounts:
                raise DeploymentError(
                    "No signing account configured and the node has no unlocked accounts; set PRIVATE_KEY"
                )
            sender = accounts[0]
        return constructor.transact({"from": sender, "gas": gas})
