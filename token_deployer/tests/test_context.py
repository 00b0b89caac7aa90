from unittest.mock import MagicMock

from token_deployer.config.network import get_rpc_url
from token_deployer.core.context import DeployerContext

# Well-known throwaway key (first Hardhat dev account)
DEV_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


def test_rpc_url_resolution(monkeypatch):
    monkeypatch.delenv("RPC_URL", raising=False)
    assert get_rpc_url("LOCAL") == "http://127.0.0.1:8545"
    assert get_rpc_url("LOCAL", "http://node:8545") == "http://node:8545"

    monkeypatch.setenv("RPC_URL", "http://from-env:8545")
    assert get_rpc_url("PRODUCTION") == "http://from-env:8545"


def test_context_without_private_key(monkeypatch):
    monkeypatch.delenv("PRIVATE_KEY", raising=False)
    context = DeployerContext("LOCAL", rpc_url="http://127.0.0.1:8545")
    assert context.account is None
    assert context.address is None


def test_context_with_private_key():
    context = DeployerContext("LOCAL", rpc_url="http://127.0.0.1:8545", private_key=DEV_KEY)
    assert context.address == "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def test_chain_id_mismatch():
    context = DeployerContext("PRODUCTION", rpc_url="http://127.0.0.1:8545", private_key=DEV_KEY)
    context.w3 = MagicMock()

    context.w3.eth.chain_id = 1
    assert context.chain_id_mismatch() is None

    context.w3.eth.chain_id = 1337
    assert context.chain_id_mismatch() == "Connected to chain 1337, expected 1 for PRODUCTION"
