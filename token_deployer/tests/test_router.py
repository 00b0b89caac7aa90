import json
from unittest.mock import MagicMock

import pytest

from token_deployer.cli.router import Router


class FakeContext:
    def __init__(self, environment_label, rpc_url=None, connected=True, warning=None):
        self.environment_label = environment_label
        self.rpc_url = rpc_url or "http://127.0.0.1:8545"
        self.w3 = MagicMock()
        self.account = None
        self.address = None
        self._connected = connected
        self._warning = warning

    def is_connected(self):
        return self._connected

    def chain_id_mismatch(self):
        return self._warning


def make_router(**context_kwargs):
    return Router(context_factory=lambda **kw: FakeContext(**kw, **context_kwargs))


def test_environments_command(capsys):
    assert make_router().dispatch(["environments"]) == 0
    assert capsys.readouterr().out.splitlines() == ["LOCAL", "TESTNET", "PRODUCTION"]


def test_plan_command_does_not_connect(capsys):
    router = Router(context_factory=MagicMock(side_effect=AssertionError("no connection expected")))
    assert router.dispatch(["plan", "--env", "local"]) == 0

    out = capsys.readouterr().out
    assert "=== LOCAL ===" in out
    assert "WETH: new WETHMock" in out


def test_deploy_production_writes_output(tmp_path, capsys):
    output = tmp_path / "addresses.json"
    code = make_router().dispatch(["deploy", "--env", "PRODUCTION", "--output", str(output)])

    assert code == 0
    data = json.loads(output.read_text())
    assert data["environment"] == "PRODUCTION"
    assert data["tokens"]["LINK"] == "0x514910771AF9Ca656af840dff83E8264EcF986CA"
    assert "LINK: 0x514910771AF9Ca656af840dff83E8264EcF986CA" in capsys.readouterr().out


def test_deploy_reports_connection_failure(capsys):
    assert make_router(connected=False).dispatch(["deploy", "--env", "TESTNET"]) == 1
    assert "Failed to connect" in capsys.readouterr().out


def test_deploy_warns_on_chain_mismatch(capsys):
    router = make_router(warning="Connected to chain 5, expected 4 for TESTNET")
    assert router.dispatch(["deploy", "--env", "TESTNET"]) == 0
    assert "expected 4 for TESTNET" in capsys.readouterr().out


def test_deploy_local_without_artifacts_reports_error(tmp_path, capsys):
    code = make_router().dispatch(["deploy", "--env", "LOCAL", "--artifacts", str(tmp_path)])
    assert code == 1
    assert "ERROR: Artifact ERC20Mock not found" in capsys.readouterr().out


def test_unknown_environment_rejected_by_parser():
    with pytest.raises(SystemExit):
        Router().parser.parse_args(["deploy", "--env", "STAGING"])
    assert make_router().dispatch(["deploy", "--env", "STAGING"]) == 2
