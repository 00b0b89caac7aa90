import itertools

import pytest
from eth_utils import to_checksum_address

from token_deployer.models.token_deployment import TokenReference

_address_counter = itertools.count(1)


class FakeFactory:
    def __init__(self, loader, name):
        self.loader = loader
        self.name = name

    def new(self, gas, symbol=None):
        self.loader.calls.append(("new", self.name, gas))
        address = to_checksum_address("0x" + f"{next(_address_counter):040x}")
        return TokenReference(symbol=symbol or self.name, address=address, created=True)


class FakeLoader:
    """Records every call; creates sequential addresses instead of deploying."""

    def __init__(self):
        self.calls = []

    def from_artifact(self, name, address=None, symbol=None):
        if address is None:
            self.calls.append(("resolve", name))
            return FakeFactory(self, name)
        self.calls.append(("bind", name, address))
        return TokenReference(symbol=symbol or name, address=to_checksum_address(address))


@pytest.fixture
def fake_loader():
    return FakeLoader()
