"""Result records returned by ``deploy_tokens``."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

from eth_utils import is_checksum_address

from token_deployer.environments import Environment


@dataclass(frozen=True)
class TokenReference:
    """Handle to a token contract that was created or bound by the loader."""

    symbol: str
    address: str
    contract: Any = field(default=None, repr=False, compare=False)
    created: bool = False


@dataclass(frozen=True)
class TokenDeployment:
    """The four token references for one environment."""

    environment: Environment
    dai: TokenReference
    link: TokenReference
    usdc: TokenReference
    weth: TokenReference

    def __post_init__(self):
        for ref in self.tokens():
            if ref is None or not is_checksum_address(ref.address):
                raise ValueError(f"Token reference without a valid address: {ref!r}")

    def tokens(self) -> Iterator[TokenReference]:
        yield self.dai
        yield self.link
        yield self.usdc
        yield self.weth

    def addresses(self) -> Dict[str, str]:
        """Returns ``{symbol: address}`` in deployment order."""
        return {ref.symbol: ref.address for ref in self.tokens()}

    def to_dict(self) -> Dict[str, Any]:
        return {"environment": self.environment.value, "tokens": self.addresses()}
