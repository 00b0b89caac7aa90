"""Deployment environments and the per-environment token resolution plans.

Each environment maps to an ordered tuple of ``TokenSource`` entries, so the
deployer walks data instead of branching on the environment label. Adding an
environment means adding a plan here.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple, Union

from token_deployer.config.tokens import (
    TOKEN_SYMBOLS,
    TOKEN_ADDRESSES,
    BOUND_ARTIFACT,
    MOCK_ARTIFACTS,
)
from token_deployer.errors import InvalidEnvironmentError

__all__ = ["Environment", "TokenSource", "parse_environment", "build_plans", "DEPLOYMENT_PLANS", "get_plan"]


class Environment(str, Enum):
    LOCAL = "LOCAL"
    TESTNET = "TESTNET"
    PRODUCTION = "PRODUCTION"


@dataclass(frozen=True, slots=True)
class TokenSource:
    symbol: str                     # "DAI", "LINK", ...
    artifact: str                   # artifact name passed to the loader
    address: Optional[str] = None   # None means "create a new instance"

    @property
    def creates(self) -> bool:
        return self.address is None


def parse_environment(value: Union[str, Environment]) -> Environment:
    """Turns a label such as ``"testnet"`` into an ``Environment``."""
    if isinstance(value, Environment):
        return value
    if isinstance(value, str):
        try:
            return Environment(value.strip().upper())
        except ValueError:
            pass
    raise InvalidEnvironmentError(value)


def build_plans(token_addresses: Mapping[str, Mapping[str, str]] = TOKEN_ADDRESSES) -> Dict[Environment, Tuple[TokenSource, ...]]:
    """
    Builds the environment -> token plan table.

    Args:
        token_addresses: ``{env_label: {symbol: address}}`` for every bound environment.

    Returns:
        Plans keyed by environment, each in ``TOKEN_SYMBOLS`` order.
    """
    plans = {
        Environment.LOCAL: tuple(
            TokenSource(symbol=symbol, artifact=MOCK_ARTIFACTS[symbol])
            for symbol in TOKEN_SYMBOLS
        ),
    }
    for env in (Environment.TESTNET, Environment.PRODUCTION):
        addresses = token_addresses[env.value]
        plans[env] = tuple(
            TokenSource(symbol=symbol, artifact=BOUND_ARTIFACT, address=addresses[symbol])
            for symbol in TOKEN_SYMBOLS
        )
    return plans


DEPLOYMENT_PLANS = build_plans()


def get_plan(environment: Union[str, Environment], plans: Optional[Mapping[Environment, Tuple[TokenSource, ...]]] = None) -> Tuple[TokenSource, ...]:
    env = parse_environment(environment)
    plans = DEPLOYMENT_PLANS if plans is None else plans
    try:
        return plans[env]
    except KeyError as exc:
        raise InvalidEnvironmentError(env.value) from exc
