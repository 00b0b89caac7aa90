"""Token Deployer: resolves DAI, LINK, USDC and WETH for an environment."""

import logging
from typing import Optional, Union

from token_deployer.cli.view import View
from token_deployer.config.tokens import DEPLOY_GAS_LIMIT
from token_deployer.environments import Environment, get_plan, parse_environment
from token_deployer.models.token_deployment import TokenDeployment

logger = logging.getLogger(__name__)


def deploy_tokens(loader, environment: Union[str, Environment], gas_limit: int = DEPLOY_GAS_LIMIT,
                  view: Optional[View] = None, plans=None) -> TokenDeployment:
    """
    Creates (LOCAL) or binds (TESTNET, PRODUCTION) the four token contracts
    and prints their addresses.

    Args:
        loader: Object exposing ``from_artifact(name)`` and ``from_artifact(name, address)``,
                e.g. an ``ArtifactLoader``.
        environment: ``Environment`` or its label.
        gas_limit: Gas allowance for each creation on LOCAL.
        view: Output sink for the address lines (a default ``View`` if omitted).
        plans: Optional replacement for ``DEPLOYMENT_PLANS``.

    Returns:
        TokenDeployment holding the four references.

    Raises:
        InvalidEnvironmentError: if ``environment`` is not recognized. Nothing
        is sent to the loader in that case.
    """
    env = parse_environment(environment)
    plan = get_plan(env, plans)
    view = view or View()

    # Resolve every creation artifact before the first transaction is sent
    factories = {}
    for source in plan:
        if source.creates and source.artifact not in factories:
            factories[source.artifact] = loader.from_artifact(source.artifact)

    refs = {}
    for source in plan:
        if source.creates:
            logger.debug("Creating %s from %s (gas %s)", source.symbol, source.artifact, gas_limit)
            refs[source.symbol] = factories[source.artifact].new(gas=gas_limit, symbol=source.symbol)
        else:
            logger.debug("Binding %s to %s", source.symbol, source.address)
            refs[source.symbol] = loader.from_artifact(source.artifact, source.address, symbol=source.symbol)

    deployment = TokenDeployment(
        environment=env,
        dai=refs["DAI"],
        link=refs["LINK"],
        usdc=refs["USDC"],
        weth=refs["WETH"],
    )
    view.display_token_addresses(deployment.addresses())
    return deployment
