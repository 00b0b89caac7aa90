import argparse
import json
import sys
import traceback
from pathlib import Path

from .view import View
from ..config.tokens import DEPLOY_GAS_LIMIT
from ..core.context import DeployerContext
from ..deployer import deploy_tokens
from ..environments import Environment, get_plan
from ..errors import TokenDeployerError
from ..loader import ArtifactLoader

ENVIRONMENT_CHOICES = [env.value for env in Environment]


class Router:
    """Parses CLI arguments and dispatches commands."""

    def __init__(self, context_factory=DeployerContext):
        self.parser = self._create_parser()
        self.context_factory = context_factory

    def _create_parser(self):
        parser = argparse.ArgumentParser(description='Token deployer')

        subparsers = parser.add_subparsers(dest='command', help='Command to run', required=True)

        # --- Deploy Command ---
        deploy_parser = subparsers.add_parser('deploy', help='Create (LOCAL) or bind (TESTNET/PRODUCTION) DAI, LINK, USDC and WETH')
        deploy_parser.add_argument('--env', required=True, type=str.upper, choices=ENVIRONMENT_CHOICES, help='Deployment environment')
        deploy_parser.add_argument('--gas-limit', type=int, default=DEPLOY_GAS_LIMIT, help='Gas limit per mock creation (LOCAL only)')
        deploy_parser.add_argument('--artifacts', type=str, default='build/contracts', help='Directory holding <Artifact>.json files')
        deploy_parser.add_argument('--output', type=str, help='Write the resulting addresses to this JSON file')

        # --- Plan Command ---
        plan_parser = subparsers.add_parser('plan', help='Show how each token is resolved, without touching the chain')
        plan_parser.add_argument('--env', required=True, type=str.upper, choices=ENVIRONMENT_CHOICES, help='Deployment environment')

        # --- Environments Command ---
        subparsers.add_parser('environments', help='List recognized environments')

        return parser

    def dispatch(self, argv=None, rpc_url=None, verbose=False) -> int:
        """Parses arguments, runs the command and returns a process exit code."""
        if argv is None:
            argv = sys.argv[1:]

        try:
            args = self.parser.parse_args(argv)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 2

        view = View(verbose=verbose)
        try:
            if args.command == 'environments':
                view.display_environments(ENVIRONMENT_CHOICES)
            elif args.command == 'plan':
                view.display_plan(args.env, get_plan(args.env))
            elif args.command == 'deploy':
                return self._deploy(args, view, rpc_url)
            return 0
        except TokenDeployerError as e:
            view.display_error(str(e))
            return 1
        except Exception as e:
            view.display_error(f"An unexpected error occurred: {e}")
            if verbose:
                traceback.print_exc()
            return 1

    def _deploy(self, args, view: View, rpc_url) -> int:
        context = self.context_factory(environment_label=args.env, rpc_url=rpc_url)
        if not context.is_connected():
            view.display_error(f"Failed to connect to {context.rpc_url}")
            return 1

        warning = context.chain_id_mismatch()
        if warning:
            view.display_warning(warning)
        view.display_verbose(f"Using RPC {context.rpc_url}, sender {context.address or 'node account'}")

        loader = ArtifactLoader(context.w3, args.artifacts, account=context.account)
        deployment = deploy_tokens(loader, args.env, gas_limit=args.gas_limit, view=view)

        if args.output:
            Path(args.output).write_text(json.dumps(deployment.to_dict(), indent=2))
            view.display_success(f"Addresses written to {args.output}")
        return 0
