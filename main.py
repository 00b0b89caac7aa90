#!/usr/bin/env python3
"""
Token deployer - main entry point
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

# Load .env BEFORE importing local modules; config reads os.environ at import time
load_dotenv()

from token_deployer.cli.router import Router


def main():
    """Main entry point."""
    # Connection args are parsed first; the rest goes to the router
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument('--rpc', type=str, help='RPC URL (overrides RPC_URL and the per-environment default)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output')
    bot_args, remaining_argv = parser.parse_known_args()

    logging.basicConfig(
        level=logging.DEBUG if bot_args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    router = Router()
    sys.exit(router.dispatch(remaining_argv, rpc_url=bot_args.rpc, verbose=bot_args.verbose))


if __name__ == '__main__':
    main()
