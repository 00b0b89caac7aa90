from typing import Dict, Iterable


class View:
    """Handles all console output and presentation."""

    def __init__(self, verbose=False):
        self.verbose = verbose

    def display_token_addresses(self, addresses: Dict[str, str]):
        """Prints one ``SYMBOL: address`` line per token."""
        for symbol, address in addresses.items():
            print(f"{symbol}: {address}")

    def display_plan(self, environment: str, plan: Iterable):
        """Prints how each token would be resolved for an environment."""
        print(f"\n=== {environment} ===")
        for source in plan:
            if source.creates:
                print(f"  {source.symbol}: new {source.artifact}")
            else:
                print(f"  {source.symbol}: {source.artifact} at {source.address}")

    def display_environments(self, labels: Iterable[str]):
        for label in labels:
            print(label)

    def display_error(self, message: str):
        """Displays an error message."""
        print(f"❌ ERROR: {message}")

    def display_warning(self, message: str):
        print(f"⚠️ {message}")

    def display_success(self, message: str):
        print(f"✅ {message}")

    def display_verbose(self, message: str):
        """Displays a message only if verbose mode is enabled."""
        if self.verbose:
            print(f"[VERBOSE] {message}")
