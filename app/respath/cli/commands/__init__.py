"""CLI commands for respath.

This package contains all subcommand implementations.
"""

from respath.cli.commands import config, listing, roots

__all__ = ["config", "listing", "roots"]
