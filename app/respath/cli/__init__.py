"""CLI package for respath.

This package contains the Typer application and all subcommands.
"""

from respath.cli.main import app

__all__ = ["app"]
