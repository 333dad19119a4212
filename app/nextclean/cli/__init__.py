"""CLI package for nextclean.

This package contains the Typer application and all subcommands.
"""

from nextclean.cli.main import app

__all__ = ["app"]
