"""CLI commands for nextclean.

This package contains all subcommand implementations.
"""

from nextclean.cli.commands import clean, roots, scan

__all__ = ["clean", "roots", "scan"]
