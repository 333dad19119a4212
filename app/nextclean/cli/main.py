"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from nextclean import __version__
from nextclean.cli.commands import clean, roots, scan
from nextclean.core.diagnostics import log_error
from nextclean.utils.formatting import print_error

logger = logging.getLogger(__name__)

# Create main Typer app
app = typer.Typer(
    name="nextclean",
    help="Find and remove stale Next.js build caches.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nextclean version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration file (default: ~/.config/nextclean/config.toml).",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Append diagnostics to this file "
            "(default: ~/.local/state/nextclean/nextclean.log).",
        ),
    ] = None,
) -> None:
    """nextclean - Find and remove stale Next.js build caches.

    Searches for .next folders next to a package.json that have not been
    modified for a while, reports their size and deletes them on request.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    ctx.obj["log_file"] = log_file


# Register commands
app.add_typer(scan.app, name="scan")
app.add_typer(clean.app, name="clean")
app.add_typer(roots.app, name="roots")


def run() -> None:
    """Console script entry point.

    Any exception escaping the commands is logged and ends the process
    with exit status 1.
    """
    try:
        app()
    except Exception as e:
        log_error(logger, e, "main process")
        print_error(f"Unexpected failure: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
