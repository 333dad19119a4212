"""Shared types and utilities for CLI commands.

This module provides the option types and run setup helpers used by
the scan and clean commands to avoid code duplication.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from nextclean.cache.models import ScanReport
from nextclean.cache.roots import default_roots
from nextclean.cache.scanner import scan_roots
from nextclean.core.config import CleanerConfig, ConfigError, load_config
from nextclean.core.diagnostics import configure_diagnostics
from nextclean.core.paths import get_log_path
from nextclean.utils.formatting import print_error

logger = logging.getLogger(__name__)

PathsOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--path",
        "-p",
        help="Directory to search (repeatable). Defaults to the current directory.",
    ),
]
MinDaysOption = Annotated[
    int | None,
    typer.Option(
        "--min-days",
        "-d",
        min=0,
        help="Only match caches strictly older than this many days.",
    ),
]
ExcludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude",
        "-x",
        help="Additional path fragment to skip (repeatable).",
    ),
]


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def prepare_run(
    ctx: typer.Context,
    min_days: int | None = None,
    excludes: list[str] | None = None,
) -> CleanerConfig:
    """Set up the diagnostic log and build the run configuration.

    Args:
        ctx: Typer context carrying the global options.
        min_days: Optional age threshold override.
        excludes: Optional extra exclusion fragments.

    Returns:
        Frozen CleanerConfig for this run.

    Raises:
        typer.Exit: If the log file or configuration cannot be set up.
    """
    options = ctx.obj if isinstance(ctx.obj, dict) else {}
    log_path: Path = options.get("log_file") or get_log_path()

    try:
        configure_diagnostics(log_path, verbose=bool(options.get("verbose")))
    except (OSError, RuntimeError) as e:
        print_error(f"Cannot open log file {log_path}: {e}")
        raise typer.Exit(code=1) from e

    try:
        config = load_config(options.get("config_path"))
    except ConfigError as e:
        logger.error("%s", e)
        print_error(str(e))
        raise typer.Exit(code=1) from e

    return config.with_overrides(min_age_days=min_days, extra_excludes=excludes or ())


def resolve_roots(paths: list[Path] | None) -> list[Path]:
    """Resolve requested search roots to absolute paths.

    Args:
        paths: Paths given on the command line, possibly relative or empty.

    Returns:
        Absolute paths in the given order, or the current directory if none.
        Symlinks are kept as given so exclusions match the requested path.
    """
    if not paths:
        return [Path.cwd()]
    return [Path(os.path.abspath(p.expanduser())) for p in paths]


def run_scan(config: CleanerConfig, roots: list[Path], dry_run: bool) -> ScanReport:
    """Log the run header and scan every root.

    The enumerated default roots are logged for visibility only; the
    scan covers exactly ``roots``.

    Args:
        config: Run configuration.
        roots: Absolute roots to scan.
        dry_run: Whether deletions will be skipped.

    Returns:
        Combined ScanReport.
    """
    logger.info("Starting full disk cleanup process...")
    logger.info("Mode: %s", "DRY RUN (no actual deletion)" if dry_run else "ACTUAL DELETE")
    logger.info(
        "Starting search in paths:\n%s",
        "\n".join(str(p) for p in default_roots()),
    )
    return scan_roots(roots, config)
