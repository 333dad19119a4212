"""Scan command implementation.

Lists stale build-cache directories without deleting anything.
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from nextclean.cache.models import ScanReport
from nextclean.cli.display import create_report_table, log_report, print_report_summary
from nextclean.cli.types import (
    ExcludeOption,
    MinDaysOption,
    OutputFormat,
    PathsOption,
    prepare_run,
    resolve_roots,
    run_scan,
)
from nextclean.utils.formatting import console, print_error, print_info, print_success

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Scan for stale build-cache folders.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def scan_caches(
    ctx: typer.Context,
    paths: PathsOption = None,
    min_days: MinDaysOption = None,
    excludes: ExcludeOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export scan results to JSON file.",
        ),
    ] = None,
) -> None:
    """Scan for stale build-cache folders and report them.

    Nothing is deleted. Use `nextclean clean` to remove the folders.

    Examples:
        nextclean scan                        # Scan the current directory
        nextclean scan -p ~/code -p ~/work    # Scan several roots
        nextclean scan --min-days 30          # Only caches older than 30 days
        nextclean scan --format json          # Output as JSON
        nextclean scan --export stale.json    # Export to JSON file
    """
    if ctx.invoked_subcommand is not None:
        return

    config = prepare_run(ctx, min_days=min_days, excludes=excludes)
    roots = resolve_roots(paths)
    report = run_scan(config, roots, dry_run=True)

    if export_path is not None:
        _export_results(report, export_path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(report.to_list()))
        return

    if report.is_empty:
        logger.info("No %s folders found for deletion.", config.cache_dir_name)
        print_success(f"No {config.cache_dir_name} folders found for deletion.")
        return

    log_report(report, config.cache_dir_name)
    console.print(create_report_table(report, config.cache_dir_name))
    print_report_summary(report, config.cache_dir_name)


def _export_results(report: ScanReport, export_path: Path) -> None:
    """Export scan results to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(report.to_list(), indent=2))
        print_info(f"Results exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
