"""Clean command implementation.

Scans for stale build-cache directories, asks for confirmation and
deletes them.
"""

import logging
from typing import Annotated

import typer

from nextclean.cache.operator import CacheOperator
from nextclean.cli.display import (
    create_report_table,
    create_results_table,
    log_report,
    print_report_summary,
    print_results_summary,
)
from nextclean.cli.types import (
    ExcludeOption,
    MinDaysOption,
    PathsOption,
    prepare_run,
    resolve_roots,
    run_scan,
)
from nextclean.utils.formatting import console, print_info, print_success

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Delete stale build-cache folders.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean_caches(
    ctx: typer.Context,
    paths: PathsOption = None,
    min_days: MinDaysOption = None,
    excludes: ExcludeOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Preview without actual deletion."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Find stale build-cache folders and delete them after confirmation.

    Examples:
        nextclean clean                         # Clean below the current directory
        nextclean clean -p ~/code --dry-run     # Preview only
        nextclean clean -p ~/code -p ~/work -y  # No confirmation prompt
    """
    if ctx.invoked_subcommand is not None:
        return

    config = prepare_run(ctx, min_days=min_days, excludes=excludes)
    roots = resolve_roots(paths)
    report = run_scan(config, roots, dry_run=dry_run)

    if report.is_empty:
        logger.info("No %s folders found for deletion.", config.cache_dir_name)
        print_success(f"No {config.cache_dir_name} folders found for deletion.")
        return

    log_report(report, config.cache_dir_name)
    console.print(create_report_table(report, config.cache_dir_name))
    print_report_summary(report, config.cache_dir_name)

    if dry_run:
        logger.info("DRY RUN mode: No actual deletions performed.")
        print_info("DRY RUN mode: No actual deletions performed.")
        return

    if not yes:
        answer = typer.prompt(
            "\nDo you want to delete these folders? (y/n)",
            default="",
            show_default=False,
        )
        # Only a single "y" confirms
        if answer.strip().lower() != "y":
            logger.info("Operation cancelled.")
            print_info("Operation cancelled.")
            return

    operator = CacheOperator(config)
    results = operator.delete(report)

    console.print(create_results_table(results))
    print_results_summary(results)
