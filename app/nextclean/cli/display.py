"""Shared Rich display functions for scan reports and deletion results.

Provides reusable table builders and summary printers used by the
scan and clean commands.
"""

import logging

from rich.table import Table

from nextclean.cache.models import ScanReport
from nextclean.cache.operator import DeletionResult
from nextclean.utils.formatting import (
    console,
    format_size_mb,
    print_info,
    print_success,
    print_warning,
    size_style,
)

logger = logging.getLogger(__name__)


def create_report_table(report: ScanReport, cache_dir_name: str = ".next") -> Table:
    """Create a Rich table listing matched cache directories.

    Args:
        report: Scan report to display.
        cache_dir_name: Cache directory name used in the title.

    Returns:
        Rich Table with Path, Size and Last Modified columns.
    """
    table = Table(
        title=f"Stale {cache_dir_name} Folders",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="path", no_wrap=True)
    table.add_column("Size", justify="right", width=12)
    table.add_column("Last Modified", style="muted", width=13)

    for record in report:
        style = size_style(record.size_bytes)
        table.add_row(record.path, f"[{style}]{record.size_mb}[/]", record.modified_date)

    return table


def log_report(report: ScanReport, cache_dir_name: str = ".next") -> None:
    """Write the list of matched folders to the diagnostic log.

    Args:
        report: Scan report to record.
        cache_dir_name: Cache directory name used in the header line.
    """
    logger.info("Found %d %s folders to delete.", len(report), cache_dir_name)
    logger.info("Folders to be deleted:")
    for record in report:
        logger.info(
            "- %s (%s, last modified: %s)",
            record.path,
            record.size_mb,
            record.modified_date,
        )


def print_report_summary(report: ScanReport, cache_dir_name: str = ".next") -> None:
    """Print the match count and total reclaimable size."""
    console.print(
        f"\n[dim]Found {len(report)} {cache_dir_name} folder(s) "
        f"({format_size_mb(report.total_size_bytes)} total)[/dim]"
    )


def create_results_table(results: list[DeletionResult]) -> Table:
    """Create a Rich table displaying deletion results.

    Args:
        results: Deletion results in processing order.

    Returns:
        Rich Table with Path, Status and Details columns.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="path")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for r in results:
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would delete"
        elif r.success:
            status = "[success]deleted[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = r.error or "Unknown error"
        table.add_row(r.path, status, detail)

    return table


def print_results_summary(results: list[DeletionResult]) -> tuple[int, int]:
    """Print and log the tally of deletion results.

    Args:
        results: Deletion results in processing order.

    Returns:
        Tuple of (successful, failed) counts.
    """
    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if not r.success)

    summary = f"Operation completed: {success_count} successful, {fail_count} failed"
    logger.info(summary)
    if fail_count:
        print_warning(summary)
    elif success_count:
        print_success(summary)
    else:
        print_info(summary)
    return success_count, fail_count
