"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from datetime import datetime

from rich.console import Console

from nextclean.core.theme import get_theme

BYTES_PER_MB = 1024 * 1024


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size_mb(size_bytes: int) -> str:
    """Format a byte count as megabytes with two decimals.

    Args:
        size_bytes: Size in bytes.

    Returns:
        String such as "5.00MB".
    """
    return f"{size_bytes / BYTES_PER_MB:.2f}MB"


def format_date(moment: datetime) -> str:
    """Format a timestamp as a local calendar date.

    Args:
        moment: Timezone-aware timestamp.

    Returns:
        Date string in YYYY-MM-DD form, in the local timezone.
    """
    return moment.astimezone().strftime("%Y-%m-%d")


def size_style(size_bytes: int) -> str:
    """Pick a theme style for a cache size.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Theme style name: size_large (>= 500 MB), size_medium (>= 50 MB)
        or size_small.
    """
    if size_bytes >= 500 * BYTES_PER_MB:
        return "size_large"
    if size_bytes >= 50 * BYTES_PER_MB:
        return "size_medium"
    return "size_small"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
