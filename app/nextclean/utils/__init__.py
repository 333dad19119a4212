"""Utility modules for nextclean.

This module exports commonly used utility functions.
"""

from nextclean.utils.formatting import (
    console,
    err_console,
    format_date,
    format_size_mb,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "format_date",
    "format_size_mb",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
