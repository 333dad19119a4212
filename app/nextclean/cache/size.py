"""Recursive directory size accounting.

Sizes are advisory: unreadable entries contribute zero instead of
aborting the sum. Symbolic links are never followed; a link counts as
an opaque file of its own size.
"""

import logging
import os
import stat

from nextclean.core.diagnostics import log_error

logger = logging.getLogger(__name__)


def folder_size(path: str) -> int:
    """Sum the sizes of all files below a directory.

    Args:
        path: Directory to measure.

    Returns:
        Total size in bytes. Zero if the directory cannot be listed.
    """
    try:
        names = os.listdir(path)
    except OSError as e:
        log_error(logger, e, f"calculating folder size ({path})")
        return 0

    total = 0
    for name in names:
        entry = os.path.join(path, name)
        try:
            entry_stat = os.lstat(entry)
        except OSError as e:
            log_error(logger, e, f"calculating folder size ({entry})")
            continue

        if stat.S_ISDIR(entry_stat.st_mode):
            total += folder_size(entry)
        elif stat.S_ISREG(entry_stat.st_mode) or stat.S_ISLNK(entry_stat.st_mode):
            total += entry_stat.st_size

    return total
