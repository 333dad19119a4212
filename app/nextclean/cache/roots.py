"""Default search root enumeration.

Lists the invoking user's home directory and the other user
directories found under the shared multi-user locations. The result
is logged for visibility only; the scan itself runs over the paths
supplied on the command line.
"""

import logging
from pathlib import Path

from nextclean.core.diagnostics import log_error

logger = logging.getLogger(__name__)

# Shared multi-user directory locations (macOS, Linux)
USERS_DIRS: tuple[Path, ...] = (Path("/Users"), Path("/home"))

# Entries under a users directory that never belong to a single user
RESERVED_USER_ENTRIES: frozenset[str] = frozenset({"Shared"})


def default_roots(
    home: Path | None = None,
    users_dirs: tuple[Path, ...] = USERS_DIRS,
) -> list[Path]:
    """Enumerate the default roots of a full-system search.

    Args:
        home: Home directory of the invoking user. Defaults to Path.home().
        users_dirs: Shared locations whose direct subdirectories are user homes.

    Returns:
        Home directory first, followed by the other user directories in
        sorted order per location. Duplicates of the home directory are dropped.
    """
    home = home if home is not None else Path.home()
    roots: list[Path] = [home]

    for users_dir in users_dirs:
        if not users_dir.is_dir():
            continue
        try:
            entries = sorted(users_dir.iterdir())
        except OSError as e:
            log_error(logger, e, "searching user directories")
            continue

        for entry in entries:
            if entry.name in RESERVED_USER_ENTRIES or entry.name.startswith("."):
                continue
            if not entry.is_dir() or entry in roots:
                continue
            roots.append(entry)

    return roots
