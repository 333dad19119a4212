"""Filesystem builders shared by the test suites."""

import os
from pathlib import Path

# Fixed "now" for age checks (integer seconds keep mtimes exact)
NOW = 1_700_000_000.0
DAY = 86_400


def set_age(path: Path, days: float, now: float = NOW) -> float:
    """Set a path's mtime to ``days`` before ``now`` and return the mtime."""
    mtime = now - days * DAY
    os.utime(path, (mtime, mtime))
    return mtime


def make_project(
    root: Path,
    age_days: float,
    *,
    manifest: bool = True,
    files: dict[str, int] | None = None,
    cache_name: str = ".next",
    now: float = NOW,
) -> Path:
    """Create a project directory with a cache folder of the given age.

    Args:
        root: Project directory to create.
        age_days: Age of the cache directory relative to ``now``.
        manifest: Whether to write package.json next to the cache.
        files: Relative file paths inside the cache mapped to their sizes.
        cache_name: Cache directory name.
        now: Reference time for the age.

    Returns:
        Path of the cache directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    if manifest:
        (root / "package.json").write_text('{"name": "demo"}')
    cache = root / cache_name
    cache.mkdir()
    for rel_path, size in (files or {}).items():
        target = cache / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"\0" * size)
    # mtime is set last: creating children updates the directory mtime
    set_age(cache, age_days, now)
    return cache
