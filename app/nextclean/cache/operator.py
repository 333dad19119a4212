"""Cache directory deletion operator.

Handles removal of matched cache directories with dry-run support and
a safety check that refuses anything not named like a cache directory.
"""

import logging
import os
import shutil
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from nextclean.cache.classifier import PathClassifier
from nextclean.cache.models import MatchRecord
from nextclean.core.config import CleanerConfig
from nextclean.core.diagnostics import log_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of a single deletion.

    Attributes:
        path: Absolute path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


class CacheOperator:
    """Deletes cache directories one by one.

    Each deletion is independent: a failure is recorded in its result
    and the remaining paths are still processed.

    Args:
        config: Cleaner configuration (cache name and exclusions).
        dry_run: If True, report what would be deleted without deleting.
    """

    def __init__(self, config: CleanerConfig, dry_run: bool = False) -> None:
        self._config = config
        self._dry_run = dry_run
        self._classifier = PathClassifier(config)

    def delete(self, targets: Iterable[MatchRecord | str]) -> list[DeletionResult]:
        """Delete each target and return one result per target.

        Args:
            targets: Match records or absolute paths, processed in order.

        Returns:
            List of DeletionResult in input order.
        """
        results: list[DeletionResult] = []
        for target in targets:
            path = target.path if isinstance(target, MatchRecord) else target
            refusal = self._check_refused(path)
            if refusal is not None:
                logger.error("Refusing to delete %s: %s", path, refusal)
                results.append(DeletionResult(path=path, success=False, error=refusal))
                continue
            results.append(self._delete_single(path))
        return results

    def _check_refused(self, path: str) -> str | None:
        """Return a reason if the path must never be deleted, else None."""
        if os.path.basename(path) != self._config.cache_dir_name:
            return f"Not a {self._config.cache_dir_name} directory: {path}"
        if self._classifier.is_excluded(path):
            return f"Path is excluded: {path}"
        return None

    def _delete_single(self, path: str) -> DeletionResult:
        """Remove one cache directory tree."""
        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return DeletionResult(path=path, success=True, dry_run=True)

        target = Path(path)
        if not target.exists() and not target.is_symlink():
            error = f"Path does not exist: {path}"
            logger.error("Could not delete %s: %s", path, error)
            return DeletionResult(path=path, success=False, error=error)

        # Symlinked caches are refused
        if target.is_symlink() or not target.is_dir():
            error = f"Not a directory: {path}"
            logger.error("Could not delete %s: %s", path, error)
            return DeletionResult(path=path, success=False, error=error)

        try:
            shutil.rmtree(path)
        except OSError as e:
            log_error(logger, e, f"deleting folder ({path})")
            return DeletionResult(path=path, success=False, error=str(e))

        logger.info("Success: Deleted %s", path)
        return DeletionResult(path=path, success=True)
