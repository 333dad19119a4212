"""Tree scanner for stale build-cache directories.

Walks each root depth-first, pruning excluded subtrees and matched
cache directories, and collects a MatchRecord for every cache
directory that passes validation and the age threshold. I/O failures
are logged and isolated to the entry that caused them; nothing is
raised past the scanner.
"""

import logging
import os
import stat
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from nextclean.cache.classifier import PathClassifier
from nextclean.cache.models import MatchRecord, ScanReport
from nextclean.cache.size import folder_size
from nextclean.core.config import CleanerConfig
from nextclean.core.diagnostics import log_error

logger = logging.getLogger(__name__)


class TreeScanner:
    """Recursively searches directory trees for stale cache directories.

    Args:
        config: Cleaner configuration.
        classifier: Optional classifier; built from config if omitted.
    """

    def __init__(
        self,
        config: CleanerConfig,
        classifier: PathClassifier | None = None,
    ) -> None:
        self._config = config
        self._classifier = classifier if classifier is not None else PathClassifier(config)

    def scan(self, root: str | Path, report: ScanReport | None = None) -> ScanReport:
        """Scan one root and append matches to a report.

        A missing root is logged and yields no matches. An excluded root
        is returned without being listed.

        Args:
            root: Absolute directory path to scan.
            report: Report to accumulate into; a new one is created if None.

        Returns:
            The report passed in (or the new one), with matches appended.
        """
        if report is None:
            report = ScanReport()
        root_str = str(root)

        if not os.path.exists(root_str):
            logger.warning("Path does not exist: %s", root_str)
            return report

        if self._classifier.is_excluded(root_str):
            return report

        self._walk(root_str, report)
        return report

    def _walk(self, directory: str, report: ScanReport) -> None:
        """Visit the entries of one directory, recursing into subdirectories."""
        try:
            names = sorted(os.listdir(directory))
        except OSError as e:
            log_error(logger, e, f"searching directory ({directory})")
            return

        for name in names:
            entry = os.path.join(directory, name)

            if self._classifier.is_excluded(entry):
                continue

            try:
                entry_stat = os.lstat(entry)
            except OSError as e:
                log_error(logger, e, f"processing file ({entry})")
                continue

            # Symlinks and files are never descended into
            if not stat.S_ISDIR(entry_stat.st_mode):
                continue

            if name == self._config.cache_dir_name:
                if self._classifier.is_deletable(entry):
                    report.add(self._build_record(entry, entry_stat.st_mtime))
                continue

            self._walk(entry, report)

    @staticmethod
    def _build_record(path: str, mtime: float) -> MatchRecord:
        """Measure a matched cache directory and wrap it in a record."""
        return MatchRecord(
            path=path,
            size_bytes=folder_size(path),
            modified_at=datetime.fromtimestamp(mtime, tz=UTC),
        )


def scan_roots(
    roots: Iterable[str | Path],
    config: CleanerConfig,
    scanner: TreeScanner | None = None,
) -> ScanReport:
    """Scan several roots sequentially into one report.

    Args:
        roots: Absolute directory paths, scanned in order.
        config: Cleaner configuration.
        scanner: Optional pre-built scanner.

    Returns:
        ScanReport with matches from all roots in discovery order.
    """
    scanner = scanner if scanner is not None else TreeScanner(config)
    report = ScanReport()
    for root in roots:
        logger.info("Searching in %s...", root)
        scanner.scan(root, report)
    return report
