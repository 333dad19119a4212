"""Path classification for cache scanning.

Decides whether a path must be pruned from traversal and whether a
directory named like the cache directory qualifies for deletion.
"""

import logging
import os
import time
from collections.abc import Callable

from nextclean.cache.models import CandidateVerdict
from nextclean.core.config import CleanerConfig
from nextclean.core.diagnostics import log_error

logger = logging.getLogger(__name__)


class PathClassifier:
    """Classifies paths against the exclusion set and deletion rules.

    Args:
        config: Cleaner configuration (exclusions, names, age threshold).
        clock: Returns the current POSIX time in seconds. Defaults to time.time.
    """

    def __init__(
        self,
        config: CleanerConfig,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._clock = clock

    @property
    def config(self) -> CleanerConfig:
        return self._config

    def is_excluded(self, path: str) -> bool:
        """Check if a path contains any excluded fragment.

        Matching is case-sensitive substring containment on the path as
        given, so "node_modules" excludes every path below any
        node_modules directory.

        Args:
            path: Absolute path to check.

        Returns:
            True if the path must not be traversed.
        """
        return any(
            fragment in path or path == fragment for fragment in self._config.excluded_fragments
        )

    def evaluate(self, candidate_path: str) -> CandidateVerdict:
        """Classify a directory named like the cache directory.

        The parent directory must hold the manifest file, and the
        directory's own modification time must be strictly older than
        the age threshold. Any I/O error yields UNREADABLE.

        Args:
            candidate_path: Absolute path of the candidate directory.

        Returns:
            CandidateVerdict for the candidate.
        """
        parent = os.path.dirname(candidate_path)
        manifest = os.path.join(parent, self._config.manifest_file_name)

        if not os.path.exists(manifest):
            logger.warning(
                "No %s found in %s. Skipping this %s folder.",
                self._config.manifest_file_name,
                parent,
                self._config.cache_dir_name,
            )
            return CandidateVerdict.NO_MANIFEST

        try:
            stat_result = os.lstat(candidate_path)
        except OSError as e:
            log_error(logger, e, f"checking folder ({candidate_path})")
            return CandidateVerdict.UNREADABLE

        age_seconds = self._clock() - stat_result.st_mtime
        if age_seconds > self._config.min_age_seconds:
            return CandidateVerdict.DELETABLE

        logger.debug("Too recent (%.1f days old): %s", age_seconds / 86400, candidate_path)
        return CandidateVerdict.TOO_RECENT

    def is_deletable(self, candidate_path: str) -> bool:
        """Check if a candidate cache directory qualifies for deletion.

        Args:
            candidate_path: Absolute path of the candidate directory.

        Returns:
            True only for the DELETABLE verdict.
        """
        return self.evaluate(candidate_path) is CandidateVerdict.DELETABLE
