"""Build-cache scanning and cleanup module.

This module provides path classification, directory size accounting,
the recursive tree scanner, default root enumeration, and deletion
operations for stale build-cache directories.
"""

from nextclean.cache.classifier import PathClassifier
from nextclean.cache.models import CandidateVerdict, MatchRecord, ScanReport
from nextclean.cache.operator import CacheOperator, DeletionResult
from nextclean.cache.roots import default_roots
from nextclean.cache.scanner import TreeScanner, scan_roots
from nextclean.cache.size import folder_size

__all__ = [
    "CacheOperator",
    "CandidateVerdict",
    "DeletionResult",
    "MatchRecord",
    "PathClassifier",
    "ScanReport",
    "TreeScanner",
    "default_roots",
    "folder_size",
    "scan_roots",
]
