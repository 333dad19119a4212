"""Cache domain models for scanning and reporting.

This module defines the data structures produced by a scan: the
verdict for a single candidate directory, the immutable record of a
matched cache directory, and the ordered report collecting them.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from nextclean.utils.formatting import format_date, format_size_mb


class CandidateVerdict(str, Enum):
    """Classification of a directory named like the cache directory.

    Attributes:
        DELETABLE: Parent holds the manifest and the directory is old enough.
        NO_MANIFEST: Parent directory lacks the project manifest file.
        TOO_RECENT: Directory is not strictly older than the age threshold.
        UNREADABLE: The directory could not be inspected.
    """

    DELETABLE = "deletable"
    NO_MANIFEST = "no_manifest"
    TOO_RECENT = "too_recent"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A stale cache directory found during scanning.

    Attributes:
        path: Absolute path of the cache directory.
        size_bytes: Recursive size of the directory contents.
        modified_at: Last modification time of the directory itself (UTC).
    """

    path: str
    size_bytes: int
    modified_at: datetime

    def __post_init__(self) -> None:
        """Validate match data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)

    @property
    def size_mb(self) -> str:
        """Size rendered as megabytes with two decimals (e.g. "5.00MB")."""
        return format_size_mb(self.size_bytes)

    @property
    def modified_date(self) -> str:
        """Modification date in the local timezone."""
        return format_date(self.modified_at)

    def to_dict(self) -> dict[str, str | int]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "path": self.path,
            "size_bytes": self.size_bytes,
            "modified_at": self.modified_at.isoformat(),
        }


@dataclass
class ScanReport:
    """Ordered collection of matches accumulated over one or more roots.

    Records keep discovery order: depth-first within a root, roots in
    the order they were scanned.
    """

    records: list[MatchRecord] = field(default_factory=list)

    def add(self, record: MatchRecord) -> None:
        """Append a match."""
        self.records.append(record)

    def merge(self, other: "ScanReport") -> None:
        """Append all matches of another report, keeping their order."""
        self.records.extend(other.records)

    def __iter__(self) -> Iterator[MatchRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def paths(self) -> list[str]:
        return [r.path for r in self.records]

    @property
    def total_size_bytes(self) -> int:
        return sum(r.size_bytes for r in self.records)

    def to_list(self) -> list[dict[str, str | int]]:
        """Serialize all records for JSON output."""
        return [r.to_dict() for r in self.records]
