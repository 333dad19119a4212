"""Cleaner configuration and settings.

This module provides the immutable configuration model shared by every
scanning component, and the loader for the optional TOML override file.

Configuration is stored in ~/.config/nextclean/config.toml::

    min_age_days = 30
    excluded_fragments = ["/System", "node_modules", ".git"]
    cache_dir_name = ".next"
    manifest_file_name = "package.json"
"""

import logging
import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nextclean.core.paths import get_config_path

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

# Path fragments that disqualify a path from traversal (substring match).
DEFAULT_EXCLUDED_FRAGMENTS: tuple[str, ...] = (
    # System locations
    "/System",
    "/Library",
    "/bin",
    "/sbin",
    "/private",
    "/opt",
    "/usr",
    "/var",
    # Dependency and VCS trees
    "node_modules",
    ".git",
)

DEFAULT_CACHE_DIR_NAME = ".next"
DEFAULT_MANIFEST_FILE_NAME = "package.json"
DEFAULT_MIN_AGE_DAYS = 14


class CleanerConfig(BaseModel):
    """Configuration for a cache cleanup run.

    Built once at startup and handed to every component. Instances are
    frozen; use :meth:`with_overrides` to derive a modified copy.

    Attributes:
        min_age_days: Cache directories must be strictly older than this.
        excluded_fragments: Ordered path fragments that prune traversal.
        cache_dir_name: Base name of the cache directories to collect.
        manifest_file_name: File that must sit beside a cache directory.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_age_days: Annotated[
        int,
        Field(ge=0, description="Minimum age in days (strictly exceeded)"),
    ] = DEFAULT_MIN_AGE_DAYS
    excluded_fragments: Annotated[
        tuple[str, ...],
        Field(description="Path fragments excluded from traversal"),
    ] = DEFAULT_EXCLUDED_FRAGMENTS
    cache_dir_name: Annotated[
        str,
        Field(min_length=1, description="Cache directory base name"),
    ] = DEFAULT_CACHE_DIR_NAME
    manifest_file_name: Annotated[
        str,
        Field(min_length=1, description="Project manifest file name"),
    ] = DEFAULT_MANIFEST_FILE_NAME

    @field_validator("excluded_fragments")
    @classmethod
    def validate_fragments(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty fragments, which would exclude every path."""
        for fragment in v:
            if not fragment:
                msg = "excluded_fragments cannot contain empty strings"
                raise ValueError(msg)
        return v

    @field_validator("cache_dir_name", "manifest_file_name")
    @classmethod
    def validate_base_name(cls, v: str) -> str:
        """Names must be bare file names, not paths."""
        if "/" in v:
            msg = f"Expected a bare name without '/', got {v!r}"
            raise ValueError(msg)
        return v

    @property
    def min_age_seconds(self) -> float:
        """Age threshold expressed in seconds."""
        return float(self.min_age_days * SECONDS_PER_DAY)

    def with_overrides(
        self,
        min_age_days: int | None = None,
        extra_excludes: Iterable[str] = (),
    ) -> "CleanerConfig":
        """Derive a new configuration with command-line overrides applied.

        Args:
            min_age_days: Replacement age threshold, or None to keep the current one.
            extra_excludes: Fragments appended after the configured ones.

        Returns:
            New validated CleanerConfig instance.
        """
        fragments = list(self.excluded_fragments)
        for fragment in extra_excludes:
            if fragment not in fragments:
                fragments.append(fragment)

        data = self.model_dump()
        data["excluded_fragments"] = tuple(fragments)
        if min_age_days is not None:
            data["min_age_days"] = min_age_days
        return CleanerConfig.model_validate(data)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> CleanerConfig:
    """Load cleaner configuration from a TOML file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CleanerConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return CleanerConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return CleanerConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
