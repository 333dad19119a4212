"""Unit tests for CleanerConfig and load_config."""

from pathlib import Path

import pytest
from nextclean.core.config import (
    DEFAULT_EXCLUDED_FRAGMENTS,
    CleanerConfig,
    ConfigError,
    ConfigParseError,
    load_config,
)
from nextclean.core.paths import get_config_path
from pydantic import ValidationError


class TestCleanerConfig:
    """Tests for CleanerConfig Pydantic model."""

    def test_default_values(self) -> None:
        """CleanerConfig has the documented defaults."""
        config = CleanerConfig()

        assert config.min_age_days == 14
        assert config.cache_dir_name == ".next"
        assert config.manifest_file_name == "package.json"
        assert config.excluded_fragments == DEFAULT_EXCLUDED_FRAGMENTS
        assert config.excluded_fragments[-2:] == ("node_modules", ".git")

    def test_min_age_seconds(self) -> None:
        """The threshold is exposed in seconds."""
        assert CleanerConfig(min_age_days=2).min_age_seconds == 172_800.0

    def test_frozen(self) -> None:
        """Configuration cannot be mutated."""
        config = CleanerConfig()
        with pytest.raises(ValidationError):
            config.min_age_days = 3  # type: ignore[misc]

    def test_rejects_negative_age(self) -> None:
        """min_age_days must be non-negative."""
        with pytest.raises(ValidationError):
            CleanerConfig(min_age_days=-1)

    def test_rejects_unknown_fields(self) -> None:
        """Unknown options are rejected."""
        with pytest.raises(ValidationError):
            CleanerConfig(dry_run=True)  # type: ignore[call-arg]

    def test_rejects_empty_fragment(self) -> None:
        """An empty fragment would exclude everything."""
        with pytest.raises(ValidationError, match="empty"):
            CleanerConfig(excluded_fragments=("node_modules", ""))

    def test_rejects_path_as_name(self) -> None:
        """Cache and manifest names must be bare names."""
        with pytest.raises(ValidationError, match="bare name"):
            CleanerConfig(cache_dir_name="build/.next")

    def test_with_overrides(self) -> None:
        """Overrides return a new instance and leave the original untouched."""
        base = CleanerConfig(excluded_fragments=("node_modules",))

        derived = base.with_overrides(min_age_days=30, extra_excludes=["dist", "node_modules"])

        assert derived.min_age_days == 30
        assert derived.excluded_fragments == ("node_modules", "dist")
        assert base.min_age_days == 14
        assert base.excluded_fragments == ("node_modules",)

    def test_with_overrides_keeps_age_when_none(self) -> None:
        """A None age override keeps the configured threshold."""
        base = CleanerConfig(min_age_days=5)
        assert base.with_overrides().min_age_days == 5


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """A missing config file yields the defaults."""
        assert load_config(tmp_path / "absent.toml") == CleanerConfig()

    def test_default_location(self) -> None:
        """Without a path the XDG config location is read."""
        path = get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("min_age_days = 21\n")

        assert load_config().min_age_days == 21

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values from the TOML file are applied."""
        path = tmp_path / "config.toml"
        path.write_text(
            'min_age_days = 30\n'
            'excluded_fragments = ["node_modules", "/mnt"]\n'
            'cache_dir_name = ".nuxt"\n'
            'manifest_file_name = "nuxt.config.ts"\n'
        )

        config = load_config(path)

        assert config.min_age_days == 30
        assert config.excluded_fragments == ("node_modules", "/mnt")
        assert config.cache_dir_name == ".nuxt"
        assert config.manifest_file_name == "nuxt.config.ts"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("min_age_days = = 3")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('min_age_days = "soon"\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)
