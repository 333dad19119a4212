"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from helpers import NOW
from nextclean.core.config import CleanerConfig
from nextclean.core.diagnostics import reset_diagnostics


@pytest.fixture(autouse=True)
def isolated_xdg(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[Path]:
    """Point XDG config/state at a private directory and reset logging handlers."""
    base = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(base / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(base / "state"))
    yield base
    reset_diagnostics()


@pytest.fixture
def config() -> CleanerConfig:
    """Configuration whose exclusions cannot match temporary directories.

    The default exclusions contain "/var" and "/private", which appear in
    temporary directory paths on some platforms.
    """
    return CleanerConfig(excluded_fragments=("node_modules", ".git"))


@pytest.fixture
def clock() -> Callable[[], float]:
    """Clock frozen at NOW."""
    return lambda: NOW
