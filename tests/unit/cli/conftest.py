"""Fixtures shared by the CLI test modules."""

from pathlib import Path

import pytest
from nextclean.core.paths import get_config_path, get_log_path


@pytest.fixture
def safe_config() -> Path:
    """Write a config file whose exclusions cannot match temporary directories."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('excluded_fragments = ["node_modules", ".git"]\n')
    return path


@pytest.fixture
def log_file() -> Path:
    """Default diagnostic log location inside the isolated state directory."""
    return get_log_path()
