"""Locations of the nextclean configuration file and diagnostic log.

Both follow the XDG base directory conventions:
- Config: $XDG_CONFIG_HOME/nextclean/config.toml (~/.config/nextclean/)
- Log: $XDG_STATE_HOME/nextclean/nextclean.log (~/.local/state/nextclean/)
"""

import os
from pathlib import Path

APP_NAME = "nextclean"

CONFIG_FILENAME = "config.toml"
LOG_FILENAME = "nextclean.log"


def _get_xdg_dir(env_var: str, fallback: str) -> Path:
    """Resolve an XDG base directory for nextclean.

    Args:
        env_var: Environment variable that overrides the base (e.g. "XDG_STATE_HOME").
        fallback: Base relative to the home directory when the variable is unset.

    Returns:
        The nextclean subdirectory of the base.
    """
    base = os.environ.get(env_var)
    root = Path(base) if base else Path.home() / fallback
    return root / APP_NAME


def get_config_dir() -> Path:
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Default configuration file; it does not have to exist."""
    return get_config_dir() / CONFIG_FILENAME


def get_log_path() -> Path:
    """Default diagnostic log file, appended to on every run."""
    return get_state_dir() / LOG_FILENAME


def _ensure_dir(path: Path, purpose: str) -> Path:
    """Create a directory tree, translating failures into RuntimeError.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        raise RuntimeError(f"Cannot create {purpose} directory {path}: Permission denied") from e
    except OSError as e:
        raise RuntimeError(f"Cannot create {purpose} directory {path}: {e}") from e
    return path


def ensure_state_dir() -> Path:
    return _ensure_dir(get_state_dir(), "state")


def ensure_parent_dir(path: Path) -> Path:
    """Make sure the directory holding ``path`` exists and return it.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    if path.parent == get_state_dir():
        return ensure_state_dir()
    return _ensure_dir(path.parent, "log")
