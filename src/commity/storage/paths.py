"""
Path utilities for Commity.

Resolves the application data directory and the configuration files that
live in it. Every lookup takes the environment as an argument so callers
(and tests) can resolve paths without touching the real process state.
"""

import os
import sys
from collections.abc import Mapping
from pathlib import Path

APP_NAME = "commity"
CONFIG_FILE_NAME = ".commity.yaml"
TUI_CONFIG_FILE_NAME = "tui_config.yaml"


def get_data_dir(environ: Mapping[str, str] | None = None) -> Path:
    """
    Get the Commity data directory.

    Resolution order:
    1. COMMITY_HOME environment variable
    2. XDG_DATA_HOME/commity
    3. LOCALAPPDATA\\commity (Windows)
    4. Default: ~/.local/share/commity

    Args:
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Path to the data directory (not created).
    """
    if environ is None:
        environ = os.environ

    env_home = environ.get("COMMITY_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()

    xdg_data = environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data).expanduser() / APP_NAME

    local_app_data = environ.get("LOCALAPPDATA")
    if sys.platform == "win32" and local_app_data:
        return Path(local_app_data) / APP_NAME

    return Path.home() / ".local" / "share" / APP_NAME


def get_global_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """
    Get the path to the global wizard configuration.

    Returns:
        Path to <data dir>/.commity.yaml
    """
    return get_data_dir(environ) / CONFIG_FILE_NAME


def get_local_config_path(repo_dir: Path) -> Path:
    """
    Get the path to the repository-local wizard configuration.

    Returns:
        Path to <repo>/.commity.yaml
    """
    return repo_dir / CONFIG_FILE_NAME


def get_tui_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """
    Get the path to the terminal UI preferences.

    Returns:
        Path to <data dir>/tui_config.yaml
    """
    return get_data_dir(environ) / TUI_CONFIG_FILE_NAME


def ensure_directory(path: Path, mode: int = 0o755) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.
        mode: Permission mode for created directories.

    Returns:
        The path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True, mode=mode)
    return path
