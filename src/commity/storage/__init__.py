"""Storage utilities for Commity."""

from commity.storage.paths import (
    ensure_directory,
    get_data_dir,
    get_global_config_path,
    get_local_config_path,
    get_tui_config_path,
)

__all__ = [
    "ensure_directory",
    "get_data_dir",
    "get_global_config_path",
    "get_local_config_path",
    "get_tui_config_path",
]
