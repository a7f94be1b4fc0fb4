"""
Configuration loader for Commity.

Finds and loads the wizard document from:
1. An explicit path, when given
2. Repository config (<repo>/.commity.yaml)
3. Global config (<data dir>/.commity.yaml)

and the terminal UI preferences from <data dir>/tui_config.yaml.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from commity.config.schema import Configuration, TUIConfig
from commity.storage.paths import (
    ensure_directory,
    get_data_dir,
    get_global_config_path,
    get_local_config_path,
    get_tui_config_path,
)
from commity.vcs import find_git_repository

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML document that must be a mapping.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed dictionary (empty for an empty file).

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return content


def resolve_config_path(
    directory: Path,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """
    Pick the wizard document for a working directory.

    The repository config wins over the global one.

    Args:
        directory: Working directory; must be inside a git work tree.
        environ: Environment mapping used to locate the data directory.

    Returns:
        Path to an existing config file.

    Raises:
        ConfigurationError: If there is no repository or no config file.
    """
    repo_dir = find_git_repository(directory)
    if repo_dir is None:
        raise ConfigurationError("No Git repository found")

    config_local = get_local_config_path(repo_dir)
    config_global = get_global_config_path(environ)

    if config_local.exists():
        return config_local
    if config_global.exists():
        return config_global

    raise ConfigurationError(f"No config file found in {config_local} or {config_global}")


def load_configuration_file(path: Path) -> Configuration:
    """
    Load and validate a wizard document.

    Entry values start out at their defaults.

    Raises:
        ConfigurationError: If the file is unreadable or invalid.
    """
    data = load_yaml_file(path)
    try:
        config = Configuration.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    logger.debug(
        f"Loaded {path}: {len(config.sections)} section(s), {config.total_pages} page(s)"
    )
    return config


def load_configuration(
    directory: Path,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Configuration:
    """
    Load the wizard document for a working directory.

    Args:
        directory: Working directory to search from.
        config_path: Explicit config file; skips the search when given.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Validated Configuration.

    Raises:
        ConfigurationError: If no usable configuration is found.
    """
    path = config_path if config_path is not None else resolve_config_path(directory, environ)
    return load_configuration_file(path)


def load_tui_config(environ: Mapping[str, str] | None = None) -> TUIConfig:
    """
    Load terminal UI preferences, falling back to defaults.

    Creates the data directory when it is missing.

    Raises:
        ConfigurationError: If the preferences file exists but is invalid.
    """
    try:
        ensure_directory(get_data_dir(environ))
    except OSError as e:
        raise ConfigurationError(f"Failed to create config directory: {e}") from e

    path = get_tui_config_path(environ)
    if not path.exists():
        return TUIConfig()

    try:
        return TUIConfig.model_validate(load_yaml_file(path))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid TUI configuration in {path}: {e}") from e
