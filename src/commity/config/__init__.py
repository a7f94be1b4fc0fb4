"""Configuration models and loading for Commity."""

from commity.config.loader import (
    ConfigurationError,
    load_configuration,
    load_configuration_file,
    load_tui_config,
    load_yaml_file,
    resolve_config_path,
)
from commity.config.schema import (
    BooleanEntry,
    Choice,
    ChoiceEntry,
    Configuration,
    Entry,
    Section,
    TextEntry,
    TUIConfig,
    TUILayout,
    TuiSymbols,
)

__all__ = [
    "BooleanEntry",
    "Choice",
    "ChoiceEntry",
    "Configuration",
    "ConfigurationError",
    "Entry",
    "Section",
    "TUIConfig",
    "TUILayout",
    "TextEntry",
    "TuiSymbols",
    "load_configuration",
    "load_configuration_file",
    "load_tui_config",
    "load_yaml_file",
    "resolve_config_path",
]
