"""Configuration system and error taxonomy for the cmdparams package."""

from cmdparams.config.exceptions import (
    CmdParamsError,
    ConfigurationFileError,
    ErrorContext,
    FixSuggestion,
    ParamValueError,
    UndeclaredParameterError,
    UnsupportedMetadataError,
    suggest_typo_corrections,
)
from cmdparams.config.manager import ConfigManager, load_tool_config

__all__ = [
    # Exceptions
    "CmdParamsError",
    "ConfigurationFileError",
    "ErrorContext",
    "FixSuggestion",
    "ParamValueError",
    "UndeclaredParameterError",
    "UnsupportedMetadataError",
    "suggest_typo_corrections",
    # Configuration management
    "ConfigManager",
    "load_tool_config",
]
