"""Configuration Management for cmdparams
=======================================

Loads the tool-level configuration from YAML or JSON: the application
metadata shown in the plugin descriptor and the logging level. Parameter
values themselves are not configured here; they come from declarations,
ini files and the command line.

Example file::

    application:
      title: Smoother
      category: Filtering
      version: "1.2"
      documentation_url: https://example.org/smoother
      contributor: Jane Doe
    logging:
      level: INFO
"""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from cmdparams.config.exceptions import ConfigurationFileError
from cmdparams.core.registry import APPLICATION_TAGS, ParamRegistry
from cmdparams.utils.logging import LOG_LEVEL_ENV, configure_logging, get_logger

logger = get_logger(__name__)


class ConfigManager:
    """Configuration manager for command-line tools built on cmdparams.

    Usage:
        config_manager = ConfigManager("tool.yaml")
        config_manager.apply_to(registry)
    """

    def __init__(
        self,
        config_file: str | Path | None = None,
        config_override: dict[str, Any] | None = None,
    ):
        """Initialize configuration manager.

        Parameters
        ----------
        config_file : str or Path, optional
            Path to YAML/JSON configuration file. Without it (and without an
            override) the default configuration is used.
        config_override : dict, optional
            Configuration data to use instead of loading from file
        """
        self.config_file = config_file
        self.config: dict[str, Any] = self._get_default_config()

        if config_override is not None:
            self.config = config_override.copy()
            logger.debug("Configuration loaded from override data")
        elif config_file is not None:
            self.load_config()

        self._normalize_schema()

    def load_config(self) -> None:
        """Load and parse the YAML/JSON configuration file.

        Unreadable or malformed files are logged and the default
        configuration is used instead.
        """
        config_path = Path(self.config_file)
        try:
            with open(config_path, encoding="utf-8") as f:
                if config_path.suffix.lower() == ".json":
                    loaded = json.load(f)
                else:
                    loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            logger.error(str(ConfigurationFileError(str(config_path), e)))
            logger.info("Using default configuration...")
            self.config = self._get_default_config()
            return

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            logger.error(
                f"Configuration file {config_path} must contain a mapping, "
                f"got {type(loaded).__name__}"
            )
            self.config = self._get_default_config()
            return

        self.config = loaded
        logger.info(f"Configuration loaded from: {config_path}")

    def _get_default_config(self) -> dict[str, Any]:
        return {
            "application": {},
            "logging": {"level": "WARNING"},
        }

    def _normalize_schema(self) -> None:
        """Fill in missing sections and map ``documentation_url`` style keys."""
        defaults = self._get_default_config()
        for section, value in defaults.items():
            if not isinstance(self.config.get(section), dict):
                self.config[section] = value

        application = {}
        for name, value in self.config["application"].items():
            tag = str(name).replace("_", "-")
            if tag not in APPLICATION_TAGS:
                logger.warning(f"Unknown application tag in configuration: {name}")
                continue
            if value is not None:
                application[tag] = str(value)
        self.config["application"] = application

    def get_config(self) -> dict[str, Any]:
        return self.config

    def get_application_tags(self) -> dict[str, str]:
        """Application tags keyed by their descriptor names."""
        return dict(self.config["application"])

    def get_log_level(self) -> str:
        """Log level: ``CMDPARAMS_LOG_LEVEL`` wins over the file."""
        return os.environ.get(LOG_LEVEL_ENV) or str(
            self.config["logging"].get("level", "WARNING")
        )

    def apply_to(self, registry: ParamRegistry) -> ParamRegistry:
        """Copy application tags into ``registry`` and configure logging."""
        registry.tags.update(self.get_application_tags())
        configure_logging(self.get_log_level())
        return registry


def load_tool_config(config_file: str | Path) -> dict[str, Any]:
    """Load a tool configuration file and return it as a dictionary."""
    return ConfigManager(config_file).get_config()
