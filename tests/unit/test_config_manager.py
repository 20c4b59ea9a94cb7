"""
Unit Tests for ConfigManager
============================

Tests cover:
- YAML and JSON loading
- Override data and defaults
- Tag name normalization and unknown tags
- Error paths (missing file, bad syntax, non-mapping content)
- Log level resolution and apply_to()
"""

import json
import logging

import pytest

from cmdparams.config.manager import ConfigManager, load_tool_config
from cmdparams.core.registry import ParamRegistry
from cmdparams.utils.logging import LOG_LEVEL_ENV


@pytest.fixture
def yaml_config(tmp_path):
    path = tmp_path / "tool.yaml"
    path.write_text(
        "application:\n"
        "  title: Smoother\n"
        "  category: Filtering\n"
        '  version: "1.2"\n'
        "  documentation_url: https://example.org/smoother\n"
        "logging:\n"
        "  level: INFO\n"
    )
    return path


@pytest.fixture(autouse=True)
def clear_level_env(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


class TestLoading:
    """Test configuration sources."""

    def test_defaults(self):
        manager = ConfigManager()

        assert manager.get_config() == {
            "application": {},
            "logging": {"level": "WARNING"},
        }
        assert manager.get_log_level() == "WARNING"

    def test_yaml_file(self, yaml_config):
        tags = ConfigManager(yaml_config).get_application_tags()

        assert tags == {
            "title": "Smoother",
            "category": "Filtering",
            "version": "1.2",
            "documentation-url": "https://example.org/smoother",
        }

    def test_json_file(self, tmp_path):
        path = tmp_path / "tool.json"
        path.write_text(json.dumps({"application": {"license": "MIT"}}))

        manager = ConfigManager(path)

        assert manager.get_application_tags() == {"license": "MIT"}
        assert manager.get_log_level() == "WARNING"

    def test_override(self):
        manager = ConfigManager(config_override={"application": {"version": 2}})
        assert manager.get_application_tags() == {"version": "2"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ConfigManager(path).get_application_tags() == {}

    def test_load_tool_config(self, yaml_config):
        assert load_tool_config(yaml_config)["logging"]["level"] == "INFO"


class TestErrorPaths:
    """Bad files fall back to defaults with a logged error."""

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="cmdparams"):
            manager = ConfigManager(tmp_path / "missing.yaml")

        assert manager.get_application_tags() == {}
        assert "[FILE_NOT_FOUND]" in caplog.text

    def test_yaml_syntax_error(self, tmp_path, caplog):
        path = tmp_path / "bad.yaml"
        path.write_text("application: [unclosed\n")

        with caplog.at_level(logging.ERROR, logger="cmdparams"):
            manager = ConfigManager(path)

        assert manager.get_application_tags() == {}
        assert "[YAML_SYNTAX_ERROR]" in caplog.text

    def test_json_syntax_error(self, tmp_path, caplog):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with caplog.at_level(logging.ERROR, logger="cmdparams"):
            ConfigManager(path)

        assert "[JSON_SYNTAX_ERROR]" in caplog.text

    def test_non_mapping_content(self, tmp_path, caplog):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with caplog.at_level(logging.ERROR, logger="cmdparams"):
            manager = ConfigManager(path)

        assert manager.get_config()["application"] == {}
        assert "must contain a mapping" in caplog.text

    def test_unknown_tag_is_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cmdparams"):
            manager = ConfigManager(
                config_override={"application": {"titel": "Typo", "title": "Ok"}}
            )

        assert manager.get_application_tags() == {"title": "Ok"}
        assert "Unknown application tag in configuration: titel" in caplog.text

    def test_malformed_sections_replaced(self):
        manager = ConfigManager(config_override={"application": "x", "logging": None})

        assert manager.get_application_tags() == {}
        assert manager.get_log_level() == "WARNING"


class TestApply:
    """Test applying configuration to a registry."""

    def test_apply_to_registry(self, yaml_config):
        registry = ParamRegistry("Default Title", "Kept")

        ConfigManager(yaml_config).apply_to(registry)

        assert registry.title == "Smoother"
        assert registry.description == "Kept"
        assert registry.documentation_url == "https://example.org/smoother"
        assert logging.getLogger("cmdparams").level == logging.INFO

    def test_environment_wins(self, yaml_config, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert ConfigManager(yaml_config).get_log_level() == "ERROR"
