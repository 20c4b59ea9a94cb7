"""
Unit Tests for the Exception System
===================================
"""

import json

import pytest
import yaml

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


class TestEnhancedMessages:
    """Test message rendering."""

    def test_code_prefix(self):
        error = CmdParamsError("Something broke")
        assert str(error) == "[CMDPARAMS_ERROR] Something broke"
        assert error.original_message == "Something broke"

    def test_context_and_suggestions(self):
        error = CmdParamsError(
            "Bad value",
            ErrorContext(section="S", key="A", source="x.ini"),
            [FixSuggestion("Fix it", "Change the value", "A = 1")],
            error_code="CUSTOM",
        )

        assert str(error).splitlines() == [
            "[CUSTOM] Bad value",
            "Parameter: [S] A",
            "Source: x.ini",
            "Suggested solutions:",
            "  1. Fix it",
            "     Change the value",
            "     A = 1",
        ]

    def test_param_value_error(self):
        error = ParamValueError("abc", "integer")

        assert isinstance(error, ValueError)
        assert error.error_code == "VALUE_CONVERSION"
        assert error.original_message == "Cannot convert 'abc' to integer"

    def test_undeclared_parameter_error(self):
        error = UndeclaredParameterError("S", "Cout", known_keys=["Count", "Name"])

        assert isinstance(error, KeyError)
        assert str(error).startswith("[UNDECLARED_PARAMETER]")
        assert "Did you mean: Count" in str(error)

    def test_undeclared_parameter_names_source_file(self):
        message = str(UndeclaredParameterError("S", "A", source="tool.ini"))

        assert "Source: tool.ini" in message
        assert "Location" not in message

    def test_unsupported_metadata_error(self):
        error = UnsupportedMetadataError("string", "constraints", "S", "A")

        assert isinstance(error, TypeError)
        assert "string parameters do not support 'constraints'" in str(error)

    def test_catch_all_base(self):
        with pytest.raises(CmdParamsError):
            raise UndeclaredParameterError("S", "A")


class TestConfigurationFileError:
    """Test error code selection."""

    def test_file_not_found(self):
        error = ConfigurationFileError("a.yaml", FileNotFoundError("a.yaml"))
        assert error.error_code == "FILE_NOT_FOUND"

    def test_yaml_error(self):
        with pytest.raises(yaml.YAMLError) as exc_info:
            yaml.safe_load("a: [b")

        error = ConfigurationFileError("a.yaml", exc_info.value)
        assert error.error_code == "YAML_SYNTAX_ERROR"

    def test_json_error(self):
        with pytest.raises(json.JSONDecodeError) as exc_info:
            json.loads("{")

        error = ConfigurationFileError("a.json", exc_info.value)
        assert error.error_code == "JSON_SYNTAX_ERROR"

    def test_other_error(self):
        error = ConfigurationFileError("a.yaml", PermissionError("denied"))
        assert error.error_code == "FILE_READ_ERROR"


class TestTypoCorrections:
    def test_close_matches(self):
        assert suggest_typo_corrections("--basic-cout", ["--basic-count", "-h"]) == [
            "--basic-count"
        ]

    def test_no_candidates(self):
        assert suggest_typo_corrections("x", []) == []
