"""
Error Handling and Exception System for cmdparams
=================================================

Exception classes with actionable error messages. Each error carries an
``error_code``, an :class:`ErrorContext` describing where the problem was
found (section/key and source file) and optional :class:`FixSuggestion`
entries that are rendered into the final message.

Only programming-contract violations are raised out of the registry:
an ini file naming an undeclared parameter, or a metadata setter used on a
parameter kind that does not support it. Conversion failures are raised by
``ParamValue.set_string`` and turned into diagnostics by the command-line
parser and the ini codec.
"""

import difflib
import json
from dataclasses import dataclass
from typing import Iterable, List, Optional

import yaml


@dataclass
class ErrorContext:
    """Context information for enhanced error messages."""

    section: Optional[str] = None
    key: Optional[str] = None
    source: Optional[str] = None


@dataclass
class FixSuggestion:
    """A specific fix suggestion with an optional code example."""

    title: str
    description: str
    code_example: Optional[str] = None


class CmdParamsError(Exception):
    """Base class for all cmdparams errors with enhanced messaging."""

    default_code = "CMDPARAMS_ERROR"

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[List[FixSuggestion]] = None,
        error_code: Optional[str] = None,
    ):
        self.original_message = message
        self.context = context or ErrorContext()
        self.suggestions = suggestions or []
        self.error_code = error_code or self.default_code

        super().__init__(self._generate_enhanced_message())

    def _generate_enhanced_message(self) -> str:
        """Generate a multi-line, actionable error message."""
        lines = [f"[{self.error_code}] {self.original_message}"]

        if self.context.section is not None and self.context.key is not None:
            lines.append(f"Parameter: [{self.context.section}] {self.context.key}")
        if self.context.source:
            lines.append(f"Source: {self.context.source}")

        if self.suggestions:
            lines.append("Suggested solutions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {suggestion.title}")
                lines.append(f"     {suggestion.description}")
                if suggestion.code_example:
                    for code_line in suggestion.code_example.strip().split("\n"):
                        lines.append(f"     {code_line}")

        return "\n".join(lines)


class ParamValueError(CmdParamsError, ValueError):
    """A string could not be converted into a parameter's value type."""

    default_code = "VALUE_CONVERSION"

    def __init__(
        self,
        text: str,
        type_name: str,
        context: Optional[ErrorContext] = None,
    ):
        self.text = text
        self.type_name = type_name
        super().__init__(f"Cannot convert {text!r} to {type_name}", context)


class UndeclaredParameterError(CmdParamsError, KeyError):
    """An ini file or lookup referenced a parameter that was never declared."""

    default_code = "UNDECLARED_PARAMETER"

    def __init__(
        self,
        section: str,
        key: str,
        known_keys: Iterable[str] = (),
        source: Optional[str] = None,
    ):
        self.section = section
        self.key = key
        context = ErrorContext(section=section, key=key, source=source)

        suggestions = [
            FixSuggestion(
                title="Declare the parameter before loading",
                description="Every key an ini file mentions must be declared first",
                code_example=f'declare_param(registry, "{section}", "{key}", TypeTag.STRING)',
            )
        ]
        matches = suggest_typo_corrections(key, list(known_keys))
        if matches:
            suggestions.append(
                FixSuggestion(
                    title="Check the key spelling",
                    description="Did you mean: " + ", ".join(matches),
                )
            )

        super().__init__(
            f"Parameter '{key}' in section '{section}' was never declared",
            context,
            suggestions,
        )

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return Exception.__str__(self)


class UnsupportedMetadataError(CmdParamsError, TypeError):
    """A metadata setter was used on a parameter kind that lacks it."""

    default_code = "UNSUPPORTED_METADATA"

    def __init__(self, type_name: str, metadata: str, section: str, key: str):
        self.type_name = type_name
        self.metadata = metadata
        super().__init__(
            f"{type_name} parameters do not support '{metadata}'",
            ErrorContext(section=section, key=key),
        )


class ConfigurationFileError(CmdParamsError):
    """Error related to configuration file loading and parsing."""

    def __init__(self, filename: str, original_error: Exception):
        self.filename = filename
        self.original_error = original_error

        if isinstance(original_error, FileNotFoundError):
            error_code = "FILE_NOT_FOUND"
            message = f"Configuration file '{filename}' not found"
            suggestions = [
                FixSuggestion(
                    title="Check the path",
                    description="Pass an existing YAML or JSON file via --config",
                )
            ]
        elif isinstance(original_error, yaml.YAMLError):
            error_code = "YAML_SYNTAX_ERROR"
            message = f"YAML syntax error in '{filename}': {original_error}"
            suggestions = [
                FixSuggestion(
                    title="Validate YAML syntax",
                    description="YAML is sensitive to indentation. Use spaces, not tabs",
                    code_example="""
application:
  title: My Tool
  version: "1.0"
logging:
  level: INFO
""",
                )
            ]
        elif isinstance(original_error, json.JSONDecodeError):
            error_code = "JSON_SYNTAX_ERROR"
            message = f"JSON syntax error in '{filename}': {original_error}"
            suggestions = []
        else:
            error_code = "FILE_READ_ERROR"
            message = f"Failed to read configuration file '{filename}': {original_error}"
            suggestions = []

        super().__init__(message, ErrorContext(source=filename), suggestions, error_code)


def suggest_typo_corrections(
    key: str, available_keys: List[str], max_suggestions: int = 3
) -> List[str]:
    """Suggest corrections for typos in keys or flags using fuzzy matching."""
    if not available_keys:
        return []

    return difflib.get_close_matches(key, available_keys, n=max_suggestions, cutoff=0.6)
