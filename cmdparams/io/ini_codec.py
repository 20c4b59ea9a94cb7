"""Ini persistence of parameter values.

File format::

    # comment
    [Section]
    Key = value
    Vector Key = 1,2,3

Keys are case-sensitive, values are the canonical string form of each
parameter. Lines before the first header belong to the ``Global`` section.
Loading only updates parameters that are already declared; an unknown key
is a programming error and raises :class:`UndeclaredParameterError`.
"""

from __future__ import annotations

import configparser
import io
from pathlib import Path

from cmdparams.config.exceptions import ParamValueError, UndeclaredParameterError
from cmdparams.core.registry import ParamRegistry
from cmdparams.utils.logging import get_logger, log_operation

logger = get_logger(__name__)

DEFAULT_SECTION = "Global"

# configparser always has a defaults section; give it a name no ini uses
_NO_DEFAULTS = "__cmdparams_defaults__"


def _make_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#",),
        inline_comment_prefixes=None,
        interpolation=None,
        allow_no_value=True,
        strict=False,
        empty_lines_in_values=False,
        default_section=_NO_DEFAULTS,
    )
    parser.optionxform = str  # keys are case-sensitive
    return parser


def _normalize_lines(text: str) -> str:
    """Left-align every line so indentation never means continuation."""
    lines = [line.strip() for line in text.splitlines()]
    # a single character can be neither a header nor an assignment
    lines = [line for line in lines if len(line) >= 2]
    return "\n".join([f"[{DEFAULT_SECTION}]", *lines]) + "\n"


class IniCodec:
    """Reads and writes a registry's values in ini format.

    Parameters
    ----------
    registry : ParamRegistry
        Registry whose declared parameters are saved or updated
    """

    def __init__(self, registry: ParamRegistry):
        self.registry = registry

    def dumps(self) -> str:
        """Return every parameter as ini text, sections and keys sorted."""
        parser = _make_parser()
        for section in self.registry.sections():
            parser.add_section(section)
            for key, param in self.registry.params_in(section):
                parser.set(section, key, param.get_string())

        buffer = io.StringIO()
        parser.write(buffer)
        return buffer.getvalue()

    def save(self, path: str | Path) -> None:
        """Write all values to ``path``. Write errors are logged, not raised."""
        with log_operation(f"save {path}", logger):
            try:
                Path(path).write_text(self.dumps(), encoding="utf-8")
            except OSError as e:
                logger.error(f"Could not write ini file {path}: {e}")
                return
        logger.info(f"Saved {len(self.registry)} parameters to {path}")

    def parse(self, text: str, source: str = "<string>") -> None:
        """Apply ini ``text`` to the declared parameters.

        Raises
        ------
        UndeclaredParameterError
            If the text names a ``(section, key)`` that was never declared.
            Values applied before the offending line are kept.
        """
        parser = _make_parser()
        parser.read_string(_normalize_lines(text), source=source)

        for section in parser.sections():
            for key in parser.options(section):
                value = parser.get(section, key, raw=True)
                param = self.registry.get_param(section, key)
                if param is None:
                    raise UndeclaredParameterError(
                        section,
                        key,
                        known_keys=self.registry.keys_in(section),
                        source=source,
                    )
                try:
                    param.set_string("" if value is None else value)
                except ParamValueError as e:
                    logger.warning(
                        f"{source}: ignored value for [{section}] {key}: "
                        f"{e.original_message}"
                    )

    def load(self, path: str | Path) -> bool:
        """Apply the ini file at ``path``; False if it cannot be read."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read ini file {path}: {e}")
            return False

        with log_operation(f"load {path}", logger):
            self.parse(text, source=str(path))
        logger.info(f"Loaded parameters from {path}")
        return True
