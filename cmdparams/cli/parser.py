"""Command-line parsing against a parameter registry
==================================================

Single left-to-right pass over the arguments:

- ``--xml`` prints the plugin descriptor, ``--help``/``-h`` the synopsis.
  Neither stops the scan; check :attr:`ParseResult.xml_requested` and
  :attr:`ParseResult.help_requested` to exit afterwards.
- ``--ctk-save-ini <file>`` / ``--ctk-load-ini <file>`` persist or restore
  all values.
- A flag bound to a boolean parameter toggles it and takes no value.
- Any other flag takes the next token as its value.
- Bare tokens are numbered ``0, 1, 2, ...`` in order and matched against
  positional bindings.

Everything the registry understood is removed from the argument list in
place, so a wrapping tool still sees its own arguments. Unknown flags (and
the token after them) are reported and kept; unmatched bare tokens are kept
silently. A flag that needs a value but ends the list aborts the scan.

Examples
--------
>>> argv = ["--basic-types-bool-param", "input.nrrd", "--verbose", "2"]
>>> result = CommandLineParser(registry).parse(argv)
>>> argv
['--verbose', '2']
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from cmdparams.cli.synopsis import build_synopsis
from cmdparams.config.exceptions import ParamValueError, suggest_typo_corrections
from cmdparams.core.registry import ParamRegistry
from cmdparams.core.values import ParamValue
from cmdparams.io.descriptor import DescriptorGenerator
from cmdparams.io.ini_codec import IniCodec
from cmdparams.utils.logging import get_logger

logger = get_logger(__name__)

XML_FLAG = "--xml"
HELP_FLAGS = ("--help", "-h")
SAVE_INI_FLAG = "--ctk-save-ini"
LOAD_INI_FLAG = "--ctk-load-ini"


@dataclass
class ParseResult:
    """Outcome of one :meth:`CommandLineParser.parse` call."""

    remaining: list[str]
    xml_requested: bool = False
    help_requested: bool = False
    aborted: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class CommandLineParser:
    """Applies command-line arguments to the parameters of a registry.

    Parameters
    ----------
    registry : ParamRegistry
        Registry holding the parameters and flag bindings
    output : TextIO, optional
        Stream for the descriptor and the help text (default: stdout)
    """

    def __init__(self, registry: ParamRegistry, output: TextIO | None = None):
        self.registry = registry
        self.output = output
        self.ini = IniCodec(registry)
        self.descriptor = DescriptorGenerator(registry)

    def _write(self, text: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def _report(self, result: ParseResult, message: str) -> None:
        logger.warning(message)
        result.errors.append(message)

    def _missing_value(self, result: ParseResult, token: str) -> None:
        self._report(
            result,
            f"Expected value but found end of argument list. "
            f"Ignored command line argument {token}",
        )
        result.aborted = True

    def _apply(
        self, result: ParseResult, param: ParamValue, token: str, text: str
    ) -> None:
        if param.spec.is_boolean:
            param.set_value(not param.value)
            logger.debug(f"{token}: toggled to {param.get_string()}")
            return
        try:
            param.set_string(text)
        except ParamValueError as e:
            self._report(result, f"Ignored value for {token}: {e.original_message}")
            return
        logger.debug(f"{token}: set to {param.get_string()!r}")

    def _unknown_flag(self, result: ParseResult, token: str) -> None:
        message = f"Ignored command line argument {token}"
        matches = suggest_typo_corrections(token, list(self.registry.flags))
        if matches:
            message += f" (did you mean {', '.join(matches)}?)"
        self._report(result, message)

    def parse(self, argv: list[str]) -> ParseResult:
        """Consume the arguments this registry understands.

        ``argv`` should not include the program name. It is compacted in
        place to the unhandled arguments, which are also returned in
        :attr:`ParseResult.remaining`.
        """
        handled = [False] * len(argv)
        result = ParseResult(remaining=[])
        position = 0
        count = len(argv)
        i = 0

        while i < count:
            token = argv[i]

            if token == XML_FLAG:
                handled[i] = True
                result.xml_requested = True
                self._write(self.descriptor.generate())
                i += 1
                continue

            if token in HELP_FLAGS:
                handled[i] = True
                result.help_requested = True
                self._write(build_synopsis(self.registry))
                i += 1
                continue

            if token in (SAVE_INI_FLAG, LOAD_INI_FLAG):
                if i == count - 1:
                    self._missing_value(result, token)
                    break
                handled[i] = handled[i + 1] = True
                path = argv[i + 1]
                if token == SAVE_INI_FLAG:
                    self.ini.save(path)
                elif not self.ini.load(path):
                    self._report(result, f"Could not load ini file {path}")
                i += 2
                continue

            if token.startswith("-"):
                param = self.registry.param_for_token(token)
                if param is not None and param.spec.is_boolean:
                    handled[i] = True
                    self._apply(result, param, token, "")
                    i += 1
                    continue
                if i == count - 1:
                    self._missing_value(result, token)
                    break
                if param is None:
                    # leave the flag and its value for the caller
                    self._unknown_flag(result, token)
                else:
                    handled[i] = handled[i + 1] = True
                    self._apply(result, param, token, argv[i + 1])
                i += 2
                continue

            # bare tokens are addressed by their position among bare tokens
            param = self.registry.param_for_token(str(position))
            position += 1
            if param is not None:
                handled[i] = True
                self._apply(result, param, token, token)
            i += 1

        remaining = [arg for arg, done in zip(argv, handled) if not done]
        argv[:] = remaining
        result.remaining = list(remaining)
        return result
