"""cmdparams: Declarative Parameters for Command-Line Tools
========================================================

Declare typed parameters once and get, for free:

- command-line parsing (``--section-key value``, short flags, positionals)
- ini-file persistence (``--ctk-save-ini`` / ``--ctk-load-ini``)
- an XML plugin descriptor (``--xml``) from which a host application
  builds a GUI for the tool
- a generated ``--help`` text

Quick Start:
    >>> from cmdparams import CommandLineParser, ParamRegistry, TypeTag, declare_param
    >>>
    >>> registry = ParamRegistry("Smoother", "Smooths a volume")
    >>> sigma = declare_param(registry, "Filter", "Sigma", TypeTag.DOUBLE, 1.0)
    >>> sigma = sigma.declare("Kernel width", "s").set_range(0, 10)
    >>>
    >>> argv = ["-s", "2.5", "extra.txt"]
    >>> result = CommandLineParser(registry).parse(argv)
    >>> sigma.get_value()
    2.5
    >>> argv
    ['extra.txt']
"""

__version__ = "1.0.0"

from cmdparams.cli.parser import CommandLineParser, ParseResult
from cmdparams.cli.synopsis import build_synopsis
from cmdparams.config.exceptions import (
    CmdParamsError,
    ParamValueError,
    UndeclaredParameterError,
    UnsupportedMetadataError,
)
from cmdparams.config.manager import ConfigManager
from cmdparams.core.proxy import ParamProxy, declare_param
from cmdparams.core.registry import ParamRegistry
from cmdparams.core.types import TypeTag
from cmdparams.core.values import ParamValue
from cmdparams.io.descriptor import DescriptorGenerator
from cmdparams.io.ini_codec import IniCodec

__all__ = [
    "__version__",
    # Parameter model
    "ParamRegistry",
    "ParamValue",
    "ParamProxy",
    "TypeTag",
    "declare_param",
    # Consumers
    "CommandLineParser",
    "ParseResult",
    "IniCodec",
    "DescriptorGenerator",
    "build_synopsis",
    # Configuration and errors
    "ConfigManager",
    "CmdParamsError",
    "ParamValueError",
    "UndeclaredParameterError",
    "UnsupportedMetadataError",
]
