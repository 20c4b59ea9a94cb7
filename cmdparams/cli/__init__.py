"""
Command Line Interface for cmdparams
====================================

Applies ``argv`` to a parameter registry and renders the help text.

Usage:
    result = CommandLineParser(registry).parse(sys.argv[1:])
"""

from cmdparams.cli.main import build_application, main
from cmdparams.cli.parser import CommandLineParser, ParseResult
from cmdparams.cli.synopsis import build_synopsis

__all__ = [
    "CommandLineParser",
    "ParseResult",
    "build_application",
    "build_synopsis",
    "main",
]
