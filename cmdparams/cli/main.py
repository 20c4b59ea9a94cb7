"""Sample command-line tool built on cmdparams
===========================================

Declares a handful of parameters of every flavour and applies the command
line to them. Useful to inspect the generated help text and descriptor:

    cmdparams-demo --help
    cmdparams-demo --xml
    cmdparams-demo input.nrrd -b --special-slider 0.5 --ctk-save-ini demo.ini
    cmdparams-demo --config tool.yaml --ctk-load-ini demo.ini

Entry point for console script: cmdparams-demo [args]
"""

import sys

from cmdparams.cli.parser import CommandLineParser
from cmdparams.config.manager import ConfigManager
from cmdparams.core.proxy import declare_param
from cmdparams.core.registry import ParamRegistry
from cmdparams.core.types import TypeTag
from cmdparams.utils.logging import get_logger

logger = get_logger(__name__)

CONFIG_FLAG = "--config"


def build_application() -> ParamRegistry:
    """Create the sample registry with its parameter declarations."""
    registry = ParamRegistry("The Big Test", "Does absolutely nothing.")
    registry.category = "Toys"
    registry.version = "1.0"
    registry.contributor = "Santa"

    # Basic types
    declare_param(registry, "Basic Types", "Bool Param", TypeTag.BOOLEAN).declare(
        "Just a test", "b"
    ).set_value(True)

    # Enumerations: assigned through a plain double handle
    declare_param(
        registry, "EnumTypes", "Double Enum", TypeTag.DOUBLE_ENUMERATION
    ).set_enumeration("0.1,0.2,0.3,0.4")
    declare_param(registry, "EnumTypes", "Double Enum", TypeTag.DOUBLE).set_value(0.3)

    # Vector types
    declare_param(
        registry, "Vector Types", "Double Vec", TypeTag.DOUBLE_VECTOR
    ).set_string("1,2,3,4")

    # Special kinds
    declare_param(registry, "Special", "File", TypeTag.FILE).set_file_extensions(
        "bli,bla,blbub"
    ).declare("Input File", 0).set_channel(True)
    declare_param(registry, "Special", "Slider", TypeTag.DOUBLE).set_range(
        0, 1
    ).set_value(0.333)

    return registry


def _pop_option(argv: list[str], flag: str) -> str | None:
    """Remove ``flag <value>`` from ``argv`` and return the value."""
    if flag not in argv:
        return None
    index = argv.index(flag)
    if index == len(argv) - 1:
        logger.warning(f"{flag} expects a file name")
        del argv[index]
        return None
    value = argv[index + 1]
    del argv[index : index + 2]
    return value


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns
    -------
    int
        Process exit code
    """
    args = list(sys.argv[1:] if argv is None else argv)

    registry = build_application()

    config_file = _pop_option(args, CONFIG_FLAG)
    if config_file is not None:
        ConfigManager(config_file).apply_to(registry)

    result = CommandLineParser(registry).parse(args)
    if result.xml_requested or result.help_requested:
        return 0

    for section, key, param in registry.iter_params():
        logger.info(f"[{section}] {key} = {param.get_string()}")

    if result.remaining:
        print("Unhandled arguments: " + " ".join(result.remaining))
    return 1 if result.aborted else 0


if __name__ == "__main__":
    sys.exit(main())
