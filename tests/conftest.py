"""
Pytest Configuration and Fixtures for cmdparams
===============================================

Shared fixtures, configuration, and test utilities for the entire test suite.
"""

import logging

import pytest

from cmdparams.core.proxy import declare_param
from cmdparams.core.registry import ParamRegistry
from cmdparams.core.types import TypeTag

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for workflows")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def propagate_cmdparams_logs():
    """Let caplog see the package loggers regardless of configured level."""
    logger = logging.getLogger("cmdparams")
    original_level = logger.level
    original_propagate = logger.propagate
    logger.setLevel(logging.DEBUG)
    logger.propagate = True

    yield

    logger.setLevel(original_level)
    logger.propagate = original_propagate


@pytest.fixture
def registry():
    """Fresh, empty registry."""
    return ParamRegistry("Test Tool", "A tool for tests")


@pytest.fixture
def sample_registry():
    """Registry with one parameter of several kinds.

    - ``[Basic] Flag``: boolean, short flag ``-b``, initially true
    - ``[Basic] Count``: integer 5, short flag ``-c``
    - ``[Basic] Name``: string "hi"
    - ``[Vectors] Numbers``: double-vector 1,2,3
    - ``[IO] Input``: file, positional 0
    - ``[IO] Output``: file, positional 1
    """
    reg = ParamRegistry("Sample", "Sample application")
    declare_param(reg, "Basic", "Flag", TypeTag.BOOLEAN, True).declare("A flag", "b")
    declare_param(reg, "Basic", "Count", TypeTag.INTEGER, 5).declare("A count", "c")
    declare_param(reg, "Basic", "Name", TypeTag.STRING, "hi")
    declare_param(reg, "Vectors", "Numbers", TypeTag.DOUBLE_VECTOR, [1, 2, 3])
    declare_param(reg, "IO", "Input", TypeTag.FILE).declare_index("Input file", 0)
    declare_param(reg, "IO", "Output", TypeTag.FILE).declare_index("Output file", 1)
    return reg
