"""Minimal utilities for the cmdparams package."""

from cmdparams.utils.logging import (
    configure_logging,
    get_logger,
    log_operation,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "log_operation",
]
