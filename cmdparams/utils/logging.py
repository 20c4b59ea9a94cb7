"""
Minimal logging infrastructure for the cmdparams package.

Every module obtains its logger through :func:`get_logger`, which roots it
under the ``cmdparams`` hierarchy. Diagnostics (unknown flags, missing
values, unreadable ini files) go through these loggers, so they end up on
stderr by default.
"""

import inspect
import logging
import os
import time
from contextlib import contextmanager
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "CMDPARAMS_LOG_LEVEL"


class MinimalLogger:
    """Simplified logger manager for the cmdparams package."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._configured = False
        self._root_logger_name = "cmdparams"
        self._initialized = True

    def configure(self, level: Optional[str] = None, force: bool = False):
        """Configure basic logging.

        The level comes from ``level``, then ``CMDPARAMS_LOG_LEVEL``, then
        defaults to WARNING.
        """
        if self._configured and not force:
            return

        if level is None:
            level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

        root_logger = logging.getLogger(self._root_logger_name)
        root_logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

        # Add console handler if none exists
        if not root_logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root_logger.addHandler(handler)

        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        """Get or create a logger with hierarchical naming."""
        if not name.startswith(self._root_logger_name):
            if name == "__main__":
                full_name = f"{self._root_logger_name}.main"
            else:
                full_name = f"{self._root_logger_name}.{name}"
        else:
            full_name = name

        if not self._configured:
            self.configure()

        return logging.getLogger(full_name)


_logger_manager = MinimalLogger()


def configure_logging(level: Optional[str] = None) -> None:
    """(Re)configure the package root logger level."""
    _logger_manager.configure(level, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with automatic naming.

    Args:
        name: Logger name. If None, uses caller's module name.

    Returns:
        Configured logger instance.
    """
    if name is None:
        frame = inspect.currentframe()
        try:
            caller_frame = frame.f_back
            if caller_frame:
                name = caller_frame.f_globals.get("__name__", "unknown")
        finally:
            del frame

    return _logger_manager.get_logger(name or "unknown")


@contextmanager
def log_operation(
    operation_name: str,
    logger: logging.Logger,
    level: int = logging.DEBUG,
):
    """
    Log the start, duration and failure of a file operation.

    Failures are logged at ERROR and re-raised; the caller decides whether
    they are fatal.

    Args:
        operation_name: Label used in the messages, e.g. ``"load demo.ini"``.
        logger: Logger of the calling module.
        level: Level for the start and completion messages.
    """
    logger.log(level, f"{operation_name}: started")
    start_time = time.perf_counter()

    try:
        yield
    except Exception as e:
        duration = time.perf_counter() - start_time
        logger.error(f"{operation_name}: failed after {duration:.3f}s: {e}")
        raise

    duration = time.perf_counter() - start_time
    logger.log(level, f"{operation_name}: done in {duration:.3f}s")


# Configure default logging on import
_logger_manager.configure()
