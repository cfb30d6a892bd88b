"""Centralized logging for odmatrix.

All modules obtain loggers through :func:`get_logger`. Records flow to a
single handler on the ``odmatrix`` package logger, which writes to stderr so
that stdout stays reserved for the list of written CSV files.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "odmatrix"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler once.

    Later calls are no-ops until :func:`reset_logging` is used.

    Args:
        level: Logging level for the package logger.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stderr stream handler.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Keep propagation so pytest's caplog sees records
    package_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of the ``odmatrix`` package logger.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger whose level is inherited from the package logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def configure_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags onto a log level and apply it.

    ``verbose`` wins over ``quiet`` when both are given.

    Returns:
        The level that was applied.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    set_global_log_level(level)
    return level


def enable_debug_logging() -> None:
    """Switch the package to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch the package back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and configuration (used by tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
