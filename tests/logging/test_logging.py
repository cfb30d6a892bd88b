"""Tests for centralized logging behavior and configuration."""

import logging
import sys
from io import StringIO

import pytest

from odmatrix.logging import (
    configure_from_flags,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    logger = get_logger("odmatrix.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()


def test_child_loggers_follow_package_level():
    mapping_logger = get_logger("odmatrix.exec.mapping")
    expand_logger = get_logger("odmatrix.exec.expand")
    assert mapping_logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert mapping_logger.getEffectiveLevel() == logging.WARNING
    assert expand_logger.getEffectiveLevel() == logging.WARNING
    assert get_logger("odmatrix.io").getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    setup_root_logger(handler=logging.StreamHandler(StringIO()))

    package_logger = logging.getLogger("odmatrix")
    assert len(package_logger.handlers) == 1

    get_logger("odmatrix.pipeline").info("once")
    assert capture.getvalue().count("once") == 1


def test_default_handler_writes_to_stderr():
    setup_root_logger()
    (handler,) = logging.getLogger("odmatrix").handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_custom_format():
    capture = StringIO()
    setup_root_logger(format_string="%(levelname)s|%(message)s", handler=logging.StreamHandler(capture))
    get_logger("odmatrix.x").warning("careful")
    assert capture.getvalue().strip() == "WARNING|careful"


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_configure_from_flags(verbose, quiet, expected):
    assert configure_from_flags(verbose=verbose, quiet=quiet) == expected
    assert logging.getLogger("odmatrix").level == expected
