"""Tests for logging setup."""
from __future__ import annotations

import logging

from showcase_wizard.log import LOGGER_NAME, setup_logging


def test_setup_is_idempotent_and_sets_level():
    setup_logging("debug")
    logger = setup_logging("warning")
    assert logger is logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert not logger.propagate


def test_module_loggers_inherit_package_level():
    setup_logging(logging.ERROR)
    assert logging.getLogger("showcase_wizard.engine.context").getEffectiveLevel() == logging.ERROR
