from __future__ import annotations

import logging

import pytest

from medtranslate.logger import DISABLED_LEVEL, get_logger, refresh_log_mode


@pytest.fixture(autouse=True)
def restore_log_mode():
    yield
    refresh_log_mode("info")


def test_get_logger_configures_console_handler():
    refresh_log_mode("info")
    logger = get_logger("medtranslate.tests.sample")

    assert logger.level == logging.INFO
    assert any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )


def test_get_logger_does_not_duplicate_handlers():
    first = len(get_logger("medtranslate.tests.repeat").handlers)
    assert len(get_logger("medtranslate.tests.repeat").handlers) == first


@pytest.mark.parametrize(
    "mode, level",
    [("debug", logging.DEBUG), ("info", logging.INFO), ("off", DISABLED_LEVEL)],
)
def test_refresh_log_mode_updates_existing_loggers(mode, level):
    logger = get_logger("medtranslate.tests.refresh")

    refresh_log_mode(mode)

    assert logger.level == level
    has_file_handler = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    assert has_file_handler is (mode != "off")
