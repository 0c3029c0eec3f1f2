"""Tests for logging configuration."""

import logging

from reimagine.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("reimagine")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_configure_logging_updates_level_and_ignores_unknown_names() -> None:
    logger = logging.getLogger("reimagine")

    configure_logging("debug")
    assert logger.level == logging.DEBUG

    configure_logging("chatty")
    assert logger.level == logging.INFO
