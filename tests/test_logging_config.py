"""
Tests for logging configuration.
"""

import logging

from strings_explorer.logging_config import (
    LOG_LEVEL_ENV,
    LOGGER_NAME,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """setup_logging configures the package logger only."""

    def test_explicit_level(self):
        setup_logging("debug")

        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")

        setup_logging()

        assert logging.getLogger(LOGGER_NAME).level == logging.ERROR

    def test_default_and_invalid_levels(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

        setup_logging()
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

        setup_logging("chatty")
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self):
        setup_logging("INFO")
        setup_logging("INFO")

        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("INFO", log_file=str(log_file))

        get_logger("tests").info("written to file")
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")


class TestGetLogger:
    """Logger naming."""

    def test_prefixes_name(self):
        assert get_logger("cli").name == "strings_explorer.cli"

    def test_keeps_package_names(self):
        assert get_logger("strings_explorer.utils").name == "strings_explorer.utils"
        assert get_logger(LOGGER_NAME).name == LOGGER_NAME
