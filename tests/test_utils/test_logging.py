"""Tests for logging setup."""

import logging
import logging.handlers

import pytest
import structlog

from reminder.utils.logging import get_logger, setup_logging


class TestSetupLogging:
    def test_console_only_by_default(self):
        setup_logging("WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], logging.FileHandler)

    def test_replaces_existing_handlers(self):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(logging.getLogger().handlers) == 1

    def test_file_logging_creates_log_files(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging("WARNING", log_to_file=True, log_dir=log_dir)

        root = logging.getLogger()
        file_handlers = [
            h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 2
        assert (log_dir / "reminder.log").exists()
        assert (log_dir / "errors.log").exists()

    def test_file_logging_requires_directory(self):
        with pytest.raises(ValueError):
            setup_logging("INFO", log_to_file=True)

    def test_invalid_level(self):
        with pytest.raises(AttributeError):
            setup_logging("LOUD")


class TestGetLogger:
    def test_structured_events_reach_stdlib(self, caplog):
        setup_logging("INFO")
        # setup_logging replaces root handlers, including pytest's
        logging.getLogger().addHandler(caplog.handler)

        logger = get_logger("reminder.test")
        with caplog.at_level(logging.INFO, logger="reminder.test"):
            logger.info("reminder_added", reminder_id=7)

        messages = [r.getMessage() for r in caplog.records if r.name == "reminder.test"]
        assert any("reminder_added" in m and "reminder_id=7" in m for m in messages)

    def test_uses_stdlib_logger_factory(self):
        setup_logging("INFO")
        config = structlog.get_config()
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
