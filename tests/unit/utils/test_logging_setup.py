"""Tests for logging configuration."""

import logging
from pathlib import Path

from intent_hooks.constants import HOOKS_LOGGER_NAME
from intent_hooks.governance.config import LogRotationConfig
from intent_hooks.utils.logging_setup import PACKAGE_LOGGER_NAME, configure_logging


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


class TestConfigureLogging:
    def test_stream_mode(self):
        configure_logging("debug")
        app_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        hooks_logger = logging.getLogger(HOOKS_LOGGER_NAME)

        assert app_logger.level == logging.DEBUG
        assert not app_logger.propagate
        assert len(app_logger.handlers) == 1
        assert hooks_logger.level == logging.INFO
        assert hooks_logger.propagate
        assert hooks_logger.handlers == []

    def test_repeated_calls_replace_handlers(self):
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(logging.getLogger(PACKAGE_LOGGER_NAME).handlers) == 1

    def test_unknown_level_defaults_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.INFO

    def test_file_mode_splits_hooks_log(self, tmp_path: Path):
        log_file = tmp_path / ".orchestration" / "intent-hooks.log"
        configure_logging("INFO", log_file=log_file, log_rotation=LogRotationConfig(enabled=False))

        app_logger = logging.getLogger("intent_hooks.governance.trace")
        hooks_logger = logging.getLogger(HOOKS_LOGGER_NAME)
        app_logger.warning("ledger write failed")
        hooks_logger.info("[VETO] write_to_file")
        _flush(logging.getLogger(PACKAGE_LOGGER_NAME))
        _flush(hooks_logger)

        main_text = log_file.read_text(encoding="utf-8")
        hooks_text = (log_file.parent / "hooks.log").read_text(encoding="utf-8")
        assert "ledger write failed" in main_text
        assert "[VETO]" not in main_text
        assert "[VETO] write_to_file" in hooks_text

    def test_rotating_handler_used_by_default(self, tmp_path: Path):
        from logging.handlers import RotatingFileHandler

        configure_logging("INFO", log_file=tmp_path / "app.log")
        handler = logging.getLogger(PACKAGE_LOGGER_NAME).handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 10 * 1024 * 1024
        assert handler.backupCount == 3
