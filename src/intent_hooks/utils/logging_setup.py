"""Logging configuration for intent-hooks.

Two loggers are configured:
- ``intent_hooks``: application logger (storage warnings, config problems)
- ``intent_hooks.hooks``: governance lifecycle (pre-tool-use, veto, post-tool-use),
  always at INFO and written to its own hooks.log when file logging is on
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from intent_hooks.constants import HOOKS_LOG_FILE, HOOKS_LOGGER_NAME

if TYPE_CHECKING:
    from intent_hooks.governance.config import LogRotationConfig

PACKAGE_LOGGER_NAME = "intent_hooks"


def _make_file_handler(path: Path, rotation: "LogRotationConfig") -> logging.Handler:
    if rotation.enabled:
        return RotatingFileHandler(
            path,
            mode="a",
            maxBytes=rotation.get_max_bytes(),
            backupCount=rotation.backup_count,
            encoding="utf-8",
        )
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def configure_logging(
    log_level: str,
    log_file: Path | None = None,
    log_rotation: "LogRotationConfig | None" = None,
) -> None:
    """Configure logging for intent-hooks.

    Safe to call repeatedly; existing handlers are replaced.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional log file path. Without one, logs go to stderr.
        log_rotation: Optional log rotation configuration.
    """
    from intent_hooks.governance.config import LogRotationConfig

    level = getattr(logging, log_level.upper(), logging.INFO)

    app_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    app_logger.setLevel(level)
    app_logger.propagate = False
    app_logger.handlers.clear()

    # Always INFO so every governance decision is visible in hooks.log
    hooks_logger = logging.getLogger(HOOKS_LOGGER_NAME)
    hooks_logger.setLevel(logging.INFO)
    hooks_logger.handlers.clear()

    if level == logging.DEBUG:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    if log_file:
        try:
            rotation = log_rotation or LogRotationConfig()
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = _make_file_handler(log_file, rotation)
            file_handler.setFormatter(formatter)
            app_logger.addHandler(file_handler)

            hooks_handler = _make_file_handler(log_file.parent / HOOKS_LOG_FILE, rotation)
            hooks_handler.setFormatter(formatter)
            hooks_logger.addHandler(hooks_handler)
            # hooks.log only; keep lifecycle lines out of the main log
            hooks_logger.propagate = False
        except OSError as e:
            app_logger.warning(f"Could not set up file logging to {log_file}: {e}")
            hooks_logger.propagate = True
    else:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        app_logger.addHandler(stream_handler)
        hooks_logger.propagate = True
