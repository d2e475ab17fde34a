"""Logging utilities for executor."""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

# Global logger instance (singleton)
_logger: Optional[logging.Logger] = None

LOG_ENV_VAR = "DEVENV_SETUP_LOG_FILE"

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ENABLE_VALUES = ("1", "true", "yes", "on")


def get_logger() -> logging.Logger:
    """Get or create the devenv-setup logger."""
    global _logger
    if _logger is None:
        _logger = _setup_logger()
    return _logger


def _log_file_path(value: str) -> Path:
    """Resolve the log file named by DEVENV_SETUP_LOG_FILE, creating its directory."""
    if value.lower() in _ENABLE_VALUES:
        path = Path.cwd() / "logs" / f"devenv_setup_{datetime.now().strftime('%Y-%m-%d')}.log"
    else:
        path = Path(value)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _setup_logger() -> logging.Logger:
    """Setup logging.

    Nothing is logged unless DEVENV_SETUP_LOG_FILE is set: a path logs to
    that file, and "1", "true", "yes" or "on" log to ./logs/. When the file
    cannot be opened, records go to stderr and the failure is logged once.
    """
    logger = logging.getLogger("devenv_setup")
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    log_env = os.environ.get(LOG_ENV_VAR)
    if not log_env:
        # Keep records from reaching the root logger's lastResort handler
        logger.addHandler(logging.NullHandler())
        return logger

    failure = None
    try:
        handler: logging.Handler = logging.FileHandler(_log_file_path(log_env), encoding="utf-8")
    except OSError as e:
        handler = logging.StreamHandler()
        failure = e

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)

    if failure is not None:
        logger.warning(f"Cannot open log file from {LOG_ENV_VAR}={log_env!r}: {failure}; logging to stderr")

    return logger
