"""Diagnostic log for the Pomodoro CLI.

Records from every ``pomodoro_cli.*`` module end up in one rotating file under
platformdirs' ``user_log_dir``. The interactive timer owns stdout, so nothing
here ever writes to the terminal.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "pomodoro_cli"
LOG_FILENAME = "pomodoro.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Where the diagnostic log lives (the directory is not created)."""
    return Path(user_log_dir(LOGGER_NAME)) / LOG_FILENAME


def _owns(handler: logging.Handler, path: Path) -> bool:
    return (
        isinstance(handler, logging.handlers.RotatingFileHandler)
        and handler.baseFilename == os.path.abspath(path)
    )


def _file_handler(path: Path) -> logging.handlers.RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def get_logger() -> logging.Logger:
    """Return the ``pomodoro_cli`` logger, attaching the log file on first use.

    Other handlers on the logger (a test harness's capture handler, say) are
    left alone; the file handler is added unless one for the same file is
    already there.
    """
    global _logger
    if _logger is not None:
        return _logger

    path = log_file_path()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if not any(_owns(h, path) for h in logger.handlers):
        logger.addHandler(_file_handler(path))
    logger.propagate = False

    _logger = logger
    return _logger
