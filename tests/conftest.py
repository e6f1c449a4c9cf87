"""Shared test fixtures and configuration.

Redirects every platformdirs location into *tmp_path* so tests never touch
the real config, data or log directories.
"""

from __future__ import annotations

import io
import logging
import logging.handlers
from unittest.mock import patch

import pytest

from pomodoro_cli.core.clock import VirtualClock
from pomodoro_cli.core.session import Pomodoro, SessionConfig
from pomodoro_cli.storage.work_log import WorkLog

FIXED_TIMESTAMP = "2026-10-18 09:30:00+00:00"


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers():
    """Detach our log files, leaving pytest's capture handlers in place."""
    app_logger = logging.getLogger("pomodoro_cli")
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            app_logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config, data and log dirs at tmp_path and reset cached singletons."""
    import pomodoro_cli.utils.logger as logger_mod
    from pomodoro_cli.config import get_config_manager

    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    get_config_manager.cache_clear()
    logger_mod._logger = None
    _drop_file_handlers()

    with patch("pomodoro_cli.config.user_config_dir", return_value=str(config_dir)):
        with patch("pomodoro_cli.config.user_data_dir", return_value=str(data_dir)):
            with patch(
                "pomodoro_cli.utils.logger.user_log_dir", return_value=str(log_dir)
            ):
                yield {"config": config_dir, "data": data_dir, "logs": log_dir}

    get_config_manager.cache_clear()
    _drop_file_handlers()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Core helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock():
    return VirtualClock()


@pytest.fixture()
def work_log(tmp_path):
    return WorkLog(tmp_path / "work_done.csv", timestamp=lambda: FIXED_TIMESTAMP)


@pytest.fixture()
def output():
    return io.StringIO()


@pytest.fixture()
def make_pomodoro(clock, work_log):
    """Build a Pomodoro on the virtual clock with the given interval lengths."""

    def _make(work_minutes: int = 0, break_minutes: int = 0) -> Pomodoro:
        return Pomodoro(clock, work_log, SessionConfig(work_minutes, break_minutes))

    return _make
