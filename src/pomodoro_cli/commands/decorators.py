"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomodoro_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INTERRUPTED,
    ERROR_IO,
)
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with logging and uniform error reporting."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except KeyboardInterrupt as e:
            logger.warning("command interrupted: %s", cmd)
            format_error("Interrupted")
            raise typer.Exit(code=ERROR_INTERRUPTED) from e

        except OSError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - I/O error: %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"I/O error: {e}")
            raise typer.Exit(code=ERROR_IO) from e

        except UnicodeDecodeError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - undecodable input: %s", cmd, elapsed, e
            )
            format_error(f"Could not decode input: {e}")
            raise typer.Exit(code=ERROR_IO) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
