"""Run command - the interactive Pomodoro loop."""

import sys
from dataclasses import replace
from pathlib import Path

import typer

from pomodoro_cli.config import get_config_manager
from pomodoro_cli.core.clock import RealClock
from pomodoro_cli.core.session import Pomodoro
from pomodoro_cli.storage.work_log import WorkLog
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoro_cli.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

console = get_console()


@command_wrapper
def run(
    work: int | None = typer.Option(
        None, "--work", "-w", help="Work interval in minutes (default from config)"
    ),
    break_: int | None = typer.Option(
        None, "--break", "-b", help="Break interval in minutes (default from config)"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="CSV file to log completed work sessions to"
    ),
) -> None:
    """Start the interactive Pomodoro timer."""
    config_manager = get_config_manager()
    config = config_manager.config

    overrides = {}
    if work is not None:
        overrides["work_minutes"] = work
    if break_ is not None:
        overrides["break_minutes"] = break_
    try:
        session_config = replace(config.session_config(), **overrides)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e

    work_log = WorkLog(
        log_file or config_manager.work_log_path(),
        mode=config.log.mode,
    )
    pomodoro = Pomodoro(RealClock(), work_log, session_config)

    console.print("[bold]Welcome to the Pomodoro Timer![/bold]")
    console.print(
        f"[dim]Work {session_config.work_minutes} min, "
        f"break {session_config.break_minutes} min. "
        f"Logging to {work_log.path}[/dim]"
    )

    try:
        completed = pomodoro.run(sys.stdin, sys.stdout)
    except (OSError, UnicodeDecodeError):
        # the prompt or a progress line is still open
        sys.stdout.write("\n")
        sys.stdout.flush()
        raise

    if completed:
        console.print(f"[green]Completed {completed} Pomodoro(s) this run.[/green]")
    console.print("Thank you for using the Pomodoro Timer. Goodbye!")
