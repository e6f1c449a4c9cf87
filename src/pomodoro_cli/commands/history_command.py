"""History command - show logged work sessions."""

from pathlib import Path

import typer

from pomodoro_cli.config import get_config_manager
from pomodoro_cli.storage.work_log import WorkLog, WorkLogError
from pomodoro_cli.utils.ui.console import get_console
from pomodoro_cli.utils.ui.formatters import work_log_table

from .decorators import AppError, command_wrapper

console = get_console()


@command_wrapper
def history(
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="Number of records to show"),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="CSV work log to read"
    ),
) -> None:
    """Show completed work sessions from the work log."""
    config_manager = get_config_manager()
    work_log = WorkLog(log_file or config_manager.work_log_path())

    try:
        records = work_log.read_records()
    except WorkLogError as e:
        raise AppError(f"Work log {work_log.path} is malformed: {e}") from e

    if not records:
        console.print("[yellow]No work sessions logged yet[/yellow]")
        return

    shown = records[-limit:]
    console.print(
        work_log_table(shown, title=f"Work sessions ({len(shown)} of {len(records)})")
    )

    total = sum(r.duration_minutes for r in records)
    console.print(f"Total focus time: [bold]{total}[/bold] minutes")
