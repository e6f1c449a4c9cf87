"""Status message and table formatters."""

from rich.table import Table

from pomodoro_cli.storage.work_log import WorkLogRecord

from .console import get_console


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def work_log_table(records: list[WorkLogRecord], title: str | None = None) -> Table:
    """Build a table of work log records in the order given."""
    table = Table(title=title, show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Completed", style="cyan")
    table.add_column("Task")
    table.add_column("Minutes", justify="right")

    for i, record in enumerate(records, start=1):
        table.add_row(
            str(i),
            record.completed_at,
            record.task or "[dim](none)[/dim]",
            str(record.duration_minutes),
        )
    return table
