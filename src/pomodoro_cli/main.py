"""Main entry point for Pomodoro CLI."""

import typer

from pomodoro_cli import __version__
from pomodoro_cli.commands import config
from pomodoro_cli.commands.history_command import history
from pomodoro_cli.commands.run_command import run
from pomodoro_cli.utils.typer_helpers import PomodoroGroup
from pomodoro_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomodoro",
    cls=PomodoroGroup,
    help="A terminal Pomodoro timer that logs your work sessions",
    no_args_is_help=True,
)

console = get_console()


app.command("run")(run)
app.command("history")(history)
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
