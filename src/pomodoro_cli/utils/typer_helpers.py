"""Typer groups that point mistyped commands at the right one."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoro_cli.utils.ui.console import get_console
from pomodoro_cli.utils.ui.formatters import format_error


class SuggestingGroup(TyperGroup):
    """Group that answers an unknown command with "Did you mean ...".

    Candidates are the group's own commands plus ``aliases``: words people
    tend to type for a command this group spells differently.
    """

    aliases: dict[str, str] = {}

    def suggestions_for(self, attempted: str) -> list[str]:
        names = sorted(self.commands)
        if attempted in self.aliases and self.aliases[attempted] in self.commands:
            return [self.aliases[attempted]]
        suggestions = get_close_matches(attempted, names, n=3, cutoff=0.6)
        if not suggestions:
            alias_hits = get_close_matches(attempted, list(self.aliases), n=1, cutoff=0.8)
            suggestions = [
                self.aliases[a] for a in alias_hits if self.aliases[a] in self.commands
            ]
        return suggestions

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            suggestions = self.suggestions_for(args[0])
            if not suggestions:
                raise

            console = get_console()
            format_error(f'unknown command "{args[0]}" for "{ctx.command_path}"')
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {ctx.command_path} {suggestion}")
            raise typer.Exit(ERROR_INVALID_ARGS) from e


class PomodoroGroup(SuggestingGroup):
    """Top-level ``pomodoro`` commands."""

    aliases = {
        "start": "run",
        "begin": "run",
        "timer": "run",
        "log": "history",
        "logs": "history",
        "stats": "history",
        "settings": "config",
        "configure": "config",
    }


class ConfigGroup(SuggestingGroup):
    """``pomodoro config`` subcommands."""

    aliases = {
        "list": "show",
        "view": "show",
        "unset": "reset",
        "clear": "reset",
    }
