"""Configuration management commands."""

import json
from typing import Optional

import typer
from pydantic import ValidationError

from pomodoro_cli.config import get_config_manager
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoro_cli.utils.ui.console import get_console
from pomodoro_cli.utils.typer_helpers import ConfigGroup
from pomodoro_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=ConfigGroup, help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | None:
    """Turn "none"/"null" into None; anything else stays text.

    The config models coerce text to the type of the target field, so
    "30" becomes an int for timer.work_duration but stays "30" for log.path.
    """
    if value.lower() in ("none", "null"):
        return None
    return value


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration."""
    config_manager = get_config_manager()
    console.print_json(json.dumps(config_manager.config.model_dump()))
    console.print(f"[dim]Config file: {config_manager.config_file}[/dim]")
    console.print(f"[dim]Work log: {config_manager.work_log_path()}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_duration)"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not set", exit_code=ERROR_INVALID_ARGS)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.work_duration)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_manager().set(key, parsed_value)
    except KeyError as e:
        raise AppError(f"Unknown configuration key '{key}'", exit_code=ERROR_INVALID_ARGS) from e
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        raise AppError(f"Invalid value for '{key}': {errors}", exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{get_config_manager().get(key)}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
) -> None:
    """Reset configuration to defaults."""
    try:
        get_config_manager().reset(key)
    except KeyError as e:
        raise AppError(f"Unknown configuration key '{key}'", exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' reset" if key else "Configuration reset")
