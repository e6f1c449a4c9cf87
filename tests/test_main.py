"""Unit tests for main.py, the CLI entry point."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from pomodoro_cli import __version__
from pomodoro_cli.main import app, main
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS

runner = CliRunner()


class TestTopLevelHelp:
    def test_help_flag_exits_zero(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0

    def test_help_lists_commands(self):
        output = runner.invoke(app, ["--help"]).output
        for command in ("run", "history", "config", "version"):
            assert command in output

    def test_run_help_lists_options(self):
        output = runner.invoke(app, ["run", "--help"]).output
        assert "--work" in output
        assert "--break" in output
        assert "--log-file" in output

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "Usage" in result.output


class TestVersion:
    def test_version_output(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestSuggestions:
    def test_typo_suggests_command(self):
        result = runner.invoke(app, ["histroy"])
        assert result.exit_code != 0
        assert "Did you mean this?" in result.output
        assert "history" in result.output

    def test_start_points_at_run(self):
        result = runner.invoke(app, ["start"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Did you mean this?" in result.output
        assert "run" in result.output

    def test_config_subcommand_typo(self):
        result = runner.invoke(app, ["config", "shwo"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Did you mean this?" in result.output
        assert "config show" in result.output

    def test_unrelated_command_has_no_suggestion(self):
        result = runner.invoke(app, ["zzzzzz"])
        assert result.exit_code != 0
        assert "Did you mean" not in result.output


def test_main_invokes_app():
    with patch("pomodoro_cli.main.app") as mock_app:
        main()
    mock_app.assert_called_once_with()
