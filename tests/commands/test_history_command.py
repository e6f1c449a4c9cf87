"""Tests for the history command."""

from typer.testing import CliRunner

from pomodoro_cli.main import app
from pomodoro_cli.storage.work_log import WorkLog, WorkLogRecord

runner = CliRunner()

STAMP = "2026-10-18 10:00:00+02:00"


def _seed(path, *tasks):
    log = WorkLog(path)
    for task in tasks:
        log.append(WorkLogRecord(task, 20, STAMP))
    return log


class TestHistoryCommand:
    def test_empty_log(self, tmp_path):
        result = runner.invoke(app, ["history", "--log-file", str(tmp_path / "none.csv")])
        assert result.exit_code == 0
        assert "No work sessions logged yet" in result.output

    def test_lists_records_and_total(self, tmp_path):
        path = tmp_path / "log.csv"
        _seed(path, "Write docs", "Fix bug")

        result = runner.invoke(app, ["history", "--log-file", str(path)])

        assert result.exit_code == 0
        assert "Write docs" in result.output
        assert "Fix bug" in result.output
        assert "Total focus time: 40 minutes" in result.output

    def test_limit_shows_most_recent(self, tmp_path):
        path = tmp_path / "log.csv"
        _seed(path, "oldest", "middle", "newest")

        result = runner.invoke(app, ["history", "--log-file", str(path), "-n", "1"])

        assert result.exit_code == 0
        assert "newest" in result.output
        assert "oldest" not in result.output
        assert "1 of 3" in result.output

    def test_reads_default_log(self, isolated_dirs):
        _seed(isolated_dirs["data"] / "work_done.csv", "From default log")
        result = runner.invoke(app, ["history"])
        assert "From default log" in result.output

    def test_malformed_log(self, tmp_path):
        path = tmp_path / "log.csv"
        path.write_text("broken\n", encoding="utf-8")

        result = runner.invoke(app, ["history", "--log-file", str(path)])

        assert result.exit_code == 1
        assert "malformed" in result.output
