"""CSV work log of completed Pomodoro sessions.

Each row is ``task, duration_minutes, completed_at``. There is no header row,
and the column order is relied on by anything reading the file.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Literal

logger = logging.getLogger(__name__)

LogMode = Literal["append", "truncate"]

DEFAULT_LOG_FILENAME = "work_done.csv"


class WorkLogError(Exception):
    """Raised when the work log contains a row that cannot be parsed."""


def local_timestamp() -> str:
    """Return the current local date-time with its UTC offset."""
    return datetime.now().astimezone().isoformat(sep=" ", timespec="seconds")


@dataclass(frozen=True)
class WorkLogRecord:
    """A single completed work interval."""

    task: str
    duration_minutes: int
    completed_at: str

    def to_row(self) -> list[str]:
        return [self.task, str(self.duration_minutes), self.completed_at]

    @classmethod
    def from_row(cls, row: list[str]) -> "WorkLogRecord":
        if len(row) != 3:
            raise WorkLogError(f"Expected 3 fields, got {len(row)}: {row!r}")
        task, duration, completed_at = row
        try:
            minutes = int(duration)
        except ValueError as e:
            raise WorkLogError(f"Invalid duration {duration!r}") from e
        return cls(task=task, duration_minutes=minutes, completed_at=completed_at)


class WorkLog:
    """Append-only handle on the CSV record store.

    The file is opened and closed inside every ``append`` call. In
    ``truncate`` mode each append recreates the file, so only the most
    recent record survives.
    """

    def __init__(
        self,
        path: Path,
        mode: LogMode = "append",
        timestamp: Callable[[], str] = local_timestamp,
    ):
        if mode not in ("append", "truncate"):
            raise ValueError(f"Unknown log mode: {mode}")
        self.path = Path(path)
        self.mode = mode
        self._timestamp = timestamp

    def new_record(self, task: str, duration_minutes: int) -> WorkLogRecord:
        """Create a record stamped with the current local time."""
        return WorkLogRecord(
            task=task,
            duration_minutes=duration_minutes,
            completed_at=self._timestamp(),
        )

    def append(self, record: WorkLogRecord) -> None:
        """Write one record and flush it before returning."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        file_mode = "a" if self.mode == "append" else "w"

        with open(self.path, file_mode, newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(record.to_row())
            f.flush()

        logger.debug(
            "logged work record to %s (%s): %s", self.path, self.mode, record.task
        )

    def read_records(self) -> list[WorkLogRecord]:
        """Read every record in file order. A missing file has no records."""
        if not self.path.exists():
            return []

        with open(self.path, newline="", encoding="utf-8") as f:
            return [WorkLogRecord.from_row(row) for row in csv.reader(f) if row]
