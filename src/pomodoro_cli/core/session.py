"""Pomodoro session controller.

Drives the interactive command loop: read a command, and on ``start`` prompt
for a task, count down the work interval, log it, then count down the break.
Input, output, time and the work log are all injected, so the whole flow can
be replayed against ``io.StringIO`` and a ``VirtualClock``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, TextIO

from pomodoro_cli.storage.work_log import WorkLog

from .clock import NANOS_PER_SECOND, Clock
from .commands import Command, parse_command

logger = logging.getLogger(__name__)

DEFAULT_WORK_MINUTES = 20
DEFAULT_BREAK_MINUTES = 5

COMMAND_PROMPT = "Enter command (start/quit): "
TASK_PROMPT = "Enter the task you're working on: "
INVALID_COMMAND_MESSAGE = "Invalid command. Please enter 'start' or 'quit'."


class LineSource(Protocol):
    def readline(self) -> str: ...


@dataclass(frozen=True)
class SessionConfig:
    """Work and break lengths in whole minutes."""

    work_minutes: int = DEFAULT_WORK_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES

    def __post_init__(self):
        for name in ("work_minutes", "break_minutes"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int")
            if value < 0:
                raise ValueError(f"{name} must be >= 0")


def format_remaining(seconds: int) -> str:
    """Format whole seconds as MM:SS."""
    mins = seconds // 60
    secs = seconds % 60
    return f"{mins:02d}:{secs:02d}"


class Pomodoro:
    """Runs work/break cycles against an injected clock and work log."""

    def __init__(
        self,
        clock: Clock,
        work_log: WorkLog,
        config: SessionConfig | None = None,
    ):
        self.clock = clock
        self.work_log = work_log
        self.config = config or SessionConfig()

    @property
    def work_duration(self) -> int:
        return self.config.work_minutes

    @property
    def break_duration(self) -> int:
        return self.config.break_minutes

    def run_timer(self, duration: int, session_type: str, output: TextIO) -> None:
        """Count down ``duration`` minutes, redrawing one progress line per second."""
        if duration < 0:
            raise ValueError("duration must be >= 0")

        total = duration * 60 * NANOS_PER_SECOND
        start = self.clock.now()
        logger.debug("%s countdown started (%d min)", session_type, duration)

        while self.clock.now() - start < total:
            elapsed = self.clock.now() - start
            remaining = (total - elapsed) // NANOS_PER_SECOND

            output.write(
                f"\r{session_type} time remaining: {format_remaining(remaining)}"
            )
            output.flush()

            self.clock.delay(1)

        output.write(f"\n{session_type} session completed!\n")
        output.flush()
        logger.debug("%s countdown completed", session_type)

    @staticmethod
    def get_task(input: LineSource, output: TextIO) -> str:
        """Prompt for the task label. Blank labels are accepted."""
        output.write(TASK_PROMPT)
        output.flush()
        return input.readline().strip()

    def log_work(self, task: str) -> None:
        """Append a record for a finished work interval."""
        record = self.work_log.new_record(task, self.work_duration)
        self.work_log.append(record)
        logger.info("work session logged: %r (%d min)", task, self.work_duration)

    def start(self, input: LineSource, output: TextIO) -> None:
        """Run one work interval, log it, then run the break."""
        task = self.get_task(input, output)
        output.write(f"Starting a Pomodoro for: {task}\n")
        self.run_timer(self.work_duration, "Work", output)
        self.log_work(task)
        output.write("Time for a break!\n")
        self.run_timer(self.break_duration, "Break", output)

    def run(self, input: LineSource, output: TextIO) -> int:
        """Read and dispatch commands until ``quit`` or end of input.

        Returns the number of sessions completed.
        """
        completed = 0
        while True:
            output.write(COMMAND_PROMPT)
            output.flush()
            line = input.readline()

            if line == "":
                # stdin closed
                logger.info("end of input, leaving command loop")
                output.write("\n")
                break

            command = parse_command(line)
            if command is Command.START:
                self.start(input, output)
                completed += 1
            elif command is Command.QUIT:
                break
            else:
                logger.debug("invalid command: %r", line.strip())
                output.write(f"{INVALID_COMMAND_MESSAGE}\n")

        logger.info("command loop finished after %d session(s)", completed)
        return completed
