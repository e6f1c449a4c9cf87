"""Interactive command parsing."""

from enum import Enum


class Command(str, Enum):
    """Commands accepted at the main prompt."""

    START = "start"
    QUIT = "quit"
    INVALID = "invalid"


def parse_command(line: str) -> Command:
    """Map one input line to a Command.

    Surrounding whitespace is ignored and matching is case-sensitive, so
    "START" is invalid.
    """
    text = line.strip()
    if text == Command.START.value:
        return Command.START
    if text == Command.QUIT.value:
        return Command.QUIT
    return Command.INVALID
