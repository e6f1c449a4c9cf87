"""Core timer logic: clocks, command parsing and the session controller."""

from .clock import Clock, RealClock, VirtualClock
from .commands import Command, parse_command
from .session import Pomodoro, SessionConfig

__all__ = [
    "Clock",
    "RealClock",
    "VirtualClock",
    "Command",
    "parse_command",
    "Pomodoro",
    "SessionConfig",
]
