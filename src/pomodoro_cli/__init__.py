"""Pomodoro CLI - a terminal Pomodoro timer with a CSV work log."""

__version__ = "0.3.0"
