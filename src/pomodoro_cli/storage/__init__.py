"""Durable storage for completed work sessions."""

from .work_log import LogMode, WorkLog, WorkLogError, WorkLogRecord

__all__ = ["LogMode", "WorkLog", "WorkLogError", "WorkLogRecord"]
