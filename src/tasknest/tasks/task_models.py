# src/tasknest/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class TaskFilter(StrEnum):
    """Named views over the task list. None of them mutate the store."""

    ALL = "all"
    TODAY = "today"
    UPCOMING = "upcoming"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"unknown filter {raw!r} (expected one of: {choices})") from None


class ValidationError(StrEnum):
    """
    Reasons a submission is rejected.

    These are returned, not raised: they block one submission attempt and are
    shown next to the offending field.
    """

    TEXT_TOO_SHORT = "text_too_short"
    TEXT_TOO_LONG = "text_too_long"
    DATE_MISSING = "date_missing"
    DATE_INVALID = "date_invalid"
    DATE_PAST = "date_past"


class NotificationKind(StrEnum):
    ADDED = "added"
    DELETED = "deleted"


@dataclass(slots=True)
class Task:
    id: int
    text: str
    date: date
    completed: bool
    created_at: datetime


@dataclass(frozen=True, slots=True)
class Notification:
    """Short-lived success event for the presentation layer."""

    kind: NotificationKind
    message: str
    created_at: datetime
    duration_seconds: float = 3.0
