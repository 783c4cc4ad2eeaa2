# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone


class MemorySlot:
    """
    In-memory KeyValueSlot.

    Counts writes so tests can assert that read-only operations never persist.
    """

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(items or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes += 1

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass(slots=True)
class FixedClock:
    """Deterministic clock: 'today' only changes when the test says so."""

    current: datetime = field(
        default_factory=lambda: datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)
    )

    def today(self) -> date:
        return self.current.date()

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + timedelta(**kwargs)


@dataclass(slots=True)
class ScriptedConfirm:
    """Confirmation prompt that answers with a fixed value and records questions."""

    answer: bool
    questions: list[str] = field(default_factory=list)

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer
