# src/tasknest/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store.

The store depends on Protocols instead of concrete implementations, so the
console connector, the JSON file slot and the tests can each plug in their own.
"""

from collections.abc import Callable
from datetime import date, datetime
from typing import Protocol

from ..tasks.task_models import Notification


class KeyValueSlot(Protocol):
    """String-valued persistent storage (localStorage-like)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class Clock(Protocol):
    def today(self) -> date: ...
    def now(self) -> datetime: ...


# Yes/no gate shown before a destructive action. Blocks until answered.
ConfirmPrompt = Callable[[str], bool]

# Receives transient success events (task added / deleted).
Notifier = Callable[[Notification], None]
