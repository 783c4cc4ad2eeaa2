# src/tasknest/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import Notification, TaskFilter
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state so command handlers can read them.
    settings: Any

    task_store: TaskStore
    current_filter: TaskFilter = TaskFilter.ALL

    # Filled by the store's notifier, drained by the connector after each command.
    notifications: list[Notification] = field(default_factory=list)

    @property
    def language(self) -> str:
        return str(getattr(self.settings, "language", "en"))
