# src/tasknest/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from datetime import date, datetime, timezone
from typing import Any

from ..core.clock import LocalClock
from ..core.ports import Clock, ConfirmPrompt, KeyValueSlot, Notifier
from .messages import confirm_delete_message, notification_message
from .task_models import Notification, NotificationKind, Task, TaskFilter, ValidationError
from .validation import check_form, parse_date

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"


def _format_created_at(ts: datetime) -> str:
    # Same shape as JavaScript's Date.toISOString(): UTC, milliseconds, 'Z'.
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "date": task.date.isoformat(),
        "completed": task.completed,
        "createdAt": _format_created_at(task.created_at),
    }


def record_to_task(raw: Any) -> Task | None:
    """Decode one persisted record. Returns None for records that cannot be used."""
    if not isinstance(raw, dict):
        return None
    tid = raw.get("id")
    if isinstance(tid, bool) or not isinstance(tid, (int, float)):
        return None
    # json.loads accepts NaN and Infinity.
    if isinstance(tid, float) and not tid.is_integer():
        return None
    text = raw.get("text")
    if not isinstance(text, str):
        return None
    try:
        due = parse_date(str(raw.get("date") or ""))
    except ValueError:
        return None
    try:
        created_at = datetime.fromisoformat(str(raw.get("createdAt")))
    except ValueError:
        created_at = datetime.fromtimestamp(0, timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Task(
        id=int(tid),
        text=text,
        date=due,
        completed=raw.get("completed") is True,
        created_at=created_at,
    )


class TaskStore:
    """
    In-memory task list mirrored to a key-value slot.

    - The list is read once from the slot when the store is built.
    - Every mutation rewrites the whole list under one key; if the write
      fails, the in-memory list is left as it was and the error propagates.
    - New tasks go to the front; nothing else reorders the list.

    Single-threaded: callers run one operation at a time.
    """

    def __init__(
        self,
        slot: KeyValueSlot,
        *,
        key: str = DEFAULT_KEY,
        clock: Clock | None = None,
        notifier: Notifier | None = None,
        language: str = "en",
        notification_seconds: float = 3.0,
    ) -> None:
        self._slot = slot
        self._key = key
        self._clock: Clock = clock or LocalClock()
        self._notifier = notifier
        self._language = language
        self._notification_seconds = notification_seconds
        self._tasks: list[Task] = self._load()
        logger.info("TaskStore ready key=%s total=%d", self._key, len(self._tasks))

    # ---- persistence ----

    def _load(self) -> list[Task]:
        raw = self._slot.get_item(self._key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored task list under %r is not valid JSON; starting empty.", self._key)
            return []
        if not isinstance(data, list):
            logger.warning("Stored task list under %r is not a list; starting empty.", self._key)
            return []

        tasks: list[Task] = []
        seen: set[int] = set()
        for item in data:
            task = record_to_task(item)
            if task is None:
                logger.warning("Skipping malformed task record: %r", item)
                continue
            if task.id in seen:
                logger.warning("Skipping task with duplicate id=%s", task.id)
                continue
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def _save(self, tasks: list[Task]) -> None:
        payload = json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False)
        self._slot.set_item(self._key, payload)

    def _notify(self, kind: NotificationKind) -> None:
        if self._notifier is None:
            return
        self._notifier(
            Notification(
                kind=kind,
                message=notification_message(kind, self._language),
                created_at=self._clock.now(),
                duration_seconds=self._notification_seconds,
            )
        )

    def _next_id(self) -> int:
        candidate = int(self._clock.now().timestamp() * 1000)
        ids = {t.id for t in self._tasks}
        while candidate in ids:
            candidate += 1
        return candidate

    # ---- public API ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def count(self) -> int:
        return len(self._tasks)

    def today(self) -> date:
        return self._clock.today()

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def create(self, text: str | None, due: date | str | None) -> Task | ValidationError:
        """
        Validate and insert a new task at the front of the list.

        Returns the first ValidationError (text before date) instead of raising;
        the store is left untouched in that case.
        """
        error = check_form(text, due, self._clock.today()).first_error
        if error is not None:
            logger.debug("Task rejected: %s", error.value)
            return error

        task = Task(
            id=self._next_id(),
            text=(text or "").strip(),
            date=parse_date(due or ""),
            completed=False,
            created_at=self._clock.now(),
        )
        tasks = [task, *self._tasks]
        self._save(tasks)
        self._tasks = tasks
        logger.info("Task added id=%s date=%s", task.id, task.date.isoformat())
        self._notify(NotificationKind.ADDED)
        return task

    def toggle_complete(self, task_id: int) -> None:
        task = self.get(task_id)
        if task is None:
            logger.debug("toggle_complete: no task id=%s", task_id)
            return
        task.completed = not task.completed
        try:
            self._save(self._tasks)
        except OSError:
            task.completed = not task.completed
            raise
        logger.info("Task id=%s completed=%s", task.id, task.completed)

    def delete(self, task_id: int, confirm: ConfirmPrompt) -> bool:
        """
        Ask `confirm` first; on "no" nothing changes and False is returned.

        On "yes" the task is removed if present, the list is persisted and a
        deletion notification is emitted (also when the id was unknown).
        """
        if not confirm(confirm_delete_message(self._language)):
            logger.debug("Delete declined id=%s", task_id)
            return False

        remaining = [t for t in self._tasks if t.id != task_id]
        self._save(remaining)
        removed = len(self._tasks) - len(remaining)
        self._tasks = remaining
        logger.info("Task deleted id=%s removed=%d", task_id, removed)
        self._notify(NotificationKind.DELETED)
        return True

    def list_filtered(self, task_filter: TaskFilter = TaskFilter.ALL) -> list[Task]:
        """Freshly computed view in store order; never mutates the store."""
        task_filter = TaskFilter(task_filter)
        today = self._clock.today()

        if task_filter is TaskFilter.TODAY:
            return [t for t in self._tasks if t.date == today]
        if task_filter is TaskFilter.UPCOMING:
            return [t for t in self._tasks if t.date > today and not t.completed]
        if task_filter is TaskFilter.COMPLETED:
            return [t for t in self._tasks if t.completed]
        return list(self._tasks)
