# src/tasknest/tasks/task_api.py

"""
Helpers the presentation layer calls.

They work on AppState (built once in bootstrap) and translate between raw form
input / tokens and TaskStore operations, including user-facing messages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.ports import ConfirmPrompt
from ..core.state import AppState
from .messages import count_label, validation_message
from .task_models import Notification, Task, TaskFilter, ValidationError
from .validation import FieldCheck, check_form

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FieldMessages:
    """Per-field error text for the form. Empty string means no message."""

    text: str = ""
    date: str = ""
    ok: bool = False


@dataclass(frozen=True, slots=True)
class SubmitResult:
    task: Task | None
    messages: FieldMessages


def _message(check: FieldCheck, language: str) -> str:
    return validation_message(check.error, language) if check.error is not None else ""


def preview_form(state: AppState, text: str | None, raw_date: str | None) -> FieldMessages:
    """Live validation: both fields are checked independently."""
    check = check_form(text, raw_date, state.task_store.today())
    return FieldMessages(
        text=_message(check.text, state.language),
        date=_message(check.date, state.language),
        ok=check.ok,
    )


def submit_task(state: AppState, text: str | None, raw_date: str | None) -> SubmitResult:
    """
    Form submission: accepted only if both fields pass at submit time.
    On rejection the store is not touched.
    """
    check = check_form(text, raw_date, state.task_store.today())
    if not check.ok:
        # Empty text has no live message, but a rejected submit still explains itself.
        text_error = check.text.error or (None if check.text.ok else ValidationError.TEXT_TOO_SHORT)
        messages = FieldMessages(
            text=validation_message(text_error, state.language) if text_error else "",
            date=_message(check.date, state.language),
        )
        return SubmitResult(task=None, messages=messages)

    result = state.task_store.create(text, raw_date)
    if isinstance(result, ValidationError):
        # Checked above with the same clock; only reachable if the day rolled over.
        logger.info("Submission rejected at create: %s", result.value)
        return SubmitResult(
            task=None,
            messages=FieldMessages(date=validation_message(result, state.language)),
        )
    return SubmitResult(task=result, messages=FieldMessages(ok=True))


def set_filter(state: AppState, raw: str | None) -> TaskFilter:
    """Raises ValueError on unknown filter names; current filter is unchanged then."""
    state.current_filter = TaskFilter.parse(raw)
    return state.current_filter


def visible_tasks(state: AppState) -> list[Task]:
    return state.task_store.list_filtered(state.current_filter)


def visible_is_empty(state: AppState) -> bool:
    """Empty-state flag for the current view."""
    return not visible_tasks(state)


def visible_count_label(state: AppState) -> str:
    return count_label(len(visible_tasks(state)), state.language)


def toggle_task(state: AppState, task_id: int) -> Task | None:
    state.task_store.toggle_complete(task_id)
    return state.task_store.get(task_id)


def delete_task(state: AppState, task_id: int, confirm: ConfirmPrompt) -> bool:
    return state.task_store.delete(task_id, confirm)


def drain_notifications(state: AppState) -> list[Notification]:
    """Pop pending notifications; the caller shows each for its duration_seconds."""
    pending = list(state.notifications)
    state.notifications.clear()
    return pending
