# src/tasknest/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the JSON file slot and the task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.clock import LocalClock
from ..core.ports import Clock, KeyValueSlot
from ..core.state import AppState
from ..storage.kv import JsonFileSlot
from ..tasks.task_models import Notification
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    slot: KeyValueSlot | None = None,
    clock: Clock | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Settings, slot and clock are injectable so tests avoid hidden global
    config reads and the real clock. If settings is None, falls back to
    get_settings(); if slot is None, a JsonFileSlot at settings.storage_path.
    """
    if settings is None:
        settings = get_settings()

    if slot is None:
        _ensure_local_dirs(settings)
        slot = JsonFileSlot(settings.storage_path)

    notifications: list[Notification] = []
    store = TaskStore(
        slot,
        key=settings.storage_key,
        clock=clock or LocalClock(),
        notifier=notifications.append,
        language=settings.language,
        notification_seconds=settings.notification_seconds,
    )
    logger.debug("State created language=%s key=%s", settings.language, settings.storage_key)
    return AppState(settings=settings, task_store=store, notifications=notifications)
