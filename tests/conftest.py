# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasknest.cli.bootstrap import create_initial_state
from tasknest.core.state import AppState
from tasknest.tasks.task_models import Notification
from tasknest.tasks.task_store import TaskStore

from .fakes import FixedClock, MemorySlot


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasknest-test",
        log_level="DEBUG",
        language="en",
        notification_seconds=3.0,
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "storage.json",
        storage_key="tasks",
    )


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def slot() -> MemorySlot:
    return MemorySlot()


@pytest.fixture()
def notifications() -> list[Notification]:
    return []


@pytest.fixture()
def store(slot: MemorySlot, clock: FixedClock, notifications: list[Notification]) -> TaskStore:
    return TaskStore(slot, clock=clock, notifier=notifications.append)


@pytest.fixture()
def state(settings: SimpleNamespace, slot: MemorySlot, clock: FixedClock) -> AppState:
    """AppState wired through the real bootstrap, with in-memory storage and a fixed clock."""
    return create_initial_state(settings=settings, slot=slot, clock=clock)
