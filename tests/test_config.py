# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from tasknest.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "TASKNEST_APP_NAME",
        "TASKNEST_DATA_DIR",
        "TASKNEST_STORAGE_PATH",
        "TASKNEST_STORAGE_KEY",
        "TASKNEST_LANGUAGE",
        "TASKNEST_NOTIFICATION_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "tasknest"
    assert s.data_dir == Path(".local/tasknest")
    assert s.storage_path == Path(".local/tasknest/storage.json")
    assert s.storage_key == "tasks"
    assert s.language == "en"
    assert s.notification_seconds == 3.0


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKNEST_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TASKNEST_STORAGE_PATH", raising=False)
    monkeypatch.setenv("TASKNEST_STORAGE_KEY", "todo")
    monkeypatch.setenv("TASKNEST_LANGUAGE", "ID")
    monkeypatch.setenv("TASKNEST_NOTIFICATION_SECONDS", "nope")

    s = Settings.from_env()
    assert s.storage_path == tmp_path / "storage.json"
    assert s.storage_key == "todo"
    assert s.language == "id"
    assert s.notification_seconds == 3.0


def test_unknown_language_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("TASKNEST_LANGUAGE", "fr")
    assert Settings.from_env().language == "en"
