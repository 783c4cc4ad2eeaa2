# src/tasknest/storage/kv.py

"""
Local key-value slot backed by a single JSON file.

Values are strings stored under string keys, like a browser's localStorage.
Every write rewrites the whole file through a temp file + os.replace, so a
crash never leaves a half-written file behind.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileSlot:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._items: dict[str, str] = self._load()
        logger.info("JsonFileSlot ready path=%s keys=%d", self._path, len(self._items))

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Unreadable storage file %s; starting empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object; starting empty.", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(self._items, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            # Best-effort: keep the task list private on disk.
            os.chmod(self._path, 0o600)

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._flush()
        logger.debug("Slot write key=%s bytes=%d", key, len(value))

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()
