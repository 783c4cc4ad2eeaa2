# src/tasknest/core/clock.py

from __future__ import annotations

from datetime import date, datetime, timezone


class LocalClock:
    """Wall clock: 'today' is the local calendar day, 'now' is aware UTC."""

    def today(self) -> date:
        return date.today()

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
