# src/tasknest/tasks/validation.py

"""
Creation-time checks for task text and due date.

The two fields are checked independently so the UI can show one message per
field while the user is typing. A submission is accepted only when both
checks pass at the same time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

from .task_models import ValidationError

TEXT_MIN_LEN = 3
TEXT_MAX_LEN = 100

_ISO_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True, slots=True)
class FieldCheck:
    """
    Result of checking one form field.

    `error` is None when the field is valid. An empty text field is invalid
    but has no error yet (nothing typed), so `ok` is tracked separately.
    """

    ok: bool
    error: ValidationError | None = None


@dataclass(frozen=True, slots=True)
class FormCheck:
    text: FieldCheck
    date: FieldCheck

    @property
    def ok(self) -> bool:
        return self.text.ok and self.date.ok

    @property
    def first_error(self) -> ValidationError | None:
        if self.text.error is not None:
            return self.text.error
        if not self.text.ok:
            return ValidationError.TEXT_TOO_SHORT
        return self.date.error


def parse_date(raw: date | str) -> date:
    """
    Accept a date or a 'YYYY-MM-DD' string.

    A trailing time part ('2026-10-19T08:30') is ignored: only the calendar
    day matters. Raises ValueError on anything else.
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    s = str(raw).strip()
    if "T" in s:
        s = s.split("T", 1)[0]
    # date.fromisoformat also takes "20261020" and week dates; only YYYY-MM-DD is a valid input.
    if not _ISO_DAY.match(s):
        raise ValueError(f"expected YYYY-MM-DD, got {raw!r}")
    return date.fromisoformat(s)


def check_text(raw: str | None) -> FieldCheck:
    value = (raw or "").strip()
    if not value:
        return FieldCheck(ok=False)
    if len(value) < TEXT_MIN_LEN:
        return FieldCheck(ok=False, error=ValidationError.TEXT_TOO_SHORT)
    if len(value) > TEXT_MAX_LEN:
        return FieldCheck(ok=False, error=ValidationError.TEXT_TOO_LONG)
    return FieldCheck(ok=True)


def check_date(raw: date | str | None, today: date) -> FieldCheck:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return FieldCheck(ok=False, error=ValidationError.DATE_MISSING)
    try:
        d = parse_date(raw)
    except ValueError:
        return FieldCheck(ok=False, error=ValidationError.DATE_INVALID)
    if d < today:
        return FieldCheck(ok=False, error=ValidationError.DATE_PAST)
    return FieldCheck(ok=True)


def check_form(text: str | None, raw_date: date | str | None, today: date) -> FormCheck:
    return FormCheck(text=check_text(text), date=check_date(raw_date, today))


def default_date(today: date) -> str:
    """Prefilled (and minimum) value for the date field."""
    return today.isoformat()
