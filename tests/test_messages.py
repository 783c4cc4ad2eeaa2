# tests/test_messages.py

from __future__ import annotations

from datetime import date

from tasknest.tasks.messages import count_label, format_date, validation_message
from tasknest.tasks.task_models import ValidationError


def test_count_label() -> None:
    assert count_label(0) == "0 tasks"
    assert count_label(1) == "1 task"
    assert count_label(3, "id") == "3 tugas"


def test_format_date_long_form() -> None:
    d = date(2026, 10, 19)
    assert format_date(d) == "Monday, 19 October 2026"
    assert format_date(d, "id") == "Senin, 19 Oktober 2026"


def test_unknown_language_falls_back_to_english() -> None:
    assert validation_message(ValidationError.DATE_PAST, "fr") == "Date cannot be in the past"
    assert validation_message(ValidationError.TEXT_TOO_SHORT, "id") == "Tugas minimal 3 karakter"
