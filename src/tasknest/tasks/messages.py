# src/tasknest/tasks/messages.py

"""User-facing strings (English and Indonesian)."""

from __future__ import annotations

from datetime import date

from .task_models import NotificationKind, ValidationError

DEFAULT_LANGUAGE = "en"

_VALIDATION: dict[str, dict[ValidationError, str]] = {
    "en": {
        ValidationError.TEXT_TOO_SHORT: "Task must be at least 3 characters",
        ValidationError.TEXT_TOO_LONG: "Task must be at most 100 characters",
        ValidationError.DATE_MISSING: "Date is required",
        ValidationError.DATE_INVALID: "Date must look like YYYY-MM-DD",
        ValidationError.DATE_PAST: "Date cannot be in the past",
    },
    "id": {
        ValidationError.TEXT_TOO_SHORT: "Tugas minimal 3 karakter",
        ValidationError.TEXT_TOO_LONG: "Tugas maksimal 100 karakter",
        ValidationError.DATE_MISSING: "Tanggal harus diisi",
        ValidationError.DATE_INVALID: "Format tanggal harus YYYY-MM-DD",
        ValidationError.DATE_PAST: "Tanggal tidak boleh di masa lalu",
    },
}

_NOTIFICATIONS: dict[str, dict[NotificationKind, str]] = {
    "en": {
        NotificationKind.ADDED: "Task added!",
        NotificationKind.DELETED: "Task deleted!",
    },
    "id": {
        NotificationKind.ADDED: "Tugas berhasil ditambahkan!",
        NotificationKind.DELETED: "Tugas berhasil dihapus!",
    },
}

_CONFIRM_DELETE = {
    "en": "Are you sure you want to delete this task?",
    "id": "Apakah Anda yakin ingin menghapus tugas ini?",
}

_COUNT_UNIT = {
    "en": ("task", "tasks"),
    "id": ("tugas", "tugas"),
}

_WEEKDAYS = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "id": ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"),
}

_MONTHS = {
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "id": (
        "Januari", "Februari", "Maret", "April", "Mei", "Juni",
        "Juli", "Agustus", "September", "Oktober", "November", "Desember",
    ),
}


def _lang(language: str | None) -> str:
    return language if language in _VALIDATION else DEFAULT_LANGUAGE


def validation_message(error: ValidationError, language: str | None = None) -> str:
    return _VALIDATION[_lang(language)][error]


def notification_message(kind: NotificationKind, language: str | None = None) -> str:
    return _NOTIFICATIONS[_lang(language)][kind]


def confirm_delete_message(language: str | None = None) -> str:
    return _CONFIRM_DELETE[_lang(language)]


def count_label(n: int, language: str | None = None) -> str:
    """'1 task' / '3 tasks' ('3 tugas' in Indonesian, which has no plural form)."""
    singular, plural = _COUNT_UNIT[_lang(language)]
    return f"{n} {singular if n == 1 else plural}"


def format_date(d: date, language: str | None = None) -> str:
    """Long display form, e.g. 'Monday, 19 October 2026' / 'Senin, 19 Oktober 2026'."""
    lang = _lang(language)
    weekday = _WEEKDAYS[lang][d.weekday()]
    month = _MONTHS[lang][d.month - 1]
    return f"{weekday}, {d.day} {month} {d.year}"
