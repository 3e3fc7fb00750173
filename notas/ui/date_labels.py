"""Two-line date labels shown on note and task cards."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from PyQt6.QtCore import QCoreApplication, QDate, QLocale, QTime

TRANSLATION_CONTEXT = "DateLabels"


def _to_qdate(value: date) -> QDate:
    return QDate(value.year, value.month, value.day)


def _to_qtime(value: datetime) -> QTime:
    return QTime(value.hour, value.minute)


def note_date_lines(created_at: datetime, locale: QLocale | None = None) -> tuple[str, str]:
    # e.g. "30 Sep" / "05:02"
    locale = locale or QLocale()
    line1 = locale.toString(_to_qdate(created_at), "d MMM")
    line2 = created_at.strftime("%H:%M")
    return line1, line2


def task_due_lines(
    due_at: datetime,
    now: datetime,
    locale: QLocale | None = None,
) -> tuple[str, str]:
    """Return (day label, short time) for a pending task's due date.

    The day label compares calendar dates only: "Today", "Tomorrow", or the
    full weekday name for anything else, past dates included.
    """
    locale = locale or QLocale()
    due_day = due_at.date()
    today = now.date()

    if due_day == today:
        day_label = QCoreApplication.translate(TRANSLATION_CONTEXT, "Today")
    elif due_day == today + timedelta(days=1):
        day_label = QCoreApplication.translate(TRANSLATION_CONTEXT, "Tomorrow")
    else:
        day_label = locale.dayName(due_day.isoweekday(), QLocale.FormatType.LongFormat)

    time_label = locale.toString(_to_qtime(due_at), QLocale.FormatType.ShortFormat)
    return day_label, time_label
