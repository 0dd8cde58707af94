# SPDX-License-Identifier: MIT

import datetime

from kalender.interval import is_same_day
from kalender.time import DateLike, calendar_day, to_local

DEFAULT_LOCALE = "id"

ZERO_DURATION_LABEL = "0 menit"

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


def duration_minutes(start: datetime.datetime, end: datetime.datetime) -> float:
    """Minutes between two moments, never negative."""
    delta_seconds = to_local(end).timestamp() - to_local(start).timestamp()
    return max(0.0, delta_seconds / 60)


def format_duration(minutes: float) -> str:
    """
    Render a number of minutes as e.g. "1 hari 2 jam 15 menit".

    Only the non-zero components are shown, largest first. Zero or negative
    input renders the zero-duration label.
    """
    if minutes <= 0:
        return ZERO_DURATION_LABEL

    days = int(minutes // MINUTES_PER_DAY)
    hours = int((minutes % MINUTES_PER_DAY) // MINUTES_PER_HOUR)
    mins = int(minutes % MINUTES_PER_HOUR)

    parts = []
    if days > 0:
        parts.append(f"{days} hari")
    if hours > 0:
        parts.append(f"{hours} jam")
    if mins > 0:
        parts.append(f"{mins} menit")

    if len(parts) == 0:
        return ZERO_DURATION_LABEL
    return " ".join(parts)


def format_date_range(
    start: DateLike, end: DateLike, locale: str = DEFAULT_LOCALE
) -> str:
    """
    Render a compact date range.

    Same day:            "10 Maret 2025"
    Same month and year: "10–12 Maret 2025"
    Otherwise:           "30 Maret 2025 – 2 April 2025"
    """
    start_day = calendar_day(start)
    end_day = calendar_day(end)

    if is_same_day(start_day, end_day):
        return start_day.format("D MMMM YYYY", locale=locale)

    if start_day.month == end_day.month and start_day.year == end_day.year:
        return f"{start_day.format('D')}–{end_day.format('D MMMM YYYY', locale=locale)}"

    return (
        f"{start_day.format('D MMMM YYYY', locale=locale)}"
        f" – {end_day.format('D MMMM YYYY', locale=locale)}"
    )


def format_day_and_date(value: DateLike, locale: str = DEFAULT_LOCALE) -> str:
    return calendar_day(value).format("dddd, D MMMM YYYY", locale=locale)


def format_month_and_year(value: DateLike, locale: str = DEFAULT_LOCALE) -> str:
    return calendar_day(value).format("MMMM YYYY", locale=locale)


def format_table_date(value: DateLike, locale: str = DEFAULT_LOCALE) -> str:
    return calendar_day(value).format("ddd, D MMM YYYY", locale=locale)


def format_time(value: datetime.datetime) -> str:
    return to_local(value).format("HH:mm")


def format_time_range(start: datetime.datetime, end: datetime.datetime) -> str:
    return f"{format_time(start)} - {format_time(end)}"
