# SPDX-License-Identifier: MIT

"""Calendar-day arithmetic over (start, end) time ranges.

All comparisons use the local calendar. Boundaries are inclusive on both
sides, so an interval ending exactly at midnight reaches into the next day.
"""

import datetime

import pendulum

from kalender.time import (
    DateLike,
    calendar_day,
    end_of_local_day,
    start_of_local_day,
)


def is_well_formed(start: datetime.datetime, end: datetime.datetime) -> bool:
    return end >= start


def is_within(
    moment: datetime.datetime, start: datetime.datetime, end: datetime.datetime
) -> bool:
    if not is_well_formed(start, end):
        return False
    return start <= moment <= end


def overlaps(
    a_start: datetime.datetime,
    a_end: datetime.datetime,
    b_start: datetime.datetime,
    b_end: datetime.datetime,
) -> bool:
    if not is_well_formed(a_start, a_end) or not is_well_formed(b_start, b_end):
        return False
    return a_start <= b_end and b_start <= a_end


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return calendar_day(a) == calendar_day(b)


def is_multi_day(start: datetime.datetime, end: datetime.datetime) -> bool:
    """True for a spanning range: well-formed and ending on a later day."""
    return is_well_formed(start, end) and not is_same_day(start, end)


def day_bounds(day: DateLike) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    return start_of_local_day(day), end_of_local_day(day)


def covers_day(
    start: datetime.datetime, end: datetime.datetime, day: DateLike
) -> bool:
    day_start, day_end = day_bounds(day)
    return start <= day_start and end >= day_end


def intersects_day(
    start: datetime.datetime, end: datetime.datetime, day: DateLike
) -> bool:
    """Whether the day [00:00, 23:59:59.999999] touches the range at all."""
    if not is_well_formed(start, end):
        return False
    day_start, day_end = day_bounds(day)
    return (
        is_within(day_start, start, end)
        or is_within(day_end, start, end)
        or covers_day(start, end, day)
    )


def span_days(start: datetime.datetime, end: datetime.datetime) -> list[pendulum.Date]:
    """Every calendar day from the start day to the end day, inclusive.

    A malformed range only occupies its start day.
    """
    first = calendar_day(start)
    if not is_well_formed(start, end):
        return [first]
    last = calendar_day(end)
    days = []
    current = first
    while current <= last:
        days.append(current)
        current = current.add(days=1)
    return days
