# SPDX-License-Identifier: MIT

import datetime
from typing import cast

import pendulum

type DateLike = pendulum.Date | datetime.date

STORAGE_FORMAT = "YYYY-MM-DDTHH:mm:ss"
DATE_KEY_FORMAT = "YYYY-MM-DD"


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return now_local().date()


def to_local(value: datetime.datetime) -> pendulum.DateTime:
    """Convert any datetime to a pendulum.DateTime in the local timezone.

    Naive values are read as local wall-clock time.
    """
    if isinstance(value, pendulum.DateTime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz="local")
        return value.in_tz("local")
    if value.tzinfo is None:
        return pendulum.instance(value, tz="local")
    return pendulum.instance(value).in_tz("local")


def calendar_day(value: DateLike) -> pendulum.Date:
    """Return the local calendar day of a date or datetime."""
    if isinstance(value, datetime.datetime):
        return to_local(value).date()
    if isinstance(value, pendulum.Date):
        return value
    return pendulum.date(value.year, value.month, value.day)


def start_of_local_day(value: DateLike) -> pendulum.DateTime:
    day = calendar_day(value)
    return pendulum.datetime(day.year, day.month, day.day, tz="local")


def end_of_local_day(value: DateLike) -> pendulum.DateTime:
    return start_of_local_day(value).end_of("day")


def date_key(value: DateLike) -> str:
    """Return the 'YYYY-MM-DD' key used to index days."""
    return calendar_day(value).format(DATE_KEY_FORMAT)


def date_from_key(key: str) -> pendulum.Date:
    return cast(pendulum.DateTime, pendulum.parse(key, tz="local")).date()


def datetime_to_str(datetime: pendulum.DateTime) -> str:
    """Serialize without an offset; stored times are local wall-clock."""
    return to_local(datetime).format(STORAGE_FORMAT)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
    return parsed.in_tz("local")


def move_to_day(datetime: pendulum.DateTime, day: DateLike) -> pendulum.DateTime:
    """Keep the wall-clock time of a datetime but place it on another day."""
    target = calendar_day(day)
    local = to_local(datetime)
    return pendulum.datetime(
        target.year,
        target.month,
        target.day,
        local.hour,
        local.minute,
        local.second,
        local.microsecond,
        tz="local",
    )
