# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

from kalender.interval import is_multi_day
from kalender.model.activity import Activity
from kalender.service.bucketing import activity_bounds
from kalender.time import DateLike, calendar_day


class BandSegment(StrEnum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class BandState(TypedDict):
    start: bool
    middle: bool
    end: bool


def empty_band_state() -> BandState:
    return {"start": False, "middle": False, "end": False}


def band_segment(activity: Activity, date: DateLike) -> Optional[BandSegment]:
    """
    Position of a calendar day within a multi-day activity's band.

    Single-day and malformed activities never form a band.
    """
    start, end = activity_bounds(activity)
    if not is_multi_day(start, end):
        return None

    day = calendar_day(date)
    start_day = calendar_day(start)
    end_day = calendar_day(end)

    if day == start_day:
        return BandSegment.START
    if day == end_day:
        return BandSegment.END
    if start_day < day < end_day:
        return BandSegment.MIDDLE
    return None


def is_band_start(date: DateLike, activities: list[Activity]) -> bool:
    return any(
        band_segment(activity, date) == BandSegment.START for activity in activities
    )


def is_band_end(date: DateLike, activities: list[Activity]) -> bool:
    return any(
        band_segment(activity, date) == BandSegment.END for activity in activities
    )


def is_band_middle(date: DateLike, activities: list[Activity]) -> bool:
    return any(
        band_segment(activity, date) == BandSegment.MIDDLE for activity in activities
    )


def band_state(date: DateLike, activities: list[Activity]) -> BandState:
    """All three band predicates for a single cell, in one pass."""
    state = empty_band_state()
    day = calendar_day(date)
    for activity in activities:
        segment = band_segment(activity, day)
        if segment is not None:
            state[segment.value] = True  # type: ignore[literal-required]
    return state
