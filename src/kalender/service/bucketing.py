# SPDX-License-Identifier: MIT

import pendulum

from kalender.interval import intersects_day, is_multi_day, is_well_formed
from kalender.model.activity import Activity
from kalender.time import DateLike, calendar_day, to_local


def activity_bounds(activity: Activity) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    return to_local(activity["start_time"]), to_local(activity["end_time"])


def belongs_to_day(activity: Activity, date: DateLike) -> bool:
    """
    Decide whether an activity appears on the agenda of a calendar day.

    An activity belongs to the day if it starts on that day, or if it spans
    several days and the day falls anywhere inside its interval. Activities
    that end before they start only match their start day.

    Args:
        activity: The activity to test
        date: The calendar day; only its local date component is used

    Returns:
        True if the activity should be listed for the day
    """
    day = calendar_day(date)
    start, end = activity_bounds(activity)

    if calendar_day(start) == day:
        return True

    if not is_well_formed(start, end):
        return False

    if is_multi_day(start, end):
        return intersects_day(start, end, day)

    return False


def activities_for_day(activities: list[Activity], date: DateLike) -> list[Activity]:
    """Return the activities on a day's agenda, in input order."""
    day = calendar_day(date)
    return [activity for activity in activities if belongs_to_day(activity, day)]


def has_activities(activities: list[Activity], date: DateLike) -> bool:
    day = calendar_day(date)
    return any(belongs_to_day(activity, day) for activity in activities)
