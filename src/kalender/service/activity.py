# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from kalender.model.activity import Activity, ActivityLabel, ActivityLocation
from kalender.query.filter import And, ContainsNoCase, Equals, Or
from kalender.query.sort import sort_items
from kalender.time import DateLike, move_to_day, to_local

SORTABLE_FIELDS = [
    "title",
    "start_time",
    "end_time",
    "location",
    "label",
    "description",
    "created_by",
]


def duplicate_activity(activity: Activity, target_day: DateLike) -> Activity:
    """
    Copy an activity onto another day.

    Every field except the id is copied. The start keeps its wall-clock time
    on the target day and the end moves by the same amount, so multi-day
    activities keep their length.
    """
    duplicate = deepcopy(activity)
    duplicate["id"] = None

    start = to_local(activity["start_time"])
    end = to_local(activity["end_time"])
    new_start = move_to_day(start, target_day)

    duplicate["start_time"] = new_start
    duplicate["end_time"] = new_start.add(seconds=int(end.timestamp() - start.timestamp()))
    return duplicate


def search_activities(activities: list[Activity], term: str) -> list[Activity]:
    """Case-insensitive match on title, location or label. Blank terms match nothing."""
    term = term.strip()
    if term == "":
        return []

    predicate = Or()
    for property in ["title", "location", "label"]:
        predicate.add_predicate(ContainsNoCase(property, term))

    items = cast(list[dict[str, Any]], activities)
    return cast(list[Activity], predicate.filter(items))


def filter_and_sort_activities(
    activities: list[Activity],
    label: Optional[ActivityLabel] = None,
    location: Optional[ActivityLocation] = None,
    sort_field: str = "start_time",
    descending: bool = False,
) -> list[Activity]:
    """The table view: optional exact label/location filter, then one sort column."""
    if sort_field not in SORTABLE_FIELDS:
        raise ValueError(f"cannot sort by {sort_field!r}")

    predicate = And()
    if label is not None:
        predicate.add_predicate(Equals("label", str(label)))
    if location is not None:
        predicate.add_predicate(Equals("location", str(location)))

    items = predicate.filter(cast(list[dict[str, Any]], activities))
    direction = "desc" if descending else "asc"
    return cast(list[Activity], sort_items(items, [f"{direction} {sort_field}"]))


def sort_by_start(activities: list[Activity]) -> list[Activity]:
    return sorted(activities, key=lambda activity: to_local(activity["start_time"]))
