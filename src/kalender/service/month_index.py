# SPDX-License-Identifier: MIT

from typing import Iterator

import pendulum

from kalender.interval import is_multi_day, span_days
from kalender.model.activity import Activity, ActivityLabel
from kalender.service.band import BandSegment, BandState, band_state, empty_band_state
from kalender.service.bucketing import activities_for_day, activity_bounds
from kalender.time import DateLike, calendar_day, date_key


class MonthIndex:
    """
    Activities and band state for every cell of a month grid, computed once.

    The grid runs Monday to Sunday and covers the whole weeks that contain
    the first and last day of the month. Answers are identical to calling
    activities_for_day and band_state per cell; dates outside the grid fall
    back to those functions.
    """

    def __init__(self, activities: list[Activity], month: DateLike) -> None:
        self.activities = activities
        self.month_start = calendar_day(month).start_of("month")
        self.month_end = self.month_start.end_of("month")
        # Pendulum's day_of_week: Monday = 0, ..., Sunday = 6
        self.grid_start = self.month_start.subtract(
            days=self.month_start.day_of_week
        )
        self.grid_end = self.month_end.add(days=6 - self.month_end.day_of_week)

        self._activities_by_day: dict[str, list[Activity]] = {}
        self._bands_by_day: dict[str, BandState] = {}

        for activity in activities:
            self.__index_activity(activity)

    def __index_activity(self, activity: Activity) -> None:
        start, end = activity_bounds(activity)
        spanning = is_multi_day(start, end)

        for day in span_days(start, end):
            if day < self.grid_start:
                continue
            if day > self.grid_end:
                break
            key = date_key(day)
            self._activities_by_day.setdefault(key, []).append(activity)

            if not spanning:
                continue
            state = self._bands_by_day.setdefault(key, empty_band_state())
            if day == calendar_day(start):
                state[BandSegment.START.value] = True  # type: ignore[literal-required]
            elif day == calendar_day(end):
                state[BandSegment.END.value] = True  # type: ignore[literal-required]
            else:
                state[BandSegment.MIDDLE.value] = True  # type: ignore[literal-required]

    def __in_grid(self, day: pendulum.Date) -> bool:
        return self.grid_start <= day <= self.grid_end

    def grid_days(self) -> list[pendulum.Date]:
        days = []
        current = self.grid_start
        while current <= self.grid_end:
            days.append(current)
            current = current.add(days=1)
        return days

    def weeks(self) -> Iterator[list[pendulum.Date]]:
        days = self.grid_days()
        for offset in range(0, len(days), 7):
            yield days[offset : offset + 7]

    def is_current_month(self, date: DateLike) -> bool:
        day = calendar_day(date)
        return self.month_start <= day <= self.month_end

    def activities_on(self, date: DateLike) -> list[Activity]:
        day = calendar_day(date)
        if not self.__in_grid(day):
            return activities_for_day(self.activities, day)
        return list(self._activities_by_day.get(date_key(day), []))

    def has_activities(self, date: DateLike) -> bool:
        return len(self.activities_on(date)) > 0

    def labels_on(self, date: DateLike) -> list[ActivityLabel]:
        """Distinct labels of a day's activities, in first-seen order."""
        labels = [activity["label"] for activity in self.activities_on(date)]
        return list(dict.fromkeys(labels))

    def band(self, date: DateLike) -> BandState:
        day = calendar_day(date)
        if not self.__in_grid(day):
            return band_state(day, self.activities)
        state = self._bands_by_day.get(date_key(day))
        if state is None:
            return empty_band_state()
        return BandState(
            start=state["start"], middle=state["middle"], end=state["end"]
        )
