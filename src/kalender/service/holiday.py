# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

import pendulum
import requests

from kalender.configuration import Configuration
from kalender.holiday_fallback import get_fallback_holidays
from kalender.model.holiday import Holiday
from kalender.repository.holiday import HOLIDAY_REPO
from kalender.time import DateLike, calendar_day, date_key, now_local

logger = logging.getLogger(__name__)

DEFAULT_TTL = pendulum.duration(hours=24)


def is_weekend(date: DateLike) -> bool:
    return calendar_day(date).day_of_week in [pendulum.SATURDAY, pendulum.SUNDAY]


def merge_holidays(
    fetched: list[Holiday], fallback: list[Holiday]
) -> dict[str, Holiday]:
    """Index days off by date key; fetched entries win over fallback ones."""
    holidays: dict[str, Holiday] = {}
    for holiday in fallback + fetched:
        if not holiday["is_day_off"]:
            continue
        holidays[date_key(holiday["date"])] = holiday
    return holidays


class HolidayCache:
    """
    Date-keyed holiday lookup with an explicit load and expiry policy.

    The cache starts out holding the static fallback table, so lookups made
    before initialize() still see the known days off. A failing fetch keeps
    the fallback table instead of emptying the cache.
    """

    def __init__(
        self,
        fetch: Callable[[], list[Holiday]],
        ttl: pendulum.Duration = DEFAULT_TTL,
    ) -> None:
        self._fetch = fetch
        self.ttl = ttl
        self.loaded_at: Optional[pendulum.DateTime] = None
        self.from_fallback = True
        self._holidays = merge_holidays([], get_fallback_holidays())

    def initialize(self) -> None:
        if self.loaded_at is None:
            self.refresh()

    def refresh(self) -> None:
        fallback = get_fallback_holidays()
        try:
            fetched = self._fetch()
        except (requests.RequestException, ValueError) as e:
            logger.warning("holiday feed unavailable, using built-in table: %s", e)
            self._holidays = merge_holidays([], fallback)
            self.from_fallback = True
        else:
            self._holidays = merge_holidays(fetched, fallback)
            self.from_fallback = False
        self.loaded_at = now_local()

    def is_expired(self, now: Optional[pendulum.DateTime] = None) -> bool:
        if self.loaded_at is None:
            return True
        now = now or now_local()
        return now >= self.loaded_at + self.ttl

    def ensure_fresh(self, now: Optional[pendulum.DateTime] = None) -> None:
        if self.is_expired(now):
            self.refresh()

    def holiday_name(self, date: DateLike) -> Optional[str]:
        holiday = self._holidays.get(date_key(date))
        if holiday is None:
            return None
        return holiday["name"]

    def is_holiday(self, date: DateLike) -> bool:
        return date_key(date) in self._holidays

    def holidays_between(self, start: DateLike, end: DateLike) -> list[Holiday]:
        first = calendar_day(start)
        last = calendar_day(end)
        return sorted(
            (
                holiday
                for holiday in self._holidays.values()
                if first <= holiday["date"] <= last
            ),
            key=lambda holiday: holiday["date"],
        )

    def __len__(self) -> int:
        return len(self._holidays)


def is_rest_day(date: DateLike, cache: HolidayCache) -> bool:
    return is_weekend(date) or cache.is_holiday(date)


def create_holiday_cache(
    config: Configuration, force_refresh: bool = False
) -> HolidayCache:
    """
    Build the cache for the configured feed and load it once.

    A snapshot saved within holiday_cache_hours is reused without a network
    request unless force_refresh is set.
    """
    HOLIDAY_REPO.configure(
        config["holiday_feed_url"], config["request_timeout_seconds"]
    )
    ttl = pendulum.duration(hours=config["holiday_cache_hours"])

    def fetch() -> list[Holiday]:
        return HOLIDAY_REPO.get_holidays(max_age=None if force_refresh else ttl)

    cache = HolidayCache(fetch, ttl=ttl)
    cache.initialize()
    return cache
