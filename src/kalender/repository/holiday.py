# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

import pendulum
import requests
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from kalender import configuration, time
from kalender.model.holiday import Holiday

logger = logging.getLogger(__name__)


def parse_feed_date(value: str) -> pendulum.Date:
    """Parse the feed's 'dd-mm-yyyy' date, e.g. '17-08-2025'."""
    parts = value.strip().split("-")
    if len(parts) != 3:
        raise ValueError(f"expected dd-mm-yyyy, got {value!r}")
    day, month, year = (int(part) for part in parts)
    return pendulum.date(year, month, day)


def parse_holiday_feed(payload: Any) -> list[Holiday]:
    """
    Convert the remote feed into holidays.

    The feed is keyed by year, then by date:

        {"2025": {"2025-08-17": {"holiday_name": "...",
                                 "holiday_date": "17-08-2025",
                                 "is_national_holiday": true}}}

    Entries that do not look like holidays are skipped.
    """
    if not isinstance(payload, dict):
        raise ValueError("holiday feed must be a JSON object")

    holidays: list[Holiday] = []
    for year, year_data in payload.items():
        if not isinstance(year_data, dict):
            continue
        for key, entry in year_data.items():
            if not isinstance(entry, dict) or "holiday_date" not in entry:
                continue
            try:
                date = parse_feed_date(str(entry["holiday_date"]))
            except ValueError:
                logger.warning("skipping holiday %s/%s: bad date", year, key)
                continue
            holidays.append(
                {
                    "date": date,
                    "name": str(entry.get("holiday_name") or ""),
                    "is_day_off": bool(entry.get("is_national_holiday", False)),
                }
            )
    return holidays


class HolidayRepository:
    def __init__(
        self, url: Optional[str] = None, timeout: Optional[int] = None
    ) -> None:
        self.url = url or configuration.DEFAULT_HOLIDAY_FEED_URL
        self.timeout = timeout or 10

    def configure(self, url: str, timeout: int) -> None:
        self.url = url
        self.timeout = timeout

    def fetch_remote(self) -> list[Holiday]:
        response = requests.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return parse_holiday_feed(response.json())

    def __read_snapshot(
        self,
    ) -> Optional[tuple[Optional[pendulum.DateTime], list[Holiday]]]:
        if not configuration.DATA_HOLIDAYS_PATH.is_file():
            return None
        try:
            raw = load(configuration.DATA_HOLIDAYS_PATH.read_text(), Loader=Loader)
            if not isinstance(raw, dict) or "holidays" not in raw:
                return None
            fetched: Optional[pendulum.DateTime] = None
            if raw.get("fetched") is not None:
                fetched = time.datetime_from_str(str(raw["fetched"]))
            holidays: list[Holiday] = [
                {
                    "date": time.date_from_key(str(raw_holiday["date"])),
                    "name": str(raw_holiday["name"]),
                    "is_day_off": bool(raw_holiday["is_day_off"]),
                }
                for raw_holiday in raw["holidays"]
            ]
        except (OSError, YAMLError, KeyError, TypeError, ValueError) as e:
            logger.warning(
                "ignoring unreadable holiday snapshot %s: %s",
                configuration.DATA_HOLIDAYS_PATH,
                e,
            )
            return None
        return fetched, holidays

    def load_snapshot(self) -> Optional[list[Holiday]]:
        """The last saved feed response, or None when missing or unreadable."""
        snapshot = self.__read_snapshot()
        if snapshot is None:
            return None
        return snapshot[1]

    def load_fresh_snapshot(
        self, max_age: pendulum.Duration
    ) -> Optional[list[Holiday]]:
        """The saved feed response if it was fetched less than max_age ago."""
        snapshot = self.__read_snapshot()
        if snapshot is None:
            return None
        fetched, holidays = snapshot
        if fetched is None or time.now_local() >= fetched + max_age:
            return None
        return holidays

    def save_snapshot(self, holidays: list[Holiday]) -> None:
        serializable = {
            "fetched": time.datetime_to_str(time.now_local()),
            "holidays": [
                {
                    "date": time.date_key(holiday["date"]),
                    "name": holiday["name"],
                    "is_day_off": holiday["is_day_off"],
                }
                for holiday in holidays
            ],
        }
        try:
            configuration.DATA_HOLIDAYS_PATH.parent.mkdir(parents=True, exist_ok=True)
            configuration.DATA_HOLIDAYS_PATH.write_text(
                dump(serializable, Dumper=Dumper)
            )
        except OSError as e:
            logger.warning("could not save holiday snapshot: %s", e)

    def get_holidays(self, max_age: Optional[pendulum.Duration] = None) -> list[Holiday]:
        """
        Return the feed's holidays, keeping a snapshot of the last good response.

        With max_age, a snapshot younger than that is returned without
        touching the network.

        Raises:
            requests.RequestException or ValueError: when the feed fails and
                no readable snapshot exists
        """
        if max_age is not None:
            fresh = self.load_fresh_snapshot(max_age)
            if fresh is not None:
                logger.debug("using holiday snapshot younger than %s", max_age)
                return fresh

        try:
            holidays = self.fetch_remote()
        except (requests.RequestException, ValueError) as e:
            snapshot = self.load_snapshot()
            if snapshot is None:
                raise
            logger.info("holiday feed unavailable (%s), using snapshot", e)
            return snapshot
        self.save_snapshot(holidays)
        logger.debug("fetched %d holidays from %s", len(holidays), self.url)
        return holidays


HOLIDAY_REPO = HolidayRepository()
