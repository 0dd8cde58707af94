"""Holiday feed parsing, snapshots and the date-keyed cache."""

from unittest.mock import MagicMock, patch

import pendulum
import pytest
import requests

from kalender import configuration
from kalender.configuration import get_default_configuration
from kalender.holiday_fallback import FALLBACK_HOLIDAYS, get_fallback_holidays
from kalender.repository.holiday import (
    HolidayRepository,
    parse_feed_date,
    parse_holiday_feed,
)
from kalender.service.holiday import (
    HolidayCache,
    create_holiday_cache,
    is_rest_day,
    is_weekend,
    merge_holidays,
)

FEED = {
    "2025": {
        "2025-08-17": {
            "holiday_name": "Hari Kemerdekaan",
            "holiday_date": "17-08-2025",
            "is_national_holiday": True,
        },
        "2025-02-14": {
            "holiday_name": "Hari Valentine",
            "holiday_date": "14-02-2025",
            "is_national_holiday": False,
        },
        "2025-10-20": {
            "holiday_name": "Libur Tambahan",
            "holiday_date": "20-10-2025",
            "is_national_holiday": True,
        },
    }
}


def _fetch_feed():
    return parse_holiday_feed(FEED)


def _fail():
    raise requests.ConnectionError("network is down")


def _response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def test_parse_feed_date():
    assert parse_feed_date("17-08-2025") == pendulum.date(2025, 8, 17)
    assert parse_feed_date(" 01-01-2026 ") == pendulum.date(2026, 1, 1)

    with pytest.raises(ValueError):
        parse_feed_date("2025-08")
    with pytest.raises(ValueError):
        parse_feed_date("aa-bb-cccc")


def test_parse_holiday_feed():
    holidays = parse_holiday_feed(FEED)

    assert len(holidays) == 3
    independence = next(h for h in holidays if h["date"] == pendulum.date(2025, 8, 17))
    assert independence["name"] == "Hari Kemerdekaan"
    assert independence["is_day_off"]


def test_parse_holiday_feed_skips_malformed_entries():
    payload = {
        "2025": {
            "bad": {"holiday_name": "Rusak", "holiday_date": "not-a-date"},
            "also-bad": "just a string",
            "2025-12-25": {
                "holiday_name": "Hari Raya Natal",
                "holiday_date": "25-12-2025",
                "is_national_holiday": True,
            },
        },
        "info": "metadata",
    }

    holidays = parse_holiday_feed(payload)

    assert [holiday["name"] for holiday in holidays] == ["Hari Raya Natal"]


def test_parse_holiday_feed_rejects_non_object():
    with pytest.raises(ValueError):
        parse_holiday_feed(["2025-08-17"])


def test_merge_keeps_only_days_off_and_prefers_fetched():
    fetched = parse_holiday_feed(FEED)
    fallback = [
        {"date": pendulum.date(2025, 8, 17), "name": "Lama", "is_day_off": True},
        {"date": pendulum.date(2025, 12, 25), "name": "Natal", "is_day_off": True},
    ]

    holidays = merge_holidays(fetched, fallback)

    assert set(holidays) == {"2025-08-17", "2025-10-20", "2025-12-25"}
    assert holidays["2025-08-17"]["name"] == "Hari Kemerdekaan"


def test_cache_before_initialize_holds_fallback_table():
    cache = HolidayCache(_fail)

    assert cache.from_fallback
    assert cache.is_expired()
    assert len(cache) == len(FALLBACK_HOLIDAYS)
    assert cache.holiday_name(pendulum.date(2025, 8, 17)) == (
        "Hari Proklamasi Kemerdekaan R.I."
    )


def test_cache_merges_feed_with_fallback():
    cache = HolidayCache(_fetch_feed)
    cache.initialize()

    assert not cache.from_fallback
    assert cache.holiday_name(pendulum.date(2025, 8, 17)) == "Hari Kemerdekaan"
    assert cache.is_holiday(pendulum.date(2025, 10, 20))
    assert not cache.is_holiday(pendulum.date(2025, 2, 14))
    # Fallback-only entries survive the merge
    assert cache.is_holiday(pendulum.date(2025, 3, 31))


def test_cache_falls_back_when_feed_fails(caplog):
    cache = HolidayCache(_fail)

    cache.initialize()

    assert cache.from_fallback
    assert cache.loaded_at is not None
    assert cache.is_holiday(pendulum.date(2025, 12, 25))
    assert not cache.is_holiday(pendulum.date(2025, 3, 12))
    assert "holiday feed unavailable" in caplog.text


def test_cache_falls_back_on_bad_payload():
    def fetch_garbage():
        return parse_holiday_feed("<html>rate limited</html>")

    cache = HolidayCache(fetch_garbage)
    cache.initialize()

    assert cache.from_fallback
    assert len(cache) == len(get_fallback_holidays())


def test_initialize_fetches_once():
    fetch = MagicMock(return_value=[])
    cache = HolidayCache(fetch)

    cache.initialize()
    cache.initialize()

    assert fetch.call_count == 1


def test_cache_expiry_and_refresh():
    fetch = MagicMock(return_value=[])
    cache = HolidayCache(fetch, ttl=pendulum.duration(hours=24))
    cache.initialize()
    loaded_at = cache.loaded_at

    assert not cache.is_expired(loaded_at.add(hours=23))
    assert cache.is_expired(loaded_at.add(hours=24))

    cache.ensure_fresh(loaded_at.add(hours=1))
    assert fetch.call_count == 1

    cache.ensure_fresh(loaded_at.add(hours=25))
    assert fetch.call_count == 2


def test_holidays_between_is_sorted_and_inclusive():
    cache = HolidayCache(_fail)

    holidays = cache.holidays_between(pendulum.date(2025, 3, 28), pendulum.date(2025, 4, 2))

    assert [holiday["date"] for holiday in holidays] == [
        pendulum.date(2025, 3, 28),
        pendulum.date(2025, 3, 29),
        pendulum.date(2025, 3, 31),
        pendulum.date(2025, 4, 1),
        pendulum.date(2025, 4, 2),
    ]


def test_lookup_accepts_datetimes(at):
    cache = HolidayCache(_fail)

    assert cache.is_holiday(at(2025, 8, 17, 23, 30))
    assert cache.holiday_name(at(2025, 3, 12, 9)) is None


def test_weekends_and_rest_days():
    cache = HolidayCache(_fail)

    assert is_weekend(pendulum.date(2025, 3, 15))
    assert is_weekend(pendulum.date(2025, 3, 16))
    assert not is_weekend(pendulum.date(2025, 3, 17))

    assert is_rest_day(pendulum.date(2025, 3, 31), cache)
    assert is_rest_day(pendulum.date(2025, 3, 16), cache)
    assert not is_rest_day(pendulum.date(2025, 3, 12), cache)


def test_repository_saves_snapshot_after_fetch(data_path):
    repository = HolidayRepository("https://example.com/holidays.json", 5)

    with patch(
        "kalender.repository.holiday.requests.get", return_value=_response(FEED)
    ) as get:
        holidays = repository.get_holidays()

    get.assert_called_once_with("https://example.com/holidays.json", timeout=5)
    assert len(holidays) == 3
    assert configuration.DATA_HOLIDAYS_PATH.is_file()
    assert repository.load_snapshot() == holidays


def test_repository_uses_snapshot_when_feed_fails(data_path):
    repository = HolidayRepository("https://example.com/holidays.json", 5)
    with patch(
        "kalender.repository.holiday.requests.get", return_value=_response(FEED)
    ):
        fetched = repository.get_holidays()

    with patch(
        "kalender.repository.holiday.requests.get",
        side_effect=requests.ConnectionError("offline"),
    ):
        holidays = repository.get_holidays()

    assert holidays == fetched


def test_repository_raises_without_snapshot(data_path):
    repository = HolidayRepository("https://example.com/holidays.json", 5)

    with patch(
        "kalender.repository.holiday.requests.get",
        side_effect=requests.Timeout("slow"),
    ):
        with pytest.raises(requests.Timeout):
            repository.get_holidays()


def test_repository_http_error_propagates(data_path):
    repository = HolidayRepository("https://example.com/holidays.json", 5)
    response = _response({})
    response.raise_for_status.side_effect = requests.HTTPError("503")

    with patch("kalender.repository.holiday.requests.get", return_value=response):
        with pytest.raises(requests.HTTPError):
            repository.get_holidays()


def test_corrupt_snapshot_falls_back_to_builtin_table(data_path):
    configuration.DATA_HOLIDAYS_PATH.parent.mkdir(parents=True, exist_ok=True)
    configuration.DATA_HOLIDAYS_PATH.write_text("holidays: [unclosed\n  - : :")

    with patch(
        "kalender.repository.holiday.requests.get",
        side_effect=requests.ConnectionError("offline"),
    ):
        cache = create_holiday_cache(get_default_configuration())

    assert cache.from_fallback
    assert cache.is_holiday(pendulum.date(2025, 8, 17))


def test_snapshot_missing_fields_is_ignored(data_path):
    configuration.DATA_HOLIDAYS_PATH.parent.mkdir(parents=True, exist_ok=True)
    configuration.DATA_HOLIDAYS_PATH.write_text(
        "holidays:\n- date: '2025-10-20'\n"
    )

    assert HolidayRepository().load_snapshot() is None


def test_unwritable_snapshot_still_returns_feed(data_path):
    repository = HolidayRepository("https://example.com/holidays.json", 5)
    # A directory in the snapshot's place makes every write fail
    configuration.DATA_HOLIDAYS_PATH.mkdir(parents=True)

    with patch(
        "kalender.repository.holiday.requests.get", return_value=_response(FEED)
    ):
        holidays = repository.get_holidays()

    assert len(holidays) == 3


def test_fresh_snapshot_is_reused_without_network(data_path):
    config = get_default_configuration()

    with patch(
        "kalender.repository.holiday.requests.get", return_value=_response(FEED)
    ) as get:
        first = create_holiday_cache(config)
        second = create_holiday_cache(config)

    assert get.call_count == 1
    assert second.is_holiday(pendulum.date(2025, 10, 20))
    assert not first.from_fallback and not second.from_fallback


def test_stale_snapshot_and_forced_refresh_hit_the_feed(data_path):
    config = get_default_configuration()
    config["holiday_cache_hours"] = 0

    with patch(
        "kalender.repository.holiday.requests.get", return_value=_response(FEED)
    ) as get:
        create_holiday_cache(config)
        create_holiday_cache(config)
        assert get.call_count == 2

        config["holiday_cache_hours"] = 24
        create_holiday_cache(config, force_refresh=True)
        assert get.call_count == 3
