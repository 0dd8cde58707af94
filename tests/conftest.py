"""Shared fixtures for the kalender test-suite."""

from typing import Callable, Optional

import pendulum
import pytest

from kalender import configuration
from kalender.model.activity import Activity, ActivityLabel, ActivityLocation
from kalender.repository.activity import ACTIVITY_REPO
from kalender.repository.configuration import CONFIGURATION_REPO
from kalender.repository.id_map import ID_MAP_REPO


@pytest.fixture(autouse=True)
def jakarta_local_timezone():
    """Pin the local calendar so day boundaries do not depend on the host."""
    pendulum.set_local_timezone(pendulum.timezone("Asia/Jakarta"))
    yield
    pendulum.set_local_timezone()


@pytest.fixture
def at() -> Callable[..., pendulum.DateTime]:
    def _at(
        year: int, month: int, day: int, hour: int = 0, minute: int = 0
    ) -> pendulum.DateTime:
        return pendulum.datetime(year, month, day, hour, minute, tz="local")

    return _at


@pytest.fixture
def make_activity() -> Callable[..., Activity]:
    counter = {"next": 0}

    def _make(
        start: pendulum.DateTime,
        end: pendulum.DateTime,
        title: str = "Rapat",
        label: ActivityLabel = ActivityLabel.RO_1,
        location: ActivityLocation = ActivityLocation.KANTOR,
        id: Optional[str] = None,
    ) -> Activity:
        counter["next"] += 1
        return {
            "id": id or f"activity-{counter['next']}",
            "title": title,
            "start_time": start,
            "end_time": end,
            "description": "",
            "label": label,
            "location": location,
            "created_by": "redaksi@example.com",
        }

    return _make


@pytest.fixture
def data_path(tmp_path, monkeypatch):
    """Point every config and data file at a temporary directory."""
    data_dir = tmp_path / "data"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_ACTIVITIES_DIR", data_dir / "activities")
    monkeypatch.setattr(configuration, "DATA_HOLIDAYS_PATH", data_dir / "holidays.yaml")
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_dir / "id_map.yaml")

    # Module-level repositories cache what they loaded; start each test empty
    for repository, attribute in [
        (ACTIVITY_REPO, "_activities"),
        (CONFIGURATION_REPO, "_config"),
        (ID_MAP_REPO, "_id_map"),
    ]:
        monkeypatch.setattr(repository, attribute, None)
        monkeypatch.setattr(repository, "is_dirty", False)
    monkeypatch.setattr(ACTIVITY_REPO, "_dirty_ids", set())
    monkeypatch.setattr(ACTIVITY_REPO, "_deleted_ids", set())

    return data_dir
