"""End-to-end runs of the typer app against a temporary data directory."""

from unittest.mock import patch

import pytest
import requests
from typer.testing import CliRunner

from kalender.repository.activity import ACTIVITY_REPO
from kalender.terminal.app import app

runner = CliRunner()


@pytest.fixture
def offline():
    with patch(
        "kalender.repository.holiday.requests.get",
        side_effect=requests.ConnectionError("offline"),
    ):
        yield


def _invoke(*args):
    result = runner.invoke(app, list(args))
    assert result.exit_code == 0, result.output
    return result


def test_add_requires_a_user(data_path):
    result = runner.invoke(app, ["activity", "add", "Rapat", "-s", "2025-03-10 09:00"])

    assert result.exit_code != 0
    assert ACTIVITY_REPO.get_all_activities() == []


def test_add_then_show_day_and_table(data_path, offline):
    _invoke("config", "set", "-u", "redaksi@example.com")

    added = _invoke(
        "a", "a", "Liputan Daerah",
        "-s", "2025-03-10 14:00",
        "-e", "2025-03-12 09:00",
        "-lb", "RO 2",
        "-l", "Luar Kota",
    )
    assert "Liputan Daerah" in added.output
    assert "10–12 Maret 2025" in added.output

    middle_day = _invoke("view", "day", "-D", "2025-03-11")
    assert "KEGIATAN HARI INI" in middle_day.output
    assert "1 Kegiatan" in middle_day.output
    assert "Liputan Daerah" in middle_day.output

    empty_day = _invoke("v", "d", "-D", "2025-03-13")
    assert "Tidak ada kegiatan pada hari ini." in empty_day.output

    table = _invoke("view", "table", "--label", "RO 2")
    assert "Liputan Daerah" in table.output


def test_add_rejects_end_before_start(data_path):
    _invoke("config", "set", "-u", "redaksi@example.com")

    result = runner.invoke(
        app,
        ["activity", "add", "Rapat", "-s", "2025-03-10 10:00", "-e", "2025-03-10 09:00"],
    )

    assert result.exit_code != 0
    assert ACTIVITY_REPO.get_all_activities() == []


def test_day_view_shows_holiday_from_fallback(data_path, offline):
    result = _invoke("view", "day", "-D", "2025-08-17")

    assert "Hari Proklamasi Kemerdekaan R.I." in result.output


def test_month_view_renders(data_path, offline):
    _invoke("config", "set", "-u", "redaksi@example.com")
    _invoke("activity", "add", "Rapat", "-s", "2025-03-10 09:00")

    result = _invoke("view", "month", "-D", "2025-03-01")

    assert "Sen" in result.output
    assert "Min" in result.output


def test_search_with_no_match(data_path):
    result = _invoke("search", "tidak-ada")

    assert "Tidak ada kegiatan yang ditemukan." in result.output


def test_modify_and_delete_by_synthetic_id(data_path):
    _invoke("config", "set", "-u", "redaksi@example.com")
    _invoke("activity", "add", "Rapat", "-s", "2025-03-10 09:00")

    _invoke("activity", "modify", "1", "--title", "Rapat Redaksi")
    assert ACTIVITY_REPO.get_all_activities()[0]["title"] == "Rapat Redaksi"

    _invoke("activity", "delete", "1", "--yes")
    assert ACTIVITY_REPO.get_all_activities() == []


def test_duplicate_onto_another_day(data_path):
    _invoke("config", "set", "-u", "redaksi@example.com")
    _invoke("activity", "add", "Rapat", "-s", "2025-03-10 09:00", "-e", "2025-03-10 10:00")

    _invoke("activity", "dup", "1", "-D", "2025-03-14")

    starts = sorted(
        activity["start_time"].format("YYYY-MM-DD HH:mm")
        for activity in ACTIVITY_REPO.get_all_activities()
    )
    assert starts == ["2025-03-10 09:00", "2025-03-14 09:00"]


def test_titles_with_markup_characters_render_literally(data_path, offline):
    _invoke("config", "set", "-u", "redaksi@example.com")
    _invoke("activity", "add", "[/] Rapat [bold]", "-s", "2025-03-10 09:00")

    table = _invoke("view", "table")
    day = _invoke("view", "day", "-D", "2025-03-10")
    found = _invoke("search", "[/]")

    assert "[/] Rapat [bold]" in table.output
    assert "[/] Rapat [bold]" in day.output
    assert "[/] Rapat [bold]" in found.output
