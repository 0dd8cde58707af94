import pendulum
import pytest
import typer

from kalender.terminal.parse import parse_datetime, parse_id
from kalender.terminal.validate import (
    require_user_email,
    validate_label,
    validate_location,
    validate_time_range,
    validate_title,
)
from kalender.model.activity import ActivityLabel, ActivityLocation


def test_parse_date_and_time_as_local(at):
    assert parse_datetime("2025-03-10 09:30") == at(2025, 3, 10, 9, 30)
    assert parse_datetime("2025-03-10 9:05") == at(2025, 3, 10, 9, 5)
    assert parse_datetime("2025-03-10T17:45:30") == at(2025, 3, 10, 17, 45).add(
        seconds=30
    )
    assert parse_datetime("2025-03-10") == at(2025, 3, 10)


def test_parse_time_only_uses_today():
    parsed = parse_datetime("9:15")

    assert parsed.date() == pendulum.today("local").date()
    assert (parsed.hour, parsed.minute) == (9, 15)


def test_parse_relative_days():
    assert parse_datetime("1").date() == pendulum.tomorrow("local").date()
    assert parse_datetime("-1").date() == pendulum.yesterday("local").date()
    assert parse_datetime("today").date() == pendulum.today("local").date()


def test_parse_none_passes_through():
    assert parse_datetime(None) is None


@pytest.mark.parametrize(
    "value", ["25:00", "10:61", "next week", "2025-13-01", "2025-03-10 24:00"]
)
def test_parse_rejects_bad_input(value):
    with pytest.raises(typer.BadParameter):
        parse_datetime(value)


def test_parse_id():
    assert parse_id("12") == 12
    with pytest.raises(typer.BadParameter):
        parse_id("abc")


def test_validate_closed_sets():
    assert validate_label("RO 2") is ActivityLabel.RO_2
    assert validate_location("Luar Kota") is ActivityLocation.LUAR_KOTA
    assert validate_label(None) is None

    with pytest.raises(typer.BadParameter):
        validate_label("RO 4")
    with pytest.raises(typer.BadParameter):
        validate_location("Bandung")


def test_validate_title_and_time_range(at):
    assert validate_title("Rapat") == "Rapat"
    with pytest.raises(typer.BadParameter):
        validate_title("   ")

    validate_time_range(at(2025, 3, 10, 9), at(2025, 3, 10, 10))
    with pytest.raises(typer.BadParameter):
        validate_time_range(at(2025, 3, 10, 9), at(2025, 3, 10, 9))


def test_require_user_email():
    assert require_user_email("redaksi@example.com") == "redaksi@example.com"
    with pytest.raises(typer.BadParameter):
        require_user_email(None)
