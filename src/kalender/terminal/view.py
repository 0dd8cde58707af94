# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from kalender.repository.activity import ACTIVITY_REPO
from kalender.repository.configuration import CONFIGURATION_REPO
from kalender.service.activity import (
    SORTABLE_FIELDS,
    filter_and_sort_activities,
    search_activities,
)
from kalender.service.holiday import create_holiday_cache
from kalender.terminal.custom_typer import AliasedTyperGroup
from kalender.terminal.parse import parse_datetime
from kalender.terminal.validate import validate_label, validate_location
from kalender.view.views import activity as activity_report
from kalender.view.views import calendar as calendar_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("month, m")
def month(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--date", "-D", parser=parse_datetime, help="any day in the month to show"
        ),
    ] = None,
    select: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--select", parser=parse_datetime, help="day to highlight"),
    ] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    holidays = create_holiday_cache(config)

    calendar_report.calendar_month_view(
        config["user_email"],
        ACTIVITY_REPO.get_all_activities(),
        holidays,
        month=date,
        selected=select,
        locale=config["locale"],
    )


@app.command("day, d")
def day(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--date", "-D", parser=parse_datetime, help="day to show"),
    ] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    holidays = create_holiday_cache(config)

    calendar_report.calendar_day_view(
        config["user_email"],
        ACTIVITY_REPO.get_all_activities(),
        holidays,
        date=date,
        locale=config["locale"],
    )


@app.command("table, t")
def table(
    label: Annotated[Optional[str], typer.Option("--label", "-lb")] = None,
    location: Annotated[Optional[str], typer.Option("--location", "-l")] = None,
    sort: Annotated[
        str,
        typer.Option("--sort", "-s", help=f"one of: {', '.join(SORTABLE_FIELDS)}"),
    ] = "start_time",
    descending: Annotated[bool, typer.Option("--desc")] = False,
) -> None:
    config = CONFIGURATION_REPO.get_config()

    if sort not in SORTABLE_FIELDS:
        raise typer.BadParameter(f"Sort must be one of: {', '.join(SORTABLE_FIELDS)}")

    activities = filter_and_sort_activities(
        ACTIVITY_REPO.get_all_activities(),
        label=validate_label(label),
        location=validate_location(location),
        sort_field=sort,
        descending=descending,
    )
    activity_report.activities_table_view(
        config["user_email"], "daftar kegiatan", activities, config["locale"]
    )


def search(term: Annotated[str, typer.Argument(help="text to look for")]) -> None:
    """Search activities by title, location or label."""
    config = CONFIGURATION_REPO.get_config()

    activities = search_activities(ACTIVITY_REPO.get_all_activities(), term)
    activity_report.activities_table_view(
        config["user_email"], f"cari: {term}", activities, config["locale"]
    )
