# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from kalender.repository.configuration import CONFIGURATION_REPO
from kalender.service.holiday import create_holiday_cache
from kalender.terminal.custom_typer import AliasedTyperGroup
from kalender.time import today_local
from kalender.view.views.holiday import holidays_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_holidays(
    year: Annotated[Optional[int], typer.Option("--year", "-y")] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    cache = create_holiday_cache(config)

    year = year if year is not None else today_local().year
    holidays = cache.holidays_between(
        pendulum.date(year, 1, 1), pendulum.date(year, 12, 31)
    )
    holidays_view(config["user_email"], holidays, cache.from_fallback, config["locale"])


@app.command("refresh, r")
def refresh() -> None:
    """Fetch the holiday feed again and report how many days off are known."""
    config = CONFIGURATION_REPO.get_config()
    cache = create_holiday_cache(config, force_refresh=True)

    source = "bawaan" if cache.from_fallback else "feed"
    typer.echo(f"{len(cache)} hari libur ({source})")
