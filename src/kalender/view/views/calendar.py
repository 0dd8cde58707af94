# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from kalender.color import (
    BAND_COLOR,
    OTHER_MONTH_STYLE,
    REST_DAY_COLOR,
    SELECTED_STYLE,
    TODAY_STYLE,
    label_color,
)
from kalender.format import (
    DEFAULT_LOCALE,
    duration_minutes,
    format_date_range,
    format_day_and_date,
    format_duration,
    format_month_and_year,
    format_time_range,
)
from kalender.interval import is_multi_day
from kalender.model.activity import Activity
from kalender.model.entity_id import EntityId
from kalender.repository.id_map import ID_MAP_REPO
from kalender.service.activity import sort_by_start
from kalender.service.band import BandState
from kalender.service.bucketing import activities_for_day
from kalender.service.holiday import HolidayCache, is_rest_day
from kalender.service.month_index import MonthIndex
from kalender.time import DateLike, calendar_day, today_local
from kalender.view.views.header import header

WEEKDAY_HEADERS = ["Sen", "Sel", "Rab", "Kam", "Jum", "Sab", "Min"]
MAX_LABEL_DOTS = 3
EMPTY_DAY_MESSAGE = "Tidak ada kegiatan pada hari ini."


def calendar_month_view(
    user_email: Optional[str],
    activities: list[Activity],
    holidays: HolidayCache,
    month: Optional[DateLike] = None,
    selected: Optional[DateLike] = None,
    cell_width: int = 9,
    locale: str = DEFAULT_LOCALE,
) -> None:
    """
    Display a month grid with activity dots, multi-day bands and rest days.

    Args:
        user_email: The configured user
        activities: Snapshot of all activities
        holidays: Holiday lookup used to colour public holidays
        month: Any day in the month to display (defaults to today)
        selected: Day to highlight (defaults to none)
        cell_width: Width of each day cell in characters
        locale: Locale used for month and holiday names
    """
    header(user_email, "kalender")

    console = Console()

    month_day = calendar_day(month) if month is not None else today_local()
    index = MonthIndex(activities, month_day)

    console.print(
        f"\n[bold]{format_month_and_year(index.month_start, locale)}[/bold]\n"
    )
    console.print(
        _render_month_grid(
            index,
            holidays,
            calendar_day(selected) if selected is not None else None,
            cell_width,
        )
    )

    month_holidays = holidays.holidays_between(index.month_start, index.month_end)
    for holiday in month_holidays:
        console.print(
            f"[{REST_DAY_COLOR}]{holiday['date'].format('D MMM', locale=locale)}"
            f"[/{REST_DAY_COLOR}]  {escape(holiday['name'])}"
        )
    console.print()


def _render_band(band: BandState, width: int) -> Text:
    """Draw the band line of a cell: a left cap on start days, a right cap on end days."""
    band_text = Text()
    if not (band["start"] or band["middle"] or band["end"]):
        band_text.append(" " * width)
        return band_text

    body = "━" * width
    if band["start"] and not band["middle"] and not band["end"]:
        body = " " + "━" * (width - 1)
    elif band["end"] and not band["middle"] and not band["start"]:
        body = "━" * (width - 1) + " "
    band_text.append(body, style=BAND_COLOR)
    return band_text


def _render_month_grid(
    index: MonthIndex,
    holidays: HolidayCache,
    selected: Optional[pendulum.Date],
    cell_width: int,
) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in WEEKDAY_HEADERS:
        table.add_column(day_name, style="bold", width=cell_width, justify="center")

    today = today_local()

    for week in index.weeks():
        week_cells: list[Text] = []
        for day in week:
            cell = Text(justify="center")
            day_str = f"{day.day:2d}"

            if not index.is_current_month(day):
                cell.append(day_str, style=OTHER_MONTH_STYLE)
            elif selected is not None and day == selected:
                cell.append(day_str, style=SELECTED_STYLE)
            elif day == today:
                cell.append(day_str, style=TODAY_STYLE)
            elif is_rest_day(day, holidays):
                cell.append(day_str, style=f"bold {REST_DAY_COLOR}")
            else:
                cell.append(day_str, style="bold")
            cell.append("\n")

            cell.append_text(_render_band(index.band(day), cell_width))
            cell.append("\n")

            labels = index.labels_on(day)
            for label in labels[:MAX_LABEL_DOTS]:
                cell.append("●", style=label_color(label))
            if len(labels) == 0:
                cell.append(" ")

            week_cells.append(cell)
        table.add_row(*week_cells)

    return table


def calendar_day_view(
    user_email: Optional[str],
    activities: list[Activity],
    holidays: HolidayCache,
    date: Optional[DateLike] = None,
    locale: str = DEFAULT_LOCALE,
) -> None:
    """
    Display the agenda of one day, ordered by start time.

    Multi-day activities show their full date range beneath the title.
    """
    header(user_email, "agenda")

    console = Console()

    day = calendar_day(date) if date is not None else today_local()
    day_activities = sort_by_start(activities_for_day(activities, day))

    console.print(f"\n[bold]{format_day_and_date(day, locale)}[/bold]")
    holiday_name = holidays.holiday_name(day)
    if holiday_name is not None:
        console.print(Text(holiday_name, style=REST_DAY_COLOR))

    console.print(
        f"\n[bold {BAND_COLOR}]KEGIATAN HARI INI[/bold {BAND_COLOR}]"
        f"  {len(day_activities)} Kegiatan\n"
    )

    if len(day_activities) == 0:
        console.print(f"[bright_black]{EMPTY_DAY_MESSAGE}[/bright_black]\n")
        return

    for activity in day_activities:
        color = label_color(activity["label"])
        synthetic_id = ID_MAP_REPO.associate_id(cast(EntityId, activity["id"]))

        line = Text()
        line.append("▌ ", style=color)
        line.append(f"{synthetic_id:>3} ", style="bright_black")
        line.append(
            format_time_range(activity["start_time"], activity["end_time"]),
            style="bold",
        )
        line.append(f"  {activity['title']}")
        console.print(line)

        details = Text("      ")
        details.append(f"{activity['label']}", style=color)
        details.append(f" · {activity['location']}", style="bright_black")
        details.append(
            " · "
            + format_duration(
                duration_minutes(activity["start_time"], activity["end_time"])
            ),
            style="bright_black",
        )
        console.print(details)

        if is_multi_day(activity["start_time"], activity["end_time"]):
            console.print(
                Text(
                    "      "
                    + format_date_range(
                        activity["start_time"], activity["end_time"], locale
                    ),
                    style=BAND_COLOR,
                )
            )
        if activity["description"]:
            console.print(Text(f"      {activity['description']}", style="dim"))
    console.print()
