# SPDX-License-Identifier: MIT

from typing import Optional, cast

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kalender.color import label_color
from kalender.format import (
    DEFAULT_LOCALE,
    duration_minutes,
    format_date_range,
    format_day_and_date,
    format_duration,
    format_table_date,
    format_time,
    format_time_range,
)
from kalender.model.activity import Activity
from kalender.model.entity_id import EntityId
from kalender.repository.id_map import ID_MAP_REPO
from kalender.view.views.header import header

EMPTY_TABLE_MESSAGE = "Tidak ada kegiatan yang ditemukan."


def activities_table_view(
    user_email: Optional[str],
    report_name: str,
    activities: list[Activity],
    locale: str = DEFAULT_LOCALE,
) -> None:
    header(user_email, report_name)

    console = Console()
    if len(activities) == 0:
        console.print(f"\n[bright_black]{EMPTY_TABLE_MESSAGE}[/bright_black]\n")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("id")
    table.add_column("Judul")
    table.add_column("Tanggal")
    table.add_column("Waktu")
    table.add_column("Lokasi")
    table.add_column("Label")

    for activity in activities:
        color = label_color(activity["label"])
        table.add_row(
            str(ID_MAP_REPO.associate_id(cast(EntityId, activity["id"]))),
            escape(activity["title"]),
            format_table_date(activity["start_time"], locale),
            format_time_range(activity["start_time"], activity["end_time"]),
            str(activity["location"]),
            f"[{color}]{activity['label']}[/{color}]",
        )

    console.print(table)


def single_activity_view(
    user_email: Optional[str], activity: Activity, locale: str = DEFAULT_LOCALE
) -> None:
    header(user_email, "kegiatan")

    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")

    color = label_color(activity["label"])
    table.add_row(
        "id", str(ID_MAP_REPO.associate_id(cast(EntityId, activity["id"])))
    )
    table.add_row("title", escape(activity["title"]))
    table.add_row(
        "date",
        format_date_range(activity["start_time"], activity["end_time"], locale),
    )
    table.add_row("start", format_day_and_date(activity["start_time"], locale))
    table.add_row("start_time", format_time(activity["start_time"]))
    table.add_row("end", format_day_and_date(activity["end_time"], locale))
    table.add_row("end_time", format_time(activity["end_time"]))
    table.add_row(
        "duration",
        format_duration(
            duration_minutes(activity["start_time"], activity["end_time"])
        ),
    )
    table.add_row("description", escape(activity["description"]))
    table.add_row("label", f"[{color}]{activity['label']}[/{color}]")
    table.add_row("location", str(activity["location"]))
    table.add_row("created_by", escape(activity["created_by"]))

    console = Console()
    console.print(table)
