# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kalender.color import REST_DAY_COLOR
from kalender.format import DEFAULT_LOCALE, format_table_date
from kalender.model.holiday import Holiday
from kalender.view.views.header import header


def holidays_view(
    user_email: Optional[str],
    holidays: list[Holiday],
    from_fallback: bool,
    locale: str = DEFAULT_LOCALE,
) -> None:
    header(user_email, "hari libur")

    console = Console()
    if from_fallback:
        console.print(
            "[bright_black]Sumber data libur tidak tersedia, memakai daftar bawaan.[/bright_black]"
        )

    table = Table(box=box.SIMPLE)
    table.add_column("Tanggal", style=REST_DAY_COLOR)
    table.add_column("Hari libur")
    for holiday in holidays:
        table.add_row(
            format_table_date(holiday["date"], locale), escape(holiday["name"])
        )

    console.print(table)
