# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from kalender.view.state import get_show_header

SIGNED_OUT = "belum masuk"


def header(user_email: Optional[str], sub_header: Optional[str] = None) -> None:
    """Print the kalender banner, the report name and who is signed in."""
    if not get_show_header():
        return

    lines = ["[red3]kalender[/red3]"]
    if sub_header is not None:
        lines.append(f"[sandy_brown]{escape(sub_header)}[/sandy_brown]")
    lines.append(f"[plum1]{escape(user_email or SIGNED_OUT)}[/plum1]")

    print(Padding("\n".join(lines), (1, 1, 0, 1)))
