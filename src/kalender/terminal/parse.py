# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a datetime option into local wall-clock time.

    Accepts YYYY-MM-DD, YYYY-MM-DD (H)H:mm, (H)H:mm (today), now, today,
    yesterday, tomorrow, or a day offset like 1 or -1.
    """
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    # Match YYYY-MM-DD format (with optional (H)H:mm[:ss] time component)
    date_match = re.match(
        r"^(\d{4})-(\d{2})-(\d{2})(?:[ T](\d{1,2}):(\d{2})(?::(\d{2}))?)?$", datetime
    )
    if date_match:
        year, month, day, hour, minute, second = (
            int(part) if part is not None else 0 for part in date_match.groups()
        )
        try:
            return pendulum.datetime(
                year, month, day, hour, minute, second, tz="local"
            )
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        return pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        return pendulum.today("local").add(days=int(datetime))

    if datetime == "now" or datetime == "n":
        return pendulum.now("local")
    if datetime == "today" or datetime == "t":
        return pendulum.today("local")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday("local")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow("local")
    raise typer.BadParameter("Incorrect datetime format")


def parse_id(id: str) -> int:
    try:
        return int(id)
    except ValueError:
        raise typer.BadParameter(f"Invalid id: {id}")
