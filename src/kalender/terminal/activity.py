# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer

from kalender.repository.activity import ACTIVITY_REPO
from kalender.repository.configuration import CONFIGURATION_REPO
from kalender.service.activity import duplicate_activity
from kalender.template.activity import get_activity_template
from kalender.terminal.custom_typer import AliasedTyperGroup
from kalender.terminal.parse import parse_datetime, parse_id
from kalender.terminal.validate import (
    require_user_email,
    resolve_activity_id,
    validate_label,
    validate_location,
    validate_time_range,
    validate_title,
)
from kalender.view.views import activity as activity_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATETIME_HELP = "valid inputs: YYYY-MM-DD (H)H:mm, YYYY-MM-DD, (H)H:mm, today, yesterday, tomorrow, or day offset like 1, -1"


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="activity title")],
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            "-e",
            parser=parse_datetime,
            help=DATETIME_HELP + " (defaults to one hour after start)",
        ),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    label: Annotated[
        Optional[str], typer.Option("--label", "-lb", help="RO 1, RO 2 or RO 3")
    ] = None,
    location: Annotated[
        Optional[str],
        typer.Option("--location", "-l", help="Kantor, Online, Jakarta or Luar Kota"),
    ] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    user_email = require_user_email(config["user_email"])

    activity = get_activity_template()
    activity["title"] = validate_title(title)
    if start is not None:
        activity["start_time"] = start
    activity["end_time"] = (
        end if end is not None else activity["start_time"].add(hours=1)
    )
    validate_time_range(activity["start_time"], activity["end_time"])
    if description is not None:
        activity["description"] = description
    activity["label"] = validate_label(label) or activity["label"]
    activity["location"] = validate_location(location) or activity["location"]
    activity["created_by"] = user_email

    id = ACTIVITY_REPO.save_new_activity(activity)
    logger.info("created activity %s", id)

    activity_report.single_activity_view(
        user_email, ACTIVITY_REPO.get_activity(id), config["locale"]
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    label: Annotated[Optional[str], typer.Option("--label", "-lb")] = None,
    location: Annotated[Optional[str], typer.Option("--location", "-l")] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()

    real_id = resolve_activity_id(parse_id(id))
    current = ACTIVITY_REPO.get_activity(real_id)

    validate_time_range(
        start if start is not None else current["start_time"],
        end if end is not None else current["end_time"],
    )

    ACTIVITY_REPO.modify_activity(
        real_id,
        title=validate_title(title) if title is not None else None,
        start_time=start,
        end_time=end,
        description=description,
        label=validate_label(label),
        location=validate_location(location),
    )
    logger.info("modified activity %s", real_id)

    activity_report.single_activity_view(
        config["user_email"], ACTIVITY_REPO.get_activity(real_id), config["locale"]
    )


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    real_id = resolve_activity_id(parse_id(id))
    activity = ACTIVITY_REPO.get_activity(real_id)

    if not yes and not typer.confirm(
        f"Anda yakin ingin menghapus kegiatan '{activity['title']}'?"
    ):
        raise typer.Abort()

    ACTIVITY_REPO.delete_activity(real_id)
    logger.info("deleted activity %s", real_id)
    typer.echo("Kegiatan berhasil dihapus")


@app.command("duplicate, dup", no_args_is_help=True)
def duplicate(
    id: str,
    date: Annotated[
        pendulum.DateTime,
        typer.Option("--date", "-D", parser=parse_datetime, help=DATETIME_HELP),
    ],
) -> None:
    config = CONFIGURATION_REPO.get_config()
    user_email = require_user_email(config["user_email"])

    real_id = resolve_activity_id(parse_id(id))
    copy = duplicate_activity(ACTIVITY_REPO.get_activity(real_id), date)
    new_id = ACTIVITY_REPO.save_new_activity(copy)
    logger.info("duplicated activity %s as %s", real_id, new_id)

    activity_report.single_activity_view(
        user_email, ACTIVITY_REPO.get_activity(new_id), config["locale"]
    )


@app.command("show, sh", no_args_is_help=True)
def show(id: str) -> None:
    config = CONFIGURATION_REPO.get_config()
    real_id = resolve_activity_id(parse_id(id))
    activity_report.single_activity_view(
        config["user_email"], ACTIVITY_REPO.get_activity(real_id), config["locale"]
    )
