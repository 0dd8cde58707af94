# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from kalender.model.activity import ActivityLabel, ActivityLocation
from kalender.model.entity_id import EntityId
from kalender.repository.id_map import ID_MAP_REPO


def validate_label(label: Optional[str]) -> Optional[ActivityLabel]:
    if label is None:
        return None
    try:
        return ActivityLabel(label)
    except ValueError:
        choices = ", ".join(str(choice) for choice in ActivityLabel)
        raise typer.BadParameter(f"Label must be one of: {choices}")


def validate_location(location: Optional[str]) -> Optional[ActivityLocation]:
    if location is None:
        return None
    try:
        return ActivityLocation(location)
    except ValueError:
        choices = ", ".join(str(choice) for choice in ActivityLocation)
        raise typer.BadParameter(f"Location must be one of: {choices}")


def validate_title(title: str) -> str:
    if title.strip() == "":
        raise typer.BadParameter("Title cannot be empty")
    return title


def validate_time_range(start: pendulum.DateTime, end: pendulum.DateTime) -> None:
    if not end > start:
        raise typer.BadParameter("End time must be after start time")


def require_user_email(user_email: Optional[str]) -> str:
    if user_email is None or user_email.strip() == "":
        raise typer.BadParameter(
            "No user configured; run `kalender config set --user-email ...` first"
        )
    return user_email


def resolve_activity_id(synthetic_id: int) -> EntityId:
    try:
        return ID_MAP_REPO.get_real_id(synthetic_id)
    except KeyError:
        raise typer.BadParameter(f"Unknown activity id: {synthetic_id}")
