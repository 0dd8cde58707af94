# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from kalender.model.entity_id import EntityId


class ActivityLabel(StrEnum):
    RO_1 = "RO 1"
    RO_2 = "RO 2"
    RO_3 = "RO 3"


class ActivityLocation(StrEnum):
    KANTOR = "Kantor"
    ONLINE = "Online"
    JAKARTA = "Jakarta"
    LUAR_KOTA = "Luar Kota"


class Activity(TypedDict):
    id: Optional[EntityId]
    title: str
    start_time: pendulum.DateTime
    end_time: pendulum.DateTime
    description: str
    label: ActivityLabel
    location: ActivityLocation
    created_by: str
