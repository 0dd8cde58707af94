# SPDX-License-Identifier: MIT

from kalender.model.activity import Activity, ActivityLabel, ActivityLocation
from kalender.time import now_local


def get_activity_template() -> Activity:
    start = now_local().start_of("hour")
    return {
        "id": None,
        "title": "",
        "start_time": start,
        "end_time": start.add(hours=1),
        "description": "",
        "label": ActivityLabel.RO_1,
        "location": ActivityLocation.KANTOR,
        "created_by": "",
    }
