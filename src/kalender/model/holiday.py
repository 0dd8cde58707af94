# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class Holiday(TypedDict):
    date: pendulum.Date
    name: str
    is_day_off: bool
