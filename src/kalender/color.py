# SPDX-License-Identifier: MIT

from kalender.model.activity import ActivityLabel

LABEL_COLORS: dict[ActivityLabel, str] = {
    ActivityLabel.RO_1: "blue",
    ActivityLabel.RO_2: "green",
    ActivityLabel.RO_3: "orange3",
}

BAND_COLOR = "red3"
REST_DAY_COLOR = "red"
TODAY_STYLE = "bold white on red3"
SELECTED_STYLE = "bold black on bright_white"
OTHER_MONTH_STYLE = "bright_black"


def label_color(label: ActivityLabel) -> str:
    return LABEL_COLORS.get(label, "white")
