# SPDX-License-Identifier: MIT

import datetime
from copy import deepcopy
from typing import Any


def sort_key(value: Any) -> Any:
    """Datetimes sort chronologically, anything else by lower-cased text."""
    if isinstance(value, datetime.datetime):
        return value.timestamp()
    return str(value).lower()


def sort_items(
    items: list[dict[str, Any]], sort_instructions: list[str]
) -> list[dict[str, Any]]:
    """
    Sort by one or more columns, e.g. ["desc start_time", "title"].

    Items whose column is None always go last.
    """
    sorted_items = deepcopy(items)

    for sort_instruction in reversed(sort_instructions):
        descending = False
        column = sort_instruction
        if " " in sort_instruction:
            direction, column = sort_instruction.split(" ", 1)
            if direction == "desc":
                descending = True
        none_items = [item for item in sorted_items if item.get(column) is None]
        value_items = [item for item in sorted_items if item.get(column) is not None]
        value_items.sort(key=lambda item: sort_key(item[column]), reverse=descending)
        sorted_items = value_items + none_items

    return sorted_items
