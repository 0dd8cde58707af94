# SPDX-License-Identifier: MIT

from typing import TypedDict

from kalender.model.entity_id import EntityId


class IdMap(TypedDict):
    """
    Short numeric ids shown in the terminal, mapped to real activity ids.

    Example:

    Activity with an id of "3f2a...".
    Synthetic id for that activity is 7.

    real_id = id_map["synthetic_to_real"][7] # returns "3f2a..."
    """

    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
