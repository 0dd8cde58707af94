# SPDX-License-Identifier: MIT

import uuid

# Activity ids are uuid4 strings; the terminal shows short ids from the id map
type EntityId = str


def generate_entity_id() -> EntityId:
    return uuid.uuid4().hex
