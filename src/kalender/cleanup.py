# SPDX-License-Identifier: MIT

import atexit
import logging

from kalender.repository.activity import ACTIVITY_REPO
from kalender.repository.configuration import CONFIGURATION_REPO
from kalender.repository.id_map import ID_MAP_REPO

logger = logging.getLogger(__name__)


def flush_and_sync() -> None:
    """Write every repository that changed during this run."""
    for name, repository in [
        ("config", CONFIGURATION_REPO),
        ("id map", ID_MAP_REPO),
        ("activities", ACTIVITY_REPO),
    ]:
        if repository.flush():
            logger.debug("saved %s", name)


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
