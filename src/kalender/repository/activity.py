# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from kalender import configuration, time
from kalender.model.activity import Activity, ActivityLabel, ActivityLocation
from kalender.model.entity_id import EntityId, generate_entity_id

logger = logging.getLogger(__name__)


class ActivityRepository:
    def __init__(self) -> None:
        self._activities: Optional[list[Activity]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def activities(self) -> list[Activity]:
        if self._activities is None:
            self.__load_data()
        if self._activities is None:
            raise ValueError()
        return self._activities

    def __load_data(self) -> None:
        self._activities = []
        if not configuration.DATA_ACTIVITIES_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_ACTIVITIES_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_activity = load(file_path.read_text(), Loader=Loader)
            if raw_activity is not None:
                self._activities.append(
                    self.__convert_activity_for_deserialization(raw_activity)
                )
        logger.debug("loaded %d activities", len(self._activities))

    def __save_data(self) -> None:
        configuration.DATA_ACTIVITIES_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for activity in self.activities:
            if activity["id"] in self._dirty_ids:
                serializable_activity = self.__convert_activity_for_serialization(
                    deepcopy(activity)
                )
                file_path = configuration.DATA_ACTIVITIES_DIR / f"{activity['id']}.yaml"
                file_path.write_text(dump(serializable_activity, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_ACTIVITIES_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._activities is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_activity_for_serialization(
        self, activity: Activity
    ) -> dict[str, Any]:
        serializable_activity = cast(dict[str, Any], activity)
        serializable_activity["start_time"] = time.datetime_to_str(
            serializable_activity["start_time"]
        )
        serializable_activity["end_time"] = time.datetime_to_str(
            serializable_activity["end_time"]
        )
        serializable_activity["label"] = str(serializable_activity["label"])
        serializable_activity["location"] = str(serializable_activity["location"])
        return serializable_activity

    def __convert_activity_for_deserialization(
        self, activity: dict[str, Any]
    ) -> Activity:
        deserializable_activity = activity
        deserializable_activity["start_time"] = time.datetime_from_str(
            deserializable_activity["start_time"]
        )
        deserializable_activity["end_time"] = time.datetime_from_str(
            deserializable_activity["end_time"]
        )
        deserializable_activity["label"] = ActivityLabel(
            deserializable_activity["label"]
        )
        deserializable_activity["location"] = ActivityLocation(
            deserializable_activity["location"]
        )
        deserializable_activity.setdefault("description", "")
        deserializable_activity.setdefault("created_by", "")
        return cast(Activity, deserializable_activity)

    def __find(self, id: EntityId) -> Activity:
        for activity in self.activities:
            if activity["id"] == id:
                return activity
        raise KeyError(id)

    def save_new_activity(self, activity: Activity) -> EntityId:
        self.is_dirty = True

        activity = deepcopy(activity)
        activity["id"] = generate_entity_id()

        self.activities.append(activity)
        self._dirty_ids.add(activity["id"])

        return activity["id"]

    def modify_activity(
        self,
        id: EntityId,
        title: Optional[str] = None,
        start_time: Optional[pendulum.DateTime] = None,
        end_time: Optional[pendulum.DateTime] = None,
        description: Optional[str] = None,
        label: Optional[ActivityLabel] = None,
        location: Optional[ActivityLocation] = None,
    ) -> None:
        activity = self.__find(id)

        self.is_dirty = True
        self._dirty_ids.add(id)

        if title is not None:
            activity["title"] = title
        if start_time is not None:
            activity["start_time"] = start_time
        if end_time is not None:
            activity["end_time"] = end_time
        if description is not None:
            activity["description"] = description
        if label is not None:
            activity["label"] = label
        if location is not None:
            activity["location"] = location

    def delete_activity(self, id: EntityId) -> None:
        activity = self.__find(id)

        self.is_dirty = True
        self._activities = [a for a in self.activities if a is not activity]
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def get_all_activities(self) -> list[Activity]:
        return deepcopy(self.activities)

    def get_activity(self, id: EntityId) -> Activity:
        return deepcopy(self.__find(id))


ACTIVITY_REPO = ActivityRepository()
