# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from kalender import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Back-fill any setting missing from older config files
        defaults = configuration.get_default_configuration()
        if loaded is None:
            self._config = defaults
            return
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value
        self._config = loaded

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        user_email: Optional[str] = None,
        remove_user_email: bool = False,
        locale: Optional[str] = None,
        holiday_feed_url: Optional[str] = None,
        holiday_cache_hours: Optional[int] = None,
        request_timeout_seconds: Optional[int] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if user_email is not None:
            self.config["user_email"] = user_email
        if remove_user_email:
            self.config["user_email"] = None
        if locale is not None:
            self.config["locale"] = locale
        if holiday_feed_url is not None:
            self.config["holiday_feed_url"] = holiday_feed_url
        if holiday_cache_hours is not None:
            self.config["holiday_cache_hours"] = holiday_cache_hours
        if request_timeout_seconds is not None:
            self.config["request_timeout_seconds"] = request_timeout_seconds
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
