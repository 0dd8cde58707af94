# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "kalender"

DEFAULT_HOLIDAY_FEED_URL = (
    "https://raw.githubusercontent.com/guangrei/APIHariLibur_V2/main/holidays.json"
)

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ACTIVITIES_DIR: Path = DATA_PATH / "activities"
DATA_HOLIDAYS_PATH: Path = DATA_PATH / "holidays.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"


class Configuration(TypedDict):
    user_email: Optional[str]
    locale: str
    holiday_feed_url: str
    holiday_cache_hours: int
    request_timeout_seconds: int
    data_path: Optional[str]
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "user_email": None,
        "locale": "id",
        "holiday_feed_url": DEFAULT_HOLIDAY_FEED_URL,
        "holiday_cache_hours": 24,
        "request_timeout_seconds": 10,
        "data_path": None,
        "show_header": True,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_ACTIVITIES_DIR, DATA_HOLIDAYS_PATH, DATA_ID_MAP_PATH

    DATA_PATH = data_path
    DATA_ACTIVITIES_DIR = DATA_PATH / "activities"
    DATA_HOLIDAYS_PATH = DATA_PATH / "holidays.yaml"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
