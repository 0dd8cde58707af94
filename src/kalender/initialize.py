# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from kalender import configuration
from kalender.logger import configure_logging
from kalender.repository.configuration import CONFIGURATION_REPO
from kalender.view import state as view_state


def initialize() -> None:
    """Prepare config and data directories, then apply the stored settings."""
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    if not configuration.APP_CONFIG_PATH.is_file():
        __write_default_config()

    # data_path may move the data directory, so resolve it before creating it
    configuration.load_data_path_configuration()
    for directory in [configuration.DATA_PATH, configuration.DATA_ACTIVITIES_DIR]:
        directory.mkdir(parents=True, exist_ok=True)

    settings = CONFIGURATION_REPO.get_config()
    configure_logging(settings["log_level"])
    view_state.set_show_header(settings["show_header"])


def __write_default_config() -> None:
    defaults = configuration.get_default_configuration()
    configuration.APP_CONFIG_PATH.write_text(dump(defaults, Dumper=Dumper))
