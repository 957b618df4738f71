# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from keepsake import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded: Optional[dict[str, Any]] = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Keys missing from older config files fall back to their defaults
        config = cast(dict[str, Any], configuration.get_default_configuration())
        if loaded is not None:
            config.update(
                {key: value for key, value in loaded.items() if key in config}
            )
        self._config = cast(configuration.Configuration, config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        clear_ids_on_view: Optional[bool] = None,
        yearly_reading_goal: Optional[int] = None,
        monthly_reading_goal: Optional[int] = None,
        log_level: Optional[str] = None,
        log_file: Optional[str] = None,
        remove_log_file: bool = False,
    ) -> None:
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if clear_ids_on_view is not None:
            self.config["clear_ids_on_view"] = clear_ids_on_view
        if yearly_reading_goal is not None:
            self.config["yearly_reading_goal"] = yearly_reading_goal
        if monthly_reading_goal is not None:
            self.config["monthly_reading_goal"] = monthly_reading_goal
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if log_file is not None:
            self.config["log_file"] = log_file
        if remove_log_file:
            self.config["log_file"] = None

        self.__save_data(self.config)


CONFIGURATION_REPO = ConfigurationRepository()
