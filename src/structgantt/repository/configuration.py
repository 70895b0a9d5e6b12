# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from structgantt import configuration


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

        # Back-fill keys missing from older or hand written files
        defaults = configuration.get_default_configuration()
        self._config = defaults
        if isinstance(loaded, dict):
            for key in defaults:
                if key in loaded:
                    self._config[key] = loaded[key]  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        skipweekends: Optional[bool] = None,
        mode: Optional[str] = None,
        show_not_found: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if skipweekends is not None:
            self.config["skipweekends"] = skipweekends
        if mode is not None:
            self.config["mode"] = mode
        if show_not_found is not None:
            self.config["show_not_found"] = show_not_found


CONFIGURATION_REPO = ConfigurationRepository()
