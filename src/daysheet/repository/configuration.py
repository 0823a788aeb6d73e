# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daysheet import configuration
from daysheet.errors import ConfigurationError


class ConfigurationRepository:
    _COERCIONS = {"default_start": int, "default_end": int, "target_hours": float}

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

        defaults = configuration.get_default_configuration()
        if loaded is None:
            self._config = defaults
            return
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Expected a mapping in {configuration.APP_CONFIG_PATH}"
            )

        # Back-fill keys added after the config file was written
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value
        self._config = self.__coerce(loaded)

    def __coerce(self, config: dict[str, Any]) -> configuration.Configuration:
        """Convert hand-edited values to the types the rest of the app expects."""
        path = configuration.APP_CONFIG_PATH
        for key, convert in self._COERCIONS.items():
            try:
                config[key] = convert(config[key])
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"Invalid value for '{key}' in {path}: {config[key]!r}"
                )

        categories = config["categories"]
        if isinstance(categories, str):
            categories = [categories]
        if not isinstance(categories, list) or len(categories) == 0:
            raise ConfigurationError(
                f"Invalid value for 'categories' in {path}: {categories!r}"
            )
        config["categories"] = [str(category) for category in categories]

        if config["data_path"] is not None:
            config["data_path"] = str(config["data_path"])
        return cast(configuration.Configuration, config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        default_start: Optional[int] = None,
        default_end: Optional[int] = None,
        target_hours: Optional[float] = None,
        categories: Optional[list[str]] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if default_start is not None:
            self.config["default_start"] = default_start
        if default_end is not None:
            self.config["default_end"] = default_end
        if target_hours is not None:
            self.config["target_hours"] = target_hours
        if categories is not None:
            self.config["categories"] = categories


CONFIGURATION_REPO = ConfigurationRepository()
