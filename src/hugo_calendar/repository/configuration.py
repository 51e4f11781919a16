# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from hugo_calendar import configuration


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
        config = configuration.get_default_configuration()

        if configuration.APP_CONFIG_PATH.is_file():
            loaded: Any = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ValueError("configuration file must contain a mapping")

            # Keys missing from the file keep their defaults, unknown keys are ignored
            values = cast(dict[str, Any], config)
            for key, value in loaded.items():
                if key in values and value is not None:
                    values[key] = self.__coerce(key, value, values[key])

        self._config = config

    def __coerce(self, key: str, value: Any, default: Any) -> Any:
        # bool is an int subclass, so it is checked first
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise ValueError(f"{key} must be true or false, got {value!r}")
            return value
        if isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be a whole number, got {value!r}")
            return value
        return str(value)

    def reload(self) -> None:
        self._config = None

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)


CONFIGURATION_REPO = ConfigurationRepository()
