import sys
from typing import Any, Dict, Optional

import yaml

KNOWN_KEYS = {"full_paths", "color"}


class Settings:
    def __init__(self, full_paths: bool, color: bool) -> None:
        self._full_paths = full_paths
        self._color = color

    def full_paths(self) -> bool:
        """
        Returns `True` if captured locations keep the full path of the source
        file, `False` if only its base name is recorded.
        """
        return self._full_paths

    def color(self) -> bool:
        return self._color


class SettingsBuilder:
    def __init__(self) -> None:
        self._full_paths = False
        self._color: Optional[bool] = None

    def use_full_paths(self, enabled: bool = True) -> "SettingsBuilder":
        self._full_paths = enabled
        return self

    def use_color(self, enabled: bool = True) -> "SettingsBuilder":
        self._color = enabled
        return self

    def load_file(self, path: str) -> "SettingsBuilder":
        """
        Apply the settings from a YAML file. The file must hold a mapping;
        keys that are left out keep their current value.
        """
        values = _load_settings_file(path)

        if "full_paths" in values:
            self.use_full_paths(bool(values["full_paths"]))
        if "color" in values:
            self.use_color(bool(values["color"]))

        return self

    def _build(self) -> Settings:
        color = self._color
        if color is None:
            color = sys.stderr.isatty()

        return Settings(self._full_paths, color)


def _load_settings_file(path: str) -> Dict[str, Any]:
    # Locations read the settings when an error is created, so the error module
    # can only be imported once this module has finished loading.
    from errchain import error

    try:
        with open(path, "r", encoding="utf-8") as file:
            values = yaml.load(file.read(), yaml.SafeLoader)
    except (OSError, yaml.YAMLError) as e:
        raise error.ChainedError(f"Failed to load settings from '{path}'", cause=e)

    if values is None:
        return {}
    if type(values) != dict:
        raise error.ChainedError(
            f"Settings file '{path}' must contain a mapping, not {type(values).__name__}"
        )

    unknown = sorted(set(values.keys()) - KNOWN_KEYS)
    if len(unknown) > 0:
        raise error.ChainedError(
            f"Unknown settings in '{path}': {', '.join(map(str, unknown))}"
        )

    return values


_settings_builder = SettingsBuilder()
_settings: Optional[Settings] = None


def setup() -> SettingsBuilder:
    return _settings_builder


def commit() -> Settings:
    global _settings
    _settings = _settings_builder._build()
    return _settings


def settings() -> Settings:
    if _settings is None:
        return commit()

    return _settings
