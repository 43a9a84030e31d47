#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import os
import sys
import pytz
import json
import logging
import threading

from typing import Any
from enum import StrEnum, Enum
from pathlib import Path
from .model.units import UnitSystem, UnitEnum


def user_data_root(app_name: str = "physunits") -> Path:
    """
    Gets the per-user writable directory holding settings and logs: the ``PHYSUNITS_HOME`` environment variable
    when set, otherwise the platform's user data location (LOCALAPPDATA on Windows, Application Support on macOS,
    XDG_DATA_HOME or ~/.local/share elsewhere).

    :param app_name: Name of the application sub-directory.
    :type app_name: str
    :return: The data root directory as a pathlib.Path object; it is not created here.
    :rtype: Path
    """
    home = os.environ.get("PHYSUNITS_HOME", "").strip()
    if home:
        return Path(home)

    if sys.platform.startswith("win"):
        base = (os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA") or "").strip()
        if base:
            return Path(base) / app_name
        return Path.home() / "AppData" / "Local" / app_name

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / app_name

    xdg = (os.environ.get("XDG_DATA_HOME") or "").strip()
    if xdg:
        return Path(xdg) / app_name
    return Path.home() / ".local" / "share" / app_name

#<editor-fold desc="Constants, Factory Settings">
DEFAULT_TIMEZONE: pytz.BaseTzInfo = pytz.UTC

# Paths
DATA_DIR = f"{user_data_root()}/data"
LOG_DIR = f"{user_data_root()}/logs"
#</editor-fold>

class Settings(StrEnum):
    """
    Enumeration for library settings.

    Each setting has an associated default value, stored the same way it is persisted: a dictionary holding
    the actual setting under the "value" key.

    :ivar default: The default value associated with the setting.
    :type default: Any
    """
    UNITS = "units", {"value": UnitSystem.METRIC}
    EQUALITY_TOLERANCE = "equality_tolerance", {"value": 1e-9}
    FORMAT_DECIMAL_DIGITS = "format_decimal_digits", {"value": 2}
    LOG_LEVEL = "log_level", {"value": "INFO"}
    LOCAL_TIMEZONE = "local_timezone", {"value": DEFAULT_TIMEZONE.zone}

    def __new__(cls, value: str, default: dict = None):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.default = default
        return obj

# Defaults
DEFAULT_SETTINGS: dict[str, Any] = {item.name: item.default for item in Settings}

#<editor-fold desc="JSON Serialization">
def _json_default(o) -> dict[str, Any]:
    """
    Encodes a setting value to a JSON-compatible format, wrapped under the "value" key.

    :param o: An object to serialize. Enum instances contribute their values, other objects their
              string representations.
    :type o: Any
    :return: A JSON-compatible representation of the object.
    :rtype: dict[str, Any]
    """
    if isinstance(o, Enum):
        return {"value": o.value}

    if isinstance(o, dict):
        return o

    if isinstance(o, (int, float, str, bool)) or o is None:
        return {"value": o}

    # Fallback to string representation
    return {"value": str(o)}

#</editor-fold>

class AppConfig:
    """
    Handles configuration settings, providing access to settings and persisting them to a JSON file.

    When no settings file exists, or it cannot be parsed, the factory defaults are used and written back as
    the starting point.

    :ivar settings: A dictionary holding the configuration values, keyed by setting name.
    :type settings: dict[str, Any]
    :ivar settings_file: Path of the backing JSON file.
    :type settings_file: str
    """
    def __init__(self, settings_file: str = None):
        self._lock = threading.RLock()
        self.settings: dict[str, Any] = {k: dict(v) for k, v in DEFAULT_SETTINGS.items()}
        self.settings_file = settings_file or f"{DATA_DIR}/settings.json"

    def __getitem__(self, arg: Settings) -> Any:
        if arg.name not in self.settings:
            self.settings[arg.name] = dict(arg.default)
        return AppConfig.__unmarshal__(arg, self.settings.get(arg.name))

    def __setitem__(self, arg: Settings, value: Any):
        with self._lock:
            self.settings[arg.name] = AppConfig.__marshal__(arg, value)

    def reset(self) -> None:
        """
        Restores all settings to their factory defaults, in memory only.
        """
        with self._lock:
            self.settings = {k: dict(v) for k, v in DEFAULT_SETTINGS.items()}

    def save_to_file(self):
        os.makedirs(os.path.dirname(self.settings_file), exist_ok=True)
        self._write_to_file()

    def read_from_file(self):
        os.makedirs(os.path.dirname(self.settings_file), exist_ok=True)
        if not self._read_from_file():
            self._write_to_file()   # when read from the backing file fails, write the defaults as starting point

    @staticmethod
    def __unmarshal__(arg: Settings, value: dict[str, Any]) -> Any:
        match arg:
            case Settings.LOCAL_TIMEZONE:
                return pytz.timezone(value["value"])
            case Settings.UNITS:
                return UnitSystem(value["value"])
            case _:
                return value["value"] if "value" in value else value

    @staticmethod
    def __marshal__(arg: Settings, value: Any) -> dict[str, Any]:
        match arg:
            case Settings.LOCAL_TIMEZONE:
                if isinstance(value, pytz.BaseTzInfo):
                    return {"value": value.zone}
                elif isinstance(value, dict):
                    return value
                else:
                    return {"value": pytz.timezone(value).zone}
            case Settings.UNITS:
                return {"value": UnitSystem(value).value}
            case _:
                if isinstance(value, dict) and "value" in value and len(value) == 1:
                    return value
                else:
                    return _json_default(value)

    def _read_from_file(self) -> bool:
        logger = logging.getLogger(__name__)
        with self._lock:
            if not os.path.exists(self.settings_file):
                return False
            try:
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("Cannot read settings from %s, using defaults: %s", self.settings_file, e)
                return False
            if not isinstance(loaded, dict):
                logger.warning("Settings file %s does not hold a JSON object, using defaults", self.settings_file)
                return False
            self.settings = {k: dict(v) for k, v in DEFAULT_SETTINGS.items()}
            self.settings.update(loaded)
            logger.debug("Loaded %d settings from %s", len(loaded), self.settings_file)
            return True

    def _write_to_file(self) -> None:
        with self._lock:
            tmp_path = self.settings_file + ".tmp"
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2, default=_json_default)
            os.replace(tmp_path, self.settings_file)


def preferred_units(family: type[UnitEnum]) -> tuple:
    """
    Returns the units of a family that belong to the configured unit system (``Settings.UNITS``).

    :param family: A unit family, e.g. SpeedUnit.
    :type family: type[UnitEnum]
    :return: The metric or imperial units of the family, in declaration order.
    :rtype: tuple
    """
    return family.get_units(CONFIG[Settings.UNITS])


CONFIG = AppConfig()
