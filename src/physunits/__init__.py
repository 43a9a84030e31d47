#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

from importlib.metadata import version, PackageNotFoundError

from .errors import InvalidArgumentError
from .model.units import (UnitSystem, UnitEnum, AccelerationUnit, SpeedUnit, TemperatureUnit, VolumeUnit, WeightUnit,
                          UNIT_FAMILIES, get_unit_family)
from .config import CONFIG, Settings, AppConfig, preferred_units
from .model.measurement import (Measurement, Acceleration, Speed, Temperature, Volume, Weight, MEASUREMENT_TYPES,
                                measurement_type)
from .log import init_logging, shutdown_logging


def get_version() -> str:
    try:
        return version("physunits")
    except PackageNotFoundError:
        return "unknown"


__version__ = get_version()
