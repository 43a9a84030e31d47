#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#
from enum import StrEnum

from ..errors import InvalidArgumentError


class UnitSystem(StrEnum):
    """
    Represents a unit system for measurement.

    This class is an enumeration of the two used unit systems: Metric and Imperial. Every unit of every
    unit family belongs to exactly one of them.

    :cvar METRIC: The metric measurement system, commonly used worldwide.
    :cvar IMPERIAL: The imperial measurement system, primarily used in the United States.
    """
    METRIC = "metric"
    IMPERIAL = "imperial"


class UnitEnum(StrEnum):
    """
    Base class of all unit families.

    Members are declared as ``NAME = "value", "symbol"``; the value is the stable identifier used for
    serialization, while the symbol is the human-readable abbreviation used when formatting. Members of
    the same family are ordered by declaration, not by their string value.

    Subclasses must implement ``_classify`` as an exhaustive ``match`` over their members; it is the single
    source of truth for the metric and imperial partitions.

    :ivar symbol: Display symbol of the unit (e.g., "m/s", "°C").
    :type symbol: str
    """

    def __new__(cls, value: str, symbol: str = None):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.symbol = symbol if symbol else value
        return obj

    @property
    def ordinal(self) -> int:
        """
        Position of this unit within its family, in declaration order.

        :return: Zero-based declaration index.
        :rtype: int
        """
        return type(self)._member_names_.index(self.name)

    @property
    def unit_system(self) -> UnitSystem:
        return type(self).get_unit_system(self)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.ordinal >= other.ordinal

    @staticmethod
    def _classify(unit) -> UnitSystem:
        raise NotImplementedError

    @classmethod
    def get_unit_system(cls, unit) -> UnitSystem:
        """
        Returns the unit system (metric or imperial) of the provided unit.

        :param unit: A unit of this family.
        :return: The unit system the unit belongs to.
        :rtype: UnitSystem
        :raises InvalidArgumentError: If unit is None or not a member of this family.
        """
        if unit is None:
            raise InvalidArgumentError(f"{cls.__name__} is required")
        if not isinstance(unit, cls):
            raise InvalidArgumentError(f"{unit!r} is not a {cls.__name__}")
        return cls._classify(unit)

    @classmethod
    def get_metric_units(cls) -> tuple:
        """
        Returns all units of this family that belong to the metric system, in declaration order.
        """
        return tuple(u for u in cls if cls.get_unit_system(u) == UnitSystem.METRIC)

    @classmethod
    def get_imperial_units(cls) -> tuple:
        """
        Returns all units of this family that belong to the imperial system, in declaration order.
        """
        return tuple(u for u in cls if cls.get_unit_system(u) == UnitSystem.IMPERIAL)

    @classmethod
    def get_units(cls, system: UnitSystem) -> tuple:
        match system:
            case UnitSystem.METRIC:
                return cls.get_metric_units()
            case UnitSystem.IMPERIAL:
                return cls.get_imperial_units()
        raise InvalidArgumentError(f"Unknown unit system {system!r}")

    @classmethod
    def is_metric(cls, unit) -> bool:
        return cls.get_unit_system(unit) == UnitSystem.METRIC

    @classmethod
    def is_imperial(cls, unit) -> bool:
        return cls.get_unit_system(unit) == UnitSystem.IMPERIAL

    @classmethod
    def from_symbol(cls, symbol: str):
        """
        Finds the unit of this family whose display symbol matches the one provided.

        When several units share a symbol, the first one declared wins.

        :param symbol: Display symbol, e.g. "mph".
        :type symbol: str
        :return: The matching unit.
        :raises InvalidArgumentError: If no unit of this family uses that symbol.
        """
        if symbol is None:
            raise InvalidArgumentError("symbol is required")
        for unit in cls:
            if unit.symbol == symbol:
                return unit
        raise InvalidArgumentError(f"Unknown {cls.__name__} symbol '{symbol}'")


class AccelerationUnit(UnitEnum):
    """
    Units of acceleration.

    :cvar METERS_PER_SQUARED_SECOND: Meters per squared second (m/s²), the SI unit.
    :cvar G: Standard gravity (g₀), approximately 9.80665 m/s².
    :cvar FEET_PER_SQUARED_SECOND: Feet per squared second (ft/s²).
    """
    METERS_PER_SQUARED_SECOND = "meters_per_squared_second", "m/s²"
    G = "g", "g₀"
    FEET_PER_SQUARED_SECOND = "feet_per_squared_second", "ft/s²"

    @staticmethod
    def _classify(unit) -> UnitSystem:
        match unit:
            case AccelerationUnit.FEET_PER_SQUARED_SECOND:
                return UnitSystem.IMPERIAL
            case AccelerationUnit.METERS_PER_SQUARED_SECOND | AccelerationUnit.G:
                return UnitSystem.METRIC
        raise InvalidArgumentError(f"Unclassified acceleration unit {unit.name}")


class SpeedUnit(UnitEnum):
    """
    Units of speed.
    """
    METERS_PER_SECOND = "meters_per_second", "m/s"
    KILOMETERS_PER_HOUR = "kilometers_per_hour", "Km/h"
    KILOMETERS_PER_SECOND = "kilometers_per_second", "Km/s"
    FEET_PER_SECOND = "feet_per_second", "ft/s"
    MILES_PER_HOUR = "miles_per_hour", "mph"

    @staticmethod
    def _classify(unit) -> UnitSystem:
        match unit:
            case SpeedUnit.FEET_PER_SECOND | SpeedUnit.MILES_PER_HOUR:
                return UnitSystem.IMPERIAL
            case SpeedUnit.METERS_PER_SECOND | SpeedUnit.KILOMETERS_PER_HOUR | SpeedUnit.KILOMETERS_PER_SECOND:
                return UnitSystem.METRIC
        raise InvalidArgumentError(f"Unclassified speed unit {unit.name}")


class TemperatureUnit(UnitEnum):
    """
    Units of temperature.

    Kelvin is an absolute scale; Celsius and Fahrenheit are relative scales.
    """
    CELSIUS = "celsius", "°C"
    FAHRENHEIT = "fahrenheit", "°F"
    KELVIN = "kelvin", "K"

    @staticmethod
    def _classify(unit) -> UnitSystem:
        match unit:
            case TemperatureUnit.FAHRENHEIT:
                return UnitSystem.IMPERIAL
            case TemperatureUnit.CELSIUS | TemperatureUnit.KELVIN:
                return UnitSystem.METRIC
        raise InvalidArgumentError(f"Unclassified temperature unit {unit.name}")


class VolumeUnit(UnitEnum):
    """
    Units of volume.

    Imperial units follow the US customary definitions (US liquid pint and gallon, oil barrel).
    """
    CUBIC_CENTIMETER = "cubic_centimeter", "cm³"
    MILLILITER = "milliliter", "mL"
    CUBIC_DECIMETER = "cubic_decimeter", "dm³"
    LITER = "liter", "L"
    HECTOLITER = "hectoliter", "hL"
    CUBIC_METER = "cubic_meter", "m³"
    CUBIC_INCH = "cubic_inch", "in³"
    PINT = "pint", "pt"
    GALLON = "gallon", "gal"
    CUBIC_FOOT = "cubic_foot", "ft³"
    BARREL = "barrel", "bbl"

    @staticmethod
    def _classify(unit) -> UnitSystem:
        match unit:
            case (VolumeUnit.CUBIC_INCH | VolumeUnit.PINT | VolumeUnit.GALLON | VolumeUnit.CUBIC_FOOT
                  | VolumeUnit.BARREL):
                return UnitSystem.IMPERIAL
            case (VolumeUnit.CUBIC_CENTIMETER | VolumeUnit.MILLILITER | VolumeUnit.CUBIC_DECIMETER
                  | VolumeUnit.LITER | VolumeUnit.HECTOLITER | VolumeUnit.CUBIC_METER):
                return UnitSystem.METRIC
        raise InvalidArgumentError(f"Unclassified volume unit {unit.name}")


class WeightUnit(UnitEnum):
    """
    Units of weight (mass).

    US_TON (short ton) and UK_TON (long ton) share the "ton" display symbol.
    """
    PICOGRAM = "picogram", "pg"
    NANOGRAM = "nanogram", "ng"
    MICROGRAM = "microgram", "µg"
    MILLIGRAM = "milligram", "mg"
    GRAM = "gram", "g"
    KILOGRAM = "kilogram", "Kg"
    TONNE = "tonne", "t"
    MEGATONNE = "megatonne", "Mt"
    US_TON = "us_ton", "ton"
    UK_TON = "uk_ton", "ton"
    POUND = "pound", "lb"
    OUNCE = "ounce", "oz"

    @staticmethod
    def _classify(unit) -> UnitSystem:
        match unit:
            case WeightUnit.US_TON | WeightUnit.UK_TON | WeightUnit.POUND | WeightUnit.OUNCE:
                return UnitSystem.IMPERIAL
            case (WeightUnit.PICOGRAM | WeightUnit.NANOGRAM | WeightUnit.MICROGRAM | WeightUnit.MILLIGRAM
                  | WeightUnit.GRAM | WeightUnit.KILOGRAM | WeightUnit.TONNE | WeightUnit.MEGATONNE):
                return UnitSystem.METRIC
        raise InvalidArgumentError(f"Unclassified weight unit {unit.name}")


UNIT_FAMILIES: tuple[type[UnitEnum], ...] = (AccelerationUnit, SpeedUnit, TemperatureUnit, VolumeUnit, WeightUnit)


def get_unit_family(name: str) -> type[UnitEnum]:
    """
    Looks up a unit family by its class name (e.g., "SpeedUnit").

    :raises InvalidArgumentError: If no unit family has that name.
    """
    for family in UNIT_FAMILIES:
        if family.__name__ == name:
            return family
    raise InvalidArgumentError(f"Unknown unit family '{name}'")
