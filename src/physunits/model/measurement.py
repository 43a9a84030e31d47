#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import math
import re

from decimal import Decimal
from numbers import Real
from typing import Generic, TypeVar, Optional

from ..config import CONFIG, Settings
from ..errors import InvalidArgumentError
from .units import (UnitEnum, UnitSystem, AccelerationUnit, SpeedUnit, TemperatureUnit, VolumeUnit, WeightUnit,
                    UNIT_FAMILIES, get_unit_family)

U = TypeVar("U", bound=UnitEnum)

# number, optional whitespace, unit symbol
_MEASUREMENT_PATTERN = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(\S.*?)\s*$")


def _parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def _as_float(value: Real) -> float:
    """
    Double precision view of a value; magnitudes beyond the float range become signed infinity.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _check_value(value) -> None:
    if value is None:
        raise InvalidArgumentError("Measurement value is required")
    # bool is an int subclass, but never a magnitude
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidArgumentError(f"Measurement value must be a real number, got {value!r}")


class Measurement(Generic[U]):
    """
    Represents a measurement: a numeric value paired with a unit.

    Exact equality (``==``) requires numerically equal values and the very same unit; ``equals`` with a tolerance
    compares the values as floats within an absolute bound and still requires the very same unit. Hashing is
    consistent with exact equality only.

    Instances are mutable through the ``value`` and ``unit`` setters and are not synchronized; callers sharing an
    instance across threads must serialize the mutations themselves.

    :ivar _value: The numerical value of the measurement (int, float, Decimal or Fraction).
    :type _value: Real
    :ivar _unit: The unit of the value.
    :type _unit: UnitEnum
    :cvar unit_family: The unit enumeration accepted by this measurement type; any unit family when None.
    :type unit_family: type[UnitEnum] | None
    """
    unit_family: Optional[type[UnitEnum]] = None
    # unset until __init__ runs
    _value: Optional[Real] = None
    _unit: Optional[UnitEnum] = None

    def __init__(self, value: Real, unit: U):
        _check_value(value)
        self._check_unit(unit)
        self._value: Real = value
        self._unit: U = unit

    def _check_unit(self, unit) -> None:
        if unit is None:
            raise InvalidArgumentError("Measurement unit is required")
        family = self.unit_family or UnitEnum
        if not isinstance(unit, family):
            raise InvalidArgumentError(f"{type(self).__name__} requires a {family.__name__}, got {unit!r}")

    @property
    def value(self) -> Real:
        """
        Retrieves the numeric value of the measurement.

        :return: The current value of the measurement.
        :rtype: Real
        """
        return self._value

    @value.setter
    def value(self, value: Real) -> None:
        _check_value(value)
        self._value = value

    @property
    def unit(self) -> U:
        """
        Returns the unit of the measurement.

        :return: The unit of the measurement.
        :rtype: UnitEnum
        """
        return self._unit

    @unit.setter
    def unit(self, unit: U) -> None:
        self._check_unit(unit)
        self._unit = unit

    @property
    def unit_system(self) -> UnitSystem:
        return self._unit.unit_system

    def __eq__(self, other) -> bool:
        if other is None or not isinstance(other, Measurement):
            return False
        if self is other:
            return True
        return (self._value is not None and self._unit is not None
                and other._value is not None and other._unit is not None
                and self._value == other._value and self._unit is other._unit)

    def __hash__(self) -> int:
        hash_code = 7
        hash_code = 19 * hash_code + (hash(self._value) if self._value is not None else 0)
        hash_code = 19 * hash_code + (hash(self._unit) if self._unit is not None else 0)
        return hash_code

    def equals(self, other: "Measurement[U]", tolerance: float = None) -> bool:
        """
        Determines whether two measurements are equal up to a tolerance.

        Units must be identical, no conversion is attempted. Values are compared as floats, therefore any
        comparison involving NaN yields False. A negative tolerance is accepted and never matches.

        :param other: Measurement to compare with.
        :type other: Measurement
        :param tolerance: Maximum allowed absolute difference between values; when None, the configured
            ``Settings.EQUALITY_TOLERANCE`` is used.
        :type tolerance: float
        :return: True if both measurements share the unit and their values differ by at most the tolerance.
        :rtype: bool
        """
        if tolerance is None:
            tolerance = CONFIG[Settings.EQUALITY_TOLERANCE]
        return (self._value is not None and self._unit is not None
                and isinstance(other, Measurement)
                and other._value is not None and other._unit is not None
                and self._unit is other._unit
                and abs(_as_float(self._value) - _as_float(other._value)) <= tolerance)

    def formatted(self, decimal_digits: int = None) -> str:
        """
        Formats the measurement as value followed by the unit symbol, e.g. "5.00 m/s".

        :param decimal_digits: Number of decimals to render; defaults to ``Settings.FORMAT_DECIMAL_DIGITS``.
        :type decimal_digits: int
        :return: The formatted measurement.
        :rtype: str
        """
        if decimal_digits is None:
            decimal_digits = CONFIG[Settings.FORMAT_DECIMAL_DIGITS]
        value = self._value if isinstance(self._value, Decimal) else _as_float(self._value)
        return f"{value:.{decimal_digits}f} {self._unit.symbol}"

    @classmethod
    def parse(cls, text: str) -> "Measurement":
        """
        Parses text such as "5.5 m/s" or "20°C" into a measurement.

        Integer literals are kept as int, any other number is parsed as float. When called on a typed measurement
        (e.g., ``Speed.parse``) only the symbols of that family are accepted; on ``Measurement`` itself every
        family is searched in turn and the matching typed measurement is returned.

        :param text: Text to parse.
        :type text: str
        :return: The parsed measurement.
        :raises InvalidArgumentError: If the text is missing, malformed, or uses an unknown unit symbol.
        """
        if text is None:
            raise InvalidArgumentError("Text to parse is required")
        parsed = _MEASUREMENT_PATTERN.match(text)
        if not parsed:
            raise InvalidArgumentError(f"Cannot parse measurement from '{text}'")
        value = _parse_number(parsed.group(1))
        symbol = parsed.group(2)
        if cls.unit_family is not None:
            return cls(value, cls.unit_family.from_symbol(symbol))
        for family in UNIT_FAMILIES:
            try:
                unit = family.from_symbol(symbol)
            except InvalidArgumentError:
                continue
            return measurement_type(family)(value, unit)
        raise InvalidArgumentError(f"Unknown unit symbol '{symbol}'")

    def json_encode(self):
        return {
            "__type__": type(self).__name__,
            "value": self._value,
            "unit": type(self._unit).__name__,
            "unit_value": self._unit.value,
        }

    @classmethod
    def json_decode(cls, obj):
        if obj.get("__type__") != cls.__name__:
            return None
        family = get_unit_family(obj.get("unit"))
        try:
            unit = family(obj.get("unit_value"))
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown {family.__name__} '{obj.get('unit_value')}'") from e
        return cls(obj.get("value"), unit)

    def __str__(self) -> str:
        """
        Returns a string representation including value and unit symbol.

        :return: A string containing value and unit symbol.
        :rtype: str
        """
        return f"{self._value} {self._unit.symbol}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: '{self}'>"


class Acceleration(Measurement[AccelerationUnit]):
    """
    Acceleration measurement; accepts only AccelerationUnit units.
    """
    unit_family = AccelerationUnit


class Speed(Measurement[SpeedUnit]):
    """
    Speed measurement; accepts only SpeedUnit units.
    """
    unit_family = SpeedUnit


class Temperature(Measurement[TemperatureUnit]):
    """
    Temperature measurement; accepts only TemperatureUnit units.
    """
    unit_family = TemperatureUnit


class Volume(Measurement[VolumeUnit]):
    unit_family = VolumeUnit


class Weight(Measurement[WeightUnit]):
    unit_family = WeightUnit


MEASUREMENT_TYPES: dict[type[UnitEnum], type[Measurement]] = {
    AccelerationUnit: Acceleration,
    SpeedUnit: Speed,
    TemperatureUnit: Temperature,
    VolumeUnit: Volume,
    WeightUnit: Weight,
}


def measurement_type(family: type[UnitEnum]) -> type[Measurement]:
    """
    Returns the typed measurement class bound to a unit family, e.g. Speed for SpeedUnit.
    """
    if family not in MEASUREMENT_TYPES:
        raise InvalidArgumentError(f"No measurement type for {family!r}")
    return MEASUREMENT_TYPES[family]
