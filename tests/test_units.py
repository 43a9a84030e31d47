#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#
"""Tests for unit families and their metric/imperial classification."""

import pytest

from physunits import InvalidArgumentError
from physunits.model.units import (UnitSystem, AccelerationUnit, SpeedUnit, TemperatureUnit, VolumeUnit, WeightUnit,
                                   UNIT_FAMILIES, get_unit_family)


@pytest.mark.parametrize("family", UNIT_FAMILIES, ids=lambda f: f.__name__)
def test_partition_is_complete_and_disjoint(family):
    metric = set(family.get_metric_units())
    imperial = set(family.get_imperial_units())
    assert metric | imperial == set(family)
    assert metric & imperial == set()
    for unit in family:
        assert (unit in metric) != (unit in imperial)


@pytest.mark.parametrize("family", UNIT_FAMILIES, ids=lambda f: f.__name__)
def test_predicates_agree_with_unit_system(family):
    for unit in family:
        system = family.get_unit_system(unit)
        assert family.is_metric(unit) == (system == UnitSystem.METRIC)
        assert family.is_imperial(unit) == (system == UnitSystem.IMPERIAL)
        assert unit.unit_system == system


@pytest.mark.parametrize("family", UNIT_FAMILIES, ids=lambda f: f.__name__)
def test_unit_lists_follow_declaration_order(family):
    declared = list(family)
    metric = list(family.get_metric_units())
    imperial = list(family.get_imperial_units())
    assert metric == sorted(metric, key=declared.index)
    assert imperial == sorted(imperial, key=declared.index)


@pytest.mark.parametrize("family", UNIT_FAMILIES, ids=lambda f: f.__name__)
def test_missing_unit_is_rejected(family):
    with pytest.raises(InvalidArgumentError):
        family.get_unit_system(None)
    with pytest.raises(InvalidArgumentError):
        family.is_metric(None)
    with pytest.raises(InvalidArgumentError):
        family.is_imperial(None)


def test_unit_from_another_family_is_rejected():
    with pytest.raises(InvalidArgumentError):
        SpeedUnit.get_unit_system(TemperatureUnit.CELSIUS)
    with pytest.raises(InvalidArgumentError):
        WeightUnit.is_metric("kilogram")


@pytest.mark.parametrize("unit, system", [
    (AccelerationUnit.FEET_PER_SQUARED_SECOND, UnitSystem.IMPERIAL),
    (AccelerationUnit.METERS_PER_SQUARED_SECOND, UnitSystem.METRIC),
    (AccelerationUnit.G, UnitSystem.METRIC),
    (SpeedUnit.MILES_PER_HOUR, UnitSystem.IMPERIAL),
    (SpeedUnit.FEET_PER_SECOND, UnitSystem.IMPERIAL),
    (SpeedUnit.KILOMETERS_PER_HOUR, UnitSystem.METRIC),
    (SpeedUnit.KILOMETERS_PER_SECOND, UnitSystem.METRIC),
    (TemperatureUnit.FAHRENHEIT, UnitSystem.IMPERIAL),
    (TemperatureUnit.CELSIUS, UnitSystem.METRIC),
    (TemperatureUnit.KELVIN, UnitSystem.METRIC),
    (VolumeUnit.BARREL, UnitSystem.IMPERIAL),
    (VolumeUnit.PINT, UnitSystem.IMPERIAL),
    (VolumeUnit.LITER, UnitSystem.METRIC),
    (VolumeUnit.CUBIC_METER, UnitSystem.METRIC),
    (WeightUnit.OUNCE, UnitSystem.IMPERIAL),
    (WeightUnit.UK_TON, UnitSystem.IMPERIAL),
    (WeightUnit.KILOGRAM, UnitSystem.METRIC),
    (WeightUnit.MEGATONNE, UnitSystem.METRIC),
])
def test_known_classifications(unit, system):
    assert type(unit).get_unit_system(unit) == system


def test_metric_and_imperial_units():
    assert AccelerationUnit.get_metric_units() == (AccelerationUnit.METERS_PER_SQUARED_SECOND, AccelerationUnit.G)
    assert AccelerationUnit.get_imperial_units() == (AccelerationUnit.FEET_PER_SQUARED_SECOND,)
    assert SpeedUnit.get_imperial_units() == (SpeedUnit.FEET_PER_SECOND, SpeedUnit.MILES_PER_HOUR)
    assert TemperatureUnit.get_metric_units() == (TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN)
    assert TemperatureUnit.get_imperial_units() == (TemperatureUnit.FAHRENHEIT,)
    assert len(VolumeUnit.get_metric_units()) == 6
    assert VolumeUnit.get_imperial_units()[-1] == VolumeUnit.BARREL
    assert WeightUnit.get_metric_units()[0] == WeightUnit.PICOGRAM
    assert WeightUnit.get_imperial_units() == (WeightUnit.US_TON, WeightUnit.UK_TON, WeightUnit.POUND,
                                               WeightUnit.OUNCE)


def test_get_units_by_system():
    assert SpeedUnit.get_units(UnitSystem.METRIC) == SpeedUnit.get_metric_units()
    assert SpeedUnit.get_units(UnitSystem.IMPERIAL) == SpeedUnit.get_imperial_units()
    with pytest.raises(InvalidArgumentError):
        SpeedUnit.get_units("nautical")


def test_units_are_ordered_by_declaration():
    assert SpeedUnit.METERS_PER_SECOND < SpeedUnit.MILES_PER_HOUR
    assert SpeedUnit.MILES_PER_HOUR >= SpeedUnit.FEET_PER_SECOND
    # lexicographic order of the values would say otherwise
    assert WeightUnit.PICOGRAM < WeightUnit.GRAM
    assert sorted(reversed(list(VolumeUnit))) == list(VolumeUnit)
    assert [u.ordinal for u in TemperatureUnit] == [0, 1, 2]


def test_units_of_different_families_are_not_comparable():
    with pytest.raises(TypeError):
        _ = SpeedUnit.METERS_PER_SECOND < WeightUnit.GRAM


def test_symbols():
    assert SpeedUnit.MILES_PER_HOUR.symbol == "mph"
    assert TemperatureUnit.CELSIUS.symbol == "°C"
    assert AccelerationUnit.G.symbol == "g₀"
    assert str(VolumeUnit.LITER) == "liter"


def test_from_symbol():
    assert SpeedUnit.from_symbol("Km/h") is SpeedUnit.KILOMETERS_PER_HOUR
    assert VolumeUnit.from_symbol("bbl") is VolumeUnit.BARREL
    # US and UK tons share the symbol, first declared wins
    assert WeightUnit.from_symbol("ton") is WeightUnit.US_TON
    with pytest.raises(InvalidArgumentError):
        SpeedUnit.from_symbol("kn")
    with pytest.raises(InvalidArgumentError):
        SpeedUnit.from_symbol(None)


@pytest.mark.parametrize("family", UNIT_FAMILIES, ids=lambda f: f.__name__)
def test_values_and_symbols_identify_units(family):
    assert len({u.value for u in family}) == len(family)
    for unit in family:
        assert family(unit.value) is unit
        assert unit.symbol


def test_unit_family_lookup():
    assert get_unit_family("TemperatureUnit") is TemperatureUnit
    with pytest.raises(InvalidArgumentError):
        get_unit_family("PressureUnit")
