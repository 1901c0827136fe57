"""Unit categories, conversion factors and conversion between units."""

from __future__ import annotations

import math
from enum import Enum
from typing import Union


class UnitError(ValueError):
    """Raised when a unit name is unknown or a unit has no fixed factor."""


class Temperature(Enum):
    KELVIN = "TEMPERATURE::KELVIN"
    CELSIUS = "TEMPERATURE::CELSIUS"
    FAHRENHEIT = "TEMPERATURE::FAHRENHEIT"


class Acceleration(Enum):
    METRE_PER_SECOND_SQUARED = "ACCELERATION::MetrePerSecondSquared"


class Angle(Enum):
    TURN = "ANGLE::TURN"
    RADIAN = "ANGLE::RADIAN"
    DEGREE = "ANGLE::DEGREE"
    GRADIAN = "ANGLE::GRADIAN"


class Length(Enum):
    MILLIMETRE = "LENGTH::MILLIMETRE"
    CENTIMETRE = "LENGTH::CENTIMETRE"
    METRE = "LENGTH::METRE"
    KILOMETRE = "LENGTH::KILOMETRE"
    INCH = "LENGTH::INCH"
    FOOT = "LENGTH::FOOT"
    YARD = "LENGTH::YARD"
    MILE = "LENGTH::MILE"
    NAUTICAL_MILE = "LENGTH::NAUTICAL_MILE"


class Mass(Enum):
    MICROGRAM = "MASS::MICROGRAM"
    MILLIGRAM = "MASS::MILLIGRAM"
    GRAM = "MASS::GRAM"
    KILOGRAM = "MASS::KILOGRAM"
    METRIC_TON = "MASS::METRIC_TON"
    OUNCE = "MASS::OUNCE"
    POUND = "MASS::POUND"
    STONE = "MASS::STONE"
    SHORT_TON = "MASS::SHORT_TON"
    LONG_TON = "MASS::LONG_TON"


class Time(Enum):
    NANOSECOND = "TIME::NANOSECOND"
    MICROSECOND = "TIME::MICROSECOND"
    MILLISECOND = "TIME::MILLISECOND"
    SECOND = "TIME::SECOND"
    MINUTE = "TIME::MINUTE"
    HOUR = "TIME::HOUR"
    DAY = "TIME::DAY"
    WEEK = "TIME::WEEK"
    MONTH = "TIME::MONTH"
    YEAR = "TIME::YEAR"
    DECADE = "TIME::DECADE"
    CENTURY = "TIME::CENTURY"
    MILLENIUM = "TIME::MILLENIUM"


class Area(Enum):
    SQUARE_METRE = "AREA::SQUARE_METRE"
    HECTARE = "AREA::HECTARE"
    SQUARE_KILOMETRE = "AREA::SQUARE_KILOMETRE"
    SQUARE_INCH = "AREA::SQUARE_INCH"
    SQUARE_FEET = "AREA::SQUARE_FEET"
    SQUARE_YARD = "AREA::SQUARE_YARD"
    ACRE = "AREA::ACRE"
    SQUARE_MILE = "AREA::SQUARE_MILE"


class Speed(Enum):
    METRE_PER_SECOND = "SPEED::METRE_PER_SECOND"
    KILOMETRES_PER_HOUR = "SPEED::KILOMETRES_PER_HOUR"
    FEET_PER_SECOND = "SPEED::FEET_PER_SECOND"
    MILES_PER_HOUR = "SPEED::MILES_PER_HOUR"
    KNOT = "SPEED::KNOT"


class DigitalInformation(Enum):
    BIT = "DIGITALINFORMATION::BIT"
    BYTE = "DIGITALINFORMATION::BYTE"
    KILOBIT = "DIGITALINFORMATION::KILOBIT"
    KILOBYTE = "DIGITALINFORMATION::KILOBYTE"
    MEGABIT = "DIGITALINFORMATION::MEGABIT"
    MEGABYTE = "DIGITALINFORMATION::MEGABYTE"
    GIGABIT = "DIGITALINFORMATION::GIGABIT"
    GIGABYTE = "DIGITALINFORMATION::GIGABYTE"
    TERABIT = "DIGITALINFORMATION::TERABIT"
    TERABYTE = "DIGITALINFORMATION::TERABYTE"
    PETABIT = "DIGITALINFORMATION::PETABIT"
    PETABYTE = "DIGITALINFORMATION::PETABYTE"


Unit = Union[
    Temperature,
    Acceleration,
    Angle,
    Length,
    Mass,
    Time,
    Area,
    Speed,
    DigitalInformation,
]

_CATEGORIES = (
    Temperature,
    Acceleration,
    Angle,
    Length,
    Mass,
    Time,
    Area,
    Speed,
    DigitalInformation,
)

_FACTORS: dict[Enum, float] = {
    Acceleration.METRE_PER_SECOND_SQUARED: 1.0,
    Angle.TURN: math.tau,
    Angle.RADIAN: 1.0,
    Angle.DEGREE: 0.0174532925,
    Angle.GRADIAN: 0.015707963267949,
    Length.MILLIMETRE: 0.001,
    Length.CENTIMETRE: 0.01,
    Length.METRE: 1.0,
    Length.KILOMETRE: 1000.0,
    Length.INCH: 0.0254,
    Length.FOOT: 0.3048,
    Length.YARD: 0.9144,
    Length.MILE: 1609.34,
    Length.NAUTICAL_MILE: 1852.0,
    Mass.MICROGRAM: 1e-7,
    Mass.MILLIGRAM: 1e-6,
    Mass.GRAM: 0.001,
    Mass.KILOGRAM: 1.0,
    Mass.METRIC_TON: 1000.0,
    Mass.OUNCE: 0.0283495,
    Mass.POUND: 0.453592,
    Mass.STONE: 6.35029,
    Mass.SHORT_TON: 907.185,
    Mass.LONG_TON: 1016.0469088,
    Time.NANOSECOND: 1e-9,
    Time.MICROSECOND: 1e-6,
    Time.MILLISECOND: 0.001,
    Time.SECOND: 1.0,
    Time.MINUTE: 60.0,
    Time.HOUR: 3600.0,
    Time.DAY: 86400.0,
    Time.WEEK: 604800.0,
    Time.MONTH: 2.62974e6,
    Time.YEAR: 3.15569e7,
    Time.DECADE: 3.15569e8,
    Time.CENTURY: 3.15569e9,
    Time.MILLENIUM: 3.1556926e10,
    Area.SQUARE_METRE: 1.0,
    Area.HECTARE: 10000.0,
    Area.SQUARE_KILOMETRE: 1000000.0,
    Area.SQUARE_INCH: 0.00064516,
    Area.SQUARE_FEET: 0.09290304,
    Area.SQUARE_YARD: 0.83612736,
    Area.ACRE: 4046.8564224,
    Area.SQUARE_MILE: 2589988.110336,
    Speed.METRE_PER_SECOND: 1.0,
    Speed.KILOMETRES_PER_HOUR: 0.277778,
    Speed.FEET_PER_SECOND: 0.3048,
    Speed.MILES_PER_HOUR: 0.44704,
    Speed.KNOT: 0.514444,
    DigitalInformation.BIT: 0.00012207,
    DigitalInformation.BYTE: 0.000976563,
    DigitalInformation.KILOBIT: 0.125,
    DigitalInformation.KILOBYTE: 1.0,
    DigitalInformation.MEGABIT: 128.0,
    DigitalInformation.MEGABYTE: 1024.0,
    DigitalInformation.GIGABIT: 131072.0,
    DigitalInformation.GIGABYTE: 1.049e6,
    DigitalInformation.TERABIT: 1.342e8,
    DigitalInformation.TERABYTE: 1.074e9,
    DigitalInformation.PETABIT: 1.374e11,
    DigitalInformation.PETABYTE: 1.1e12,
}

_BY_NAME: dict[str, Enum] = {
    member.value: member for category in _CATEGORIES for member in category
}


def conversion_factor(unit: Unit) -> float:
    """Return the factor that takes one ``unit`` to the category's base unit.

    Temperatures have no fixed factor and raise :class:`UnitError`.
    """
    try:
        return _FACTORS[unit]
    except KeyError:
        raise UnitError(f"{unit!r} has no fixed conversion factor") from None


def _convert_temperature(value: float, source: Temperature, target: Temperature) -> float:
    if source is target:
        return value
    if source is Temperature.KELVIN:
        if target is Temperature.CELSIUS:
            return value - 273.15
        return value * 1.8 - 459.67
    if source is Temperature.CELSIUS:
        if target is Temperature.FAHRENHEIT:
            return value * 1.8 + 32.0
        return value + 273.15
    if target is Temperature.CELSIUS:
        return (value - 32.0) / 1.8
    return (value + 459.67) * 5.0 / 9.0


def convert(value: float, source: Unit, target: Unit) -> float:
    """Convert ``value`` from ``source`` to ``target``.

    Units of different categories give NaN.
    """
    if source == target:
        return value
    if type(source) is not type(target):
        return math.nan
    if isinstance(source, Temperature):
        return _convert_temperature(value, source, target)
    return value * conversion_factor(source) / conversion_factor(target)


def parse_unit(text: str) -> Unit:
    """Look up a unit by its qualified name, such as ``LENGTH::METRE``."""
    try:
        return _BY_NAME[text]
    except KeyError:
        raise UnitError(f"'{text}' is not a valid value for UnitType") from None