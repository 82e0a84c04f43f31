"""Unit conversion - pure functions, canonical wind speed is km/h."""
from enum import Enum
from typing import Optional


class WindUnit(str, Enum):
    """Wind speed units. Values match the persisted setting strings."""
    KMH = "kmh"
    MPH = "mph"
    MS = "ms"
    KNOTS = "knots"

    @property
    def display_name(self) -> str:
        return _WIND_DISPLAY[self]

    @property
    def abbreviation(self) -> str:
        """Single-letter form used by the compact menu-bar style."""
        return _WIND_ABBREVIATION[self]


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.CELSIUS else "°F"


class PressureUnit(str, Enum):
    HPA = "hPa"
    MBAR = "mbar"

    @property
    def display_name(self) -> str:
        return self.value


_WIND_DISPLAY = {
    WindUnit.KMH: "km/h",
    WindUnit.MPH: "mph",
    WindUnit.MS: "m/s",
    WindUnit.KNOTS: "knots",
}

_WIND_ABBREVIATION = {
    WindUnit.KMH: "k",
    WindUnit.MPH: "M",
    WindUnit.MS: "m",
    WindUnit.KNOTS: "K",
}

# Multiplier from km/h to each unit
KMH_FACTORS = {
    WindUnit.KMH: 1.0,
    WindUnit.MPH: 0.621371,
    WindUnit.MS: 1 / 3.6,
    WindUnit.KNOTS: 0.539957,
}


def convert_speed(speed_kmh: float, unit: WindUnit) -> float:
    """
    Convert a wind speed from km/h to the target unit.

    Args:
        speed_kmh: Speed in km/h
        unit: Target unit

    Returns:
        Speed expressed in ``unit``
    """
    if unit is WindUnit.KMH:
        return speed_kmh
    if unit is WindUnit.MS:
        return speed_kmh / 3.6
    return speed_kmh * KMH_FACTORS[unit]


def convert_speed_between(value: float, from_unit: WindUnit, to_unit: WindUnit) -> float:
    """Convert a speed between any two units, going through km/h."""
    if from_unit is to_unit:
        return value
    if from_unit is WindUnit.MS:
        kmh = value * 3.6
    else:
        kmh = value / KMH_FACTORS[from_unit]
    return convert_speed(kmh, to_unit)


def convert_optional_speed(speed_kmh: Optional[float], unit: WindUnit) -> Optional[float]:
    if speed_kmh is None:
        return None
    return convert_speed(speed_kmh, unit)


def convert_temperature(celsius: Optional[float], unit: TemperatureUnit) -> Optional[float]:
    """Celsius to the target unit; None passes through."""
    if celsius is None:
        return None
    if unit is TemperatureUnit.FAHRENHEIT:
        return celsius * 9 / 5 + 32
    return celsius


def convert_pressure(hpa: Optional[float], unit: PressureUnit) -> Optional[float]:
    # hPa and mbar are numerically identical
    return hpa


def parse_wind_unit(value: Optional[str], default: WindUnit = WindUnit.KMH) -> WindUnit:
    """Parse a stored unit string, falling back to ``default`` for unknown values."""
    try:
        return WindUnit(value)
    except ValueError:
        return default
