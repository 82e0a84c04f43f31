"""Map raw provider payloads onto the internal snapshot model."""
import re
from datetime import datetime
from typing import List, Optional, Tuple, TypeVar

from compass import compass_direction, wind_arrow
from weather_data import HourlyEntry, WeatherSnapshot
from weather_provider import RawForecast, RawHourly

MAX_HOURLY_ENTRIES = 6

_TIME_SEPARATOR = re.compile(r"[T ]")

T = TypeVar("T")


def hourly_label(raw_time: str) -> str:
    """
    Extract an "HH:MM" label from a provider timestamp.

    "2024-05-01T14:00" -> "14:00". Strings without a date/time separator
    are returned unchanged.
    """
    parts = _TIME_SEPARATOR.split(raw_time)
    if len(parts) < 2:
        return raw_time
    return parts[-1][:5]


def _at(values: Optional[List[T]], index: int) -> Optional[T]:
    if values is None or index >= len(values):
        return None
    return values[index]


def normalize_hourly(hourly: Optional[RawHourly], limit: int = MAX_HOURLY_ENTRIES) -> Tuple[HourlyEntry, ...]:
    """First ``limit`` hourly points in provider order; missing values become None."""
    if hourly is None:
        return ()

    entries = []
    for i, raw_time in enumerate(hourly.time[:limit]):
        direction = _at(hourly.wind_direction_10m, i)
        entries.append(HourlyEntry(
            label=hourly_label(raw_time),
            temperature_c=_at(hourly.temperature_2m, i),
            wind_speed=_at(hourly.wind_speed_10m, i),
            wind_gust=_at(hourly.wind_gusts_10m, i),
            wind_direction_deg=direction,
            wind_direction_compass=compass_direction(direction),
            pressure_hpa=_at(hourly.surface_pressure, i),
        ))
    return tuple(entries)


def normalize(raw: RawForecast, captured_at: datetime) -> Tuple[WeatherSnapshot, Tuple[HourlyEntry, ...]]:
    """
    Build the snapshot and hourly window for one refresh.

    Args:
        raw: Decoded provider payload (speeds in km/h)
        captured_at: Timestamp stamped onto the snapshot

    Returns:
        (snapshot, hourly entries)
    """
    current = raw.current
    snapshot = WeatherSnapshot(
        wind_speed=current.wind_speed_10m,
        wind_gust=current.wind_gusts_10m,
        wind_direction_deg=current.wind_direction_10m,
        wind_direction_compass=compass_direction(current.wind_direction_10m),
        wind_direction_arrow=wind_arrow(current.wind_direction_10m),
        temperature_c=current.temperature_2m,
        pressure_hpa=current.surface_pressure,
        uv_index=current.uv_index,
        captured_at=captured_at,
    )
    return snapshot, normalize_hourly(raw.hourly)
