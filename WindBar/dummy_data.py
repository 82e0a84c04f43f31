"""Static offline data so the whole pipeline can run without network access."""
from datetime import datetime
from typing import Tuple

from compass import compass_direction, wind_arrow
from weather_data import HourlyEntry, WeatherSnapshot

DUMMY_WIND_KMH = 8.8
DUMMY_GUST_KMH = 16.6
DUMMY_DIRECTION_DEG = 202.0
DUMMY_TEMPERATURE_C = 24.0
DUMMY_PRESSURE_HPA = 1009.0
DUMMY_UV_INDEX = 0.0


def dummy_snapshot(now: datetime) -> Tuple[WeatherSnapshot, Tuple[HourlyEntry, ...]]:
    """
    Fixed snapshot plus six hourly points starting at the current hour.

    Every field is populated. Only the labels and captured_at depend on ``now``.
    """
    snapshot = WeatherSnapshot(
        wind_speed=DUMMY_WIND_KMH,
        wind_gust=DUMMY_GUST_KMH,
        wind_direction_deg=DUMMY_DIRECTION_DEG,
        wind_direction_compass=compass_direction(DUMMY_DIRECTION_DEG),
        wind_direction_arrow=wind_arrow(DUMMY_DIRECTION_DEG),
        temperature_c=DUMMY_TEMPERATURE_C,
        pressure_hpa=DUMMY_PRESSURE_HPA,
        uv_index=DUMMY_UV_INDEX,
        captured_at=now,
    )
    hourly = tuple(
        HourlyEntry(
            label=f"{(now.hour + i) % 24:02d}:00",
            temperature_c=DUMMY_TEMPERATURE_C + i * 0.5,
            wind_speed=DUMMY_WIND_KMH + i * 1.5,
            wind_gust=DUMMY_GUST_KMH + i * 0.8,
            wind_direction_deg=DUMMY_DIRECTION_DEG,
            wind_direction_compass=compass_direction(DUMMY_DIRECTION_DEG),
            pressure_hpa=DUMMY_PRESSURE_HPA - i * 0.5,
        )
        for i in range(6)
    )
    return snapshot, hourly
