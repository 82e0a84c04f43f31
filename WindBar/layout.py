"""Menu-bar and detail text formatting - pure functions for testability."""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from compass import wind_arrow
from units import (
    PressureUnit,
    TemperatureUnit,
    WindUnit,
    convert_optional_speed,
    convert_pressure,
    convert_temperature,
)
from weather_data import HourlyEntry, ViewState, WeatherSnapshot

NO_VALUE = "—"
MAX_MENU_BAR_LENGTH = 50
ALERT_PREFIX = "🔔 "


class IconStyle(str, Enum):
    WIND_AND_ARROW = "wind_and_arrow"
    ARROW_ONLY = "arrow_only"
    WIND_ONLY = "wind_only"
    COMPACT = "compact"


@dataclass(frozen=True)
class DisplayPreferences:
    wind_unit: WindUnit = WindUnit.KMH
    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    pressure_unit: PressureUnit = PressureUnit.HPA
    icon_style: IconStyle = IconStyle.WIND_AND_ARROW


def format_wind_speed(speed_kmh: Optional[float], unit: WindUnit) -> str:
    """
    Whole-number speed with unit label, e.g. "8 km/h".

    Fractions are truncated, not rounded, so 8.8 km/h shows as 8.
    """
    converted = convert_optional_speed(speed_kmh, unit)
    if converted is None:
        return NO_VALUE
    return f"{int(converted)} {unit.display_name}"


def temperature_string(celsius: Optional[float], unit: TemperatureUnit) -> str:
    value = convert_temperature(celsius, unit)
    if value is None:
        return NO_VALUE
    return f"{value:.1f}{unit.symbol}"


def pressure_string(hpa: Optional[float], unit: PressureUnit) -> str:
    value = convert_pressure(hpa, unit)
    if value is None:
        return NO_VALUE
    return f"{value:.0f} {unit.display_name}"


def limit_text(text: str, max_length: int = MAX_MENU_BAR_LENGTH) -> str:
    """Cut text to max_length characters, the last one being an ellipsis."""
    if len(text) > max_length:
        return text[:max_length - 1] + "…"
    return text


def format_menu_bar_title(view: ViewState, prefs: DisplayPreferences) -> str:
    """
    Build the menu-bar title for the latest published state.

    Styles:
        wind_and_arrow: "↙ 8 km/h SSW — Gusts ↙ 16 km/h SSW"
        wind_only:      "8 km/h SSW — Gusts ↙ 16 km/h SSW"
        arrow_only:     "↙ "
        compact:        "💨8k G16k"

    A bell prefix is shown while the wind alert is active.

    Args:
        view: Latest coordinator state
        prefs: Units and icon style

    Returns:
        Title text, at most MAX_MENU_BAR_LENGTH characters
    """
    snapshot = view.snapshot
    speed = convert_optional_speed(snapshot.wind_speed if snapshot else None, prefs.wind_unit)
    gust = convert_optional_speed(snapshot.wind_gust if snapshot else None, prefs.wind_unit)
    direction = snapshot.wind_direction_deg if snapshot else None
    compass = snapshot.wind_direction_compass if snapshot else None
    arrow = wind_arrow(direction)
    unit = prefs.wind_unit

    title = ALERT_PREFIX if view.alert.is_active else ""

    if prefs.icon_style is IconStyle.COMPACT:
        if speed is None:
            return limit_text(title + NO_VALUE)
        title += f"💨{int(speed)}{unit.abbreviation}"
        if gust is not None:
            title += f" G{int(gust)}{unit.abbreviation}"
        return limit_text(title)

    if prefs.icon_style is IconStyle.ARROW_ONLY:
        return limit_text(arrow + " ")

    if prefs.icon_style is IconStyle.WIND_AND_ARROW:
        title += arrow + " "

    if speed is None:
        title += NO_VALUE
    else:
        title += f"{int(speed)} {unit.display_name}"
        if compass:
            title += f" {compass}"
        if gust is not None:
            title += f" — Gusts {arrow} {int(gust)} {unit.display_name}"
            if compass:
                title += f" {compass}"
    return limit_text(title)


def format_hourly_line(entry: HourlyEntry, prefs: DisplayPreferences) -> str:
    parts = [
        entry.label,
        temperature_string(entry.temperature_c, prefs.temperature_unit),
        format_wind_speed(entry.wind_speed, prefs.wind_unit),
    ]
    if entry.wind_gust is not None:
        parts.append(f"G {format_wind_speed(entry.wind_gust, prefs.wind_unit)}")
    parts.append(entry.wind_direction_compass or NO_VALUE)
    parts.append(pressure_string(entry.pressure_hpa, prefs.pressure_unit))
    return "  ".join(parts)


def _snapshot_lines(snapshot: WeatherSnapshot, prefs: DisplayPreferences) -> List[str]:
    direction = NO_VALUE
    if snapshot.wind_direction_deg is not None:
        direction = f"{snapshot.wind_direction_deg:.0f}° {snapshot.wind_direction_compass} {snapshot.wind_direction_arrow}"
    uv = NO_VALUE if snapshot.uv_index is None else f"{snapshot.uv_index:.1f}"
    return [
        f"Wind:        {format_wind_speed(snapshot.wind_speed, prefs.wind_unit)}",
        f"Gusts:       {format_wind_speed(snapshot.wind_gust, prefs.wind_unit)}",
        f"Direction:   {direction}",
        f"Temperature: {temperature_string(snapshot.temperature_c, prefs.temperature_unit)}",
        f"Pressure:    {pressure_string(snapshot.pressure_hpa, prefs.pressure_unit)}",
        f"UV index:    {uv}",
        f"Updated:     {snapshot.captured_at.strftime('%H:%M:%S')}",
    ]


def format_detail_lines(
    view: ViewState,
    prefs: DisplayPreferences,
    stale_after_seconds: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[str]:
    """
    Multi-line summary of the snapshot, hourly forecast and any error.

    With ``stale_after_seconds`` set, a snapshot older than that is flagged.
    """
    lines: List[str] = []
    if view.error_message:
        lines.append(f"Error: {view.error_message}")
    if view.snapshot is None:
        lines.append("No data yet")
        return lines

    lines.extend(_snapshot_lines(view.snapshot, prefs))
    if stale_after_seconds is not None and view.snapshot.is_stale(stale_after_seconds, now):
        lines.append("Data is stale")
    if view.alert.is_active:
        lines.append("Wind alert active")
    if view.hourly:
        lines.append("Next hours:")
        lines.extend(f"  {format_hourly_line(entry, prefs)}" for entry in view.hourly)
    return lines
