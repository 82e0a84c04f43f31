"""Tests for menu-bar and detail formatting."""
import pytest
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from layout import (
    DisplayPreferences,
    IconStyle,
    MAX_MENU_BAR_LENGTH,
    format_detail_lines,
    format_hourly_line,
    format_menu_bar_title,
    format_wind_speed,
    limit_text,
    pressure_string,
    temperature_string,
)
from units import PressureUnit, TemperatureUnit, WindUnit
from weather_data import AlertState, HourlyEntry, ViewState, WeatherSnapshot


@pytest.fixture
def sample_snapshot():
    """Sample snapshot: 8.8 km/h from 202 degrees."""
    return WeatherSnapshot(
        wind_speed=8.8,
        wind_gust=16.6,
        wind_direction_deg=202.0,
        wind_direction_compass="SSW",
        wind_direction_arrow="↙",
        temperature_c=24.0,
        pressure_hpa=1009.0,
        uv_index=0.0,
        captured_at=datetime(2024, 5, 1, 14, 15, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_view(sample_snapshot):
    hourly = (
        HourlyEntry(
            label="14:00",
            temperature_c=24.0,
            wind_speed=8.8,
            wind_gust=16.6,
            wind_direction_deg=202.0,
            wind_direction_compass="SSW",
            pressure_hpa=1009.0,
        ),
    )
    return ViewState(snapshot=sample_snapshot, hourly=hourly, wind_speed_displayed="8 km/h")


def test_format_wind_speed_truncates():
    assert format_wind_speed(8.8, WindUnit.KMH) == "8 km/h"
    assert format_wind_speed(36.5, WindUnit.MS) == "10 m/s"
    assert format_wind_speed(None, WindUnit.MPH) == "—"


def test_temperature_string():
    assert temperature_string(24.0, TemperatureUnit.CELSIUS) == "24.0°C"
    assert temperature_string(0.0, TemperatureUnit.FAHRENHEIT) == "32.0°F"
    assert temperature_string(None, TemperatureUnit.CELSIUS) == "—"


def test_pressure_string():
    assert pressure_string(1009.4, PressureUnit.HPA) == "1009 hPa"
    assert pressure_string(1009.4, PressureUnit.MBAR) == "1009 mbar"
    assert pressure_string(None, PressureUnit.HPA) == "—"


def test_title_wind_and_arrow(sample_view):
    title = format_menu_bar_title(sample_view, DisplayPreferences())
    assert title == "↙ 8 km/h SSW — Gusts ↙ 16 km/h SSW"


def test_title_wind_only(sample_view):
    title = format_menu_bar_title(sample_view, DisplayPreferences(icon_style=IconStyle.WIND_ONLY))
    assert title == "8 km/h SSW — Gusts ↙ 16 km/h SSW"


def test_title_arrow_only(sample_view):
    title = format_menu_bar_title(sample_view, DisplayPreferences(icon_style=IconStyle.ARROW_ONLY))
    assert title == "↙ "


def test_title_compact(sample_view):
    prefs = DisplayPreferences(wind_unit=WindUnit.KNOTS, icon_style=IconStyle.COMPACT)
    assert format_menu_bar_title(sample_view, prefs) == "💨4K G8K"


def test_title_other_unit(sample_view):
    title = format_menu_bar_title(sample_view, DisplayPreferences(wind_unit=WindUnit.MPH))
    assert title.startswith("↙ 5 mph SSW")


def test_title_without_data():
    view = ViewState()
    assert format_menu_bar_title(view, DisplayPreferences()) == "↑ —"
    assert format_menu_bar_title(view, DisplayPreferences(icon_style=IconStyle.COMPACT)) == "—"


def test_title_alert_prefix(sample_view):
    view = replace(sample_view, alert=AlertState(is_active=True))
    assert format_menu_bar_title(view, DisplayPreferences()).startswith("🔔 ↙ 8 km/h")


def test_title_never_exceeds_limit(sample_view):
    view = replace(sample_view, alert=AlertState(is_active=True))
    for style in IconStyle:
        for unit in WindUnit:
            title = format_menu_bar_title(view, DisplayPreferences(wind_unit=unit, icon_style=style))
            assert len(title) <= MAX_MENU_BAR_LENGTH


def test_limit_text():
    assert limit_text("short") == "short"
    cut = limit_text("x" * 60)
    assert len(cut) == MAX_MENU_BAR_LENGTH
    assert cut.endswith("…")


def test_hourly_line(sample_view):
    line = format_hourly_line(sample_view.hourly[0], DisplayPreferences())
    assert line == "14:00  24.0°C  8 km/h  G 16 km/h  SSW  1009 hPa"


def test_hourly_line_missing_values():
    entry = HourlyEntry(label="15:00")
    line = format_hourly_line(entry, DisplayPreferences())
    assert line == "15:00  —  —  —  —"


def test_detail_lines(sample_view):
    lines = format_detail_lines(sample_view, DisplayPreferences())
    assert "Wind:        8 km/h" in lines
    assert "Direction:   202° SSW ↙" in lines
    assert "Updated:     14:15:30" in lines
    assert "Next hours:" in lines
    assert "Wind alert active" not in lines


def test_detail_lines_error_without_data():
    view = ViewState(error_message="Enter a city name.")
    assert format_detail_lines(view, DisplayPreferences()) == ["Error: Enter a city name.", "No data yet"]


def test_detail_lines_flag_stale_snapshot(sample_view, sample_snapshot):
    fresh = sample_snapshot.captured_at + timedelta(minutes=10)
    old = sample_snapshot.captured_at + timedelta(hours=1)

    assert "Data is stale" not in format_detail_lines(sample_view, DisplayPreferences(), 1800, now=fresh)
    assert "Data is stale" in format_detail_lines(sample_view, DisplayPreferences(), 1800, now=old)
