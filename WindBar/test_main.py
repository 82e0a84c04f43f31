"""Tests for the command-line entry point."""
import pytest
from datetime import datetime, timezone
from unittest.mock import patch
from main import build_coordinator, display_preferences, load_config, main, parse_args, run_once
from layout import IconStyle
from settings_store import InMemorySettingsStore
from units import PressureUnit, TemperatureUnit, WindUnit

ENV_VARS = ["WINDBAR_SETTINGS_FILE", "WINDBAR_CITY", "WINDBAR_COUNTRY", "WINDBAR_LAT", "WINDBAR_LON"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch('main.load_dotenv'):
        yield monkeypatch


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "settings.json")


def test_parse_args_defaults():
    args = parse_args([])
    assert args.settings_file is None
    assert args.unit is None
    assert args.interval is None
    assert args.dummy is False
    assert args.once is False
    assert args.timeout == 10


def test_parse_args_rejects_unknown_unit():
    with pytest.raises(SystemExit):
        parse_args(["--unit", "furlongs"])


def test_cli_overrides(settings_path):
    args = parse_args([
        "--settings-file", settings_path,
        "--unit", "knots",
        "--interval", "30",
        "--alert-threshold", "0",
        "--dummy",
    ])
    store = load_config(args)
    assert store.get("wind_unit") == "knots"
    assert store.get("refresh_interval_minutes") == 30
    assert store.get("alerts_enabled") is True
    assert store.get("alert_threshold_kmh") == 0.0
    assert store.get("use_dummy_data") is True


def test_env_coordinates(clean_env, settings_path):
    clean_env.setenv("WINDBAR_LAT", "-34.9")
    clean_env.setenv("WINDBAR_LON", "138.6")
    store = load_config(parse_args(["--settings-file", settings_path]))
    assert store.get("location_mode") == "coordinates"
    assert store.get("latitude") == -34.9
    assert store.get("longitude") == 138.6


def test_env_coordinates_need_both(clean_env, settings_path):
    clean_env.setenv("WINDBAR_LAT", "-34.9")
    with pytest.raises(SystemExit):
        load_config(parse_args(["--settings-file", settings_path]))


def test_env_coordinates_must_be_numbers(clean_env, settings_path):
    clean_env.setenv("WINDBAR_LAT", "north")
    clean_env.setenv("WINDBAR_LON", "138.6")
    with pytest.raises(SystemExit):
        load_config(parse_args(["--settings-file", settings_path]))


def test_env_country_city(clean_env, settings_path):
    clean_env.setenv("WINDBAR_COUNTRY", "Japan")
    clean_env.setenv("WINDBAR_CITY", "Osaka")
    store = load_config(parse_args(["--settings-file", settings_path]))
    assert store.get("location_mode") == "countryCity"
    assert store.get("selected_country") == "Japan"
    assert store.get("selected_city") == "Osaka"


def test_env_city_name(clean_env, settings_path):
    clean_env.setenv("WINDBAR_CITY", "Hobart")
    store = load_config(parse_args(["--settings-file", settings_path]))
    assert store.get("location_mode") == "cityName"
    assert store.get("city_name") == "Hobart"


def test_env_settings_file(clean_env, settings_path):
    clean_env.setenv("WINDBAR_SETTINGS_FILE", settings_path)
    store = load_config(parse_args([]))
    assert store.path == settings_path


def test_display_preferences_fall_back():
    store = InMemorySettingsStore({
        "temperature_unit": "fahrenheit",
        "pressure_unit": "bogus",
        "icon_style": "compact",
    })
    prefs = display_preferences(store, WindUnit.MPH)
    assert prefs.wind_unit is WindUnit.MPH
    assert prefs.temperature_unit is TemperatureUnit.FAHRENHEIT
    assert prefs.pressure_unit is PressureUnit.HPA
    assert prefs.icon_style is IconStyle.COMPACT


def test_main_once_with_dummy_data(settings_path, capsys):
    with patch('openmeteo_provider.requests.get') as mock_get:
        code = main(["--settings-file", settings_path, "--dummy", "--once", "--silent"])

    mock_get.assert_not_called()
    assert code == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "↙ 8 km/h SSW — Gusts ↙ 16 km/h SSW"
    assert "Next hours:" in out


def test_run_once_reports_failure(capsys):
    store = InMemorySettingsStore({"location_mode": "cityName", "city_name": "  "})
    args = parse_args(["--silent"])
    coordinator = build_coordinator(store, args)

    assert run_once(coordinator, store) == 1
    out = capsys.readouterr().out
    assert "Error: Enter a city name." in out


def test_drone_sets_alert_threshold(settings_path):
    store = load_config(parse_args(["--settings-file", settings_path, "--drone", "dji mini 4 pro"]))
    assert store.get("alerts_enabled") is True
    assert store.get("alert_threshold_kmh") == 35.0


def test_explicit_threshold_overrides_drone(settings_path):
    args = parse_args(["--settings-file", settings_path, "--drone", "DJI Neo 1", "--alert-threshold", "12"])
    assert load_config(args).get("alert_threshold_kmh") == 12.0


def test_unknown_drone_exits(settings_path):
    with pytest.raises(SystemExit, match="Known models: DJI Avata 2"):
        load_config(parse_args(["--settings-file", settings_path, "--drone", "Paper plane"]))


def test_list_countries(settings_path, capsys):
    assert main(["--settings-file", settings_path, "--list-countries"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "🇦🇺 Australia: Adelaide, Melbourne, Sydney" in "\n".join(lines)
    names = [line.split(" ", 1)[1].split(":")[0] for line in lines]
    assert names == sorted(names)


def test_list_drones(capsys):
    assert main(["--list-drones"]) == 0
    out = capsys.readouterr().out
    assert "DJI Mini 4 Pro: 35 km/h" in out
    assert len(out.splitlines()) == 8


def test_run_once_flags_stale_data(capsys):
    store = InMemorySettingsStore({"use_dummy_data": True})
    coordinator = build_coordinator(store, parse_args(["--silent"]))
    coordinator.clock = lambda: datetime(2020, 1, 1, tzinfo=timezone.utc)

    assert run_once(coordinator, store) == 0
    assert "Data is stale" in capsys.readouterr().out
