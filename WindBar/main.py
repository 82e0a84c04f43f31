"""WindBar command-line client - prints the wind menu-bar title as it updates."""
import argparse
import logging
import os
import signal
import sys
import threading
from typing import List, Optional

from dotenv import load_dotenv

import catalog
from alert import DRONE_WIND_LIMITS, find_drone_limit
from layout import DisplayPreferences, IconStyle, format_detail_lines, format_menu_bar_title
from notification import NotificationSinkBase, RecordingNotifier, SoundNotifier
from openmeteo_provider import OpenMeteoGeocoder, OpenMeteoProvider
from settings_store import JsonFileSettingsStore, SettingsStoreBase
from units import PressureUnit, TemperatureUnit, WindUnit
from weather_coordinator import WeatherCoordinator
from weather_data import ByCityName, ByCoordinates, ByCountryCity, ViewState

DEFAULT_SETTINGS_FILE = os.path.join("~", ".windbar.json")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("WindBar wind monitor")
    parser.add_argument("--settings-file", default=None, help="JSON settings file (default: $WINDBAR_SETTINGS_FILE or ~/.windbar.json)")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--unit", choices=[u.value for u in WindUnit], default=None)
    parser.add_argument("--interval", type=int, default=None, help="Minutes between refreshes (min 5)")
    parser.add_argument("--alert-threshold", type=float, default=None, help="Wind alert threshold in km/h; enables alerts")
    parser.add_argument("--drone", default=None, help="Use a drone model's wind limit as the alert threshold; enables alerts")
    parser.add_argument("--dummy", action="store_true", help="Use offline dummy data")
    parser.add_argument("--once", action="store_true", help="Refresh once, print details and exit")
    parser.add_argument("--silent", action="store_true", help="Log alert cues instead of playing them")
    parser.add_argument("--timeout", type=int, default=10, help="HTTP timeout in seconds")
    parser.add_argument("--list-countries", action="store_true", help="Print the country/city catalog and exit")
    parser.add_argument("--list-drones", action="store_true", help="Print the drone wind limits and exit")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_config(args: argparse.Namespace) -> SettingsStoreBase:
    """
    Open the settings store and apply environment and CLI overrides.

    Environment: WINDBAR_SETTINGS_FILE, WINDBAR_CITY, WINDBAR_COUNTRY,
    WINDBAR_LAT / WINDBAR_LON (both required together).
    """
    load_dotenv()
    path = args.settings_file or os.getenv("WINDBAR_SETTINGS_FILE", DEFAULT_SETTINGS_FILE)
    store = JsonFileSettingsStore(path)

    lat = os.getenv("WINDBAR_LAT")
    lon = os.getenv("WINDBAR_LON")
    city = os.getenv("WINDBAR_CITY")
    country = os.getenv("WINDBAR_COUNTRY")

    if lat or lon:
        if not lat or not lon:
            raise SystemExit("Both WINDBAR_LAT and WINDBAR_LON must be set")
        try:
            lat_val = float(lat)
            lon_val = float(lon)
        except ValueError as exc:
            raise SystemExit(f"Invalid coordinates: {exc}") from exc
        store.set("location_mode", ByCoordinates.mode.value)
        store.set("latitude", lat_val)
        store.set("longitude", lon_val)
    elif country:
        store.set("location_mode", ByCountryCity.mode.value)
        store.set("selected_country", country)
        if city:
            store.set("selected_city", city)
    elif city:
        store.set("location_mode", ByCityName.mode.value)
        store.set("city_name", city)

    if args.unit:
        store.set("wind_unit", args.unit)
    if args.interval is not None:
        store.set("refresh_interval_minutes", args.interval)
    if args.drone:
        limit = find_drone_limit(args.drone)
        if limit is None:
            known = ", ".join(d.name for d in DRONE_WIND_LIMITS)
            raise SystemExit(f"Unknown drone '{args.drone}'. Known models: {known}")
        store.set("alerts_enabled", True)
        store.set("alert_threshold_kmh", limit.max_wind_kmh)
    if args.alert_threshold is not None:
        store.set("alerts_enabled", True)
        store.set("alert_threshold_kmh", args.alert_threshold)
    if args.dummy:
        store.set("use_dummy_data", True)

    logging.info(
        "Configuration loaded: settings=%s mode=%s unit=%s",
        store.path,
        store.get_or_default("location_mode"),
        store.get_or_default("wind_unit"),
    )
    return store


def display_preferences(store: SettingsStoreBase, unit: WindUnit) -> DisplayPreferences:
    def _enum(enum_cls, key):
        try:
            return enum_cls(store.get_or_default(key))
        except ValueError:
            logging.warning("Ignoring unknown %s setting", key)
            return list(enum_cls)[0]

    return DisplayPreferences(
        wind_unit=unit,
        temperature_unit=_enum(TemperatureUnit, "temperature_unit"),
        pressure_unit=_enum(PressureUnit, "pressure_unit"),
        icon_style=_enum(IconStyle, "icon_style"),
    )


def build_coordinator(store: SettingsStoreBase, args: argparse.Namespace) -> WeatherCoordinator:
    notifier: NotificationSinkBase = RecordingNotifier() if args.silent else SoundNotifier()
    coordinator = WeatherCoordinator(
        settings=store,
        provider=OpenMeteoProvider(timeout=args.timeout),
        geocoder=OpenMeteoGeocoder(timeout=args.timeout),
        notifier=notifier,
    )
    logging.info("Weather coordinator ready (refresh every %s min)", coordinator.refresh_interval)
    return coordinator


def print_title(view: ViewState, coordinator: WeatherCoordinator, store: SettingsStoreBase) -> None:
    prefs = display_preferences(store, coordinator.wind_unit)
    title = format_menu_bar_title(view, prefs)
    if view.error_message:
        title += f"  ({view.error_message})"
    print(title, flush=True)


def print_catalog() -> None:
    for country in catalog.countries():
        print(f"{catalog.flag_emoji(country)} {country}: {', '.join(catalog.cities_for(country))}")


def print_drone_limits() -> None:
    for limit in DRONE_WIND_LIMITS:
        print(f"{limit.name}: {limit.max_wind_kmh:.0f} km/h")


def run_once(coordinator: WeatherCoordinator, store: SettingsStoreBase) -> int:
    view = coordinator.refresh()
    prefs = display_preferences(store, coordinator.wind_unit)
    print(format_menu_bar_title(view, prefs))
    stale_after = 2 * coordinator.refresh_interval * 60
    for line in format_detail_lines(view, prefs, stale_after_seconds=stale_after):
        print(line)
    return 1 if view.error_message else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    if args.list_countries:
        print_catalog()
        return 0
    if args.list_drones:
        print_drone_limits()
        return 0

    store = load_config(args)
    coordinator = build_coordinator(store, args)

    if args.once:
        return run_once(coordinator, store)

    stop = threading.Event()

    def signal_handler(signum, frame):
        logging.info("Received signal %s, shutting down", signum)
        stop.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    coordinator.subscribe(lambda view: None if view.is_loading else print_title(view, coordinator, store))
    coordinator.start()
    try:
        while not stop.wait(1.0):
            pass
    finally:
        coordinator.close()
        logging.info("Stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
