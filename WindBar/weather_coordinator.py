"""Weather state coordinator - owns the published state and runs refresh cycles."""
import dataclasses
import logging
import threading
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple

import catalog
from alert import AlertEvaluator
from dummy_data import dummy_snapshot
from layout import format_wind_speed
from location_resolver import GeocoderBase, LocationError, LocationResolver
from normalizer import normalize
from notification import AlertSound, NotificationSinkBase, SoundCue, parse_cue
from scheduler import RefreshScheduler, clamp_interval
from settings_store import DEFAULTS, SettingsStoreBase
from units import WindUnit, parse_wind_unit
from weather_data import (
    AlertState,
    ByCityName,
    ByCoordinates,
    ByCountryCity,
    CoordinatorState,
    HourlyEntry,
    LocationMode,
    LocationSpec,
    ViewState,
    WeatherSnapshot,
)
from weather_provider import FetchError, WeatherProviderBase

Observer = Callable[[ViewState], None]


class RefreshFailure(Exception):
    """A refresh cycle failed. ``cause`` is the LocationError, FetchError or unexpected error."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(self.user_message())

    def user_message(self) -> str:
        if isinstance(self.cause, LocationError):
            return str(self.cause)
        if isinstance(self.cause, FetchError):
            return f"Weather service error: {self.cause}"
        return f"Failed: {self.cause}"


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _number_setting(settings: SettingsStoreBase, key: str, convert: Callable[[Any], Any]) -> Any:
    """Read a numeric setting; a stored value of the wrong type falls back to its default."""
    value = settings.get_or_default(key)
    try:
        return convert(value)
    except (TypeError, ValueError):
        logging.warning(f"Ignoring invalid {key} setting {value!r}, using {DEFAULTS[key]!r}")
        return convert(DEFAULTS[key])


def location_spec_from_settings(settings: SettingsStoreBase) -> LocationSpec:
    """Build the active LocationSpec from the stored mode and its fields."""
    try:
        mode = LocationMode(settings.get_or_default("location_mode"))
    except ValueError:
        mode = LocationMode.CITY_NAME

    if mode is LocationMode.COORDINATES:
        return ByCoordinates(settings.get_or_default("latitude"), settings.get_or_default("longitude"))
    if mode is LocationMode.COUNTRY_CITY:
        return ByCountryCity(settings.get_or_default("selected_country"), settings.get_or_default("selected_city"))
    return ByCityName(settings.get_or_default("city_name"))


def store_location_spec(settings: SettingsStoreBase, spec: LocationSpec) -> None:
    settings.set("location_mode", spec.mode.value)
    if isinstance(spec, ByCoordinates):
        # A missing value clears the stored one so a restart fails the same way
        settings.set("latitude", spec.lat)
        settings.set("longitude", spec.lon)
    elif isinstance(spec, ByCountryCity):
        settings.set("selected_country", spec.country)
        settings.set("selected_city", spec.city)
    else:
        settings.set("city_name", spec.name)


class WeatherCoordinator:
    """
    Runs refresh cycles and publishes the results to observers.

    A cycle either generates dummy data or resolves the location, fetches
    the forecast and normalizes it. The snapshot, hourly window, alert state
    and display string are then published together as one ViewState.
    Failures keep the previous snapshot and set ``error_message``.

    Cycles may overlap (timer tick plus a manual refresh). Each one takes a
    generation number when it starts; a cycle that finishes after a newer
    one has started is discarded instead of published.
    """

    def __init__(
        self,
        settings: SettingsStoreBase,
        provider: WeatherProviderBase,
        geocoder: GeocoderBase,
        notifier: Optional[NotificationSinkBase] = None,
        clock: Callable[[], datetime] = _local_now,
    ):
        """
        Initialize coordinator from stored settings.

        Args:
            settings: Key-value store, read here and written by the setters
            provider: Forecast provider
            geocoder: Geocoding provider for city names
            notifier: Sink for the alert sound, None for silent alerts
            clock: Source of capture timestamps
        """
        self.settings = settings
        self.provider = provider
        self.resolver = LocationResolver(geocoder)
        self.notifier = notifier
        self.clock = clock
        self.alert_evaluator = AlertEvaluator(on_fire=self._play_alert_sound)
        self.scheduler: Optional[RefreshScheduler] = None

        self._wind_unit = parse_wind_unit(settings.get_or_default("wind_unit"))
        self._location = location_spec_from_settings(settings)
        self._use_dummy_data = bool(settings.get_or_default("use_dummy_data"))
        self._refresh_interval = clamp_interval(_number_setting(settings, "refresh_interval_minutes", int))
        self._alerts_enabled = bool(settings.get_or_default("alerts_enabled"))
        self._alert_threshold = _number_setting(settings, "alert_threshold_kmh", float)
        self._alert_sound = parse_cue(settings.get_or_default("alert_sound"), settings.get_or_default("custom_sound_path"))

        self._lock = threading.Lock()
        self._view = ViewState()
        self._state = CoordinatorState.IDLE
        self._generation = 0
        self._closed = False
        self._observers: List[Observer] = []

    # -- Published state -------------------------------------------------
    @property
    def view_state(self) -> ViewState:
        with self._lock:
            return self._view

    @property
    def state(self) -> CoordinatorState:
        """Phase of the newest cycle, IDLE between cycles."""
        with self._lock:
            return self._state

    @property
    def wind_unit(self) -> WindUnit:
        return self._wind_unit

    @property
    def location(self) -> LocationSpec:
        return self._location

    @property
    def use_dummy_data(self) -> bool:
        return self._use_dummy_data

    @property
    def refresh_interval(self) -> int:
        return self._refresh_interval

    @property
    def alerts_enabled(self) -> bool:
        return self._alerts_enabled

    @property
    def alert_threshold(self) -> float:
        return self._alert_threshold

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a function that unregisters it."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    # -- Lifecycle -------------------------------------------------------
    def start(self, seconds_per_minute: float = 60.0) -> RefreshScheduler:
        """Start the periodic timer and request the first refresh."""
        if self.scheduler is None:
            self.scheduler = RefreshScheduler(self.refresh, self._refresh_interval, seconds_per_minute)
        self.scheduler.start()
        self.scheduler.trigger_now()
        return self.scheduler

    def close(self) -> None:
        """Stop the timer. Cycles still in flight finish without publishing."""
        with self._lock:
            self._closed = True
        if self.scheduler is not None:
            self.scheduler.stop()

    # -- Commands --------------------------------------------------------
    def request_refresh(self) -> None:
        """Refresh on the scheduler thread when running, otherwise right here."""
        if self.scheduler is not None and self.scheduler.is_running:
            self.scheduler.trigger_now()
        else:
            self.refresh()

    def set_wind_unit(self, unit: WindUnit) -> None:
        self._wind_unit = WindUnit(unit)
        self.settings.set("wind_unit", self._wind_unit.value)
        logging.info(f"Wind unit set to {self._wind_unit.display_name}")
        self.request_refresh()

    def set_location_spec(self, spec: LocationSpec) -> None:
        if not isinstance(spec, (ByCoordinates, ByCityName, ByCountryCity)):
            raise TypeError(f"Unsupported location spec: {spec!r}")
        self._location = spec
        store_location_spec(self.settings, spec)
        logging.info(f"Location set to {spec}")
        self.request_refresh()

    def select_country(self, country: str) -> None:
        """Switch to country/city mode with the country's first listed city."""
        self.set_location_spec(ByCountryCity(country, catalog.default_city(country) or ""))

    def set_use_dummy_data(self, enabled: bool) -> None:
        self._use_dummy_data = bool(enabled)
        self.settings.set("use_dummy_data", self._use_dummy_data)
        logging.info(f"Dummy data {'enabled' if enabled else 'disabled'}")
        self.request_refresh()

    def set_refresh_interval(self, minutes: int) -> int:
        """Set the timer period (minimum 5 minutes). Returns the value applied."""
        self._refresh_interval = clamp_interval(minutes)
        self.settings.set("refresh_interval_minutes", self._refresh_interval)
        if self.scheduler is not None:
            self.scheduler.set_interval(self._refresh_interval)
        return self._refresh_interval

    def set_alerts_enabled(self, enabled: bool) -> None:
        self._alerts_enabled = bool(enabled)
        self.settings.set("alerts_enabled", self._alerts_enabled)
        if not self._alerts_enabled:
            self.reset_alert()

    def set_alert_threshold(self, threshold_kmh: float) -> None:
        self._alert_threshold = float(threshold_kmh)
        self.settings.set("alert_threshold_kmh", self._alert_threshold)

    def set_alert_sound(self, cue: SoundCue) -> None:
        self._alert_sound = cue
        if isinstance(cue, AlertSound):
            self.settings.set("alert_sound", cue.value)
        else:
            self.settings.set("alert_sound", "custom")
            self.settings.set("custom_sound_path", cue)

    def reset_alert(self) -> None:
        """Force the alert inactive; the next crossing fires again."""
        with self._lock:
            if not self._view.alert.is_active:
                return
            self._view = dataclasses.replace(self._view, alert=AlertState(is_active=False))
            view = self._view
        self._notify(view)

    # -- Refresh cycle ---------------------------------------------------
    def refresh(self) -> ViewState:
        """
        Run one refresh cycle and return the latest published state.

        Never raises for cycle failures; those end up in error_message.
        """
        with self._lock:
            if self._closed:
                return self._view
            self._generation += 1
            generation = self._generation
            use_dummy = self._use_dummy_data
            spec = self._location
            unit = self._wind_unit
            alerts_enabled = self._alerts_enabled
            threshold = self._alert_threshold

        if use_dummy:
            self._set_state(generation, CoordinatorState.DUMMY_GENERATING)
            snapshot, hourly = dummy_snapshot(self.clock())
            logging.info("Loaded dummy weather data")
            return self._publish(generation, snapshot, hourly, unit, alerts_enabled, threshold)

        self._begin_loading(generation)
        try:
            snapshot, hourly = self._fetch_live(generation, spec)
        except (LocationError, FetchError) as e:
            logging.warning(f"Refresh failed: {e}")
            return self._fail(generation, RefreshFailure(e))
        except Exception as e:
            logging.exception(f"Unexpected error during refresh: {e}")
            return self._fail(generation, RefreshFailure(e))
        return self._publish(generation, snapshot, hourly, unit, alerts_enabled, threshold)

    def _fetch_live(self, generation: int, spec: LocationSpec) -> Tuple[WeatherSnapshot, Tuple[HourlyEntry, ...]]:
        self._set_state(generation, CoordinatorState.RESOLVING)
        lat, lon = self.resolver.resolve(spec)

        self._set_state(generation, CoordinatorState.FETCHING)
        raw = self.provider.fetch_forecast(lat, lon)

        self._set_state(generation, CoordinatorState.NORMALIZING)
        return normalize(raw, self.clock())

    def _set_state(self, generation: int, state: CoordinatorState) -> None:
        with self._lock:
            if generation == self._generation:
                self._state = state

    def _is_current(self, generation: int) -> bool:
        # Caller holds self._lock
        return not self._closed and generation == self._generation

    def _begin_loading(self, generation: int) -> None:
        with self._lock:
            if not self._is_current(generation):
                return
            self._view = dataclasses.replace(
                self._view,
                is_loading=True,
                error_message=None,
                state=CoordinatorState.RESOLVING,
            )
            view = self._view
        self._notify(view)

    def _publish(
        self,
        generation: int,
        snapshot: WeatherSnapshot,
        hourly: Tuple[HourlyEntry, ...],
        unit: WindUnit,
        alerts_enabled: bool,
        threshold: float,
    ) -> ViewState:
        with self._lock:
            if not self._is_current(generation):
                logging.info(f"Discarding result of refresh {generation}, refresh {self._generation} is newer")
                return self._view

            fired = False
            if alerts_enabled:
                alert, fired = self.alert_evaluator.evaluate(snapshot.wind_speed, threshold, self._view.alert)
            else:
                alert = AlertState(is_active=False)

            self._view = ViewState(
                snapshot=snapshot,
                hourly=hourly,
                alert=alert,
                wind_speed_displayed=format_wind_speed(snapshot.wind_speed, unit),
                error_message=None,
                is_loading=False,
                state=CoordinatorState.PUBLISHED,
                generation=generation,
            )
            self._state = CoordinatorState.IDLE
            view = self._view

        logging.info(
            f"Published refresh {generation}: {view.wind_speed_displayed} "
            f"{snapshot.wind_direction_compass or ''}".rstrip()
        )
        if fired:
            self.alert_evaluator.fire()
        self._notify(view)
        return view

    def _fail(self, generation: int, failure: RefreshFailure) -> ViewState:
        with self._lock:
            if not self._is_current(generation):
                logging.info(f"Discarding failure of refresh {generation}: {failure}")
                return self._view
            self._view = dataclasses.replace(
                self._view,
                error_message=failure.user_message(),
                is_loading=False,
                state=CoordinatorState.FAILED,
                generation=generation,
            )
            self._state = CoordinatorState.IDLE
            view = self._view
        self._notify(view)
        return view

    def _notify(self, view: ViewState) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            try:
                observer(view)
            except Exception:
                logging.exception("Observer raised while handling a state update")

    def _play_alert_sound(self) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier.notify(self._alert_sound)
        except Exception:
            logging.exception("Alert notification failed")
