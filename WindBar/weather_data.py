"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple, Union


class LocationMode(str, Enum):
    """Which LocationSpec variant is active. Values match the stored setting."""
    CITY_NAME = "cityName"
    COORDINATES = "coordinates"
    COUNTRY_CITY = "countryCity"

    @property
    def label(self) -> str:
        return {
            LocationMode.CITY_NAME: "City",
            LocationMode.COORDINATES: "Coords",
            LocationMode.COUNTRY_CITY: "Country/City",
        }[self]


@dataclass(frozen=True)
class ByCoordinates:
    lat: Optional[float]
    lon: Optional[float]

    mode = LocationMode.COORDINATES


@dataclass(frozen=True)
class ByCityName:
    name: str

    mode = LocationMode.CITY_NAME


@dataclass(frozen=True)
class ByCountryCity:
    country: str
    city: str

    mode = LocationMode.COUNTRY_CITY


LocationSpec = Union[ByCoordinates, ByCityName, ByCountryCity]


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Current conditions at one point in time.

    Speeds are always km/h; conversion to the user's unit happens only
    when formatting for display.
    """
    wind_speed: Optional[float]
    captured_at: datetime
    wind_gust: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    wind_direction_compass: Optional[str] = None
    wind_direction_arrow: Optional[str] = None
    temperature_c: Optional[float] = None
    pressure_hpa: Optional[float] = None
    uv_index: Optional[float] = None

    def is_stale(self, max_age_seconds: int = 900, now: Optional[datetime] = None) -> bool:
        """Check if this snapshot is older than max_age_seconds."""
        now = now or datetime.now(timezone.utc)
        age = (now - self.captured_at).total_seconds()
        return age > max_age_seconds


@dataclass(frozen=True)
class HourlyEntry:
    """One forecast point, e.g. label "14:00"."""
    label: str
    temperature_c: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_gust: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    wind_direction_compass: Optional[str] = None
    pressure_hpa: Optional[float] = None


@dataclass(frozen=True)
class AlertState:
    is_active: bool = False


class CoordinatorState(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    NORMALIZING = "normalizing"
    DUMMY_GENERATING = "dummy_generating"
    PUBLISHED = "published"
    FAILED = "failed"


@dataclass(frozen=True)
class ViewState:
    """
    Everything observers see, published as one group.

    A new ViewState replaces the previous one after every cycle, so
    observers never see a snapshot without its derived fields. ``state``
    is the phase the producing cycle was in when it was published:
    RESOLVING while a live cycle is loading, then PUBLISHED or FAILED.
    """
    snapshot: Optional[WeatherSnapshot] = None
    hourly: Tuple[HourlyEntry, ...] = field(default_factory=tuple)
    alert: AlertState = field(default_factory=AlertState)
    wind_speed_displayed: str = "—"
    error_message: Optional[str] = None
    is_loading: bool = False
    state: CoordinatorState = CoordinatorState.IDLE
    generation: int = 0
