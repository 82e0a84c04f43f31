"""Weather provider abstraction - allows swapping different forecast APIs."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class RawCurrent:
    """The provider's "current" block, all fields nullable."""
    temperature_2m: Optional[float] = None
    wind_speed_10m: Optional[float] = None
    wind_gusts_10m: Optional[float] = None
    wind_direction_10m: Optional[float] = None
    surface_pressure: Optional[float] = None
    uv_index: Optional[float] = None


@dataclass(frozen=True)
class RawHourly:
    """Parallel arrays indexed by position in ``time``."""
    time: List[str] = field(default_factory=list)
    temperature_2m: Optional[List[Optional[float]]] = None
    wind_speed_10m: Optional[List[Optional[float]]] = None
    wind_gusts_10m: Optional[List[Optional[float]]] = None
    wind_direction_10m: Optional[List[Optional[float]]] = None
    surface_pressure: Optional[List[Optional[float]]] = None


@dataclass(frozen=True)
class RawForecast:
    current: RawCurrent
    hourly: Optional[RawHourly] = None


class WeatherProviderBase(ABC):
    """Abstract base class for forecast providers."""

    @abstractmethod
    def fetch_forecast(self, lat: float, lon: float) -> RawForecast:
        """
        Fetch current conditions plus the hourly series, speeds in km/h.

        Makes exactly one request; retrying is up to the caller.

        Args:
            lat: Latitude (-90 to 90)
            lon: Longitude (-180 to 180)

        Returns:
            RawForecast: Decoded provider payload

        Raises:
            FetchError: If the request or decoding fails
        """
        pass


class FetchError(Exception):
    """Exception raised when a provider request fails."""
    pass


class FetchNetworkError(FetchError):
    """Connection, DNS or timeout failure."""
    pass


class FetchHTTPStatusError(FetchError):
    """Provider answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")


class FetchDecodeError(FetchError):
    """Response body was not the JSON shape we expect."""
    pass
