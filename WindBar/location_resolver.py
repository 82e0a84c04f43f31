"""Location resolution - coordinates pass through, names go to a geocoder."""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

import catalog
from weather_data import ByCityName, ByCoordinates, ByCountryCity, LocationSpec


@dataclass(frozen=True)
class GeocodeResult:
    latitude: float
    longitude: float
    name: Optional[str] = None
    country: Optional[str] = None


class GeocoderBase(ABC):
    """Abstract base class for geocoding providers."""

    @abstractmethod
    def search(self, name: str, count: int = 1) -> List[GeocodeResult]:
        """
        Look up candidate locations for a free-text name.

        Returns:
            List of candidates, best first. An empty list means "not found".

        Raises:
            FetchError: If the request or decoding fails
        """
        pass


class LocationError(Exception):
    """Exception raised when a location cannot be resolved."""
    pass


class EmptyInputError(LocationError):
    pass


class LocationNotFoundError(LocationError):
    pass


class InvalidCoordinatesError(LocationError):
    pass


def validate_coordinates(lat: Optional[float], lon: Optional[float]) -> Tuple[float, float]:
    """
    Check both coordinates are present and in range.

    Raises:
        InvalidCoordinatesError: If either is missing or out of range
    """
    if lat is None or lon is None:
        raise InvalidCoordinatesError("Enter valid coordinates.")
    if not -90.0 <= lat <= 90.0:
        raise InvalidCoordinatesError(f"Latitude {lat} out of range [-90, 90]")
    if not -180.0 <= lon <= 180.0:
        raise InvalidCoordinatesError(f"Longitude {lon} out of range [-180, 180]")
    return float(lat), float(lon)


class LocationResolver:
    """Turns a LocationSpec into a (latitude, longitude) pair."""

    def __init__(self, geocoder: GeocoderBase):
        self.geocoder = geocoder

    def resolve(self, spec: LocationSpec) -> Tuple[float, float]:
        """
        Resolve a location.

        Args:
            spec: The active location variant

        Returns:
            (latitude, longitude)

        Raises:
            LocationError: For empty names, unknown places or bad coordinates
            FetchError: If the geocoding request itself fails
        """
        if isinstance(spec, ByCoordinates):
            return validate_coordinates(spec.lat, spec.lon)
        if isinstance(spec, ByCityName):
            return self.geocode(spec.name)
        if isinstance(spec, ByCountryCity):
            city = spec.city.strip() if spec.city else ""
            if not city:
                city = catalog.default_city(spec.country) or ""
            return self.geocode(city)
        raise TypeError(f"Unsupported location spec: {spec!r}")

    def geocode(self, name: str) -> Tuple[float, float]:
        trimmed = (name or "").strip()
        if not trimmed:
            raise EmptyInputError("Enter a city name.")

        logging.info(f"Geocoding '{trimmed}'")
        results = self.geocoder.search(trimmed, count=1)
        if not results:
            logging.warning(f"No geocoding results for '{trimmed}'")
            raise LocationNotFoundError(f"No results for '{trimmed}'")

        best = results[0]
        logging.debug(f"Geocoded '{trimmed}' to {best.latitude}, {best.longitude}")
        return best.latitude, best.longitude
