"""Tests for location resolution."""
import pytest
from location_resolver import (
    EmptyInputError,
    GeocodeResult,
    GeocoderBase,
    InvalidCoordinatesError,
    LocationError,
    LocationNotFoundError,
    LocationResolver,
    validate_coordinates,
)
from weather_data import ByCityName, ByCoordinates, ByCountryCity
from weather_provider import FetchNetworkError


class MockGeocoder(GeocoderBase):
    """Mock geocoder that records every lookup."""

    def __init__(self, results=None, raise_error=None):
        self.results = results if results is not None else []
        self.raise_error = raise_error
        self.queries = []

    def search(self, name, count=1):
        self.queries.append((name, count))
        if self.raise_error:
            raise self.raise_error
        return self.results


@pytest.fixture
def adelaide():
    return [GeocodeResult(latitude=-34.93, longitude=138.6, name="Adelaide", country="Australia")]


def test_coordinates_resolve_without_network():
    geocoder = MockGeocoder()
    resolver = LocationResolver(geocoder)

    assert resolver.resolve(ByCoordinates(-34.9, 138.6)) == (-34.9, 138.6)
    assert geocoder.queries == []


@pytest.mark.parametrize("lat,lon", [
    (None, 138.6),
    (-34.9, None),
    (None, None),
    (90.1, 0.0),
    (-90.1, 0.0),
    (0.0, 180.5),
    (0.0, -181.0),
    (float("nan"), 0.0),
])
def test_invalid_coordinates(lat, lon):
    resolver = LocationResolver(MockGeocoder())
    with pytest.raises(InvalidCoordinatesError):
        resolver.resolve(ByCoordinates(lat, lon))


def test_coordinate_range_edges_are_valid():
    assert validate_coordinates(90.0, 180.0) == (90.0, 180.0)
    assert validate_coordinates(-90.0, -180.0) == (-90.0, -180.0)


@pytest.mark.parametrize("name", ["", "   ", "\n\t"])
def test_empty_city_fails_before_network(name):
    geocoder = MockGeocoder()
    resolver = LocationResolver(geocoder)

    with pytest.raises(EmptyInputError):
        resolver.resolve(ByCityName(name))
    assert geocoder.queries == []


def test_city_name_takes_first_result(adelaide):
    second = GeocodeResult(latitude=1.0, longitude=2.0)
    geocoder = MockGeocoder(results=adelaide + [second])
    resolver = LocationResolver(geocoder)

    assert resolver.resolve(ByCityName("  Adelaide ")) == (-34.93, 138.6)
    assert geocoder.queries == [("Adelaide", 1)]


def test_city_not_found():
    resolver = LocationResolver(MockGeocoder(results=[]))
    with pytest.raises(LocationNotFoundError) as exc_info:
        resolver.resolve(ByCityName("Atlantis"))
    assert "Atlantis" in str(exc_info.value)


def test_country_city_geocodes_city(adelaide):
    geocoder = MockGeocoder(results=adelaide)
    resolver = LocationResolver(geocoder)

    resolver.resolve(ByCountryCity("Australia", "Adelaide"))
    assert geocoder.queries == [("Adelaide", 1)]


def test_country_city_blank_city_uses_first_catalog_city(adelaide):
    geocoder = MockGeocoder(results=adelaide)
    resolver = LocationResolver(geocoder)

    resolver.resolve(ByCountryCity("Japan", ""))
    assert geocoder.queries == [("Tokyo", 1)]


def test_country_city_unknown_country_blank_city():
    resolver = LocationResolver(MockGeocoder())
    with pytest.raises(EmptyInputError):
        resolver.resolve(ByCountryCity("Narnia", ""))


def test_geocoder_network_error_propagates():
    resolver = LocationResolver(MockGeocoder(raise_error=FetchNetworkError("Network error: timeout")))
    with pytest.raises(FetchNetworkError):
        resolver.resolve(ByCityName("Adelaide"))


def test_location_errors_share_base_class():
    for error in (EmptyInputError, LocationNotFoundError, InvalidCoordinatesError):
        assert issubclass(error, LocationError)


def test_resolve_does_not_mutate_location(adelaide):
    spec = ByCityName(" Adelaide ")
    LocationResolver(MockGeocoder(results=adelaide)).resolve(spec)
    assert spec.name == " Adelaide "
