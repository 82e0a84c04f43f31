"""Open-Meteo forecast and geocoding API clients."""
import logging
import math
from typing import Any, Dict, List, Optional

import requests

from location_resolver import GeocodeResult, GeocoderBase
from weather_provider import (
    FetchDecodeError,
    FetchHTTPStatusError,
    FetchNetworkError,
    RawCurrent,
    RawForecast,
    RawHourly,
    WeatherProviderBase,
)

CURRENT_FIELDS = [
    "temperature_2m",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
    "surface_pressure",
    "uv_index",
]
HOURLY_FIELDS = [f for f in CURRENT_FIELDS if f != "uv_index"]


def _get_json(url: str, params: Dict[str, Any], timeout: int) -> Any:
    """
    Perform one GET and decode the JSON body.

    Raises:
        FetchNetworkError: On any requests-level failure
        FetchHTTPStatusError: On a non-2xx response
        FetchDecodeError: If the body is not JSON
    """
    try:
        logging.info(f"Making Open-Meteo request: {url}")
        logging.debug(f"Request parameters: {params}")
        response = requests.get(url, params=params, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logging.error(f"Network error during API request: {e}")
        raise FetchNetworkError(f"Network error: {e}") from e

    logging.info(f"API response status: {response.status_code}")
    if not response.ok:
        reason = _error_reason(response)
        logging.error(f"API request failed with status {response.status_code}: {reason}")
        raise FetchHTTPStatusError(response.status_code, f"HTTP {response.status_code}: {reason}")

    try:
        data = response.json()
    except ValueError as e:
        logging.error(f"Non-JSON response body: {response.text[:200]}")
        raise FetchDecodeError(f"Failed to parse response: {e}") from e

    logging.debug(f"API response (truncated): {str(data)[:500]}...")
    return data


def _error_reason(response: requests.Response) -> str:
    # Open-Meteo errors look like {"error": true, "reason": "..."}
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return str(body)[:200]


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"expected finite number, got {value}")
    return float(value)


def _optional_series(block: Dict[str, Any], key: str) -> Optional[List[Optional[float]]]:
    values = block.get(key)
    if values is None:
        return None
    if not isinstance(values, list):
        raise TypeError(f"hourly.{key} is not a list")
    return [_optional_float(v) for v in values]


def parse_forecast(data: Any) -> RawForecast:
    """
    Decode an Open-Meteo forecast payload.

    Raises:
        FetchDecodeError: If the payload does not have the expected shape
    """
    try:
        if not isinstance(data, dict):
            raise TypeError("response is not a JSON object")
        current_block = data.get("current")
        if not isinstance(current_block, dict):
            raise FetchDecodeError("Response missing 'current' block")

        current = RawCurrent(**{name: _optional_float(current_block.get(name)) for name in CURRENT_FIELDS})

        hourly = None
        hourly_block = data.get("hourly")
        if hourly_block is not None:
            if not isinstance(hourly_block, dict):
                raise TypeError("hourly is not an object")
            times = hourly_block.get("time")
            if not isinstance(times, list):
                raise FetchDecodeError("Response 'hourly' block missing 'time' array")
            hourly = RawHourly(
                time=[str(t) for t in times],
                **{name: _optional_series(hourly_block, name) for name in HOURLY_FIELDS},
            )
        return RawForecast(current=current, hourly=hourly)
    except (KeyError, ValueError, TypeError) as e:
        logging.error(f"Failed to parse API response: {e}", exc_info=True)
        raise FetchDecodeError(f"Failed to parse response: {e}") from e


class OpenMeteoProvider(WeatherProviderBase):
    """
    Forecast provider using the free Open-Meteo API: https://open-meteo.com/

    No API key required. Wind speeds are always requested in km/h.
    """

    BASE_URL = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, timeout: int = 10, forecast_days: int = 1):
        """
        Initialize Open-Meteo provider.

        Args:
            timeout: HTTP request timeout in seconds
            forecast_days: Forecast horizon passed to the API
        """
        self.timeout = timeout
        self.forecast_days = forecast_days

    def build_params(self, lat: float, lon: float) -> Dict[str, Any]:
        return {
            "latitude": lat,
            "longitude": lon,
            "current": ",".join(CURRENT_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "forecast_days": self.forecast_days,
            "timezone": "auto",
            "wind_speed_unit": "kmh",
        }

    def fetch_forecast(self, lat: float, lon: float) -> RawForecast:
        data = _get_json(self.BASE_URL, self.build_params(lat, lon), self.timeout)
        forecast = parse_forecast(data)
        logging.info(
            f"Successfully parsed forecast: wind={forecast.current.wind_speed_10m} km/h "
            f"dir={forecast.current.wind_direction_10m}"
        )
        return forecast


class OpenMeteoGeocoder(GeocoderBase):
    """Geocoder using https://geocoding-api.open-meteo.com/v1/search"""

    BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"

    def __init__(self, timeout: int = 10, language: str = "en"):
        self.timeout = timeout
        self.language = language

    def search(self, name: str, count: int = 1) -> List[GeocodeResult]:
        params = {"name": name, "count": count, "language": self.language, "format": "json"}
        data = _get_json(self.BASE_URL, params, self.timeout)

        try:
            if not isinstance(data, dict):
                raise TypeError("response is not a JSON object")
            results = data.get("results") or []
            return [
                GeocodeResult(
                    latitude=float(item["latitude"]),
                    longitude=float(item["longitude"]),
                    name=item.get("name"),
                    country=item.get("country"),
                )
                for item in results
            ]
        except (KeyError, ValueError, TypeError) as e:
            logging.error(f"Failed to parse geocoding response: {e}", exc_info=True)
            raise FetchDecodeError(f"Failed to parse geocoding response: {e}") from e
