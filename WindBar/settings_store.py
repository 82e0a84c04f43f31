"""Key-value settings persistence."""
import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from alert import DEFAULT_THRESHOLD_KMH

# Keys and the defaults used when a key was never written
DEFAULTS: Dict[str, Any] = {
    "location_mode": "cityName",
    "city_name": "Adelaide",
    "latitude": None,
    "longitude": None,
    "selected_country": "Australia",
    "selected_city": "Adelaide",
    "wind_unit": "kmh",
    "use_dummy_data": False,
    "refresh_interval_minutes": 15,
    "alerts_enabled": False,
    "alert_threshold_kmh": DEFAULT_THRESHOLD_KMH,
    "alert_sound": "Ping",
    "custom_sound_path": None,
    "temperature_unit": "celsius",
    "pressure_unit": "hPa",
    "icon_style": "wind_and_arrow",
}


class SettingsStoreBase(ABC):
    """Abstract get/set store. Missing keys fall back to DEFAULTS."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        pass

    def get_or_default(self, key: str) -> Any:
        return self.get(key, DEFAULTS.get(key))


class InMemorySettingsStore(SettingsStoreBase):
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def as_dict(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._values)


class JsonFileSettingsStore(InMemorySettingsStore):
    """
    Settings persisted to a JSON file.

    Read once at construction, rewritten on every set.
    """

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)
        super().__init__(self._load())

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            logging.info(f"Settings file {self.path} not found, using defaults")
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logging.warning(f"Could not read settings file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logging.warning(f"Settings file {self.path} is not a JSON object, ignoring")
            return {}
        logging.debug(f"Loaded settings: {sorted(data)}")
        return data

    def set(self, key: str, value: Any) -> None:
        super().set(key, value)
        self._save()

    def _save(self) -> None:
        data = self.as_dict()
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)
