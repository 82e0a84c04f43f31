"""Edge-triggered wind alerts."""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from weather_data import AlertState

DEFAULT_THRESHOLD_KMH = 25.0


@dataclass(frozen=True)
class DroneWindLimit:
    name: str
    max_wind_kmh: float


# Recommended maximum sustained wind per drone model, usable as threshold presets
DRONE_WIND_LIMITS: List[DroneWindLimit] = [
    DroneWindLimit("DJI Avata 2", 25.0),
    DroneWindLimit("DJI Neo 1", 15.0),
    DroneWindLimit("DJI Neo 2", 20.0),
    DroneWindLimit("DJI Mini 3", 35.0),
    DroneWindLimit("DJI Mini 4 Pro", 35.0),
    DroneWindLimit("DJI Air 3S", 40.0),
    DroneWindLimit("DJI Matrice Series 4", 40.0),
    DroneWindLimit("DJI Agras T50", 20.0),
]


def find_drone_limit(name: str) -> Optional[DroneWindLimit]:
    wanted = name.strip().lower()
    for limit in DRONE_WIND_LIMITS:
        if limit.name.lower() == wanted:
            return limit
    return None


def next_alert_state(speed_kmh: Optional[float], threshold_kmh: float, previous: AlertState) -> Tuple[AlertState, bool]:
    """
    Pure transition function.

    Active while speed is strictly above the threshold. The second element
    is True only when the state goes from inactive to active.
    """
    above = speed_kmh is not None and speed_kmh > threshold_kmh
    fired = above and not previous.is_active
    return AlertState(is_active=above), fired


class AlertEvaluator:
    """
    Wraps next_alert_state with a one-shot side effect.

    ``evaluate`` only computes the new state, so callers can run it while
    holding a lock. ``fire`` runs ``on_fire`` and belongs after the lock is
    released; call it only when ``evaluate`` reported a transition, which
    happens once per inactive->active change, never while the wind stays
    above the threshold.
    """

    def __init__(self, on_fire: Optional[Callable[[], None]] = None):
        self.on_fire = on_fire

    def evaluate(self, speed_kmh: Optional[float], threshold_kmh: float, previous: AlertState) -> Tuple[AlertState, bool]:
        state, fired = next_alert_state(speed_kmh, threshold_kmh, previous)
        if state.is_active != previous.is_active:
            logging.info(
                f"Wind alert {'raised' if state.is_active else 'cleared'}: "
                f"{speed_kmh} km/h vs threshold {threshold_kmh} km/h"
            )
        return state, fired

    def fire(self) -> None:
        if self.on_fire is not None:
            self.on_fire()
