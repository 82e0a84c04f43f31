"""Periodic refresh scheduling on a single worker thread."""
import itertools
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

MIN_INTERVAL_MINUTES = 5


@dataclass(frozen=True)
class RefreshPolicy:
    interval_minutes: int
    timer_id: int


def clamp_interval(minutes: int) -> int:
    return max(int(minutes), MIN_INTERVAL_MINUTES)


class RefreshScheduler:
    """
    Runs ``callback`` every ``interval_minutes`` and on demand.

    Timer ticks and on-demand triggers both run on the worker thread, so
    refreshes started by the scheduler never overlap each other. Triggers
    that arrive while a refresh is running coalesce into one.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval_minutes: int = 15,
        seconds_per_minute: float = 60.0,
    ):
        """
        Initialize scheduler.

        Args:
            callback: Called for every tick and trigger
            interval_minutes: Timer period, raised to MIN_INTERVAL_MINUTES if lower
            seconds_per_minute: Length of a minute; only tests change it
        """
        self.callback = callback
        self.seconds_per_minute = seconds_per_minute

        self._timer_ids = itertools.count(1)
        self._policy = RefreshPolicy(clamp_interval(interval_minutes), next(self._timer_ids))

        self._lock = threading.Lock()
        self._wake = threading.Event()
        self._trigger_pending = False
        self._stopping = False
        self._thread: Optional[threading.Thread] = None

    @property
    def policy(self) -> RefreshPolicy:
        with self._lock:
            return self._policy

    @property
    def period_seconds(self) -> float:
        return self.policy.interval_minutes * self.seconds_per_minute

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stopping = False
        self._thread = threading.Thread(target=self._run, name="refresh-scheduler", daemon=True)
        self._thread.start()
        logging.info(f"Refresh scheduler started (every {self.policy.interval_minutes} min)")

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        thread = self._thread
        with self._lock:
            self._stopping = True
        self._wake.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        logging.info("Refresh scheduler stopped")

    def set_interval(self, minutes: int) -> RefreshPolicy:
        """Replace the timer. The next tick is a full period from now."""
        with self._lock:
            self._policy = RefreshPolicy(clamp_interval(minutes), next(self._timer_ids))
            policy = self._policy
        logging.info(f"Refresh interval set to {policy.interval_minutes} min (timer {policy.timer_id})")
        self._wake.set()
        return policy

    def trigger_now(self) -> None:
        """Ask for one immediate refresh on the worker thread."""
        with self._lock:
            self._trigger_pending = True
        self._wake.set()

    def _run(self) -> None:
        while True:
            woke = self._wake.wait(timeout=self.period_seconds)
            self._wake.clear()

            with self._lock:
                if self._stopping:
                    return
                triggered = self._trigger_pending
                self._trigger_pending = False

            if woke and not triggered:
                # Interval changed: restart the wait with the new period
                continue

            logging.debug("Scheduler firing refresh (%s)", "trigger" if triggered else "timer")
            try:
                self.callback()
            except Exception:
                logging.exception("Scheduled refresh failed")
