"""Qt timer driver for the tick scheduler.

Owns a single repeating QTimer whose timeout advances a TickScheduler, so
per-tick callbacks run inside a Qt event loop.
"""

import logging
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QTimer

from .scheduler import TickScheduler

if TYPE_CHECKING:
    from ..settings import AppSettings

MIN_INTERVAL_MS = 1
MAX_INTERVAL_MS = 1000


def _clamp_interval(interval_ms: int) -> int:
    return max(MIN_INTERVAL_MS, min(MAX_INTERVAL_MS, int(interval_ms)))


class QtTickDriver:
    """Drives a TickScheduler from a repeating QTimer."""

    def __init__(self, scheduler: TickScheduler, interval_ms: int = 16):
        """Initialize the driver.

        Args:
            scheduler: Scheduler to advance on every timeout
            interval_ms: Tick interval in milliseconds (clamped to 1-1000)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.scheduler = scheduler
        self._interval = _clamp_interval(interval_ms)

        self.timer = QTimer()
        self.timer.setSingleShot(False)
        self.timer.timeout.connect(self._on_timeout)

    @classmethod
    def from_settings(
        cls, settings: "AppSettings", scheduler: Optional[TickScheduler] = None
    ) -> "QtTickDriver":
        """Create a driver using the configured tick interval."""
        return cls(scheduler or TickScheduler(), settings.engine.tick_interval_ms)

    @property
    def interval(self) -> int:
        return self._interval

    def set_interval(self, interval_ms: int) -> None:
        """Update the tick interval (clamped to 1-1000 ms)."""
        self._interval = _clamp_interval(interval_ms)
        if self.timer.isActive():
            self.timer.setInterval(self._interval)
        self.logger.debug(f"Tick interval set to: {self._interval}ms")

    def start(self) -> None:
        if not self.timer.isActive():
            self.timer.start(self._interval)
            self.logger.debug(f"Tick timer started with interval: {self._interval}ms")

    def stop(self) -> None:
        if self.timer.isActive():
            self.timer.stop()
            self.logger.debug("Tick timer stopped")

    def is_active(self) -> bool:
        return self.timer.isActive()

    def _on_timeout(self) -> None:
        """Handle timer timeout - advance the scheduler by one tick."""
        self.scheduler.tick()
