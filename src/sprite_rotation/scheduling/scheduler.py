"""Per-tick callback scheduling.

A TickScheduler keeps an ordered list of callbacks and runs each of them once
per call to tick(). Registration returns a TickHandle that can stop the
callback; without cancellation a callback runs for the scheduler's lifetime.
"""

import logging
from typing import Callable, List


class TickHandle:
    """Cancellation handle for a registered per-tick callback."""

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Stop the callback from running on future ticks. Safe to repeat."""
        self._cancelled = True


class TickScheduler:
    """Runs registered callbacks once per simulation tick.

    Callbacks registered while a tick is running start on the next tick.
    A failing callback is logged and stays registered.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._handles: List[TickHandle] = []
        self.tick_count = 0

    def on_update(self, callback: Callable[[], None]) -> TickHandle:
        """Register a callback to run on every tick.

        Args:
            callback: Zero-argument callable

        Returns:
            Handle whose cancel() unregisters the callback
        """
        handle = TickHandle(callback)
        self._handles.append(handle)
        self.logger.debug(f"Tick callback registered, total: {len(self._handles)}")
        return handle

    def tick(self) -> None:
        """Advance one tick, running every live callback once."""
        self.tick_count += 1
        for handle in list(self._handles):
            if handle.cancelled:
                continue
            try:
                handle.callback()
            except Exception as e:
                self.logger.error(f"Error in tick callback: {e}", exc_info=True)

        before = len(self._handles)
        self._handles = [h for h in self._handles if not h.cancelled]
        if len(self._handles) != before:
            self.logger.debug(
                f"Dropped {before - len(self._handles)} cancelled callbacks, "
                f"total: {len(self._handles)}"
            )

    def active_count(self) -> int:
        """Get the number of callbacks that will run on the next tick."""
        return sum(1 for h in self._handles if not h.cancelled)

    def clear(self) -> None:
        """Cancel and drop every registered callback."""
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
        self.logger.debug("Cleared all tick callbacks")
