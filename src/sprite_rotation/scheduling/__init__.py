"""Scheduling package for sprite_rotation.

- TickScheduler: per-tick callbacks with cancellation handles
- QtTickDriver: QTimer-driven ticks (imported from .qt_driver, needs PySide6)
"""

from .scheduler import TickHandle, TickScheduler

__all__ = ["TickHandle", "TickScheduler"]
