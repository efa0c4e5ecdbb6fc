"""Directional tracking: turn one sprite to face another.

The bearing from the source sprite to the target (plus an offset) is fed to
the manager's rotation setter, once or on every simulation tick.
"""

import logging
import weakref
from typing import TYPE_CHECKING, Any, Callable, Optional

from ..host import Scheduler, SpriteLike
from ..imaging.transform import bearing_degrees

if TYPE_CHECKING:
    from ..scheduling.scheduler import TickHandle
    from .manager import SpriteRotationManager

logger = logging.getLogger(__name__)


def rotate_towards_with_offset(
    manager: "SpriteRotationManager",
    source: Optional[SpriteLike],
    target: Optional[SpriteLike],
    offset: float = 0,
) -> None:
    """Rotate `source` so it faces `target`, adding `offset` degrees.

    Does nothing if either sprite is missing.
    """
    if source is None or target is None:
        return
    angle = bearing_degrees(source.x, source.y, target.x, target.y) + offset
    manager.set_rotation(source, angle)


def _reference(obj: Any) -> Callable[[], Any]:
    """Weak reference to obj; objects that refuse weakrefs are held strongly."""
    try:
        return weakref.ref(obj)
    except TypeError:
        return lambda: obj


def continuously_rotate_towards_with_offset(
    manager: "SpriteRotationManager",
    scheduler: Optional[Scheduler],
    source: Optional[SpriteLike],
    target: Optional[SpriteLike],
    offset: float = 0,
) -> Optional["TickHandle"]:
    """Rotate `source` towards `target` now and again on every tick.

    The per-tick callback holds only weak references to both sprites and
    cancels itself once either of them is gone.

    Args:
        manager: Manager owning the sprites' rotation state
        scheduler: Host scheduler that runs the per-tick callback
        source: Sprite to rotate
        target: Sprite to face
        offset: Extra rotation in degrees

    Returns:
        Handle that stops the tracking when cancelled. Without cancellation
        the tracking runs for the scheduler's lifetime. None if a sprite is
        missing or no scheduler is available.
    """
    if source is None or target is None:
        return None

    rotate_towards_with_offset(manager, source, target, offset)

    if scheduler is None:
        logger.warning(
            f"No scheduler available, sprite {source.id} rotated once but not tracked"
        )
        return None

    source_ref = _reference(source)
    target_ref = _reference(target)
    handle: Optional["TickHandle"] = None

    def on_tick() -> None:
        current_source = source_ref()
        current_target = target_ref()
        if current_source is None or current_target is None:
            if handle is not None:
                handle.cancel()
            logger.debug("Tracked sprite released, tracking stopped")
            return
        rotate_towards_with_offset(manager, current_source, current_target, offset)

    handle = scheduler.on_update(on_tick)
    logger.debug(f"Sprite {source.id} tracks sprite {target.id} (offset {offset})")
    return handle
