"""Per-sprite rotation state and transformed-image cache.

Tracks, for every sprite it touches, the untouched original image plus the
current rotation and flip. The transformed image is recomputed from the
original only when that state changes and is then applied to the sprite.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from ..imaging.models import Bitmap
from ..imaging.transform import compose, normalize_angle
from ..host import InputSource, Scheduler, SpriteLike
from .input_guard import InputGuard
from . import tracking

if TYPE_CHECKING:
    from ..scheduling.scheduler import TickHandle
    from ..settings import AppSettings


@dataclass
class TransformState:
    """Rotation/flip state of a single sprite.

    `original` is captured once and never modified; every recomputation
    starts from it. `cached_output`, when set, always equals
    compose(original, rotation, flipped_vertically).
    """

    original: Bitmap
    rotation: float = 0
    flipped_vertically: bool = False
    cached_output: Optional[Bitmap] = None

    def compose(self) -> Bitmap:
        """Compute the transformed image for the current state."""
        return compose(self.original, self.rotation, self.flipped_vertically)


class SpriteRotationManager:
    """Maps sprite ids to their TransformState and keeps sprites in sync.

    Sprites without an entry behave as rotation 0 with no flip. Entries are
    created on the first rotation or flip request and live until forget()
    or clear() is called.
    """

    def __init__(
        self,
        input_guard: Optional[InputGuard] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        """Initialize the manager.

        Args:
            input_guard: Gate consulted before flip changes (optional)
            scheduler: Host tick scheduler for continuous tracking (optional)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.input_guard = input_guard or InputGuard()
        self.scheduler = scheduler

        # sprite id -> TransformState
        self._states: dict[int, TransformState] = {}

        # Number of transformed images computed for the cache
        self.recompute_count = 0

    @classmethod
    def from_settings(
        cls,
        settings: "AppSettings",
        input_source: Optional[InputSource] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> "SpriteRotationManager":
        """Create a manager configured from application settings.

        Input protection is enabled when settings.engine.input_protection is set.
        """
        manager = cls(InputGuard(input_source), scheduler)
        if settings.engine.input_protection:
            manager.enable_input_protection()
        return manager

    # === STATE ACCESS ===

    def get_state(self, sprite: Optional[SpriteLike]) -> Optional[TransformState]:
        if sprite is None:
            return None
        return self._states.get(sprite.id)

    def tracked_count(self) -> int:
        return len(self._states)

    def forget(self, sprite: Union[SpriteLike, int, None]) -> bool:
        """Drop the cached state of a sprite, e.g. when it is destroyed.

        Args:
            sprite: Sprite or sprite id

        Returns:
            True if an entry was removed
        """
        if sprite is None:
            return False
        sprite_id = sprite if isinstance(sprite, int) else sprite.id
        removed = self._states.pop(sprite_id, None) is not None
        if removed:
            self.logger.debug(f"Forgot sprite {sprite_id}, tracked: {len(self._states)}")
        return removed

    def clear(self) -> None:
        self._states.clear()
        self.logger.debug("Cleared all sprite rotation states")

    def _ensure_state(self, sprite: SpriteLike) -> TransformState:
        state = self._states.get(sprite.id)
        if state is None:
            state = TransformState(original=sprite.image.copy())
            self._states[sprite.id] = state
            self.logger.debug(
                f"Tracking sprite {sprite.id} "
                f"({state.original.width}x{state.original.height})"
            )
        return state

    # === MUTATIONS ===

    def set_rotation(self, sprite: Optional[SpriteLike], angle: float) -> None:
        """Set a sprite's rotation in degrees.

        The angle is normalized to [0, 360). Setting the current value again
        (including the initial 0) does nothing.
        """
        if sprite is None:
            return
        state = self._ensure_state(sprite)
        normalized = normalize_angle(angle)
        if state.rotation == normalized:
            return
        state.rotation = normalized
        self._apply(sprite, state)

    def set_vertical_flip(self, sprite: Optional[SpriteLike], flipped: bool) -> None:
        """Set whether a sprite is flipped vertically.

        Does nothing at all while the input guard vetoes the change.
        """
        if sprite is None:
            return
        if not self.input_guard.should_process():
            return
        state = self._ensure_state(sprite)
        flipped = bool(flipped)
        if state.flipped_vertically == flipped:
            return
        state.flipped_vertically = flipped
        self._apply(sprite, state)

    def enable_input_protection(self) -> None:
        """Turn on the flip veto for simultaneous left/right input.

        The guard needs an input source to read; without one every flip
        still goes through.
        """
        if self.input_guard.input_source is None:
            self.logger.warning(
                "Input protection enabled without an input source, flips are not guarded"
            )
        self.input_guard.enable()

    def _apply(self, sprite: SpriteLike, state: TransformState) -> None:
        """Recompute the cached image and show it on the sprite.

        The position is read before the image swap and restored afterwards,
        since hosts may re-anchor a sprite when its image changes.
        """
        x, y = sprite.x, sprite.y
        state.cached_output = state.compose()
        self.recompute_count += 1
        sprite.set_image(state.cached_output.copy())
        sprite.set_position(x, y)
        self.logger.debug(
            f"Sprite {sprite.id}: rotation={state.rotation} "
            f"flipped={state.flipped_vertically} -> "
            f"{state.cached_output.width}x{state.cached_output.height}"
        )

    # === QUERIES ===

    def get_rotated_image(self, sprite: Optional[SpriteLike]) -> Optional[Bitmap]:
        """Get a fresh copy of a sprite's transformed image.

        Never touches the cache. Untracked sprites return a copy of their
        current image.
        """
        if sprite is None:
            return None
        state = self._states.get(sprite.id)
        if state is None:
            return sprite.image.copy()
        if state.cached_output is not None:
            return state.cached_output.copy()
        return state.compose()

    # === TRACKING ===

    def rotate_towards(
        self,
        source: Optional[SpriteLike],
        target: Optional[SpriteLike],
        offset: float = 0,
    ) -> None:
        """Rotate `source` to face `target`, plus `offset` degrees."""
        tracking.rotate_towards_with_offset(self, source, target, offset)

    def continuously_rotate_towards(
        self,
        source: Optional[SpriteLike],
        target: Optional[SpriteLike],
        offset: float = 0,
    ) -> Optional["TickHandle"]:
        """Rotate `source` to face `target` now and on every tick.

        Returns:
            Handle to stop the tracking, or None if nothing was registered
        """
        return tracking.continuously_rotate_towards_with_offset(
            self, self.scheduler, source, target, offset
        )
