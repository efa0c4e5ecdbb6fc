"""
sprite_rotation: Rotation and flip engine for palette-indexed sprites

Rotates and flips pixel-art bitmaps with nearest-neighbour inverse mapping and
keeps per-sprite transform state so images are recomputed only on change.
"""

__version__ = "0.1.0"
__author__ = "sprite_rotation Contributors"

# Core engine
from .imaging import (
    Bitmap, TRANSPARENT,
    rotate, rotate_with_margin, flip_vertical, normalize_angle,
    rotate_image_by_degrees, rotate_image_from_to,
)

# Sprite binding
from .rotation import SpriteRotationManager, TransformState, InputGuard
from .scheduling import TickScheduler, TickHandle
from .host import Direction

__all__ = [
    # Engine
    'Bitmap',
    'TRANSPARENT',
    'rotate',
    'rotate_with_margin',
    'flip_vertical',
    'normalize_angle',
    'rotate_image_by_degrees',
    'rotate_image_from_to',

    # Sprite binding
    'SpriteRotationManager',
    'TransformState',
    'InputGuard',
    'TickScheduler',
    'TickHandle',
    'Direction',
]
