"""Sprite rotation package for sprite_rotation.

This package binds the transform engine to host sprites:
- SpriteRotationManager: per-sprite state, cached transformed images
- InputGuard: vetoes flips while opposing inputs are pressed together
- tracking: rotate one sprite to face another, once or every tick
"""

from .input_guard import InputGuard
from .manager import SpriteRotationManager, TransformState

__all__ = ["InputGuard", "SpriteRotationManager", "TransformState"]
