"""Imaging package for sprite_rotation.

This package contains the palette bitmap model and the pixel transform engine:
- Bitmap: palette-indexed pixel grid with a reserved transparent index
- transform: rotation, margin rotation and vertical flip
- pil_bridge: Pillow image conversion
"""

from .models import Bitmap, TRANSPARENT
from .transform import (
    bearing_degrees,
    compose,
    flip_vertical,
    normalize_angle,
    rotate,
    rotate_image_by_degrees,
    rotate_image_from_to,
    rotate_with_margin,
    rotated_size,
)

__all__ = [
    "Bitmap",
    "TRANSPARENT",
    "bearing_degrees",
    "compose",
    "flip_vertical",
    "normalize_angle",
    "rotate",
    "rotate_image_by_degrees",
    "rotate_image_from_to",
    "rotate_with_margin",
    "rotated_size",
]
