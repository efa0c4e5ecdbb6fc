"""Pixel transform engine (rotation, vertical flip).

Pure functions mapping a source bitmap to a newly allocated bitmap. Rotation
uses inverse mapping: every destination pixel samples the source at the
inverse-rotated coordinate, so the output has no holes. Sampling is strictly
nearest-neighbour to keep pixel-art palettes intact.

Angles are in degrees, clockwise on screen (y axis points down).
"""

import logging
import math
from typing import Optional

from .models import Bitmap

logger = logging.getLogger(__name__)

# Exact (cos, sin) for quarter turns, indexed by angle // 90
_QUARTER_TURNS = [(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0)]

# Extents closer than this to an integer are treated as that integer
_EXTENT_EPSILON = 1e-9


def normalize_angle(angle: float) -> float:
    """Normalize an angle in degrees to the range [0, 360).

    Non-finite input normalizes to 0.
    """
    if not math.isfinite(angle):
        logger.warning(f"Non-finite angle {angle!r} normalized to 0")
        return 0
    normalized = ((angle % 360) + 360) % 360
    # Float modulo of tiny negative values can land exactly on 360
    return 0 if normalized >= 360 else normalized


def _trig(angle: float) -> tuple[float, float]:
    """Get (cos, sin) of an angle in degrees, exact for quarter turns."""
    a = normalize_angle(angle)
    if a % 90 == 0:
        return _QUARTER_TURNS[int(a // 90)]
    r = math.radians(a)
    return (math.cos(r), math.sin(r))


def _ceil_extent(value: float) -> int:
    return max(0, math.ceil(value - _EXTENT_EPSILON))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def rotated_size(width: int, height: int, angle: float) -> tuple[int, int]:
    """Get the bounding box size of a width x height rectangle rotated by angle.

    Args:
        width: Source width in pixels
        height: Source height in pixels
        angle: Rotation angle in degrees

    Returns:
        (new_width, new_height)
    """
    cos, sin = _trig(angle)
    new_width = _ceil_extent(abs(width * cos) + abs(height * sin))
    new_height = _ceil_extent(abs(width * sin) + abs(height * cos))
    return (new_width, new_height)


def _sample_rotated(source: Bitmap, out: Bitmap, angle: float) -> Bitmap:
    """Fill `out` by inverse-mapping each of its pixels into `source`.

    Both images rotate around their geometric centers (width/2, height/2).
    Destination pixels are sampled at their centers; the source pixel whose
    area contains the inverse-rotated point is copied unless transparent.
    """
    cos, sin = _trig(angle)
    sw, sh = source.width, source.height
    cx, cy = sw / 2, sh / 2
    ncx, ncy = out.width / 2, out.height / 2
    src = source.pixels
    dst = out.pixels
    transparent = source.transparent

    for y in range(out.height):
        dy = y + 0.5 - ncy
        # Row-invariant parts of the inverse rotation
        row_x = dy * sin + cx - 0.5
        row_y = dy * cos + cy - 0.5
        row_offset = y * out.width
        for x in range(out.width):
            dx = x + 0.5 - ncx
            sx = _round_half_up(dx * cos + row_x)
            sy = _round_half_up(-dx * sin + row_y)
            if 0 <= sx < sw and 0 <= sy < sh:
                value = src[sy * sw + sx]
                if value != transparent:
                    dst[row_offset + x] = value
    return out


def rotate(image: Bitmap, angle: float) -> Bitmap:
    """Rotate a bitmap onto a canvas that exactly bounds the rotated footprint.

    Args:
        image: Source bitmap (not modified)
        angle: Rotation angle in degrees, any real value

    Returns:
        New bitmap of size rotated_size(image.width, image.height, angle)
    """
    new_width, new_height = rotated_size(image.width, image.height, angle)
    out = Bitmap.create(new_width, new_height, image.transparent)
    return _sample_rotated(image, out, angle)


def rotate_with_margin(image: Bitmap, angle: float, margin: int) -> Bitmap:
    """Rotate a bitmap onto a fixed canvas of (w + 2*margin, h + 2*margin).

    The canvas size never depends on the angle, so repeated calls give a
    predictable layout. Corners of the rotated footprint may be clipped.

    Args:
        image: Source bitmap (not modified)
        angle: Rotation angle in degrees
        margin: Extra pixels on each side (negative values count as 0)

    Returns:
        New bitmap
    """
    margin = max(0, int(margin))
    out = Bitmap.create(
        image.width + 2 * margin, image.height + 2 * margin, image.transparent
    )
    return _sample_rotated(image, out, angle)


def flip_vertical(image: Bitmap) -> Bitmap:
    """Mirror a bitmap top to bottom: out(x, y) = in(x, height - 1 - y)."""
    w = image.width
    pixels: list[int] = []
    for y in range(image.height - 1, -1, -1):
        pixels.extend(image.pixels[y * w : (y + 1) * w])
    return Bitmap(w, image.height, pixels, image.transparent)


def compose(image: Bitmap, angle: float, flipped: bool) -> Bitmap:
    """Apply a full rotation/flip state to an untouched source bitmap.

    Rotation is applied first, then the vertical flip. The identity state
    returns a copy of the source.
    """
    result = image.copy() if normalize_angle(angle) == 0 else rotate(image, angle)
    if flipped:
        result = flip_vertical(result)
    return result


def bearing_degrees(x1: float, y1: float, x2: float, y2: float) -> float:
    """Get the bearing from (x1, y1) towards (x2, y2) in degrees.

    0 points along +x, 90 along +y (down on screen).
    """
    return math.degrees(math.atan2(y2 - y1, x2 - x1))


# === STANDALONE IMAGE COMMANDS ===


def rotate_image_by_degrees(
    image: Optional[Bitmap], angle: float, margin: int = 0
) -> Optional[Bitmap]:
    """Rotate a standalone image by an angle onto a margin-padded canvas.

    Args:
        image: Source bitmap, may be None
        angle: Rotation angle in degrees (normalized)
        margin: Pixel margin, clamped to >= 0

    Returns:
        New bitmap, or None if no image was given
    """
    if image is None:
        return None
    return rotate_with_margin(image, normalize_angle(angle), max(0, margin))


def rotate_image_from_to(
    image: Optional[Bitmap],
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    offset: float = 0,
    margin: int = 0,
) -> Optional[Bitmap]:
    """Rotate a standalone image so it faces from (x1, y1) towards (x2, y2).

    Args:
        image: Source bitmap, may be None
        x1, y1: Point the image is looking from
        x2, y2: Point the image should face
        offset: Extra rotation in degrees added to the bearing
        margin: Pixel margin, clamped to >= 0

    Returns:
        New bitmap; an unrotated copy if both points coincide; None if no
        image was given
    """
    if image is None:
        return None
    if x1 == x2 and y1 == y2:
        return image.copy()
    angle = bearing_degrees(x1, y1, x2, y2) + offset
    return rotate_with_margin(image, angle, max(0, margin))
