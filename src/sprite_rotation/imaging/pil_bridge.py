"""Conversion between Pillow images and palette bitmaps.

Handles loading of arbitrary Pillow images into palette-indexed bitmaps,
writing bitmaps back as "P" mode images and pixel-perfect upscaling for
preview output.
"""

import logging
from typing import List

from PIL import Image

from .models import Bitmap, TRANSPARENT

logger = logging.getLogger(__name__)

# One palette slot is reserved for the transparent index
MAX_OPAQUE_COLORS = 255


def _flat_palette(image: Image.Image) -> List[int]:
    palette = image.getpalette()
    return list(palette) if palette else []


def bitmap_from_image(image: Image.Image) -> tuple[Bitmap, List[int]]:
    """Convert a Pillow image to a palette bitmap.

    "P" images keep their indices; the image's transparency index (if any)
    becomes the bitmap's transparent index. "L" images keep their grey
    values as indices. Any other mode is quantized to at most 255 colors
    shifted up by one, and fully transparent pixels map to index 0.

    Args:
        image: Source Pillow image

    Returns:
        (bitmap, flat RGB palette)
    """
    width, height = image.size

    if image.mode == "P":
        transparency = image.info.get("transparency")
        transparent = transparency if isinstance(transparency, int) else TRANSPARENT
        pixels = list(image.tobytes())
        return Bitmap(width, height, pixels, transparent), _flat_palette(image)

    if image.mode == "L":
        palette = [v for g in range(256) for v in (g, g, g)]
        return Bitmap(width, height, list(image.tobytes())), palette

    rgba = image.convert("RGBA")
    alpha = list(rgba.getchannel("A").tobytes())
    quantized = rgba.convert("RGB").quantize(colors=MAX_OPAQUE_COLORS)
    indices = list(quantized.tobytes())

    pixels = [
        TRANSPARENT if a == 0 else index + 1 for index, a in zip(indices, alpha)
    ]
    # Slot 0 is the transparent color, real colors start at 1
    palette = [0, 0, 0] + _flat_palette(quantized)[: MAX_OPAQUE_COLORS * 3]
    logger.debug(
        f"Quantized {image.mode} image {width}x{height} to {len(palette) // 3} colors"
    )
    return Bitmap(width, height, pixels), palette


def bitmap_to_image(bitmap: Bitmap, palette: List[int]) -> Image.Image:
    """Convert a palette bitmap to a "P" mode Pillow image.

    Args:
        bitmap: Bitmap to convert
        palette: Flat RGB palette (padded to 256 entries)

    Returns:
        Pillow image with the transparent index recorded in `transparency`
    """
    image = Image.new("P", (bitmap.width, bitmap.height), bitmap.transparent)
    if bitmap.width and bitmap.height:
        image.putdata(bitmap.pixels)
    flat = list(palette[: 256 * 3])
    flat.extend([0] * (256 * 3 - len(flat)))
    image.putpalette(flat)
    image.info["transparency"] = bitmap.transparent
    return image


def scale_for_display(image: Image.Image, pixelscale: int) -> Image.Image:
    """Upscale an image by an integer factor using NEAREST for pixel art.

    Args:
        image: Source Pillow image
        pixelscale: Scaling factor (values below 2 return the image unchanged)

    Returns:
        Scaled image
    """
    if pixelscale <= 1:
        return image
    new_width = image.width * pixelscale
    new_height = image.height * pixelscale
    scaled = image.resize((new_width, new_height), Image.Resampling.NEAREST)
    if "transparency" in image.info:
        scaled.info["transparency"] = image.info["transparency"]
    return scaled
