"""
Command line entry point for sprite_rotation.
Usage: python -m sprite_rotation rotate INPUT OUTPUT --angle 45
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PIL import Image
from PySide6.QtCore import QSettings

from . import __version__
from .imaging.models import Bitmap
from .imaging.pil_bridge import bitmap_from_image, bitmap_to_image, scale_for_display
from .imaging.transform import rotate_image_by_degrees, rotate_image_from_to
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

# Grey ramp used when a JSON bitmap is written as an image
DEFAULT_PALETTE = [v for i in range(256) for v in (i, i, i)]


def load_bitmap(path: Path) -> tuple[Bitmap, List[int]]:
    """Load a bitmap from a JSON file or any image format Pillow reads."""
    if path.suffix.lower() == ".json":
        return Bitmap.from_json(path.read_bytes()), DEFAULT_PALETTE
    with Image.open(path) as image:
        image.load()
        return bitmap_from_image(image)


def save_bitmap(bitmap: Bitmap, palette: List[int], path: Path, scale: int = 1) -> None:
    """Save a bitmap as JSON or as an image (format from the file suffix)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".json":
        path.write_bytes(bitmap.to_json())
        return
    image = scale_for_display(bitmap_to_image(bitmap, palette), scale)
    image.save(path, transparency=bitmap.transparent)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprite_rotation",
        description="Rotate palette-indexed sprite images without smoothing.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--settings", type=Path, help="INI file to read settings from instead of the user profile"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("input", type=Path, help="Source image (.json bitmap or image file)")
        p.add_argument("output", type=Path, help="Destination (.json bitmap or image file)")
        p.add_argument("--margin", type=int, default=None, help="Pixel margin (default from settings)")
        p.add_argument("--scale", type=int, default=1, help="Nearest-neighbour upscale for image output")

    rotate_parser = sub.add_parser("rotate", help="Rotate an image by an angle")
    add_common(rotate_parser)
    rotate_parser.add_argument("--angle", type=float, required=True, help="Degrees, clockwise")

    face_parser = sub.add_parser("face", help="Rotate an image to face from one point to another")
    add_common(face_parser)
    face_parser.add_argument("--from", dest="from_point", type=float, nargs=2, required=True, metavar=("X", "Y"))
    face_parser.add_argument("--to", dest="to_point", type=float, nargs=2, required=True, metavar=("X", "Y"))
    face_parser.add_argument("--offset", type=float, default=0.0, help="Extra degrees added to the bearing")

    return parser


def run(args: argparse.Namespace, settings: AppSettings) -> None:
    """Execute a parsed command."""
    logger = logging.getLogger(f"{__name__}.run")

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(f"  {warning}")
    if not validation.is_valid:
        raise ConfigError("; ".join(validation.errors))

    margin = settings.engine.default_margin if args.margin is None else args.margin
    bitmap, palette = load_bitmap(args.input)
    logger.info(f"Loaded {args.input} ({bitmap.width}x{bitmap.height})")

    if args.command == "rotate":
        result = rotate_image_by_degrees(bitmap, args.angle, margin)
    else:
        x1, y1 = args.from_point
        x2, y2 = args.to_point
        result = rotate_image_from_to(bitmap, x1, y1, x2, y2, args.offset, margin)

    if result is None:
        raise ValueError(f"Nothing to rotate in {args.input}")

    save_bitmap(result, palette, args.output, args.scale)
    logger.info(f"Wrote {args.output} ({result.width}x{result.height})")


def main(argv: Optional[List[str]] = None) -> int:
    """Main command line entry point."""
    args = build_parser().parse_args(argv)

    qsettings = None
    if args.settings is not None:
        qsettings = QSettings(str(args.settings), QSettings.Format.IniFormat)
    settings = AppSettings(qsettings=qsettings)
    setup_logging(settings)

    logger = logging.getLogger(f"{__name__}.main")
    try:
        run(args, settings)
    except Exception:
        logger.exception(f"Command '{args.command}' failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
