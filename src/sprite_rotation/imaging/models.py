"""
Data models for palette-indexed bitmaps.

A bitmap is a width x height grid of palette indices where one reserved
index marks "no pixel". The model is intentionally lightweight: no file-system
or rendering logic lives here.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Sequence, cast

import orjson

# Palette index the host uses as "no pixel"
TRANSPARENT = 0


@dataclass
class Bitmap:
    """Palette-indexed pixel grid stored row-major.

    Out-of-bounds reads return the transparent index and out-of-bounds
    writes are ignored, mirroring the host image semantics.
    """

    width: int
    height: int
    pixels: List[int] = field(default_factory=list)
    transparent: int = TRANSPARENT

    def __post_init__(self):
        self.width = max(0, int(self.width))
        self.height = max(0, int(self.height))
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [self.transparent] * size
        elif len(self.pixels) != size:
            raise ValueError(
                f"Bitmap {self.width}x{self.height} needs {size} pixels, got {len(self.pixels)}"
            )

    @classmethod
    def create(cls, width: int, height: int, transparent: int = TRANSPARENT) -> "Bitmap":
        """Allocate a fully transparent canvas."""
        return cls(width, height, transparent=transparent)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], transparent: int = TRANSPARENT
    ) -> "Bitmap":
        """Create a bitmap from a list of equally sized rows.

        Args:
            rows: Pixel rows, top to bottom
            transparent: Reserved "no pixel" index

        Returns:
            New Bitmap
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        pixels: List[int] = []
        for row in rows:
            if len(row) != width:
                raise ValueError("All bitmap rows must have the same length")
            pixels.extend(int(v) for v in row)
        return cls(width, height, pixels, transparent)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return self.transparent
        return self.pixels[y * self.width + x]

    def set_pixel(self, x: int, y: int, index: int) -> None:
        if self.in_bounds(x, y):
            self.pixels[y * self.width + x] = index

    def is_transparent(self, x: int, y: int) -> bool:
        return self.get_pixel(x, y) == self.transparent

    def opaque_count(self) -> int:
        """Count pixels that are not the transparent index."""
        return sum(1 for p in self.pixels if p != self.transparent)

    def rows(self) -> List[List[int]]:
        w = self.width
        return [self.pixels[y * w : (y + 1) * w] for y in range(self.height)]

    def copy(self) -> "Bitmap":
        """Return an independent copy (pixel list is duplicated)."""
        return Bitmap(self.width, self.height, list(self.pixels), self.transparent)

    # Host images call this clone()
    clone = copy

    # === SERIALIZATION ===

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "transparent": self.transparent,
            "rows": self.rows(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bitmap":
        """Create Bitmap from a JSON dict.

        Args:
            data: Dict with 'rows' and optional 'transparent'

        Returns:
            Bitmap instance
        """
        raw_rows: Iterable[Any] = data.get("rows") or []
        rows = [list(cast(Sequence[int], row)) for row in raw_rows]
        bitmap = cls.from_rows(rows, int(data.get("transparent", TRANSPARENT)))
        if "width" in data and int(data["width"]) != bitmap.width and rows:
            raise ValueError(
                f"Declared width {data['width']} does not match rows ({bitmap.width})"
            )
        if not rows:
            # Zero-height bitmaps still carry their declared width
            bitmap = cls(int(data.get("width", 0)), 0, [], bitmap.transparent)
        return bitmap

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: bytes | str) -> "Bitmap":
        return cls.from_dict(orjson.loads(raw))
