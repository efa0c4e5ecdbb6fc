"""
Host environment interfaces.

The sprite system, input polling and frame scheduling belong to the host.
These protocols describe the small surface this package consumes.
"""

from enum import Enum
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from .imaging.models import Bitmap
    from .scheduling.scheduler import TickHandle


class Direction(Enum):
    """Opposing directional inputs watched by the input guard."""

    LEFT = "left"
    RIGHT = "right"


class SpriteLike(Protocol):
    """Positioned, renderable host object."""

    id: int
    x: float
    y: float
    image: "Bitmap"

    def set_image(self, image: "Bitmap") -> None: ...

    def set_position(self, x: float, y: float) -> None: ...


class InputSource(Protocol):
    """Reports whether a directional input is currently pressed."""

    def is_pressed(self, direction: Direction) -> bool: ...


class Scheduler(Protocol):
    """Runs callbacks once per simulation tick."""

    def on_update(self, callback: Callable[[], None]) -> "TickHandle": ...
