"""Shared fixtures for sprite_rotation tests."""

from pathlib import Path
from typing import Optional

import pytest

from sprite_rotation.host import Direction
from sprite_rotation.imaging.models import Bitmap


class FakeSprite:
    """Minimal host sprite recording image and position updates."""

    _next_id = 1

    def __init__(self, image: Bitmap, x: float = 0, y: float = 0):
        self.id = FakeSprite._next_id
        FakeSprite._next_id += 1
        self.image = image
        self.x = x
        self.y = y
        self.set_image_calls = 0
        self.set_position_calls: list[tuple[float, float]] = []

    def set_image(self, image: Bitmap) -> None:
        self.set_image_calls += 1
        self.image = image
        # Hosts re-anchor sprites when the image changes
        self.x = 0
        self.y = 0

    def set_position(self, x: float, y: float) -> None:
        self.set_position_calls.append((x, y))
        self.x = x
        self.y = y


class FakeInput:
    """Input source with directly settable pressed state."""

    def __init__(self):
        self.pressed: set[Direction] = set()

    def press(self, *directions: Direction) -> None:
        self.pressed.update(directions)

    def release_all(self) -> None:
        self.pressed.clear()

    def is_pressed(self, direction: Direction) -> bool:
        return direction in self.pressed


@pytest.fixture
def arrow() -> Bitmap:
    """Asymmetric 4x2 sprite: every opaque pixel has a distinct index."""
    return Bitmap.from_rows([[1, 2, 3, 4], [5, 0, 0, 6]])


@pytest.fixture
def make_sprite():
    def factory(image: Optional[Bitmap] = None, x: float = 0, y: float = 0) -> FakeSprite:
        return FakeSprite(image or Bitmap.from_rows([[1, 2, 3, 4], [5, 0, 0, 6]]), x, y)

    return factory


@pytest.fixture
def fake_input() -> FakeInput:
    return FakeInput()


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture
def app_settings(settings_file: Path):
    from PySide6.QtCore import QSettings

    from sprite_rotation.settings import AppSettings

    return AppSettings(qsettings=QSettings(str(settings_file), QSettings.Format.IniFormat))
