"""Tests for directional tracking."""

import gc

import pytest

from sprite_rotation.rotation import SpriteRotationManager
from sprite_rotation.rotation.tracking import (
    continuously_rotate_towards_with_offset,
    rotate_towards_with_offset,
)
from sprite_rotation.scheduling import TickScheduler


@pytest.fixture
def scheduler() -> TickScheduler:
    return TickScheduler()


@pytest.fixture
def manager(scheduler: TickScheduler) -> SpriteRotationManager:
    return SpriteRotationManager(scheduler=scheduler)


class TestRotateTowards:
    """Test one-shot tracking."""

    def test_target_to_the_right(self, manager, make_sprite) -> None:
        source = make_sprite(x=0, y=0)
        target = make_sprite(x=10, y=0)
        manager.rotate_towards(source, target, 0)
        assert manager.get_state(source).rotation == 0
        assert manager.recompute_count == 0

    def test_target_below(self, manager, make_sprite) -> None:
        source = make_sprite(x=0, y=0)
        target = make_sprite(x=0, y=10)
        manager.rotate_towards(source, target, 0)
        assert manager.get_state(source).rotation == 90

    def test_offset_added(self, manager, make_sprite) -> None:
        source = make_sprite(x=5, y=5)
        target = make_sprite(x=5, y=-5)
        rotate_towards_with_offset(manager, source, target, 45)
        assert manager.get_state(source).rotation == pytest.approx(315)

    def test_missing_sprite_is_noop(self, manager, make_sprite) -> None:
        sprite = make_sprite()
        manager.rotate_towards(sprite, None, 0)
        manager.rotate_towards(None, sprite, 0)
        assert manager.tracked_count() == 0

    def test_target_unchanged(self, manager, make_sprite) -> None:
        source = make_sprite(x=0, y=0)
        target = make_sprite(x=0, y=10)
        image = target.image
        manager.rotate_towards(source, target, 0)
        assert manager.get_state(target) is None
        assert target.image is image


class TestContinuousTracking:
    """Test per-tick tracking."""

    def test_rotates_immediately_and_every_tick(self, manager, scheduler, make_sprite) -> None:
        source = make_sprite(x=0, y=0)
        target = make_sprite(x=0, y=10)

        handle = manager.continuously_rotate_towards(source, target, 0)
        assert handle is not None
        assert manager.get_state(source).rotation == 90

        target.x, target.y = -10, 0
        scheduler.tick()
        assert manager.get_state(source).rotation == 180

        target.x, target.y = 0, -10
        scheduler.tick()
        assert manager.get_state(source).rotation == 270

    def test_unchanged_target_does_not_recompute(self, manager, scheduler, make_sprite) -> None:
        source = make_sprite(x=0, y=0)
        target = make_sprite(x=3, y=3)
        manager.continuously_rotate_towards(source, target, 0)
        for _ in range(5):
            scheduler.tick()
        assert manager.recompute_count == 1

    def test_cancel_stops_tracking(self, manager, scheduler, make_sprite) -> None:
        source = make_sprite(x=0, y=0)
        target = make_sprite(x=0, y=10)
        handle = manager.continuously_rotate_towards(source, target, 0)

        handle.cancel()
        target.x, target.y = -10, 0
        scheduler.tick()

        assert manager.get_state(source).rotation == 90
        assert scheduler.active_count() == 0

    def test_runs_until_cancelled(self, manager, scheduler, make_sprite) -> None:
        source = make_sprite()
        target = make_sprite(x=1, y=1)
        manager.continuously_rotate_towards(source, target, 0)
        for _ in range(50):
            scheduler.tick()
        assert scheduler.active_count() == 1

    def test_released_sprite_stops_tracking(self, manager, scheduler, make_sprite) -> None:
        source = make_sprite(x=0, y=0)
        target = make_sprite(x=0, y=10)
        handle = manager.continuously_rotate_towards(source, target, 0)

        del target
        gc.collect()
        scheduler.tick()

        assert handle.cancelled
        assert scheduler.active_count() == 0
        assert manager.get_state(source).rotation == 90

    def test_without_scheduler_rotates_once(self, make_sprite) -> None:
        manager = SpriteRotationManager()
        source = make_sprite(x=0, y=0)
        target = make_sprite(x=0, y=10)

        assert manager.continuously_rotate_towards(source, target, 0) is None
        assert manager.get_state(source).rotation == 90

    def test_missing_sprite_registers_nothing(self, manager, scheduler, make_sprite) -> None:
        result = continuously_rotate_towards_with_offset(
            manager, scheduler, make_sprite(), None, 0
        )
        assert result is None
        assert scheduler.active_count() == 0
