from __future__ import annotations

import pytest

from flappy_dragon.config import PhysicsConfig
from flappy_dragon.entities import Player


@pytest.mark.parametrize("dt", [1e-4, 1 / 240, 1 / 60, 1 / 30, 0.25])
@pytest.mark.parametrize("vy", [-150.0, 0.0, 42.0])
def test_physics_is_semi_implicit_euler(dt: float, vy: float) -> None:
    player = Player(5.0, 300.0)
    player.vel.y = vy

    player.physics(dt)

    assert player.pos.y == pytest.approx(300.0 + vy * dt)
    assert player.vel.y == pytest.approx(vy + 600.0 * dt)
    assert player.pos.x == pytest.approx(5.0 + 120.0 * dt)


def test_horizontal_velocity_is_constant() -> None:
    player = Player(0.0, 300.0)
    for _ in range(120):
        player.physics(1 / 60)
    assert player.vel.x == pytest.approx(120.0)
    assert player.pos.x == pytest.approx(120.0 * 120 / 60)


def test_ceiling_clamps_position_and_vertical_velocity() -> None:
    player = Player(5.0, 1.0)
    player.vel.y = -500.0

    player.physics(1 / 60)

    assert player.pos.y == 0.0
    assert player.vel.y == 0.0


def test_ceiling_clamp_after_flap_from_top() -> None:
    player = Player(5.0, 0.0)
    player.flap()
    player.physics(1 / 60)  # velocity turns strongly negative
    player.physics(1 / 60)  # position would go above the ceiling

    assert player.pos.y == 0.0
    assert player.vel.y == 0.0


def test_force_is_cleared_after_each_step() -> None:
    player = Player(5.0, 300.0)
    player.add_force(0.0, -1000.0)
    player.physics(0.01)
    assert player.force_accum.x == 0.0
    assert player.force_accum.y == 0.0
    assert player.vel.y == pytest.approx((600.0 - 1000.0) * 0.01)

    player.physics(0.01)
    assert player.vel.y == pytest.approx((600.0 - 1000.0) * 0.01 + 600.0 * 0.01)


def test_flap_zeroes_vertical_velocity_and_applies_one_shot_force() -> None:
    player = Player(5.0, 300.0)
    player.vel.y = 250.0

    player.flap()

    assert player.vel.y == 0.0
    assert player.force_accum.y == pytest.approx(-20000.0)


def _falling_player() -> Player:
    player = Player(5.0, 300.0)
    for _ in range(10):
        player.physics(1 / 60)
    assert player.vel.y > 0.0
    return player


def test_flap_lowers_y_compared_to_not_flapping() -> None:
    dt = 1 / 60
    flapped = _falling_player()
    control = _falling_player()

    flapped.flap()
    flapped.physics(dt)
    control.physics(dt)

    assert flapped.pos.y < control.pos.y

    before = flapped.pos.y
    flapped.physics(dt)
    assert flapped.pos.y < before


def test_inverse_mass_scales_force() -> None:
    heavy = Player(0.0, 300.0, PhysicsConfig(mass=4.0))
    heavy.add_force(0.0, -4000.0)
    heavy.physics(0.1)
    assert heavy.inverse_mass == pytest.approx(0.25)
    assert heavy.vel.y == pytest.approx((600.0 - 1000.0) * 0.1)
