from __future__ import annotations

import numpy as np

from flappy_dragon.config import GameConfig
from flappy_dragon.entities import Obstacle, ObstacleGenerator


def test_gap_centres_stay_inside_band(config: GameConfig) -> None:
    generator = ObstacleGenerator(config)
    low = config.screen_height // 9
    high = config.screen_height * 8 // 10

    gaps = [generator.create(800, 0).gap for _ in range(10_000)]

    assert min(gaps) >= low
    assert max(gaps) <= high
    # Both ends of the band are reachable.
    assert min(gaps) < low + 20
    assert max(gaps) > high - 20


def test_geometry_for_default_screen(config: GameConfig, rng: np.random.Generator) -> None:
    obstacle = ObstacleGenerator(config, rng).create(800, 0)

    assert obstacle.x == 800
    assert obstacle.size == 200
    assert obstacle.width == config.obstacles.width
    assert obstacle.gap_top == obstacle.gap - 100
    assert obstacle.gap_bottom == obstacle.gap + 100


def test_world_x_is_truncated_to_int(config: GameConfig, rng: np.random.Generator) -> None:
    obstacle = ObstacleGenerator(config, rng).create(1612.9, 3)
    assert obstacle.x == 1612
    assert isinstance(obstacle.x, int)


def test_score_does_not_change_the_band(config: GameConfig) -> None:
    early = ObstacleGenerator(config, np.random.default_rng(7))
    late = ObstacleGenerator(config, np.random.default_rng(7))

    assert [early.create(800, 0).gap for _ in range(50)] == [late.create(800, 99).gap for _ in range(50)]


def test_seeded_generators_are_reproducible(config: GameConfig) -> None:
    first = ObstacleGenerator(config, np.random.default_rng(42))
    second = ObstacleGenerator(config, np.random.default_rng(42))

    assert [first.create(i, 0) for i in range(20)] == [second.create(i, 0) for i in range(20)]


def test_obstacles_are_immutable_values() -> None:
    obstacle = Obstacle(x=10, gap=300, size=200, width=20)
    assert obstacle == Obstacle(x=10, gap=300, size=200, width=20)
    try:
        obstacle.x = 11  # type: ignore[misc]
    except AttributeError:
        pass
    else:
        raise AssertionError("Obstacle should be frozen")
