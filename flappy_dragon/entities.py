"""Player physics and obstacle generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from pygame.math import Vector2

from .config import GameConfig, PhysicsConfig

logger = logging.getLogger(__name__)


class Player:
    """Handles the dragon's physics state.

    Screen space is used for the vertical axis, so gravity is positive and a
    flap pushes towards y = 0. The top of the screen acts as a ceiling.
    """

    def __init__(self, x: float, y: float, physics: Optional[PhysicsConfig] = None) -> None:
        self.cfg = physics or PhysicsConfig()
        self.pos = Vector2(x, y)
        self.vel = Vector2(self.cfg.horizontal_velocity, 0.0)
        self.acc = Vector2(0.0, self.cfg.gravity)
        self.force_accum = Vector2(0.0, 0.0)
        self.inverse_mass = 1.0 / self.cfg.mass

    def add_force(self, fx: float, fy: float) -> None:
        self.force_accum.x += fx
        self.force_accum.y += fy

    def physics(self, dt: float) -> None:
        """Advance one step; position uses the velocity from the previous step."""
        self.pos += self.vel * dt

        accel = self.acc + self.force_accum * self.inverse_mass
        self.vel += accel * dt

        if self.pos.y < 0.0:
            self.pos.y = 0.0
            self.vel.y = 0.0

        self.force_accum.x = self.force_accum.y = 0.0

    def flap(self) -> None:
        self.vel.y = 0.0
        self.add_force(0.0, self.cfg.flap_force)

    def __repr__(self) -> str:
        return f"Player(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), vel=({self.vel.x:.1f}, {self.vel.y:.1f}))"


@dataclass(frozen=True)
class Obstacle:
    """A column with a single passable gap, positioned in world space."""

    x: int
    gap: int
    size: int
    width: int

    @property
    def gap_top(self) -> int:
        return self.gap - self.size // 2

    @property
    def gap_bottom(self) -> int:
        return self.gap + self.size // 2


class ObstacleGenerator:
    """Creates obstacles with a uniformly random gap centre."""

    def __init__(self, config: GameConfig, rng: Optional[np.random.Generator] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        height = config.screen_height
        obstacles = config.obstacles
        self.gap_min = height // obstacles.band_min_divisor
        self.gap_max = (height * obstacles.band_max_numerator) // obstacles.band_max_denominator
        self.gap_size = config.gap_size

    def create(self, x: float, score: int) -> Obstacle:
        # score does not scale difficulty yet; every obstacle uses the same band.
        gap = int(self.rng.integers(self.gap_min, self.gap_max, endpoint=True))
        obstacle = Obstacle(x=int(x), gap=gap, size=self.gap_size, width=self.config.obstacles.width)
        logger.debug("Spawned obstacle at x=%d gap=%d (score %d)", obstacle.x, obstacle.gap, score)
        return obstacle
