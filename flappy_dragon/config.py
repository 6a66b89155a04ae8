"""Configuration data structures for Flappy Dragon."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

Color = tuple[int, int, int]


@dataclass(frozen=True)
class PhysicsConfig:
    """Constants for the dragon's point-mass integrator."""

    gravity: float = 600.0  # units/s^2, +y is down
    flap_force: float = -20000.0  # one-shot force, cleared after a single step
    mass: float = 1.0
    horizontal_velocity: float = 120.0  # units/s


@dataclass(frozen=True)
class ObstacleConfig:
    """Geometry of the obstacle columns."""

    width: int = 20
    gap_divisor: int = 3  # gap size = screen height // divisor
    band_min_divisor: int = 9  # gap centre >= height // 9
    band_max_numerator: int = 8  # gap centre <= height * 8 // 10
    band_max_denominator: int = 10


@dataclass(frozen=True)
class RenderingConfig:
    """Visual parameters shared by both renderer styles."""

    style: str = "shapes"  # "shapes" or "glyph"
    font_size: int = 20
    font_path: Optional[str] = None  # None uses pygame's default font
    player_anchor_x: int = 20  # screen column the dragon is drawn at
    ground_offset: int = 15
    background_color: Color = (255, 255, 255)
    text_color: Color = (0, 0, 0)
    player_color: Color = (230, 41, 55)
    obstacle_color: Color = (0, 121, 241)
    ground_color: Color = (0, 117, 44)
    player_glyph: str = "@"
    obstacle_glyph: str = "#"


@dataclass(frozen=True)
class GameConfig:
    """High-level configuration of the game."""

    window_size: tuple[int, int] = (800, 600)
    target_fps: int = 60
    title: str = "Flappy Dragon"
    player_start_x: float = 5.0
    player_radius: float = 10.0
    collision: str = "overlap"  # "overlap" or "exact"
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    obstacles: ObstacleConfig = field(default_factory=ObstacleConfig)
    render: RenderingConfig = field(default_factory=RenderingConfig)

    @property
    def screen_width(self) -> int:
        return self.window_size[0]

    @property
    def screen_height(self) -> int:
        return self.window_size[1]

    @property
    def gap_size(self) -> int:
        return self.screen_height // self.obstacles.gap_divisor
