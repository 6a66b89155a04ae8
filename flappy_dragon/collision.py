"""Collision tests between the dragon and an obstacle column."""

from __future__ import annotations

import enum

import pygame

from .entities import Obstacle, Player


class CollisionMode(enum.Enum):
    OVERLAP = "overlap"
    EXACT = "exact"

    @classmethod
    def parse(cls, value: "str | CollisionMode") -> "CollisionMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown collision mode {value!r} (expected one of: {choices})") from None


def obstacle_rects(obstacle: Obstacle, screen_height: int) -> tuple[pygame.Rect, pygame.Rect]:
    """Return the solid (top, bottom) rectangles of an obstacle in world space."""
    top = pygame.Rect(obstacle.x, 0, obstacle.width, max(0, obstacle.gap_top))
    bottom = pygame.Rect(
        obstacle.x,
        obstacle.gap_bottom,
        obstacle.width,
        max(0, screen_height - obstacle.gap_bottom),
    )
    return top, bottom


def circle_overlaps_rect(cx: float, cy: float, radius: float, rect: pygame.Rect) -> bool:
    if rect.width <= 0 or rect.height <= 0:
        return False
    nearest_x = max(float(rect.left), min(cx, float(rect.right)))
    nearest_y = max(float(rect.top), min(cy, float(rect.bottom)))
    dx = cx - nearest_x
    dy = cy - nearest_y
    return dx * dx + dy * dy < radius * radius


def overlap_hit(obstacle: Obstacle, player: Player, radius: float, screen_height: int) -> bool:
    return any(
        circle_overlaps_rect(player.pos.x, player.pos.y, radius, rect)
        for rect in obstacle_rects(obstacle, screen_height)
    )


def exact_hit(obstacle: Obstacle, player: Player) -> bool:
    """Legacy test: only the obstacle's exact integer column can register a hit.

    Frames that step over that column miss the collision entirely.
    """
    x_matches = int(player.pos.x) == obstacle.x
    above = int(player.pos.y) < obstacle.gap_top
    below = int(player.pos.y) > obstacle.gap_bottom
    return x_matches and (above or below)


def is_hit(
    obstacle: Obstacle,
    player: Player,
    *,
    mode: CollisionMode = CollisionMode.OVERLAP,
    radius: float = 10.0,
    screen_height: int = 600,
) -> bool:
    if mode is CollisionMode.EXACT:
        return exact_hit(obstacle, player)
    return overlap_hit(obstacle, player, radius, screen_height)
