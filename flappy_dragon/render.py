"""Rendering back-ends: a character-grid style and a flat-shape style."""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Iterator, Optional, Protocol

import pygame

from .collision import obstacle_rects
from .config import Color, GameConfig
from .entities import Obstacle, Player


class Renderer(Protocol):
    """Drawing surface consumed by the game state machine."""

    def frame(self) -> contextlib.AbstractContextManager[None]:
        """Bracket one frame's draw calls (clear on enter, present on exit)."""

    def draw_text(self, text: str, x: int, y: int, color: Optional[Color] = None) -> None: ...

    def measure_text(self, text: str) -> int: ...

    def draw_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None: ...

    def draw_circle(self, x: int, y: int, radius: float, color: Color) -> None: ...

    def draw_player(self, player: Player) -> None: ...

    def draw_obstacle(self, obstacle: Obstacle, player_x: float) -> None: ...

    def draw_ground(self) -> None: ...


class PygameRenderer:
    """Shared pygame primitives; subclasses decide how entities look."""

    def __init__(self, surface: pygame.Surface, config: GameConfig) -> None:
        self.surface = surface
        self.config = config
        self.cfg = config.render
        self.font: Optional[pygame.font.Font] = self._load_font()
        self._text_cache: dict[tuple[str, Color], pygame.Surface] = {}

    def _load_font(self) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if self.cfg.font_path is None:
            return pygame.font.Font(None, self.cfg.font_size)
        path = Path(self.cfg.font_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Font not found at {path}")
        return pygame.font.Font(str(path), self.cfg.font_size)

    def close(self) -> None:
        """Release the font handle; the renderer is unusable afterwards."""
        self._text_cache.clear()
        self.font = None

    @contextlib.contextmanager
    def frame(self) -> Iterator[None]:
        self.surface.fill(self.cfg.background_color)
        yield
        if self.surface is pygame.display.get_surface():
            pygame.display.flip()

    def _render_text(self, text: str, color: Color) -> pygame.Surface:
        if self.font is None:
            raise RuntimeError("Renderer has been closed")
        key = (text, color)
        surf = self._text_cache.get(key)
        if surf is None:
            surf = self.font.render(text, True, color)
            # Score strings change every pass; keep the cache small.
            if len(self._text_cache) > 256:
                self._text_cache.clear()
            self._text_cache[key] = surf
        return surf

    def draw_text(self, text: str, x: int, y: int, color: Optional[Color] = None) -> None:
        surf = self._render_text(text, color or self.cfg.text_color)
        self.surface.blit(surf, (int(x), int(y)))

    def measure_text(self, text: str) -> int:
        if self.font is None:
            raise RuntimeError("Renderer has been closed")
        return self.font.size(text)[0]

    def draw_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        if width <= 0 or height <= 0:
            return
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def draw_circle(self, x: int, y: int, radius: float, color: Color) -> None:
        pygame.draw.circle(self.surface, color, (int(x), int(y)), max(1, int(radius)))

    def screen_x(self, world_x: float, player_x: float) -> int:
        return int(world_x - player_x) + self.cfg.player_anchor_x

    def draw_player(self, player: Player) -> None:
        raise NotImplementedError

    def draw_obstacle(self, obstacle: Obstacle, player_x: float) -> None:
        raise NotImplementedError

    def draw_ground(self) -> None:
        raise NotImplementedError


class GlyphRenderer(PygameRenderer):
    """Character-grid look: '@' for the dragon, stacked '#' for columns."""

    def _glyph(self, char: str, color: Color) -> pygame.Surface:
        return self._render_text(char, color)

    def draw_player(self, player: Player) -> None:
        glyph = self._glyph(self.cfg.player_glyph, self.cfg.player_color)
        rect = glyph.get_rect(center=(self.cfg.player_anchor_x, int(player.pos.y)))
        self.surface.blit(glyph, rect)

    def draw_obstacle(self, obstacle: Obstacle, player_x: float) -> None:
        glyph = self._glyph(self.cfg.obstacle_glyph, self.cfg.obstacle_color)
        step = max(1, glyph.get_height())
        x = self.screen_x(obstacle.x, player_x)
        height = self.config.screen_height

        for y in range(0, max(0, obstacle.gap_top), step):
            self.surface.blit(glyph, (x, y))
        for y in range(obstacle.gap_bottom, height, step):
            self.surface.blit(glyph, (x, y))

    def draw_ground(self) -> None:
        glyph = self._glyph(self.cfg.obstacle_glyph, self.cfg.ground_color)
        step = max(1, glyph.get_width())
        y = self.config.screen_height - self.cfg.ground_offset
        for x in range(0, self.config.screen_width, step):
            self.surface.blit(glyph, (x, y))


class ShapeRenderer(PygameRenderer):
    """Flat shapes: a filled circle for the dragon and solid rectangles."""

    def draw_player(self, player: Player) -> None:
        self.draw_circle(
            self.cfg.player_anchor_x,
            int(player.pos.y),
            self.config.player_radius,
            self.cfg.player_color,
        )

    def draw_obstacle(self, obstacle: Obstacle, player_x: float) -> None:
        offset = self.screen_x(0, player_x)
        for rect in obstacle_rects(obstacle, self.config.screen_height):
            self.draw_rect(rect.x + offset, rect.y, rect.width, rect.height, self.cfg.obstacle_color)

    def draw_ground(self) -> None:
        y = self.config.screen_height - self.cfg.ground_offset
        self.draw_rect(0, y, self.config.screen_width, self.cfg.ground_offset, self.cfg.ground_color)


RENDERERS: dict[str, type[PygameRenderer]] = {
    "glyph": GlyphRenderer,
    "shapes": ShapeRenderer,
}


def create_renderer(surface: pygame.Surface, config: GameConfig) -> PygameRenderer:
    style = config.render.style.lower()
    renderer_cls = RENDERERS.get(style)
    if renderer_cls is None:
        choices = ", ".join(sorted(RENDERERS))
        raise ValueError(f"Unknown renderer style {config.render.style!r} (expected one of: {choices})")
    return renderer_cls(surface, config)
