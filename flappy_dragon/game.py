"""Window, clock and main loop for Flappy Dragon."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pygame

from .config import GameConfig
from .input import InputProvider, KeyboardInput
from .render import PygameRenderer, create_renderer
from .state import GameMode, GameState

logger = logging.getLogger(__name__)


class FlappyDragonGame:
    """High-level game orchestration."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_provider: Optional[InputProvider] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.state = GameState(self.config, rng)

        pygame.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode(self.config.window_size)
        pygame.display.set_caption(self.config.title)

        self.clock = pygame.time.Clock()
        try:
            self.renderer: Optional[PygameRenderer] = create_renderer(self.screen, self.config)
        except Exception:
            pygame.quit()
            raise
        self.input_provider = input_provider or KeyboardInput()
        self.running = True
        self.frames = 0
        logger.info(
            "Started %dx%d, %s renderer, %s collision",
            self.config.screen_width,
            self.config.screen_height,
            self.config.render.style,
            self.state.collision_mode.value,
        )

    def __enter__(self) -> "FlappyDragonGame":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def run(self, max_frames: Optional[int] = None) -> None:
        try:
            while self.running and self.state.mode is not GameMode.QUITTING:
                if max_frames is not None and self.frames >= max_frames:
                    break
                self.step()
        finally:
            self.close()

    def step(self) -> GameMode:
        dt = self.clock.tick(self.config.target_fps) / 1000.0
        self._handle_events(pygame.event.get())
        if not self.running:
            self.state.quit()
            return self.state.mode

        assert self.renderer is not None
        inputs = self.input_provider.poll(dt)
        self.frames += 1
        return self.state.tick(self.renderer, inputs, dt)

    def _handle_events(self, events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def close(self) -> None:
        if self.renderer is None:
            return
        self.renderer.close()
        self.renderer = None
        if hasattr(self.input_provider, "shutdown"):
            self.input_provider.shutdown()  # type: ignore[attr-defined]
        logger.info("Closed after %d frames (final score %d)", self.frames, self.state.score)
        pygame.quit()
