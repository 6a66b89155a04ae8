"""Menu / play / death state machine."""

from __future__ import annotations

import enum
import logging
from typing import Optional

import numpy as np

from .collision import CollisionMode, is_hit
from .config import GameConfig
from .entities import ObstacleGenerator, Player
from .input import InputState
from .render import Renderer

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to Flappy Dragon"
PLAY_GAME = "(P) Play Game"
PLAY_AGAIN = "(P) Play Again"
QUIT_GAME = "(Q) Quit Game"
YOU_ARE_DEAD_TEXT = "You're Dead!"
FLAP_HINT = "Press SPACE to flap"


class GameMode(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"
    QUITTING = "quitting"


class GameState:
    """Owns the player, the current obstacle and the score."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.collision_mode = CollisionMode.parse(self.config.collision)
        self.obstacles = ObstacleGenerator(self.config, rng)
        self._mode = GameMode.MENU
        self.player = self._new_player()
        self.obstacle = self.obstacles.create(self.config.screen_width, 0)
        self.score = 0
        self.can_flap = True

    @property
    def mode(self) -> GameMode:
        return self._mode

    def _set_mode(self, mode: GameMode) -> None:
        if mode is not self._mode:
            logger.info("Mode %s -> %s (score %d)", self._mode.value, mode.value, self.score)
        self._mode = mode

    def _new_player(self) -> Player:
        return Player(
            self.config.player_start_x,
            self.config.screen_height / 2.0,
            self.config.physics,
        )

    def restart(self) -> None:
        self.player = self._new_player()
        self.obstacle = self.obstacles.create(self.config.screen_width, 0)
        self.score = 0
        self._set_mode(GameMode.PLAYING)

    def tick(self, renderer: Renderer, inputs: InputState, dt: float) -> GameMode:
        """Run one frame of whichever screen is active and return the new mode."""
        if self._mode is GameMode.MENU:
            self.on_main_menu(renderer, inputs)
        elif self._mode is GameMode.PLAYING:
            self.on_play(renderer, inputs, dt)
        elif self._mode is GameMode.END:
            self.on_died(renderer, inputs)
        return self._mode

    def _draw_modal(self, renderer: Renderer, title: str, play_label: str) -> None:
        height = self.config.screen_height
        font_size = self.config.render.font_size
        loc = (self.config.screen_width - renderer.measure_text(title)) // 2
        renderer.draw_text(title, loc, height // 3)
        renderer.draw_text(play_label, loc, height // 3 + font_size)
        renderer.draw_text(QUIT_GAME, loc, height // 3 + font_size * 2)

    def on_main_menu(self, renderer: Renderer, inputs: InputState) -> None:
        with renderer.frame():
            self._draw_modal(renderer, WELCOME_TEXT, PLAY_GAME)

        if inputs.play or inputs.flap:
            self.restart()
        elif inputs.quit:
            self._set_mode(GameMode.QUITTING)

    def on_play(self, renderer: Renderer, inputs: InputState, dt: float) -> None:
        with renderer.frame():
            renderer.draw_text(FLAP_HINT, 10, 10)
            renderer.draw_text(f"Score: {self.score}", 10, 30)

            self.player.physics(dt)
            if self.can_flap and inputs.flap:
                self.player.flap()
                self.can_flap = False
            if not self.can_flap and not inputs.flap:
                self.can_flap = True

            renderer.draw_player(self.player)
            renderer.draw_obstacle(self.obstacle, self.player.pos.x)
            renderer.draw_ground()

        if self.player.pos.y > self.config.screen_height or self.collided():
            self._set_mode(GameMode.END)
        elif self.player.pos.x > self.obstacle.x:
            self.score += 1
            self.obstacle = self.obstacles.create(
                self.player.pos.x + self.config.screen_width, self.score
            )

    def on_died(self, renderer: Renderer, inputs: InputState) -> None:
        with renderer.frame():
            self._draw_modal(renderer, YOU_ARE_DEAD_TEXT, PLAY_AGAIN)
            renderer.draw_text(f"Score: {self.score}", 10, 10)

        if inputs.play:
            self.restart()
        elif inputs.quit:
            self._set_mode(GameMode.QUITTING)

    def collided(self) -> bool:
        return is_hit(
            self.obstacle,
            self.player,
            mode=self.collision_mode,
            radius=self.config.player_radius,
            screen_height=self.config.screen_height,
        )

    def quit(self) -> None:
        self._set_mode(GameMode.QUITTING)
