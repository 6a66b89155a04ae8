from __future__ import annotations

import contextlib
import os
from typing import Iterator, Optional

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from flappy_dragon.config import GameConfig
from flappy_dragon.entities import Obstacle, Player


class RecordingRenderer:
    """Renderer double that records every call instead of drawing."""

    def __init__(self, char_width: int = 10) -> None:
        self.char_width = char_width
        self.calls: list[tuple] = []
        self.frames_begun = 0
        self.frames_ended = 0
        self.in_frame = False

    @contextlib.contextmanager
    def frame(self) -> Iterator[None]:
        assert not self.in_frame, "frame() must not be nested"
        self.in_frame = True
        self.frames_begun += 1
        try:
            yield
        finally:
            self.in_frame = False
            self.frames_ended += 1

    def _record(self, *call: object) -> None:
        assert self.in_frame, f"{call[0]} called outside frame()"
        self.calls.append(call)

    def draw_text(self, text: str, x: int, y: int, color: Optional[tuple] = None) -> None:
        self._record("text", text, x, y)

    def measure_text(self, text: str) -> int:
        return len(text) * self.char_width

    def draw_rect(self, x: int, y: int, width: int, height: int, color: tuple) -> None:
        self._record("rect", x, y, width, height)

    def draw_circle(self, x: int, y: int, radius: float, color: tuple) -> None:
        self._record("circle", x, y, radius)

    def draw_player(self, player: Player) -> None:
        self._record("player", player.pos.x, player.pos.y)

    def draw_obstacle(self, obstacle: Obstacle, player_x: float) -> None:
        self._record("obstacle", obstacle.x, player_x)

    def draw_ground(self) -> None:
        self._record("ground")

    def texts(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "text"]


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
