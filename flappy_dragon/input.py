"""Input abstractions for Flappy Dragon."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Optional, Protocol

import pygame


@dataclass(frozen=True)
class InputState:
    """Snapshot of which keys are held this frame."""

    flap: bool = False
    play: bool = False
    quit: bool = False


class InputProvider(Protocol):
    """Interface for supplying player input to the game loop."""

    def poll(self, dt: float) -> InputState:
        """Return an InputState representing the latest player intent."""


class KeyboardInput(InputProvider):
    """Default keyboard controller (Space to flap, P to play, Q to quit)."""

    def __init__(
        self,
        flap_key: int = pygame.K_SPACE,
        play_key: int = pygame.K_p,
        quit_key: int = pygame.K_q,
    ) -> None:
        self.flap_key = flap_key
        self.play_key = play_key
        self.quit_key = quit_key

    def poll(self, dt: float) -> InputState:
        pressed = pygame.key.get_pressed()
        return InputState(
            flap=bool(pressed[self.flap_key]),
            play=bool(pressed[self.play_key]),
            quit=bool(pressed[self.quit_key]),
        )


class ScriptedInput(InputProvider):
    """Replays a fixed sequence of input frames, then defers to ``base``.

    Without a base provider the script ends by holding the quit key so an
    unattended run always terminates.
    """

    def __init__(self, frames: Iterable[InputState], base: Optional[InputProvider] = None) -> None:
        self._frames: Deque[InputState] = deque(frames)
        self.base = base
        self.polled = 0

    def poll(self, dt: float) -> InputState:
        self.polled += 1
        if self._frames:
            return self._frames.popleft()
        if self.base is not None:
            return self.base.poll(dt)
        return InputState(quit=True)

    @property
    def remaining(self) -> int:
        return len(self._frames)
