"""Flappy Dragon arcade game package."""

from .collision import CollisionMode, is_hit
from .config import GameConfig, ObstacleConfig, PhysicsConfig, RenderingConfig
from .entities import Obstacle, ObstacleGenerator, Player
from .game import FlappyDragonGame
from .input import InputState, KeyboardInput, ScriptedInput
from .render import GlyphRenderer, ShapeRenderer, create_renderer
from .state import GameMode, GameState

__all__ = [
    "FlappyDragonGame",
    "GameConfig",
    "PhysicsConfig",
    "ObstacleConfig",
    "RenderingConfig",
    "GameMode",
    "GameState",
    "Player",
    "Obstacle",
    "ObstacleGenerator",
    "CollisionMode",
    "is_hit",
    "InputState",
    "KeyboardInput",
    "ScriptedInput",
    "GlyphRenderer",
    "ShapeRenderer",
    "create_renderer",
]
