"""Entry point for Flappy Dragon."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

import numpy as np

from flappy_dragon import FlappyDragonGame, GameConfig, KeyboardInput


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fly the dragon through the gaps.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Optional random seed for deterministic obstacle gaps.",
    )
    parser.add_argument(
        "--renderer",
        choices=("shapes", "glyph"),
        help="Drawing style (default: config value).",
    )
    parser.add_argument(
        "--collision",
        choices=("overlap", "exact"),
        help="Collision test; 'exact' reproduces the legacy single-column check.",
    )
    parser.add_argument(
        "--font",
        help="Path to a .ttf/.otf font (default: pygame's built-in font).",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error"),
        help="Logging verbosity.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(levelname).1s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = GameConfig()

    render_overrides = {}
    if args.renderer:
        render_overrides["style"] = args.renderer
    if args.font:
        render_overrides["font_path"] = args.font
    if render_overrides:
        config = replace(config, render=replace(config.render, **render_overrides))

    if args.collision:
        config = replace(config, collision=args.collision)

    rng = np.random.default_rng(args.seed)
    game = FlappyDragonGame(config=config, input_provider=KeyboardInput(), rng=rng)
    game.run()


if __name__ == "__main__":
    main()
