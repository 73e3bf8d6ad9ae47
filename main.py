"""
2D Flocking Demo
================

A real-time boids simulation where the flock follows the mouse pointer.

Controls:
    - Move mouse: Set the flock's destination
    - R: Respawn the flock at random positions
    - H: Toggle HUD
    - ESC / close window: Quit

Usage:
    python main.py                          # Defaults from config/boids.py
    python main.py --count 500 --seed 7     # Bigger, reproducible flock
    python main.py --strategy two_phase     # Snapshot-then-commit update
"""

import argparse

from config import boids as config
from boids import NeighborlessPolicy, UpdateStrategy


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2D boids flocking toward the mouse pointer")
    parser.add_argument("--width", type=int, default=config.WINDOW["width"], help="Window width in pixels")
    parser.add_argument("--height", type=int, default=config.WINDOW["height"], help="Window height in pixels")
    parser.add_argument("--count", "-n", type=int, default=config.BOIDS["count"], help="Number of boids")
    parser.add_argument("--fps", type=int, default=config.WINDOW["fps_limit"], help="Frame-rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Seed for spawning and jitter")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in UpdateStrategy],
        default=UpdateStrategy.SEQUENTIAL.value,
        help="Order of steering vs. movement within a step",
    )
    parser.add_argument(
        "--neighborless",
        choices=[p.value for p in NeighborlessPolicy],
        default=NeighborlessPolicy.ORIGIN_PULL.value,
        help="Alignment/cohesion behavior for boids with no neighbors",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Deferred so --help works without a display or OpenGL library
    from core.application import Application

    app = Application(
        width=args.width,
        height=args.height,
        flock_size=args.count,
        fps_limit=args.fps,
        seed=args.seed,
        strategy=args.strategy,
        neighborless=args.neighborless,
    )
    app.run()


if __name__ == "__main__":
    main()
