"""Random population of a flock inside a window-sized rectangle."""

import numpy as np

from config import boids as config
from .flock import Flock


def random_color(rng: np.random.Generator) -> tuple:
    """Random RGB tuple with channels in [0, max_channel)."""
    r, g, b = rng.integers(0, config.BOIDS["max_channel"], size=3)
    return int(r), int(g), int(b)


def populate(flock: Flock, count: int, width: int, height: int,
             rng: np.random.Generator) -> Flock:
    """
    Add `count` boids at random integer positions within [0, width) x [0, height).

    Each boid gets a random integer radius in [min_radius, max_radius) and a
    random color. Draw order per boid: x, y, radius, color.

    Raises:
        ValueError: If count is negative or the rectangle is empty
    """
    if count < 0:
        raise ValueError(f"Flock size must be non-negative, got {count}")
    if width <= 0 or height <= 0:
        raise ValueError(f"Spawn area must be non-empty, got {width}x{height}")

    min_radius = config.BOIDS["min_radius"]
    max_radius = config.BOIDS["max_radius"]

    for _ in range(count):
        x = int(rng.integers(0, width))
        y = int(rng.integers(0, height))
        radius = int(rng.integers(min_radius, max_radius))
        flock.add_boid(x, y, radius, random_color(rng))

    return flock
