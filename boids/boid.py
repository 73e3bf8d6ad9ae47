"""Individual boid entity with position, velocity, radius and color."""

import numpy as np
from typing import Tuple

from config import boids as config


Color = Tuple[int, int, int]


class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Attributes:
        position: 2D position vector (read-only view)
        velocity: 2D velocity vector, rewritten by the flock every step
        radius: Circle radius used for neighbor-distance geometry
        color: RGB tuple (0-255), only used for rendering
    """

    __slots__ = ("_position", "_velocity", "_radius", "color")

    def __init__(self, x: float, y: float, radius: float,
                 color: Color = config.BOIDS["default_color"]):
        self._position = np.array([x, y], dtype=np.float64)
        self._velocity = np.zeros(2, dtype=np.float64)
        self._radius = float(radius)
        self.color = tuple(color)

    def __repr__(self):
        x, y = self._position
        vx, vy = self._velocity
        return f"Boid(pos=({x:.2f}, {y:.2f}), vel=({vx:.2f}, {vy:.2f}), r={self._radius:g})"

    @property
    def position(self) -> np.ndarray:
        view = self._position.view()
        view.flags.writeable = False
        return view

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity

    @velocity.setter
    def velocity(self, value):
        self._velocity[:] = value

    @property
    def radius(self) -> float:
        return self._radius

    def move(self):
        """Advance the position by the current velocity."""
        self._position += self._velocity

    def _store(self, position: np.ndarray, velocity: np.ndarray):
        # Written back by Flock after a kernel sweep.
        self._position[:] = position
        self._velocity[:] = velocity
