"""2D flocking simulation core."""

from .boid import Boid
from .events import KeyPressed, PointerMoved, WindowClosed
from .flock import Flock, NeighborlessPolicy, UpdateStrategy
from .population import populate
from .simulation import Simulation

__all__ = [
    "Boid",
    "Flock",
    "KeyPressed",
    "NeighborlessPolicy",
    "PointerMoved",
    "Simulation",
    "UpdateStrategy",
    "WindowClosed",
    "populate",
]
