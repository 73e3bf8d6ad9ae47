"""Headless per-frame driver: events in, one flock step, draw stream out."""

from typing import Iterable, Optional

import numpy as np

from config import boids as config
from .events import Event, KeyPressed, PointerMoved, WindowClosed
from .flock import Flock, NeighborlessPolicy, UpdateStrategy
from .population import populate


class Simulation:
    """
    Owns a flock plus everything needed to (re)populate it.

    A single seed is split into two independent streams: one for the
    flock's jitter and one for spawning, so a seed fixes both the initial
    population and the trajectories.
    """

    def __init__(
        self,
        width: int = config.WINDOW["width"],
        height: int = config.WINDOW["height"],
        flock_size: int = config.BOIDS["count"],
        seed: Optional[int] = None,
        strategy=UpdateStrategy.SEQUENTIAL,
        neighborless=NeighborlessPolicy.ORIGIN_PULL
    ):
        if flock_size < 0:
            raise ValueError(f"Flock size must be non-negative, got {flock_size}")

        self.width = width
        self.height = height
        self.flock_size = flock_size
        self.reset_key = config.CONTROLS["reset_key"]
        self.quit_key = config.CONTROLS["quit_key"]

        flock_seed, spawn_seed = np.random.SeedSequence(seed).spawn(2)
        self.spawn_rng = np.random.default_rng(spawn_seed)
        self.flock = Flock(
            rng=np.random.default_rng(flock_seed),
            strategy=strategy,
            neighborless=neighborless,
        )
        self.running = True
        self.frame_count = 0

        self.reset()

    def reset(self):
        """Replace the population with a fresh random one. The destination is kept."""
        self.flock.clear()
        populate(self.flock, self.flock_size, self.width, self.height, self.spawn_rng)
        print(f"[Flock] Spawned {self.flock_size:,} boids in {self.width}x{self.height}")

    def handle(self, events: Iterable[Event]) -> bool:
        """
        Apply a frame's events in order.
        Returns False once the window was closed or quit was requested.
        """
        for event in events:
            if isinstance(event, WindowClosed):
                self.running = False
            elif isinstance(event, PointerMoved):
                self.flock.set_dest((event.x, event.y))
            elif isinstance(event, KeyPressed):
                if event.code == self.reset_key:
                    self.reset()
                elif event.code == self.quit_key:
                    self.running = False
        return self.running

    def step(self):
        self.flock.update()
        self.frame_count += 1

    def frame(self, events: Iterable[Event]) -> bool:
        """Handle events then advance one step, unless the loop should stop."""
        if not self.handle(events):
            return False
        self.step()
        return True

    def draw(self, renderer):
        self.flock.draw(renderer)
