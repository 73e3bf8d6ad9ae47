"""Main application class that ties the simulation to a pygame/OpenGL window."""

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import boids as config
from boids import Simulation, KeyPressed
from .input_handler import InputHandler
from rendering.circles import CircleRenderer
from rendering.text import HudRenderer


class Application:
    """Main application managing the frame loop and rendering."""

    def __init__(
        self,
        width: int = config.WINDOW["width"],
        height: int = config.WINDOW["height"],
        flock_size: int = config.BOIDS["count"],
        fps_limit: int = config.WINDOW["fps_limit"],
        seed=None,
        strategy="sequential",
        neighborless="origin_pull"
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Window size must be positive, got {width}x{height}")
        if fps_limit <= 0:
            raise ValueError(f"Frame-rate cap must be positive, got {fps_limit}")

        self.width = width
        self.height = height
        self.fps_limit = fps_limit

        pygame.init()
        pygame.display.set_mode((width, height), DOUBLEBUF | OPENGL)
        pygame.display.set_caption(config.WINDOW["title"])

        self.input_handler = InputHandler()
        self.circles = CircleRenderer()
        self.hud = HudRenderer()

        print("[App] Initializing flock...")
        self.simulation = Simulation(
            width=width,
            height=height,
            flock_size=flock_size,
            seed=seed,
            strategy=strategy,
            neighborless=neighborless,
        )
        self.simulation.flock.warmup()

        self.clock = pygame.time.Clock()
        self.fps = 0
        self.show_hud = True

        self._setup_gl()
        print("[App] Ready!")

    def _setup_gl(self):
        """2D projection in window pixels, origin top-left like pointer events."""
        glClearColor(*config.COLORS["background"])
        glDisable(GL_DEPTH_TEST)

        glViewport(0, 0, self.width, self.height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def _render(self):
        glClear(GL_COLOR_BUFFER_BIT)
        self.simulation.draw(self.circles)

        if self.show_hud:
            flock = self.simulation.flock
            self.hud.draw_lines(
                [
                    f"Boids: {len(flock)}  |  FPS: {self.fps:.0f}",
                    f"Mode: {flock.strategy.value}  |  R: reset  H: hide",
                ],
                (self.width, self.height)
            )

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        hud_key = config.CONTROLS["hud_key"]

        while True:
            self.clock.tick(self.fps_limit)
            self.fps = self.clock.get_fps()

            events = self.input_handler.poll()
            if KeyPressed(hud_key) in events:
                self.show_hud = not self.show_hud

            if not self.simulation.frame(events):
                break
            self._render()

        print(f"[App] Closed after {self.simulation.frame_count:,} frames")
        pygame.quit()
